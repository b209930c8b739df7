"""Tracker abstractions and implementations."""

from issuetree.providers.base import Tracker
from issuetree.providers.dry_run import DryRunOperation, DryRunTracker
from issuetree.providers.factory import create_tracker

__all__ = ["DryRunOperation", "DryRunTracker", "Tracker", "create_tracker"]
