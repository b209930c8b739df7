"""Import engine."""

from issuetree.engine.engine import ImportEngine
from issuetree.engine.linker import ParentLinker
from issuetree.engine.preflight import run_preflight

__all__ = ["ImportEngine", "ParentLinker", "run_preflight"]
