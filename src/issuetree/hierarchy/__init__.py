"""Hierarchy loading and inspection."""

from issuetree.hierarchy.loader import collect_labels, count_nodes, load_hierarchy

__all__ = ["collect_labels", "count_nodes", "load_hierarchy"]
