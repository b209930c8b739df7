"""Issue body rendering."""

from issuetree.rendering.components import ACCEPTANCE_CRITERIA_HEADER, SUB_ISSUES_HEADER, checklist
from issuetree.rendering.markdown import MarkdownRenderer

__all__ = ["ACCEPTANCE_CRITERIA_HEADER", "SUB_ISSUES_HEADER", "MarkdownRenderer", "checklist"]
