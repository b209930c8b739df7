"""Label reconciliation and color allocation."""

from issuetree.labels.colors import FALLBACK_COLOR, PRESET_COLORS, ColorAllocator
from issuetree.labels.reconciler import LABEL_DESCRIPTION, LabelReconciler

__all__ = ["FALLBACK_COLOR", "LABEL_DESCRIPTION", "PRESET_COLORS", "ColorAllocator", "LabelReconciler"]
