"""Custom exception hierarchy for issuetree.

All issuetree exceptions inherit from :class:`IssueTreeError`. Everything
except :class:`ProviderError` is fatal: the CLI maps it to exit code 1 before
any mutating call has been made. :class:`ProviderError` marks a single failed
tracker call and is always handled where the call is made.
"""

from __future__ import annotations


class IssueTreeError(Exception):
    """Base exception for all issuetree errors."""


class ConfigError(IssueTreeError):
    """Raised when the run configuration is invalid."""


class HierarchyLoadError(IssueTreeError):
    """Raised when the hierarchy file cannot be read or parsed."""


class PreflightError(IssueTreeError):
    """Raised when an environment precondition for the run is not met."""


class GhNotFoundError(PreflightError):
    """Raised when the ``gh`` CLI is not installed or not runnable."""


class AuthenticationError(PreflightError):
    """Raised when the ``gh`` CLI has no authenticated session."""


class ProjectNotFoundError(PreflightError):
    """Raised when the target project cannot be accessed."""


class ProviderError(IssueTreeError):
    """Raised when a single tracker call fails."""


class UnknownLabelError(ProviderError):
    """Raised when issue creation is rejected because a label does not exist.

    Attributes:
        labels: The labels that were sent with the rejected request.
    """

    def __init__(self, message: str, labels: list[str] | None = None) -> None:
        self.labels = list(labels or [])
        super().__init__(message)
