"""Core domain logic for the autostatus build reporter.

This package contains zero external dependencies and represents
the pure business logic of the application. All adapters and
external integrations are handled by the adapters package.
"""

from .exceptions import AutostatusError, GitHubHTTPError, NotifierConfigurationError
from .models import BuildState, CommitState, NotifierConfig, StageStatus

__all__ = [
    "AutostatusError",
    "BuildState",
    "CommitState",
    "GitHubHTTPError",
    "NotifierConfig",
    "NotifierConfigurationError",
    "StageStatus",
]
