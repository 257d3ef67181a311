"""Domain models for the autostatus build reporter.

All models in this module use only Python standard library types,
ensuring zero external dependencies in the core domain.
"""

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .ports import CommitStatusPort


class BuildState(Enum):
    """Lifecycle states of a build or stage, as observed by the pipeline.

    - Pending: stage has started and is running
    - CompletedError: stage (or the build) finished with an error
    - CompletedSuccess: stage finished successfully
    - SkippedFailure: stage did not run because an earlier stage failed
    - SkippedUnstable: stage did not run because the build went unstable
    - SkippedConditional: stage did not run because of a `when` guard
    """

    Pending = "pending"
    CompletedError = "completed_error"
    CompletedSuccess = "completed_success"
    SkippedFailure = "skipped_failure"
    SkippedUnstable = "skipped_unstable"
    SkippedConditional = "skipped_conditional"


class CommitState(Enum):
    """Commit status states accepted by the GitHub statuses API."""

    PENDING = "pending"
    SUCCESS = "success"
    ERROR = "error"
    FAILURE = "failure"


@dataclass(frozen=True)
class StageStatus:
    """The commit state and description reported for one build state."""

    state: CommitState
    description: str

    def __post_init__(self) -> None:
        """Validate stage status invariants on creation."""
        if not self.description or not self.description.strip():
            raise ValueError("description must be a non-empty string")


@dataclass(frozen=True)
class NotifierConfig:
    """Immutable binding of a notifier to one commit of one repository.

    A repository of None produces a disabled notifier.
    """

    repository: "CommitStatusPort | None"
    sha: str
    target_url: str = ""
