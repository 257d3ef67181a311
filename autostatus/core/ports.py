"""Port interfaces for the autostatus build reporter.

These abstract base classes define the boundaries between core
domain logic and external adapters. Implementations live in the
adapters/ package.

Port Interface Categories:

1. **Driven Ports** (core calls out to adapters)
   - CommitStatusPort: Set a commit status on a hosted repository

2. **Notifier Ports** (build events are delivered to these)
   - BuildNotifierPort: Report stage and build results to one channel
"""

from abc import ABC, abstractmethod

from .models import BuildState, CommitState


# ============================================================================
# DRIVEN PORTS (Core calls out to adapters)
# ============================================================================


class CommitStatusPort(ABC):
    """Port for attaching statuses to commits of a single repository.

    Adapters implementing this port are bound to one repository at
    construction and talk to the hosting service's API (GitHub,
    GitHub Enterprise).
    """

    @abstractmethod
    async def create_commit_status(
        self,
        sha: str,
        state: CommitState,
        target_url: str,
        description: str,
        context: str,
    ) -> None:
        """Create a status for a commit.

        Args:
            sha: Commit the status is attached to.
            state: Commit state to report.
            target_url: Link shown next to the status (may be empty).
            description: Short human-readable description.
            context: Label distinguishing this status from others on
                the same commit (the stage name).

        Raises:
            GitHubHTTPError: If the API responds outside 2xx.
            Exception: If the API is unreachable.
        """


# ============================================================================
# NOTIFIER PORTS (Build events are delivered to these)
# ============================================================================


class BuildNotifierPort(ABC):
    """Port for reporting build lifecycle events to one channel.

    Every notifier variant (GitHub commit status, stdout, ...) satisfies
    this same four-operation contract plus an enablement check. Durations
    are in milliseconds.
    """

    @abstractmethod
    def is_enabled(self) -> bool:
        """Whether this notifier can deliver events.

        Callers skip disabled notifiers; the notify methods do not
        check this themselves.
        """

    @abstractmethod
    async def notify_build_state(
        self, job_name: str, node_name: str, build_state: BuildState
    ) -> None:
        """Report that a stage entered a new state.

        Args:
            job_name: Name of the job, used for logging context.
            node_name: The stage that changed.
            build_state: The new state.
        """

    @abstractmethod
    async def notify_build_stage_status(
        self,
        job_name: str,
        node_name: str,
        build_state: BuildState,
        node_duration: int,
    ) -> None:
        """Report the result of a stage.

        Args:
            job_name: Name of the job.
            node_name: The stage name.
            build_state: The stage result.
            node_duration: Elapsed time of the stage in milliseconds.
        """

    @abstractmethod
    async def notify_final_build_status(
        self,
        job_name: str,
        build_state: BuildState,
        build_duration: int,
        blocked_duration: int,
    ) -> None:
        """Report the result of the whole build.

        Args:
            job_name: Name of the job.
            build_state: Success or failure of the build.
            build_duration: Build duration in milliseconds.
            blocked_duration: Time the build was blocked before running.
        """

    @abstractmethod
    async def send_non_stage_error(self, job_name: str, node_name: str) -> None:
        """Report an error that happened outside of any tracked stage.

        Sent regardless of whether a pending status was sent first.
        Scripted pipelines can fail outside a stage.

        Args:
            job_name: Name of the job.
            node_name: Name of the node that failed.
        """
