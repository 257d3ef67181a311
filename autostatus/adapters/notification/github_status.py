"""GitHub commit status notifier.

Implements BuildNotifierPort by setting a commit status for each stage
of a build. The stage name is used as the status context, so every stage
shows up as its own check on the commit.
"""

import logging
from collections.abc import Mapping
from types import MappingProxyType

from autostatus.core.exceptions import GitHubHTTPError
from autostatus.core.models import BuildState, CommitState, NotifierConfig, StageStatus
from autostatus.core.ports import BuildNotifierPort, CommitStatusPort

logger = logging.getLogger(__name__)

# Skipped stages are reported as success so intentionally skipped work
# does not turn the commit red.
STAGE_STATUS_MAP: Mapping[BuildState, StageStatus] = MappingProxyType(
    {
        BuildState.Pending: StageStatus(CommitState.PENDING, "Building stage"),
        BuildState.CompletedError: StageStatus(
            CommitState.ERROR, "Failed to build stage"
        ),
        BuildState.CompletedSuccess: StageStatus(
            CommitState.SUCCESS, "Stage built successfully"
        ),
        BuildState.SkippedFailure: StageStatus(
            CommitState.SUCCESS, "Stage did not run due to earlier failure(s)"
        ),
        BuildState.SkippedUnstable: StageStatus(
            CommitState.SUCCESS,
            "Stage did not run due to earlier stage(s) marking the build as unstable",
        ),
        BuildState.SkippedConditional: StageStatus(
            CommitState.SUCCESS, "Stage did not run due to when conditional"
        ),
    }
)


def _check_total(mapping: Mapping[BuildState, StageStatus]) -> None:
    """Raise RuntimeError unless every BuildState has a stage status."""
    unmapped = set(BuildState) - set(mapping)
    if unmapped:
        raise RuntimeError(
            f"No commit status defined for build states: {sorted(s.name for s in unmapped)}"
        )


_check_total(STAGE_STATUS_MAP)


class GithubBuildNotifier(BuildNotifierPort):
    """Sets the GitHub commit status for stages based on build notifications."""

    def __init__(
        self,
        repository: CommitStatusPort | None,
        sha: str,
        target_url: str = "",
    ):
        """Initialize GitHub commit status notifier.

        Args:
            repository: The GitHub repository, or None to disable.
            sha: The commit notifications are being provided for.
            target_url: Link back to the build.
        """
        self._config = NotifierConfig(
            repository=repository, sha=sha, target_url=target_url
        )

    @classmethod
    def from_config(cls, config: NotifierConfig) -> "GithubBuildNotifier":
        """Create a notifier bound to an existing config."""
        return cls(config.repository, config.sha, config.target_url)

    @property
    def config(self) -> NotifierConfig:
        return self._config

    def is_enabled(self) -> bool:
        return self._config.repository is not None

    async def notify_build_state(
        self, job_name: str, node_name: str, build_state: BuildState
    ) -> None:
        """Send stage status notification to GitHub.

        Failures are logged and never propagate to the caller: the build
        itself remains the source of truth and commit statuses are best
        effort.
        """
        stage_status = STAGE_STATUS_MAP[build_state]
        repository = self._config.repository
        try:
            await repository.create_commit_status(  # type: ignore[union-attr]
                self._config.sha,
                stage_status.state,
                self._config.target_url,
                stage_status.description,
                node_name,
            )
        except GitHubHTTPError as e:
            if not e.is_success_code:
                logger.error(
                    f"Exception while creating status for job {job_name}",
                    exc_info=True,
                    extra={
                        "job_name": job_name,
                        "node_name": node_name,
                        "response_code": e.response_code,
                    },
                )
        except Exception:
            logger.error(
                f"Exception while creating status for job {job_name}",
                exc_info=True,
                extra={"job_name": job_name, "node_name": node_name},
            )

    async def notify_build_stage_status(
        self,
        job_name: str,
        node_name: str,
        build_state: BuildState,
        node_duration: int,
    ) -> None:
        """Send stage status notification to GitHub; duration is unused."""
        await self.notify_build_state(job_name, node_name, build_state)

    async def notify_final_build_status(
        self,
        job_name: str,
        build_state: BuildState,
        build_duration: int,
        blocked_duration: int,
    ) -> None:
        """No-op: only stages get commit statuses, not the build as a whole."""

    async def send_non_stage_error(self, job_name: str, node_name: str) -> None:
        """Report an error for a node regardless of a prior pending status."""
        await self.notify_build_state(job_name, node_name, BuildState.CompletedError)
