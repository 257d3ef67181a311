"""Stdout build notifier.

Implements BuildNotifierPort by printing stage and build results to the
terminal with human-readable formatting.
"""

import asyncio

from autostatus.core.models import BuildState
from autostatus.core.ports import BuildNotifierPort


class StdoutBuildNotifier(BuildNotifierPort):
    """Prints build events to stdout."""

    def __init__(self, verbose: bool = False):
        """Initialize stdout notifier.

        Args:
            verbose: If True, also print plain state changes, not only
                stage results.
        """
        self.verbose = verbose

    def is_enabled(self) -> bool:
        return True

    async def notify_build_state(
        self, job_name: str, node_name: str, build_state: BuildState
    ) -> None:
        if self.verbose:
            await asyncio.to_thread(
                print, self._format_stage(job_name, node_name, build_state)
            )

    async def notify_build_stage_status(
        self,
        job_name: str,
        node_name: str,
        build_state: BuildState,
        node_duration: int,
    ) -> None:
        await asyncio.to_thread(
            print,
            self._format_stage(job_name, node_name, build_state, node_duration),
        )

    async def notify_final_build_status(
        self,
        job_name: str,
        build_state: BuildState,
        build_duration: int,
        blocked_duration: int,
    ) -> None:
        summary = self._format_summary(
            job_name, build_state, build_duration, blocked_duration
        )
        await asyncio.to_thread(print, summary)

    async def send_non_stage_error(self, job_name: str, node_name: str) -> None:
        await asyncio.to_thread(
            print, f"[{job_name}] {node_name}: ERROR outside of any stage"
        )

    @staticmethod
    def _format_duration(milliseconds: int) -> str:
        """Format a millisecond duration as seconds."""
        return f"{milliseconds / 1000:.1f}s"

    @classmethod
    def _format_stage(
        cls,
        job_name: str,
        node_name: str,
        build_state: BuildState,
        node_duration: int | None = None,
    ) -> str:
        """Format a one-line stage report."""
        line = f"[{job_name}] {node_name}: {build_state.value.upper()}"
        if node_duration is not None:
            line += f" ({cls._format_duration(node_duration)})"
        return line

    @classmethod
    def _format_summary(
        cls,
        job_name: str,
        build_state: BuildState,
        build_duration: int,
        blocked_duration: int,
    ) -> str:
        """Format the final build report."""
        lines = [
            "=" * 80,
            "BUILD REPORT",
            "=" * 80,
            f"Job: {job_name}",
            f"Result: {build_state.value.upper()}",
            f"Duration: {cls._format_duration(build_duration)}",
            f"Blocked: {cls._format_duration(blocked_duration)}",
            "=" * 80,
        ]
        return "\n".join(lines)
