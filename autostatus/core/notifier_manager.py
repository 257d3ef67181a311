"""Fan-out of build events to every enabled notifier.

The manager is what the pipeline observer talks to: it holds the enabled
subset of the configured notifiers and forwards each event to all of them
in registration order. One notifier failing never prevents delivery to
the others.
"""

import logging
from collections.abc import Awaitable, Callable, Iterable

from .models import BuildState
from .ports import BuildNotifierPort

logger = logging.getLogger(__name__)


class BuildNotifierManager:
    """Delivers build lifecycle events to a set of notifiers."""

    def __init__(self, notifiers: Iterable[BuildNotifierPort]):
        """Initialize the manager.

        Args:
            notifiers: Candidate notifiers. Disabled ones are dropped.
        """
        self.notifiers: list[BuildNotifierPort] = []
        for notifier in notifiers:
            if notifier.is_enabled():
                self.notifiers.append(notifier)
            else:
                logger.info(
                    f"Skipping disabled notifier {type(notifier).__name__}"
                )

    def has_notifiers(self) -> bool:
        """Whether at least one notifier is enabled."""
        return bool(self.notifiers)

    async def notify_build_state(
        self, job_name: str, node_name: str, build_state: BuildState
    ) -> None:
        await self._dispatch(
            job_name,
            lambda n: n.notify_build_state(job_name, node_name, build_state),
        )

    async def notify_build_stage_status(
        self,
        job_name: str,
        node_name: str,
        build_state: BuildState,
        node_duration: int,
    ) -> None:
        await self._dispatch(
            job_name,
            lambda n: n.notify_build_stage_status(
                job_name, node_name, build_state, node_duration
            ),
        )

    async def notify_final_build_status(
        self,
        job_name: str,
        build_state: BuildState,
        build_duration: int,
        blocked_duration: int,
    ) -> None:
        await self._dispatch(
            job_name,
            lambda n: n.notify_final_build_status(
                job_name, build_state, build_duration, blocked_duration
            ),
        )

    async def send_non_stage_error(self, job_name: str, node_name: str) -> None:
        await self._dispatch(
            job_name, lambda n: n.send_non_stage_error(job_name, node_name)
        )

    async def _dispatch(
        self,
        job_name: str,
        send: Callable[[BuildNotifierPort], Awaitable[None]],
    ) -> None:
        """Send one event to every notifier, logging individual failures."""
        for notifier in self.notifiers:
            try:
                await send(notifier)
            except Exception as e:
                logger.error(
                    f"Notifier {type(notifier).__name__} failed for job {job_name}: {e}",
                    exc_info=True,
                    extra={"job_name": job_name},
                )
