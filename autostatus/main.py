"""Composition root for the autostatus build reporter.

This module is the ONLY location that imports both core domain logic
and concrete adapter implementations. All wiring of dependencies
happens here, creating a clear entry point for the application.

Module Structure:
- Configuration loading via config module
- Adapter instantiation
- Notifier manager initialization
- Command line parsing and event dispatch
"""

import argparse
import asyncio
import logging
import sys
from collections.abc import Sequence

from autostatus.adapters.github.repository import GitHubRepository
from autostatus.adapters.notification.github_status import GithubBuildNotifier
from autostatus.adapters.notification.stdout import StdoutBuildNotifier
from autostatus.config import Settings, load_settings
from autostatus.core.exceptions import NotifierConfigurationError
from autostatus.core.models import BuildState
from autostatus.core.notifier_manager import BuildNotifierManager
from autostatus.core.ports import BuildNotifierPort

EVENTS = ("state", "stage", "final", "error")


def configure_logging(log_level: str, log_format: str) -> None:
    """Configure application logging.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        log_format: Log format (json, text).
    """
    level = getattr(logging, log_level, logging.INFO)

    if log_format == "json":
        format_str = '{"time": "%(asctime)s", "level": "%(levelname)s", "name": "%(name)s", "message": "%(message)s"}'
    else:
        format_str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    logging.basicConfig(
        level=level,
        format=format_str,
        handlers=[
            logging.StreamHandler(sys.stdout),
        ],
    )


def build_notifiers(settings: Settings) -> list[BuildNotifierPort]:
    """Instantiate the notifiers selected in settings.

    The GitHub notifier is always built when selected, but without a
    repository (and so disabled) unless both token and repository are set.

    Raises:
        NotifierConfigurationError: If GitHub credentials are set but
            there is no commit to attach statuses to.
    """
    logger = logging.getLogger(__name__)
    notifiers: list[BuildNotifierPort] = []

    for backend in settings.notifiers:
        if backend == "github":
            repository = None
            if settings.github_enabled:
                if not settings.commit_sha:
                    raise NotifierConfigurationError(
                        "GitHub notifier selected but COMMIT_SHA not set"
                    )
                repository = GitHubRepository(
                    full_name=settings.github_repo,
                    github_token=settings.github_token,
                    api_base_url=settings.github_api_url,
                    timeout_seconds=settings.github_timeout_seconds,
                )
                logger.info(f"GitHub notifier: {settings.github_repo}")
            else:
                logger.warning(
                    "GitHub notifier selected but GITHUB_TOKEN or GITHUB_REPO not set"
                )
            notifiers.append(
                GithubBuildNotifier(
                    repository=repository,
                    sha=settings.commit_sha,
                    target_url=settings.target_url,
                )
            )
        elif backend == "stdout":
            notifiers.append(StdoutBuildNotifier(verbose=settings.debug))
            logger.info("Stdout notifier enabled")

    return notifiers


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments for a single build event."""
    parser = argparse.ArgumentParser(
        prog="autostatus",
        description="Report a build event as GitHub commit statuses.",
    )
    parser.add_argument("event", choices=EVENTS, help="Kind of build event")
    parser.add_argument("--job", required=True, help="Name of the job")
    parser.add_argument("--node", default="", help="Stage or node name")
    parser.add_argument(
        "--state",
        choices=[s.name for s in BuildState],
        default=BuildState.Pending.name,
        help="Build state to report",
    )
    parser.add_argument(
        "--duration", type=int, default=0, help="Stage or build duration in ms"
    )
    parser.add_argument(
        "--blocked", type=int, default=0, help="Time the build was blocked in ms"
    )
    args = parser.parse_args(argv)

    if args.event in ("state", "stage", "error") and not args.node:
        parser.error(f"--node is required for the '{args.event}' event")
    return args


async def send_event(manager: BuildNotifierManager, args: argparse.Namespace) -> None:
    """Forward one parsed command line event to the manager."""
    build_state = BuildState[args.state]

    if args.event == "state":
        await manager.notify_build_state(args.job, args.node, build_state)
    elif args.event == "stage":
        await manager.notify_build_stage_status(
            args.job, args.node, build_state, args.duration
        )
    elif args.event == "final":
        await manager.notify_final_build_status(
            args.job, build_state, args.duration, args.blocked
        )
    elif args.event == "error":
        await manager.send_non_stage_error(args.job, args.node)
    else:
        raise ValueError(f"Unknown event: {args.event}")


async def bootstrap(args: argparse.Namespace, settings: Settings | None = None) -> None:
    """Load configuration, wire adapters, and deliver one event.

    This is the composition root: the single place where all components
    are instantiated and wired together.

    Raises:
        NotifierConfigurationError: If no notifier is enabled.
    """
    if settings is None:
        settings = load_settings()

    configure_logging(settings.log_level, settings.log_format)
    logger = logging.getLogger(__name__)

    notifiers = build_notifiers(settings)
    manager = BuildNotifierManager(notifiers)
    if not manager.has_notifiers():
        raise NotifierConfigurationError("No enabled notifiers configured")

    try:
        logger.debug(f"Sending {args.event} event for job {args.job}")
        await send_event(manager, args)
    finally:
        # Close HTTP clients held by GitHub notifiers
        for notifier in notifiers:
            if isinstance(notifier, GithubBuildNotifier) and isinstance(
                notifier.config.repository, GitHubRepository
            ):
                await notifier.config.repository.close()


def main(argv: Sequence[str] | None = None) -> None:
    """Application entry point.

    Exit codes:
        0: Event delivered (individual notifier failures are only logged)
        1: Configuration error
        2: Invalid arguments
        130: Interrupted by user (SIGINT/KeyboardInterrupt)
    """
    args = parse_args(argv)
    logger = logging.getLogger(__name__)
    try:
        asyncio.run(bootstrap(args))
    except KeyboardInterrupt:
        logger.warning("Interrupted by user (SIGINT)")
        sys.exit(130)
    except NotifierConfigurationError as e:
        logger.error(f"Configuration error: {e}")
        sys.exit(1)
    except Exception as e:
        logger.error(f"Fatal error: {e}", exc_info=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
