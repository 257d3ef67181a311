"""Unit tests for StdoutBuildNotifier."""

import pytest

from autostatus.adapters.notification.stdout import StdoutBuildNotifier
from autostatus.core.models import BuildState


def test_always_enabled() -> None:
    assert StdoutBuildNotifier().is_enabled()


@pytest.mark.asyncio
async def test_stage_status_output(capsys) -> None:
    notifier = StdoutBuildNotifier()

    await notifier.notify_build_stage_status(
        "app", "test", BuildState.CompletedSuccess, 2500
    )

    output = capsys.readouterr().out
    assert "[app] test: COMPLETED_SUCCESS (2.5s)" in output


@pytest.mark.asyncio
async def test_build_state_silent_unless_verbose(capsys) -> None:
    await StdoutBuildNotifier().notify_build_state("app", "build", BuildState.Pending)
    assert capsys.readouterr().out == ""

    await StdoutBuildNotifier(verbose=True).notify_build_state(
        "app", "build", BuildState.Pending
    )
    assert "[app] build: PENDING" in capsys.readouterr().out


@pytest.mark.asyncio
async def test_final_build_status_summary(capsys) -> None:
    notifier = StdoutBuildNotifier()

    await notifier.notify_final_build_status(
        "app", BuildState.CompletedError, 65000, 1200
    )

    output = capsys.readouterr().out
    assert "BUILD REPORT" in output
    assert "Job: app" in output
    assert "Result: COMPLETED_ERROR" in output
    assert "Duration: 65.0s" in output
    assert "Blocked: 1.2s" in output


@pytest.mark.asyncio
async def test_non_stage_error(capsys) -> None:
    await StdoutBuildNotifier().send_non_stage_error("app", "checkout")

    assert "[app] checkout: ERROR outside of any stage" in capsys.readouterr().out


@pytest.mark.asyncio
async def test_skipped_state_is_readable(capsys) -> None:
    await StdoutBuildNotifier().notify_build_stage_status(
        "app", "deploy", BuildState.SkippedConditional, 0
    )

    assert "[app] deploy: SKIPPED_CONDITIONAL (0.0s)" in capsys.readouterr().out
