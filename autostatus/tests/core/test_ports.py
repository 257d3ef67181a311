"""Tests that the port interfaces are abstract and complete."""

import pytest

from autostatus.core.ports import BuildNotifierPort, CommitStatusPort
from autostatus.tests.fakes import FakeBuildNotifier, FakeCommitStatusPort


def test_commit_status_port_is_abstract() -> None:
    with pytest.raises(TypeError):
        CommitStatusPort()  # type: ignore[abstract]


def test_build_notifier_port_is_abstract() -> None:
    with pytest.raises(TypeError):
        BuildNotifierPort()  # type: ignore[abstract]


def test_partial_notifier_cannot_be_instantiated() -> None:
    class EnabledOnly(BuildNotifierPort):
        def is_enabled(self) -> bool:
            return True

    with pytest.raises(TypeError):
        EnabledOnly()  # type: ignore[abstract]


def test_fakes_implement_ports() -> None:
    assert isinstance(FakeCommitStatusPort(), CommitStatusPort)
    assert isinstance(FakeBuildNotifier(), BuildNotifierPort)
