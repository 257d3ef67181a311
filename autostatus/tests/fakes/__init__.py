"""Fake implementations of core ports for testing.

These in-memory implementations allow notifiers and the notifier manager
to be tested without talking to GitHub:

- FakeCommitStatusPort: Captured commit status calls
- FakeBuildNotifier: Captured build events
"""

from .notification import FakeBuildNotifier
from .repository import FakeCommitStatusPort

__all__ = [
    "FakeBuildNotifier",
    "FakeCommitStatusPort",
]
