"""GitHub API adapters."""

from .repository import GitHubRepository

__all__ = ["GitHubRepository"]
