"""GitHub repository adapter.

Implements CommitStatusPort on top of the GitHub REST statuses API:
POST /repos/{owner}/{repo}/statuses/{sha}.
"""

import logging
from typing import Any

import httpx

from autostatus.core.exceptions import GitHubHTTPError
from autostatus.core.models import CommitState
from autostatus.core.ports import CommitStatusPort

logger = logging.getLogger(__name__)

# GitHub rejects status descriptions longer than this.
MAX_DESCRIPTION_LENGTH = 140


class GitHubRepository(CommitStatusPort):
    """Handle on one GitHub repository for setting commit statuses."""

    def __init__(
        self,
        full_name: str,
        github_token: str,
        api_base_url: str = "https://api.github.com",
        timeout_seconds: float = 10.0,
        client: httpx.AsyncClient | None = None,
    ):
        """Initialize GitHub repository adapter.

        Args:
            full_name: Repository in "owner/repo" form.
            github_token: GitHub token with permission to create statuses.
            api_base_url: Base URL for GitHub API (default: https://api.github.com).
            timeout_seconds: Timeout applied to every request.
            client: Optional preconfigured client. Its base URL and headers
                are used as-is, and the caller remains responsible for
                closing it.

        Raises:
            ValueError: If full_name is not of the form "owner/repo".
        """
        owner, sep, name = full_name.partition("/")
        if not sep or not owner or not name or "/" in name:
            raise ValueError(
                f"Repository must be given as 'owner/repo', got {full_name!r}"
            )
        self.repo_owner = owner
        self.repo_name = name
        self.github_token = github_token
        self.api_base_url = api_base_url.rstrip("/")
        self.timeout_seconds = timeout_seconds
        self._client = client
        self._owns_client = client is None

    @property
    def full_name(self) -> str:
        return f"{self.repo_owner}/{self.repo_name}"

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create async HTTP client.

        Returns:
            httpx.AsyncClient configured with GitHub authentication.
        """
        if self._client is None:
            self._client = httpx.AsyncClient(
                base_url=self.api_base_url,
                headers={
                    "Authorization": f"token {self.github_token}",
                    "Accept": "application/vnd.github.v3+json",
                },
                timeout=self.timeout_seconds,
            )
        return self._client

    async def close(self) -> None:
        """Close the HTTP client if this adapter created it."""
        if self._client is not None and self._owns_client:
            await self._client.aclose()
            self._client = None

    async def create_commit_status(
        self,
        sha: str,
        state: CommitState,
        target_url: str,
        description: str,
        context: str,
    ) -> None:
        """Create a commit status, raising GitHubHTTPError outside 2xx."""
        payload = self._build_payload(state, target_url, description, context)
        client = await self._get_client()

        response = await client.post(
            f"/repos/{self.repo_owner}/{self.repo_name}/statuses/{sha}",
            json=payload,
        )

        if not 200 <= response.status_code <= 299:
            raise GitHubHTTPError(response.status_code, response.text)

        logger.debug(
            f"Set {context} status on {self.full_name}@{sha[:7]} to {state.value}",
            extra={
                "repository": self.full_name,
                "sha": sha,
                "context": context,
                "state": state.value,
            },
        )

    @staticmethod
    def _build_payload(
        state: CommitState, target_url: str, description: str, context: str
    ) -> dict[str, Any]:
        """Build the JSON body of a create-status request."""
        if len(description) > MAX_DESCRIPTION_LENGTH:
            description = description[: MAX_DESCRIPTION_LENGTH - 3] + "..."

        payload: dict[str, Any] = {
            "state": state.value,
            "description": description,
            "context": context,
        }
        if target_url:
            payload["target_url"] = target_url
        return payload
