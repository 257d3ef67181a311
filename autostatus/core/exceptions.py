"""Exceptions raised across the autostatus port boundaries."""


class AutostatusError(Exception):
    """Base exception for autostatus errors."""


class GitHubHTTPError(AutostatusError):
    """Raised when a GitHub API call does not return a 2xx response."""

    def __init__(self, response_code: int, message: str = "") -> None:
        self.response_code = response_code
        self.message = message
        detail = f": {message}" if message else ""
        super().__init__(f"GitHub API returned HTTP {response_code}{detail}")

    @property
    def is_success_code(self) -> bool:
        return 200 <= self.response_code <= 299


class NotifierConfigurationError(AutostatusError):
    """Raised when no usable notifier can be built from the settings."""
