"""Build notifiers for reporting build results.

Implementations support multiple output channels:
- GitHub commit statuses (one status per stage)
- Stdout (terminal pretty-print)
"""

from .github_status import STAGE_STATUS_MAP, GithubBuildNotifier
from .stdout import StdoutBuildNotifier

__all__ = ["GithubBuildNotifier", "STAGE_STATUS_MAP", "StdoutBuildNotifier"]
