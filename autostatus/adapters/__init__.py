"""External adapters for the autostatus build reporter.

This package contains all external dependencies (GitHub API over HTTP,
terminal output) and provides implementations of the core port interfaces.

Adapter Organization:

- github/: Repository client for the GitHub commit statuses API
- notification/: Build notifiers (GitHub commit status, stdout)
"""
