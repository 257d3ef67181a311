"""Test suite for the autostatus build reporter.

Organized into three categories:

1. core/: Unit tests for core domain logic
   - Minimal dependencies, fast execution
   - Uses in-memory fakes for ports

2. adapters/: Tests for adapter implementations
   - GitHub API faked with httpx.MockTransport
   - Validates adapter behavior and error handling

3. fakes/: Port implementations for testing
   - In-memory implementations of CommitStatusPort and BuildNotifierPort
"""
