"""
Pytest configuration and shared fixtures for seqdfa tests.
"""
import pytest

from seqdfa.constants import ENV_CONTEXT_LINES, ENV_IGNORE_CASE, ENV_MAX_CONTENT_SIZE, ENV_MAX_MATCHES


@pytest.fixture(autouse=True)
def _clean_seqdfa_env(monkeypatch):
    """Keep matcher settings from the developer's shell out of the tests."""
    for name in (ENV_CONTEXT_LINES, ENV_IGNORE_CASE, ENV_MAX_CONTENT_SIZE, ENV_MAX_MATCHES, "DEBUG"):
        monkeypatch.delenv(name, raising=False)
