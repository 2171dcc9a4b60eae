"""Shared pytest fixtures and configuration."""

from unittest.mock import Mock

import pytest
import requests


@pytest.fixture
def test_env(monkeypatch):
    """
    Set test configuration in the environment.
    
    Overrides anything a local .env file or the shell might provide.
    """
    monkeypatch.setenv("GITHUB_API_URL", "https://github.example.com/api/v3/")
    monkeypatch.setenv("GITHUB_USER_AGENT", "pr-commit-table-tests")
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")
    
    return {
        "api_base_url": "https://github.example.com/api/v3",
        "user_agent": "pr-commit-table-tests",
        "log_level": "DEBUG",
    }


@pytest.fixture
def clean_env(monkeypatch):
    """Remove configuration variables so defaults apply."""
    for name in ("GITHUB_API_URL", "GITHUB_USER_AGENT", "LOG_LEVEL"):
        monkeypatch.setenv(name, "")


@pytest.fixture
def token_file(tmp_path):
    """Token file with surrounding whitespace, as editors tend to leave it."""
    path = tmp_path / "token.txt"
    path.write_text("  ghp_test_token_1234567890\n\n")
    return path


def make_response(payload=None, status_code=200, text=""):
    """Build a mock requests.Response."""
    response = Mock()
    response.status_code = status_code
    response.headers = {"X-RateLimit-Remaining": "4999", "X-RateLimit-Limit": "5000"}
    response.text = text
    response.json.return_value = payload
    if status_code >= 400:
        response.raise_for_status.side_effect = requests.HTTPError(
            f"{status_code} Client Error"
        )
    return response


def commit_payload(sha, name, date, message, **extra):
    """Commit entry in the shape returned by GitHub's PR commits endpoint."""
    payload = {
        "sha": sha,
        "commit": {
            "author": {"name": name, "email": f"{name.lower()}@example.com", "date": date},
            "committer": {"name": name, "date": date},
            "message": message,
        },
        "html_url": f"https://github.com/owner/repo/commit/{sha}",
    }
    payload.update(extra)
    return payload
