"""Data models for the PR commit table."""

from models.config_models import AppConfig
from models.data_models import Commit, PullRequestSummary

__all__ = [
    "AppConfig",
    "Commit",
    "PullRequestSummary",
]
