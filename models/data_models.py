"""Data models for GitHub pull request and commit data."""

from typing import Any

from pydantic import BaseModel, model_validator


class PullRequestSummary(BaseModel):
    """The subset of a single-PR response that gets displayed.
    
    Any other fields in the API payload are ignored.
    """
    title: str


class Commit(BaseModel):
    """One entry from a PR's commits endpoint, flattened for display.
    
    GitHub returns commits in a nested shape:
    
        {"sha": ..., "commit": {"author": {"name": ..., "date": ...}, "message": ...}}
    
    which is flattened on validation. Unused fields are ignored.
    """
    
    sha: str
    author_name: str
    author_date: str
    message: str
    
    @model_validator(mode="before")
    @classmethod
    def flatten_api_payload(cls, data: Any) -> Any:
        """Accept the raw API shape as well as the flat one."""
        if not isinstance(data, dict) or "commit" not in data:
            return data
        
        commit = data["commit"]
        if not isinstance(commit, dict):
            raise ValueError("'commit' must be an object")
        author = commit.get("author")
        if not isinstance(author, dict):
            raise ValueError("'commit.author' must be an object")
        
        return {
            "sha": data.get("sha"),
            "author_name": author.get("name"),
            "author_date": author.get("date"),
            "message": commit.get("message"),
        }
    
    @property
    def summary(self) -> str:
        """First line of the commit message."""
        return self.message.split("\n", 1)[0].rstrip("\r")
