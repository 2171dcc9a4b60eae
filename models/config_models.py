"""Configuration models for validation using Pydantic."""

from pydantic import BaseModel, Field, field_validator


DEFAULT_API_BASE_URL = "https://api.github.com"
DEFAULT_USER_AGENT = "pr-commit-table"


class AppConfig(BaseModel):
    """Application configuration loaded from environment variables."""
    
    api_base_url: str = Field(default=DEFAULT_API_BASE_URL, description="GitHub REST API root")
    user_agent: str = Field(default=DEFAULT_USER_AGENT, min_length=1, description="User-Agent header sent with every request")
    log_level: str = Field(default="INFO", description="Logging level")
    
    @field_validator("api_base_url")
    @classmethod
    def validate_api_base_url(cls, v: str) -> str:
        """Validate API URL scheme and strip any trailing slash."""
        if not v.startswith(("https://", "http://")):
            raise ValueError("GitHub API URL must start with https:// or http://")
        return v.rstrip("/")
    
    @field_validator("user_agent")
    @classmethod
    def validate_user_agent(cls, v: str) -> str:
        """GitHub rejects requests without a User-Agent."""
        v = v.strip()
        if not v:
            raise ValueError("User-Agent must not be blank")
        return v
    
    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is one of the standard levels."""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        v_upper = v.upper()
        if v_upper not in valid_levels:
            raise ValueError(f"Log level must be one of: {', '.join(valid_levels)}")
        return v_upper
