"""Configuration and credential loading."""

import os
import sys
from pathlib import Path
from typing import Union

from dotenv import load_dotenv
from pydantic import ValidationError

from models.config_models import DEFAULT_API_BASE_URL, DEFAULT_USER_AGENT, AppConfig


def load_config() -> AppConfig:
    """
    Load and validate configuration from environment variables.
    
    Reads from .env file in the project root (if present) and validates
    the optional settings using Pydantic models.
    
    Returns:
        AppConfig: Validated configuration object
        
    Raises:
        SystemExit: If configuration is invalid
    """
    # Load .env file from project root
    env_path = Path(__file__).parent.parent / ".env"
    load_dotenv(dotenv_path=env_path)
    
    try:
        return AppConfig(
            api_base_url=os.getenv("GITHUB_API_URL") or DEFAULT_API_BASE_URL,
            user_agent=os.getenv("GITHUB_USER_AGENT") or DEFAULT_USER_AGENT,
            log_level=os.getenv("LOG_LEVEL") or "INFO",
        )
        
    except ValidationError as e:
        print("❌ Configuration validation failed:", file=sys.stderr)
        print("\nPlease check your .env file. Invalid fields:", file=sys.stderr)
        
        for error in e.errors():
            field_path = " → ".join(str(x) for x in error["loc"])
            message = error["msg"]
            print(f"  • {field_path}: {message}", file=sys.stderr)
        
        print("\nHint: Copy .env.example to .env and adjust the settings.", file=sys.stderr)
        sys.exit(1)


def load_token(token_path: Union[str, Path]) -> str:
    """
    Read a GitHub token from a plain text file.
    
    Args:
        token_path: Path to the token file
        
    Returns:
        str: File contents with surrounding whitespace removed
        
    Raises:
        OSError: If the file cannot be read
        ValueError: If the file is empty or the token cannot be sent as a header
    """
    token = Path(token_path).read_text(encoding="utf-8").strip()
    if not token:
        raise ValueError(f"Token file is empty: {token_path}")
    
    # http.client encodes header values as latin-1
    try:
        token.encode("latin-1")
    except UnicodeEncodeError as e:
        raise ValueError(
            f"Token file contains characters not allowed in an HTTP header: {token_path} "
            f"(position {e.start})"
        ) from None
    return token
