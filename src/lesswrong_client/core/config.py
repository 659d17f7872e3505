"""Configuration settings for the LessWrong client."""

import os
from dataclasses import dataclass
from dotenv import load_dotenv

from .constants import Constants

# Load environment variables
load_dotenv()


def env_bool(key: str, default: bool = False) -> bool:
    """Get boolean environment variable."""
    return os.getenv(key, str(default)).lower() in ('true', '1', 'yes', 'on')


def env_int(key: str, default: int) -> int:
    """Get integer environment variable."""
    return int(os.getenv(key, str(default)))


def env_float(key: str, default: float) -> float:
    """Get float environment variable."""
    return float(os.getenv(key, str(default)))


@dataclass
class LessWrongConfig:
    """LessWrong API configuration."""
    endpoint: str = os.getenv('LESSWRONG_GRAPHQL_URL', Constants.GRAPHQL_URL)
    timeout: float = env_float('LESSWRONG_TIMEOUT', Constants.REQUEST_TIMEOUT)
    user_agent: str = os.getenv('LESSWRONG_USER_AGENT', Constants.USER_AGENT)
    comment_limit: int = env_int('LESSWRONG_COMMENT_LIMIT', Constants.DEFAULT_COMMENT_LIMIT)
    debug: bool = env_bool('LESSWRONG_DEBUG', False)
    
    def validate(self) -> None:
        """Validate client configuration."""
        if not self.endpoint:
            raise ValueError("LESSWRONG_GRAPHQL_URL is required")
        if not self.endpoint.startswith(('http://', 'https://')):
            raise ValueError("LESSWRONG_GRAPHQL_URL must be an http(s) URL")
        if self.timeout <= 0:
            raise ValueError("LESSWRONG_TIMEOUT must be positive")
        if self.comment_limit < 1:
            raise ValueError("LESSWRONG_COMMENT_LIMIT must be at least 1")
