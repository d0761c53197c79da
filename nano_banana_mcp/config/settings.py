"""
Settings management for nano-banana-mcp.

Handles the Gemini API key and server configuration from environment variables.
"""

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Callable, TypeVar

from ..exceptions import ConfigurationError, MissingCredentialError
from .constants import DEFAULT_MODEL, GEMINI_API_BASE_URL

T = TypeVar("T")


def _env_number(names: tuple[str, ...], default: T, convert: Callable[[str], T], expected: str) -> T:
    """Parse the first non-empty variable in `names`, or return `default`."""
    for name in names:
        raw = os.getenv(name)
        if raw:
            try:
                return convert(raw)
            except ValueError:
                raise ConfigurationError(name, raw, expected) from None
    return default


@dataclass
class Settings:
    """Application settings loaded from environment."""

    # API
    gemini_api_key: str | None = None  # Also checks GOOGLE_API_KEY
    api_base_url: str = GEMINI_API_BASE_URL
    default_model: str = DEFAULT_MODEL

    # Transport timeout in seconds; None disables it
    request_timeout: float | None = None

    # Output
    output_dir: str | None = None

    # Logging
    log_dir: str | None = None
    log_level: str = "INFO"
    log_max_bytes: int = 5_242_880  # 5 MiB
    log_backup_count: int = 3
    log_prompts: bool = False

    @classmethod
    def from_env(cls) -> "Settings":
        """Load settings from environment variables."""
        # Support both GEMINI_API_KEY and GOOGLE_API_KEY
        gemini_key = os.getenv("GEMINI_API_KEY") or os.getenv("GOOGLE_API_KEY")
        log_dir = os.getenv("NANO_BANANA_MCP_LOG_DIR") or os.getenv("LOG_DIR")
        log_level = os.getenv("NANO_BANANA_MCP_LOG_LEVEL") or os.getenv("LOG_LEVEL", "INFO")

        timeout = _env_number(("REQUEST_TIMEOUT",), 0.0, float, "a number of seconds")

        return cls(
            gemini_api_key=gemini_key,
            api_base_url=os.getenv("GEMINI_API_BASE_URL", GEMINI_API_BASE_URL).rstrip("/"),
            default_model=os.getenv("GEMINI_DEFAULT_MODEL", DEFAULT_MODEL),
            request_timeout=timeout if timeout > 0 else None,
            output_dir=os.getenv("OUTPUT_DIR"),
            log_dir=log_dir,
            log_level=log_level,
            log_max_bytes=_env_number(
                ("NANO_BANANA_MCP_LOG_MAX_BYTES", "LOG_MAX_BYTES"), 5_242_880, int, "an integer"
            ),
            log_backup_count=_env_number(
                ("NANO_BANANA_MCP_LOG_BACKUP_COUNT", "LOG_BACKUP_COUNT"), 3, int, "an integer"
            ),
            log_prompts=(
                os.getenv("NANO_BANANA_MCP_LOG_PROMPTS") or os.getenv("LOG_PROMPTS", "false")
            ).lower()
            == "true",
        )

    def get_gemini_api_key(self, provided_key: str | None = None) -> str:
        """Get Gemini API key from provided value or settings."""
        api_key = provided_key or self.gemini_api_key
        if not api_key:
            raise MissingCredentialError()
        return api_key

    def has_gemini_key(self) -> bool:
        """Check if Gemini API key is available."""
        return bool(self.gemini_api_key)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings.from_env()
