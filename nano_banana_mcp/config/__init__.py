"""Configuration module for nano-banana-mcp."""

from .constants import (
    ASPECT_RATIOS,
    DEFAULT_DESCRIBE_PROMPT,
    DEFAULT_MODEL,
    GEMINI_API_BASE_URL,
    GEMINI_MODELS,
    IMAGE_SIZES,
    PERSON_GENERATION_POLICIES,
    THINKING_LEVELS,
)
from .settings import Settings, get_settings

__all__ = [
    "ASPECT_RATIOS",
    "IMAGE_SIZES",
    "GEMINI_MODELS",
    "DEFAULT_MODEL",
    "GEMINI_API_BASE_URL",
    "PERSON_GENERATION_POLICIES",
    "THINKING_LEVELS",
    "DEFAULT_DESCRIBE_PROMPT",
    "get_settings",
    "Settings",
]
