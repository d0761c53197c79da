"""
Value records exchanged with the Gemini image adapter.

None of these outlive a single call; all are immutable.
"""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class ImageInput:
    """A reference or source image supplied by the caller."""

    data: str  # base64 encoded image data
    mime_type: str  # e.g. "image/png", "image/jpeg"

    def to_part(self) -> dict[str, Any]:
        """Render as a Gemini request part."""
        return {"inlineData": {"mimeType": self.mime_type, "data": self.data}}


@dataclass(frozen=True)
class ThinkingConfig:
    """Reasoning depth for models that support thinking."""

    thinking_level: str | None = None  # MINIMAL, LOW, MEDIUM, HIGH
    include_thoughts: bool | None = None

    def to_wire(self) -> dict[str, Any]:
        """Render with only the fields the caller set."""
        wire: dict[str, Any] = {}
        if self.thinking_level is not None:
            wire["thinkingLevel"] = self.thinking_level
        if self.include_thoughts is not None:
            wire["includeThoughts"] = self.include_thoughts
        return wire


@dataclass(frozen=True)
class GeneratedImage:
    """Result from image generation."""

    mime_type: str
    base64_data: str

    # Optional text that accompanied the image
    description: str | None = None
    thoughts: str | None = None
    search_queries: tuple[str, ...] | None = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization, omitting absent fields."""
        data: dict[str, Any] = {
            "mimeType": self.mime_type,
            "base64Data": self.base64_data,
        }
        if self.description is not None:
            data["description"] = self.description
        if self.thoughts is not None:
            data["thoughts"] = self.thoughts
        if self.search_queries is not None:
            data["searchQueries"] = list(self.search_queries)
        return data
