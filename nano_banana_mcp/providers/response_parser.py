"""
Normalization of Gemini generateContent responses.

Response parts are parsed into a small sum type before classification:
a part is either `TextPart` (possibly a thought) or `InlineDataPart`.
For image generation the last image wins, the last non-thought text wins,
and thought texts accumulate in order.
"""

from dataclasses import dataclass
from typing import Any, Union

from ..exceptions import (
    EmptyResponseError,
    NoDescriptionError,
    NoImageDataError,
    NoResponseError,
    ProviderError,
)
from .base import GeneratedImage


@dataclass(frozen=True)
class TextPart:
    content: str
    is_thought: bool = False


@dataclass(frozen=True)
class InlineDataPart:
    mime_type: str
    data: str


ResponsePart = Union[TextPart, InlineDataPart]


def parse_part(raw: dict[str, Any]) -> ResponsePart | None:
    """Parse one raw part; returns None for parts with neither data nor text."""
    inline_data = raw.get("inlineData")
    if inline_data:
        return InlineDataPart(
            mime_type=inline_data.get("mimeType", ""),
            data=inline_data.get("data", ""),
        )
    text = raw.get("text")
    if text:
        return TextPart(content=text, is_thought=bool(raw.get("thought")))
    return None


def parse_parts(candidate: dict[str, Any]) -> list[ResponsePart]:
    """Parse a candidate's parts in response order."""
    raw_parts = (candidate.get("content") or {}).get("parts") or []
    parts = []
    for raw in raw_parts:
        part = parse_part(raw)
        if part is not None:
            parts.append(part)
    return parts


def raise_for_provider_error(data: dict[str, Any]) -> None:
    """Raise ProviderError if the body carries an error object."""
    error = data.get("error")
    if error:
        raise ProviderError(
            error.get("message", ""),
            code=error.get("code"),
            status=error.get("status"),
        )


def first_candidate(data: dict[str, Any]) -> dict[str, Any] | None:
    candidates = data.get("candidates")
    if not candidates:
        return None
    return candidates[0]


def parse_generation_response(data: dict[str, Any]) -> GeneratedImage:
    """
    Normalize a generation response into a GeneratedImage.

    Raises:
        ProviderError: If the body carries an error object
        EmptyResponseError: If there are no candidates
        NoImageDataError: If no inline image part was found
    """
    raise_for_provider_error(data)

    candidate = first_candidate(data)
    if candidate is None:
        raise EmptyResponseError()

    image: InlineDataPart | None = None
    description: str | None = None
    thoughts: str | None = None

    for part in parse_parts(candidate):
        if isinstance(part, InlineDataPart):
            image = part
        elif part.is_thought:
            thoughts = part.content if thoughts is None else f"{thoughts}\n{part.content}"
        else:
            description = part.content

    if image is None:
        raise NoImageDataError()

    search_queries = (candidate.get("groundingMetadata") or {}).get("webSearchQueries")

    return GeneratedImage(
        mime_type=image.mime_type,
        base64_data=image.data,
        description=description,
        thoughts=thoughts,
        search_queries=tuple(search_queries) if search_queries else None,
    )


def parse_description_response(data: dict[str, Any]) -> str:
    """
    Normalize a description response into its concatenated text.

    Raises:
        ProviderError: If the body carries an error object
        NoResponseError: If there are no candidates
        NoDescriptionError: If the candidate carried no text
    """
    raise_for_provider_error(data)

    candidate = first_candidate(data)
    if candidate is None:
        raise NoResponseError()

    description = "".join(
        part.content for part in parse_parts(candidate) if isinstance(part, TextPart)
    )
    if not description:
        raise NoDescriptionError()
    return description
