"""
Request shaping for the Gemini generateContent endpoint.

Turns caller options into a request body, applying the model allow-list,
capability gating for image-shaping parameters, and default substitution.
Keys are only added when their governing input is present: the API treats
an absent key and an empty one differently.
"""

from dataclasses import dataclass, field
from typing import Any, Sequence

from ..config.constants import (
    DEFAULT_DESCRIBE_PROMPT,
    DEFAULT_MODEL,
    DESCRIBE_MODALITIES,
    GEMINI_MODELS,
    GENERATE_MODALITIES,
    IMAGE_CAPABLE_MARKERS,
)
from ..exceptions import InvalidModelError, NoImagesProvidedError
from .base import ImageInput, ThinkingConfig


@dataclass(frozen=True)
class ModelCatalog:
    """Allow-listed model identifiers and the default among them."""

    allowed: tuple[str, ...] = GEMINI_MODELS
    default: str = DEFAULT_MODEL

    def __post_init__(self) -> None:
        if self.default not in self.allowed:
            raise ValueError(
                f"Default model '{self.default}' is not in the allow-list: {', '.join(self.allowed)}"
            )

    def resolve(self, model: str | None) -> str:
        """Return the model to use, raising InvalidModelError if not allowed."""
        resolved = model or self.default
        if resolved not in self.allowed:
            raise InvalidModelError(resolved, self.allowed)
        return resolved


DEFAULT_CATALOG = ModelCatalog()


@dataclass(frozen=True)
class GenerationRequest:
    """Caller options for image generation."""

    prompt: str
    images: Sequence[ImageInput] = ()
    aspect_ratio: str | None = None
    image_size: str | None = None
    model: str | None = None
    person_generation: str | None = None
    use_google_search: bool = False
    thinking_config: ThinkingConfig | None = None


@dataclass(frozen=True)
class PreparedRequest:
    """A validated request ready for the transport."""

    model: str
    body: dict[str, Any] = field(default_factory=dict)


def supports_image_config(model: str) -> bool:
    """Whether a model accepts imageConfig (aspect ratio / size)."""
    return any(marker in model for marker in IMAGE_CAPABLE_MARKERS)


def endpoint_url(base_url: str, model: str) -> str:
    """generateContent URL for a model; the API key travels as a query parameter."""
    return f"{base_url.rstrip('/')}/{model}:generateContent"


def _content_parts(text: str, images: Sequence[ImageInput]) -> list[dict[str, Any]]:
    parts: list[dict[str, Any]] = [{"text": text}]
    parts.extend(image.to_part() for image in images)
    return parts


def build_generation_request(
    request: GenerationRequest, catalog: ModelCatalog = DEFAULT_CATALOG
) -> PreparedRequest:
    """
    Build the generateContent body for image generation.

    Aspect ratio and size are dropped, without error, for models that do not
    accept imageConfig. `tools` is only present when grounding is enabled.

    Raises:
        InvalidModelError: If the model is not allow-listed
    """
    model = catalog.resolve(request.model)

    generation_config: dict[str, Any] = {"responseModalities": list(GENERATE_MODALITIES)}

    if supports_image_config(model):
        image_config: dict[str, Any] = {}
        if request.aspect_ratio:
            image_config["aspectRatio"] = request.aspect_ratio
        if request.image_size:
            image_config["imageSize"] = request.image_size
        if image_config:
            generation_config["imageConfig"] = image_config

    if request.thinking_config is not None:
        generation_config["thinkingConfig"] = request.thinking_config.to_wire()

    body: dict[str, Any] = {
        "contents": [{"parts": _content_parts(request.prompt, request.images)}],
        "generationConfig": generation_config,
    }

    if request.use_google_search:
        body["tools"] = [{"google_search": {}}]

    return PreparedRequest(model=model, body=body)


def build_description_request(
    images: Sequence[ImageInput] | None,
    prompt: str | None = None,
    model: str | None = None,
    catalog: ModelCatalog = DEFAULT_CATALOG,
) -> PreparedRequest:
    """
    Build the generateContent body for describing images (text-only output).

    Raises:
        InvalidModelError: If the model is not allow-listed
        NoImagesProvidedError: If no images are given
    """
    resolved = catalog.resolve(model)

    if not images:
        raise NoImagesProvidedError()

    body: dict[str, Any] = {
        "contents": [{"parts": _content_parts(prompt or DEFAULT_DESCRIBE_PROMPT, images)}],
        "generationConfig": {"responseModalities": list(DESCRIBE_MODALITIES)},
    }
    return PreparedRequest(model=resolved, body=body)
