"""Provider module for nano-banana-mcp."""

from .base import GeneratedImage, ImageInput, ThinkingConfig
from .gemini_provider import GeminiImageClient
from .request_builder import DEFAULT_CATALOG, GenerationRequest, ModelCatalog

__all__ = [
    "GeminiImageClient",
    "GeneratedImage",
    "ImageInput",
    "ThinkingConfig",
    "GenerationRequest",
    "ModelCatalog",
    "DEFAULT_CATALOG",
]
