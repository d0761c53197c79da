"""Models module for nano-banana-mcp."""

from .input_models import (
    DescribeImageInput,
    EditImageInput,
    GenerateImageInput,
    ImageData,
    ThinkingOptions,
)

__all__ = [
    "GenerateImageInput",
    "EditImageInput",
    "DescribeImageInput",
    "ImageData",
    "ThinkingOptions",
]
