"""
Pydantic input models for nano-banana-mcp tools.

These models define the parameters accepted by MCP tools
with rich descriptions for the agent to understand how to use them.
"""

from pydantic import BaseModel, ConfigDict, Field

from ..config.constants import (
    DEFAULT_MODEL,
    GEMINI_MODELS,
    AspectRatio,
    ImageSize,
    PersonGeneration,
    ThinkingLevel,
)
from ..providers.base import ImageInput, ThinkingConfig

_MODEL_DESCRIPTION = (
    f"Gemini model ({', '.join(GEMINI_MODELS)}). Default: {DEFAULT_MODEL}"
)

_OUTPUT_PATH_DESCRIPTION = (
    "Optional path to save the image (e.g., /path/to/image.png). "
    "The file is written at exactly this path; a path ending in `/` or naming an existing "
    "directory gets a generated filename inside it. "
    "Supports `~` and environment variables; relative paths resolve against `OUTPUT_DIR`."
)


class ImageData(BaseModel):
    """A base64-encoded image with its MIME type."""

    model_config = ConfigDict(extra="forbid")

    data: str = Field(..., description="Base64 encoded image data")
    mime_type: str = Field(
        ..., description="MIME type of the image (e.g., image/png, image/jpeg)"
    )

    def to_image_input(self) -> ImageInput:
        return ImageInput(data=self.data, mime_type=self.mime_type)


class ThinkingOptions(BaseModel):
    """Controls the model's thinking/reasoning behavior."""

    model_config = ConfigDict(extra="forbid")

    thinking_level: ThinkingLevel | None = Field(
        default=None,
        description="Thinking depth: MINIMAL (fast) or HIGH (better for complex scenes, precise text)",
    )
    include_thoughts: bool | None = Field(
        default=None,
        description="Whether to return the reasoning process",
    )

    def to_thinking_config(self) -> ThinkingConfig:
        return ThinkingConfig(
            thinking_level=self.thinking_level,
            include_thoughts=self.include_thoughts,
        )


class GenerateImageInput(BaseModel):
    """Input model for image generation."""

    model_config = ConfigDict(
        str_strip_whitespace=True,
        validate_assignment=True,
        extra="forbid",
    )

    prompt: str = Field(
        ...,
        description=(
            "Description of the image to generate. Be specific about subject, "
            "composition, style, lighting, and mood."
        ),
    )

    aspect_ratio: AspectRatio | None = Field(
        default="1:1",
        description=(
            "Aspect ratio of the generated image. Ultra-wide/tall options for "
            "banners and panoramas: 4:1, 1:4, 8:1, 1:8"
        ),
    )

    image_size: ImageSize | None = Field(
        default="1K",
        description=(
            "Resolution of the generated image "
            "(512px for fast iterations, 1K default, 2K/4K for high quality)"
        ),
    )

    model: str | None = Field(default=None, description=_MODEL_DESCRIPTION)

    images: list[ImageData] | None = Field(
        default=None,
        description=(
            "Optional reference images to guide generation "
            "(up to 10 object refs + 4 person refs = 14 total)"
        ),
    )

    output_path: str | None = Field(default=None, description=_OUTPUT_PATH_DESCRIPTION)

    person_generation: PersonGeneration | None = Field(
        default=None,
        description="Controls the generation of people in images",
    )

    use_google_search: bool | None = Field(
        default=False,
        description=(
            "Enable Google Search grounding to use real-time web data for more accurate "
            "image generation (e.g., current weather, real products, recent events)"
        ),
    )

    thinking_config: ThinkingOptions | None = Field(
        default=None,
        description="Controls the model's thinking/reasoning behavior for complex compositions",
    )


class EditImageInput(BaseModel):
    """Input model for editing one or more images."""

    model_config = ConfigDict(
        str_strip_whitespace=True,
        validate_assignment=True,
        extra="forbid",
    )

    prompt: str = Field(..., description="Instructions for how to edit the image(s)")

    images: list[ImageData] = Field(..., description="One or more images to edit")

    model: str | None = Field(default=None, description=_MODEL_DESCRIPTION)

    output_path: str | None = Field(default=None, description=_OUTPUT_PATH_DESCRIPTION)

    person_generation: PersonGeneration | None = Field(
        default=None,
        description="Controls the generation of people in images",
    )


class DescribeImageInput(BaseModel):
    """Input model for describing/analyzing images."""

    model_config = ConfigDict(
        str_strip_whitespace=True,
        validate_assignment=True,
        extra="forbid",
    )

    images: list[ImageData] = Field(..., description="One or more images to describe/analyze")

    prompt: str | None = Field(
        default=None,
        description="Optional custom prompt for analysis (default: general description)",
    )

    model: str | None = Field(default=None, description=_MODEL_DESCRIPTION)
