#!/usr/bin/env python3
"""
nano-banana-mcp: Gemini Image Generation MCP Server

An MCP server that exposes Google Gemini image models (Nano Banana) as tools:
- generate_image: text-to-image with reference images, grounding and thinking
- edit_image: modify one or more images following instructions
- describe_image: analyze images and return a text description

A catalog of ready-made prompts is registered alongside the tools.
"""

import logging
import sys
from functools import lru_cache
from pathlib import Path
from typing import Any

from mcp.server.fastmcp import FastMCP
from mcp.server.fastmcp.exceptions import ToolError
from mcp.server.fastmcp.prompts.base import Prompt, PromptArgument
from mcp.types import ImageContent, TextContent

from .config.settings import get_settings
from .exceptions import ConfigurationError, GeminiImageError
from .models.input_models import DescribeImageInput, EditImageInput, GenerateImageInput
from .prompts import IMAGE_PROMPTS, PromptTemplate
from .providers import GeminiImageClient, GeneratedImage, ModelCatalog
from .services.image_store import save_image
from .services.logging_config import configure_logging

logger = logging.getLogger(__name__)

# Initialize MCP server
mcp = FastMCP("nano_banana_mcp")

# Failures reported to the host as tool errors instead of crashing the server
HANDLED_ERRORS = (GeminiImageError, OSError, ValueError)

# ============================
# Helper Functions
# ============================


@lru_cache(maxsize=1)
def get_client() -> GeminiImageClient:
    """Get the shared Gemini client built from settings."""
    settings = get_settings()
    return GeminiImageClient(
        settings.get_gemini_api_key(),
        catalog=ModelCatalog(default=settings.default_model),
        base_url=settings.api_base_url,
        timeout=settings.request_timeout,
        log_prompts=settings.log_prompts,
    )


def _save_if_requested(result: GeneratedImage, output_path: str | None, prompt: str) -> Path | None:
    if not output_path:
        return None
    return save_image(
        result.base64_data, output_path, mime_type=result.mime_type, prompt=prompt
    )


def format_image_result(
    result: GeneratedImage,
    saved_path: Path | None = None,
    *,
    include_reasoning: bool = True,
) -> list[ImageContent | TextContent]:
    """Format a generated image as MCP content: the image, then any text."""
    content: list[ImageContent | TextContent] = [
        ImageContent(type="image", data=result.base64_data, mimeType=result.mime_type)
    ]
    texts: list[str] = []

    if saved_path:
        texts.append(f"Image saved to: {saved_path}")
    if result.description:
        texts.append(result.description)
    if include_reasoning:
        if result.thoughts:
            texts.append(f"[Thinking] {result.thoughts}")
        if result.search_queries:
            texts.append(f"[Search queries] {', '.join(result.search_queries)}")

    content.extend(TextContent(type="text", text=text) for text in texts)
    return content


# ============================
# MCP Tools
# ============================


@mcp.tool(name="generate_image")
async def generate_image(params: GenerateImageInput):
    """Generate an image using Google Gemini.

    Optionally provide reference images to guide the generation style or
    content. Returns the generated image, plus any description the model
    wrote alongside it.

    **Features:**
    - 14 aspect ratios, including ultra-wide/tall 4:1, 1:4, 8:1, 1:8
    - 512px, 1K, 2K and 4K resolutions
    - Google Search grounding for real-time data (weather, products, events)
    - Thinking mode for complex compositions and precise text

    Args:
        params: Image generation parameters including prompt and optional settings.

    Returns:
        Image content followed by text notes (saved path, description, reasoning).
    """
    try:
        client = get_client()
        result = await client.generate_image(
            params.prompt,
            images=[image.to_image_input() for image in params.images or []],
            aspect_ratio=params.aspect_ratio,
            image_size=params.image_size,
            model=params.model,
            person_generation=params.person_generation,
            use_google_search=bool(params.use_google_search),
            thinking_config=(
                params.thinking_config.to_thinking_config() if params.thinking_config else None
            ),
        )
        saved_path = _save_if_requested(result, params.output_path, params.prompt)
    except HANDLED_ERRORS as e:
        logger.error(f"Image generation failed: {e}")
        raise ToolError(f"Failed to generate image: {e}") from e

    return format_image_result(result, saved_path)


@mcp.tool(name="edit_image")
async def edit_image(params: EditImageInput):
    """Edit one or more images using Google Gemini.

    Provide images and instructions for how to modify them, e.g. "replace the
    background with a beach", "make it look like a watercolor painting", or
    "combine these two products into one scene".

    Args:
        params: Edit instructions and the images to edit.

    Returns:
        The edited image, optionally followed by the saved path and a description.
    """
    try:
        client = get_client()
        result = await client.edit_image(
            params.prompt,
            [image.to_image_input() for image in params.images],
            model=params.model,
            person_generation=params.person_generation,
        )
        saved_path = _save_if_requested(result, params.output_path, params.prompt)
    except HANDLED_ERRORS as e:
        logger.error(f"Image editing failed: {e}")
        raise ToolError(f"Failed to edit image: {e}") from e

    return format_image_result(result, saved_path, include_reasoning=False)


@mcp.tool(name="describe_image")
async def describe_image(params: DescribeImageInput):
    """Analyze and describe one or more images using Google Gemini.

    Args:
        params: Images to analyze and an optional custom prompt.

    Returns:
        A text description of the image contents.
    """
    try:
        client = get_client()
        description = await client.describe_image(
            [image.to_image_input() for image in params.images],
            prompt=params.prompt,
            model=params.model,
        )
    except HANDLED_ERRORS as e:
        logger.error(f"Image description failed: {e}")
        raise ToolError(f"Failed to describe image: {e}") from e

    return description


# ============================
# MCP Prompts
# ============================


def _prompt_renderer(template: PromptTemplate):
    def render(**arguments: Any) -> str:
        return template.render({key: str(value) for key, value in arguments.items() if value})

    return render


def register_prompts(server: FastMCP) -> None:
    """Register every catalog template as an MCP prompt."""
    for template in IMAGE_PROMPTS:
        server.add_prompt(
            Prompt(
                name=template.name,
                title=template.title,
                description=template.description,
                arguments=[
                    PromptArgument(name=arg.name, description=arg.description, required=arg.required)
                    for arg in template.arguments
                ],
                fn=_prompt_renderer(template),
            )
        )


register_prompts(mcp)

# ============================
# Server Entry Point
# ============================


def create_app():
    """Create the MCP server application."""
    return mcp


def main() -> None:
    """Run the server over stdio."""
    try:
        settings = get_settings()
    except ConfigurationError as e:
        logger.error(f"Configuration error: {e}")
        sys.exit(1)

    configure_logging()

    if not settings.has_gemini_key():
        logger.error("GEMINI_API_KEY environment variable is required")
        logger.error("Set it with: export GEMINI_API_KEY=your_key_here")
        sys.exit(1)

    logger.info("Nano Banana MCP server started")
    mcp.run()


if __name__ == "__main__":
    main()
