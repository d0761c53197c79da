"""Persistence of generated images to the local filesystem."""

import base64
import logging
import mimetypes
from datetime import datetime
from pathlib import Path
from uuid import uuid4

from ..config.paths import resolve_output_path
from .logging_config import log_event

logger = logging.getLogger(__name__)


def default_filename(prompt: str, mime_type: str) -> str:
    """Build a filename from the timestamp, a prompt snippet and the MIME type."""
    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    short_id = uuid4().hex[:8]
    prompt_snippet = "".join(c for c in prompt[:30] if c.isalnum() or c == " ").strip()
    prompt_snippet = prompt_snippet.replace(" ", "_")[:20]
    extension = mimetypes.guess_extension(mime_type) or ".png"
    return f"gemini_{timestamp}_{prompt_snippet}_{short_id}{extension}"


def save_image(
    base64_data: str,
    output_path: str,
    *,
    mime_type: str = "image/png",
    prompt: str = "",
) -> Path:
    """
    Decode a base64 image and write it to `output_path`.

    Args:
        base64_data: Base64-encoded image payload
        output_path: File path, or directory to place a generated filename in
        mime_type: MIME type used to pick the extension of generated filenames
        prompt: Prompt used to name generated filenames

    Returns:
        Absolute path of the written file
    """
    image_bytes = base64.b64decode(base64_data)
    save_path = resolve_output_path(
        output_path, default_filename=default_filename(prompt, mime_type)
    )

    with open(save_path, "wb") as f:
        f.write(image_bytes)

    logger.info(f"Image saved to: {save_path}")
    log_event("image_saved", path=str(save_path), bytes=len(image_bytes))
    return save_path
