"""Services module for nano-banana-mcp."""

from .image_store import save_image
from .logging_config import configure_logging, log_event

__all__ = ["save_image", "configure_logging", "log_event"]
