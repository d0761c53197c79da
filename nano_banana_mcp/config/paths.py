"""
Path utilities for saving generated images.

Centralizes output path behavior:
- Expands `~` and environment variables for user-supplied paths
- Resolves relative paths against `OUTPUT_DIR` when it is set
- Creates parent directories as needed
"""

from __future__ import annotations

import os
from pathlib import Path

from .settings import get_settings


def expand_path(path: str) -> Path:
    """Expand `~` and environment variables in a path string."""
    expanded = os.path.expandvars(os.path.expanduser(path))
    return Path(expanded)


def get_base_output_directory() -> Path:
    """Get the base directory that relative output paths are resolved against."""
    settings = get_settings()
    if settings.output_dir:
        return expand_path(settings.output_dir).resolve()
    return Path.cwd()


def get_log_directory() -> Path:
    """Get the directory for server logs."""
    settings = get_settings()
    if settings.log_dir:
        log_dir = expand_path(settings.log_dir)
    elif settings.output_dir:
        log_dir = expand_path(settings.output_dir) / "logs"
    else:
        log_dir = Path.home() / "Downloads" / "images" / "logs"

    log_dir.mkdir(parents=True, exist_ok=True)
    return log_dir


def resolve_output_path(output_path: str, *, default_filename: str) -> Path:
    """
    Resolve an `output_path` (directory or file path) into an absolute file path.

    Rules:
    - Relative paths are anchored at `OUTPUT_DIR` (or the working directory)
    - If `output_path` ends with a path separator, treat it as a directory
    - If `output_path` exists and is a directory, treat it as a directory
    - Otherwise treat it as a file path
    """
    if not default_filename:
        raise ValueError("default_filename must not be empty")

    raw = output_path.strip()
    if not raw:
        raise ValueError("output_path must not be empty")

    path_obj = expand_path(raw)
    if not path_obj.is_absolute():
        path_obj = get_base_output_directory() / path_obj

    is_directory = raw.endswith(("/", "\\")) or path_obj.is_dir()
    save_path = path_obj / default_filename if is_directory else path_obj

    save_path = save_path.resolve()
    save_path.parent.mkdir(parents=True, exist_ok=True)
    return save_path
