"""Tests for output path handling and image persistence."""

import base64
import os
from pathlib import Path

import pytest

# Set dummy API key for testing
os.environ.setdefault("GEMINI_API_KEY", "test-key")


TINY_PNG_BASE64 = (
    "iVBORw0KGgoAAAANSUhEUgAAAAEAAAABCAQAAAC1HAwCAAAAC0lEQVR42mP8/x8AAwMCAO7+9pQAAAAA"
    "SUVORK5CYII="
)


def test_resolve_output_path_expands_user_directory(tmp_path: Path, monkeypatch):
    from nano_banana_mcp.config.paths import resolve_output_path

    monkeypatch.setenv("HOME", str(tmp_path))

    resolved = resolve_output_path("~/images/", default_filename="test.png")
    assert resolved == tmp_path.resolve() / "images" / "test.png"
    assert resolved.parent.is_dir()


def test_resolve_output_path_existing_directory_with_suffix_is_directory(tmp_path: Path):
    from nano_banana_mcp.config.paths import resolve_output_path

    output_dir = tmp_path / "my.images"
    output_dir.mkdir()

    resolved = resolve_output_path(str(output_dir), default_filename="test.png")
    assert resolved == output_dir.resolve() / "test.png"


def test_resolve_output_path_without_suffix_is_file(tmp_path: Path):
    from nano_banana_mcp.config.paths import resolve_output_path

    resolved = resolve_output_path(str(tmp_path / "renders" / "fox"), default_filename="test.png")
    assert resolved == (tmp_path / "renders" / "fox").resolve()
    assert not resolved.exists()


def test_resolve_output_path_file_creates_parents(tmp_path: Path):
    from nano_banana_mcp.config.paths import resolve_output_path

    target = tmp_path / "nested" / "deeper" / "fox.png"

    resolved = resolve_output_path(str(target), default_filename="unused.png")
    assert resolved == target.resolve()
    assert resolved.parent.is_dir()


def test_relative_output_path_uses_output_dir_env(tmp_path: Path, monkeypatch):
    from nano_banana_mcp.config.paths import resolve_output_path

    monkeypatch.setenv("OUTPUT_DIR", str(tmp_path / "custom-output"))

    resolved = resolve_output_path("banners/fox.png", default_filename="unused.png")
    assert resolved == (tmp_path / "custom-output" / "banners" / "fox.png").resolve()


def test_relative_output_path_defaults_to_cwd(tmp_path: Path, monkeypatch):
    from nano_banana_mcp.config.paths import resolve_output_path

    monkeypatch.delenv("OUTPUT_DIR", raising=False)
    monkeypatch.chdir(tmp_path)

    resolved = resolve_output_path("fox.png", default_filename="unused.png")
    assert resolved == tmp_path.resolve() / "fox.png"


def test_resolve_output_path_rejects_blank(tmp_path: Path):
    from nano_banana_mcp.config.paths import resolve_output_path

    with pytest.raises(ValueError):
        resolve_output_path("   ", default_filename="test.png")


def test_log_directory_uses_env(tmp_path: Path, monkeypatch):
    from nano_banana_mcp.config.paths import get_log_directory

    monkeypatch.setenv("NANO_BANANA_MCP_LOG_DIR", str(tmp_path / "logs"))

    log_dir = get_log_directory()
    assert log_dir == tmp_path / "logs"
    assert log_dir.is_dir()


def test_save_image_writes_file(tmp_path: Path):
    from nano_banana_mcp.services.image_store import save_image

    target = tmp_path / "out" / "fox.png"

    saved_path = save_image(TINY_PNG_BASE64, str(target))

    assert saved_path.is_absolute()
    assert saved_path == target.resolve()
    assert saved_path.read_bytes() == base64.b64decode(TINY_PNG_BASE64)


def test_save_image_to_directory_generates_filename(tmp_path: Path):
    from nano_banana_mcp.services.image_store import save_image

    output_dir = tmp_path / "outputs"

    saved_path = save_image(
        TINY_PNG_BASE64, f"{output_dir}/", mime_type="image/png", prompt="A red fox!"
    )

    assert saved_path.parent == output_dir.resolve()
    assert saved_path.name.startswith("gemini_")
    assert "A_red_fox" in saved_path.name
    assert saved_path.suffix == ".png"
    assert saved_path.is_file()


def test_save_image_without_suffix_writes_exact_path(tmp_path: Path):
    from nano_banana_mcp.services.image_store import save_image

    target = tmp_path / "out" / "fox"

    saved_path = save_image(TINY_PNG_BASE64, str(target), prompt="fox")

    assert saved_path == target.resolve()
    assert saved_path.is_file()
    assert saved_path.read_bytes() == base64.b64decode(TINY_PNG_BASE64)


def test_save_image_write_failure_propagates(tmp_path: Path):
    from nano_banana_mcp.services.image_store import save_image

    blocker = tmp_path / "blocker"
    blocker.write_text("not a directory")

    with pytest.raises(OSError):
        save_image(TINY_PNG_BASE64, str(blocker / "fox.png"))
