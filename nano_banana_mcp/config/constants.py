"""
Constants for the Gemini image adapter.

This module defines the model allow-list, supported aspect ratios and
resolutions, and the enumerations accepted by the Gemini API.
"""

from typing import Literal

GEMINI_API_BASE_URL = "https://generativelanguage.googleapis.com/v1beta/models"

# ============================
# Models
# ============================

# Allow-listed model identifiers. The model is interpolated into the request
# URL, so nothing outside this list may reach the transport.
GEMINI_MODELS = (
    "gemini-3.1-flash-image-preview",  # Nano Banana 2 (latest, recommended)
    "gemini-3-pro-image-preview",  # Nano Banana Pro (highest quality)
    "gemini-2.5-flash-preview-05-20",  # Nano Banana (fast)
    "gemini-2.0-flash-exp",  # Widely available fallback
)

DEFAULT_MODEL = "gemini-3.1-flash-image-preview"

# ============================
# Image shaping
# ============================

AspectRatio = Literal[
    "1:1",
    "3:2",
    "2:3",
    "3:4",
    "4:3",
    "4:5",
    "5:4",
    "9:16",
    "16:9",
    "21:9",
    "4:1",
    "1:4",
    "8:1",
    "1:8",
]

ASPECT_RATIOS = [
    "1:1",  # Square
    "3:2",  # Landscape (photo)
    "2:3",  # Portrait (phone)
    "3:4",  # Portrait (social)
    "4:3",  # Landscape (classic)
    "4:5",  # Portrait (Instagram)
    "5:4",  # Landscape (social)
    "9:16",  # Portrait (Stories/Reels)
    "16:9",  # Landscape (video)
    "21:9",  # Ultra-wide
    "4:1",  # Banner
    "1:4",  # Tall banner
    "8:1",  # Panorama
    "1:8",  # Tall panorama
]

ImageSize = Literal["512px", "1K", "2K", "4K"]

# Resolution tiers (uppercase K)
IMAGE_SIZES = [
    "512px",  # Fast iterations
    "1K",  # Default
    "2K",  # High quality
    "4K",  # Maximum resolution
]

PersonGeneration = Literal["ALLOW_ALL", "ALLOW_ADULT", "ALLOW_NONE"]

PERSON_GENERATION_POLICIES = ["ALLOW_ALL", "ALLOW_ADULT", "ALLOW_NONE"]

ThinkingLevel = Literal["MINIMAL", "LOW", "MEDIUM", "HIGH"]

THINKING_LEVELS = ["MINIMAL", "LOW", "MEDIUM", "HIGH"]

# ============================
# Request defaults
# ============================

GENERATE_MODALITIES = ["TEXT", "IMAGE"]
DESCRIBE_MODALITIES = ["TEXT"]

DEFAULT_DESCRIBE_PROMPT = "Describe this image in detail. What do you see?"

# Substrings marking a model as accepting imageConfig
IMAGE_CAPABLE_MARKERS = ("image", "imagen")
