"""
nano-banana-mcp: Gemini Image Generation MCP Server

Exposes Google Gemini image models (Nano Banana) to MCP hosts:
- generate_image: text-to-image with optional reference images
- edit_image: instruction-driven edits of one or more images
- describe_image: text descriptions of images
"""

__version__ = "1.0.0"
