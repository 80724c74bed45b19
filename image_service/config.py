"""Image service configuration, loaded from environment variables."""

import os
from pathlib import Path

from dotenv import load_dotenv

REPO_ROOT = Path(__file__).resolve().parent.parent

load_dotenv(REPO_ROOT / ".env")

# Jinja2 templates for the preview page
WEB_TEMPLATES_DIR = Path(__file__).resolve().parent / "templates"

# Server
HOST = os.environ.get("HOST", "0.0.0.0")
PORT = int(os.environ.get("PORT", "8000"))
LOG_LEVEL = os.environ.get("LOG_LEVEL", "info").lower()

# Cache-Control max-age for generated images (seconds)
CACHE_MAX_AGE = int(os.environ.get("CACHE_MAX_AGE", "300"))

# Scale factor applied when rasterizing SVG to PNG
PNG_SCALE = float(os.environ.get("PNG_SCALE", "1.0"))

# The datetime icon defaults to "now", so it is cached briefly
DATETIME_CACHE_MAX_AGE = int(os.environ.get("DATETIME_CACHE_MAX_AGE", "60"))
