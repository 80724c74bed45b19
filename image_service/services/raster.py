"""SVG → PNG conversion (cairosvg)."""

from __future__ import annotations

import logging

from image_service.config import PNG_SCALE

logger = logging.getLogger(__name__)


class RasterizationError(RuntimeError):
    pass


def svg_to_png(svg: str, scale: float = PNG_SCALE) -> bytes:
    """Rasterize SVG markup. Raises RasterizationError if cairo is unavailable
    or the conversion fails."""
    try:
        import cairosvg  # needs the system cairo library at import time
    except (ImportError, OSError) as e:
        logger.error("cairosvg unavailable: %s", e)
        raise RasterizationError("PNG output is not available on this server") from e

    try:
        return cairosvg.svg2png(bytestring=svg.encode("utf-8"), scale=scale)
    except Exception as e:
        logger.error("SVG rasterization failed: %s", e)
        raise RasterizationError("Failed to rasterize image") from e
