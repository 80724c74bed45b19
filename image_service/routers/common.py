"""Response helpers shared by the image routers."""

import logging
from typing import Callable, Mapping, Optional

from fastapi import HTTPException
from fastapi.responses import Response

from image_service.config import CACHE_MAX_AGE
from image_service.services.errors import RenderValidationError
from image_service.services.raster import RasterizationError, svg_to_png

logger = logging.getLogger(__name__)

SVG_MEDIA_TYPE = "image/svg+xml"
PNG_MEDIA_TYPE = "image/png"


def _cache_headers(max_age: int = CACHE_MAX_AGE) -> dict:
    return {
        "Cache-Control": f"public, max-age={max_age}",
        "Access-Control-Allow-Origin": "*",
    }


def present(**params: Optional[str]) -> dict[str, str]:
    """Flat name → string mapping of the parameters that were sent."""
    return {name: value for name, value in params.items() if value is not None}


def render_or_400(render: Callable[[Mapping[str, str]], str], params: Mapping[str, str]) -> str:
    """Run a renderer, turning validation errors into HTTP 400."""
    try:
        return render(params)
    except RenderValidationError as e:
        logger.info("Rejected %s: %s", render.__name__, e.message)
        raise HTTPException(status_code=400, detail=e.to_dict())


def svg_response(svg: str, max_age: int = CACHE_MAX_AGE) -> Response:
    return Response(content=svg, media_type=SVG_MEDIA_TYPE, headers=_cache_headers(max_age))


def png_response(svg: str) -> Response:
    try:
        png = svg_to_png(svg)
    except RasterizationError as e:
        raise HTTPException(status_code=500, detail=str(e))
    return Response(content=png, media_type=PNG_MEDIA_TYPE, headers=_cache_headers())


def image_response(svg: str, fmt: str) -> Response:
    return png_response(svg) if fmt == "png" else svg_response(svg)
