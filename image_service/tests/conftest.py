"""Shared fixtures for image service tests.

Provides:
- client: TestClient wired to a minimal app with the image routers
- png stub: svg_to_png patched so cairo isn't needed
- edge_radii: (left, right) rounding of a bar primitive
"""

import os
from unittest.mock import patch

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

# Set env vars before any service imports
os.environ.setdefault("CACHE_MAX_AGE", "300")

from image_service.routers import progress, shapes
from image_service.services.colors import Color
from image_service.services.svg import (
    AsymmetricRoundedRect,
    Ellipse,
    Rect,
    RoundedRect,
)

FAKE_PNG = b"\x89PNG\r\n\x1a\nfake"

GREEN = Color(0x10, 0xB9, 0x81)
BLUE = Color(0x3B, 0x82, 0xF6)
PURPLE = Color(0x8B, 0x5C, 0xF6)
RED = Color(255, 0, 0)
LIME = Color(0, 255, 0)
NAVY = Color(0, 0, 255)


@pytest.fixture
def client():
    """Minimal FastAPI TestClient with only the image routers."""
    app = FastAPI(title="Test Image Service")
    app.include_router(progress.router)
    app.include_router(shapes.router)

    with patch("image_service.routers.common.svg_to_png", return_value=FAKE_PNG):
        with TestClient(app) as c:
            yield c


def edge_radii(shape) -> tuple[float, float]:
    """(left, right) corner radius of a bar primitive."""
    if isinstance(shape, Rect):
        return 0.0, 0.0
    if isinstance(shape, RoundedRect):
        return shape.radius, shape.radius
    if isinstance(shape, AsymmetricRoundedRect):
        return shape.r_left, shape.r_right
    if isinstance(shape, Ellipse):
        return shape.rx, shape.rx
    raise TypeError(type(shape).__name__)


def piece_width(shape) -> float:
    if isinstance(shape, Ellipse):
        return 2 * shape.rx
    return shape.width

