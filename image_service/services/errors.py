"""Validation errors raised while turning query parameters into a render request.

Routers translate these into HTTP 400 responses; nothing in the render
path raises anything else for bad input.
"""

from __future__ import annotations

from typing import Optional


class RenderValidationError(ValueError):
    """Base class for rejected render input."""

    code = "invalid_request"

    def __init__(self, message: str, param: Optional[str] = None) -> None:
        super().__init__(message)
        self.message = message
        self.param = param

    def to_dict(self) -> dict:
        return {"error": self.code, "message": self.message, "param": self.param}


class InvalidColor(RenderValidationError):
    code = "invalid_color"


class OutOfRangeDimension(RenderValidationError):
    code = "out_of_range"


class MalformedAspectRatio(RenderValidationError):
    code = "malformed_aspect_ratio"


class MalformedMultiValue(RenderValidationError):
    """Unparsable `values` list. Degraded to an empty render, never returned."""

    code = "malformed_values"


class InvalidDate(RenderValidationError):
    code = "invalid_date"
