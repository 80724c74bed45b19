"""Entry points that take raw query parameters and return SVG markup."""

from __future__ import annotations

from typing import Mapping

from image_service.services.bar import plan_bar
from image_service.services.donut import plan_donut
from image_service.services.params import parse_bar_request, parse_donut_request
from image_service.services.svg import RenderPlan, to_svg


def bar_plan(params: Mapping[str, str]) -> RenderPlan:
    return plan_bar(parse_bar_request(params))


def donut_plan(params: Mapping[str, str]) -> RenderPlan:
    return plan_donut(parse_donut_request(params))


def render_bar(params: Mapping[str, str]) -> str:
    """Progress bar SVG. Raises RenderValidationError on bad input."""
    return to_svg(bar_plan(params))


def render_donut(params: Mapping[str, str]) -> str:
    """Progress donut SVG. Raises RenderValidationError on bad input."""
    return to_svg(donut_plan(params))
