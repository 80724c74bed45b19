"""Text badges (pill-shaped by default)."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping, Optional

from image_service.services.colors import Color, lighten, parse_color
from image_service.services.params import check_range, dimension, first_param, to_float
from image_service.services.svg import Paint, Rect, RenderPlan, RoundedRect, Text, to_svg

FONT_SIZE = 16
CHAR_WIDTH = 0.5  # estimated glyph width as a share of font size
MARGIN = 20
AUTO_BG_LIGHTEN = 85


@dataclass(frozen=True)
class BadgeRequest:
    text: str = ""
    color: Color = Color(0x3B, 0x82, 0xF6)
    background: Optional[Color] = None  # None = lightened text color
    padding: float = 8
    vertical_padding: float = 6
    radius: Optional[float] = None      # None = fully rounded

    @property
    def fill(self) -> Color:
        return self.background or lighten(self.color, AUTO_BG_LIGHTEN)


def parse_badge_request(params: Mapping[str, str]) -> BadgeRequest:
    color = parse_color(first_param(params, "color", "textColor") or "#3B82F6", param="color")
    bg_raw = first_param(params, "backgroundColor")
    background = parse_color(bg_raw, param="backgroundColor") if bg_raw else None
    radius = to_float(first_param(params, "radius"))
    if radius is not None:
        check_range("radius", radius, 0, 100)
    return BadgeRequest(
        text=params.get("text", "") or "",
        color=color,
        background=background,
        padding=dimension(params, "padding", 8, 0, 200),
        vertical_padding=dimension(params, "verticalPadding", 6, 0, 100),
        radius=radius,
    )


def plan_badge(req: BadgeRequest) -> RenderPlan:
    text_width = len(req.text) * FONT_SIZE * CHAR_WIDTH
    width = max(0 if req.text else 100, text_width + 2 * req.padding)
    height = FONT_SIZE + 2 * req.vertical_padding
    radius = height / 2 if req.radius is None else min(req.radius, height / 2)

    paint = Paint.solid(req.fill)
    if radius > 0:
        shape = RoundedRect(MARGIN, MARGIN, width, height, radius, paint)
    else:
        shape = Rect(MARGIN, MARGIN, width, height, paint)

    overlay = ()
    if req.text:
        overlay = (Text(
            MARGIN + width / 2,
            MARGIN + height / 2 + FONT_SIZE / 3,
            req.text,
            font_size=FONT_SIZE,
            paint=Paint.solid(req.color),
            baseline="",
            weight="500",
        ),)
    return RenderPlan(
        width=width + 2 * MARGIN,
        height=height + 2 * MARGIN,
        background=(shape,),
        overlay=overlay,
        mode="badge",
    )


def render_badge(params: Mapping[str, str]) -> str:
    return to_svg(plan_badge(parse_badge_request(params)))
