"""Pill buttons: solid fill fading slightly towards the bottom, with a top sheen."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping

from image_service.services.badge import FONT_SIZE, MARGIN
from image_service.services.colors import Color, parse_color
from image_service.services.gradients import GradientStop
from image_service.services.params import dimension, first_param
from image_service.services.svg import BoxGradient, Paint, RenderPlan, RoundedRect, Text, to_svg

GRADIENT_ID = "pillGradient"
CHAR_WIDTH = 0.6
MIN_WIDTH = 100
BOTTOM_OPACITY = 0.8
HIGHLIGHT = Color(255, 255, 255, 0.2)
HIGHLIGHT_SHARE = 0.3  # sheen height as a share of the pill height


@dataclass(frozen=True)
class PillRequest:
    text: str = "Pill"
    color: Color = Color(0x3B, 0x82, 0xF6)
    text_color: Color = Color(0xFF, 0xFF, 0xFF)
    padding: float = 20
    vertical_padding: float = 12


def parse_pill_request(params: Mapping[str, str]) -> PillRequest:
    return PillRequest(
        text=params.get("text") or "Pill",
        color=parse_color(first_param(params, "color") or "#3B82F6", param="color"),
        text_color=parse_color(first_param(params, "textColor") or "#FFFFFF", param="textColor"),
        padding=dimension(params, "padding", 20, 0, 200),
        vertical_padding=dimension(params, "verticalPadding", 12, 0, 100),
    )


def plan_pill(req: PillRequest) -> RenderPlan:
    width = max(MIN_WIDTH, len(req.text) * FONT_SIZE * CHAR_WIDTH + 2 * req.padding)
    height = FONT_SIZE + 2 * req.vertical_padding
    radius = height / 2
    c = req.color
    faded = Color(c.r, c.g, c.b, round(c.a * BOTTOM_OPACITY, 3))
    stops = (GradientStop(0, c), GradientStop(100, faded))

    return RenderPlan(
        width=width + 2 * MARGIN,
        height=height + 2 * MARGIN,
        background=(
            RoundedRect(MARGIN, MARGIN, width, height, radius, Paint.gradient(GRADIENT_ID)),
            RoundedRect(
                MARGIN, MARGIN, width, round(height * HIGHLIGHT_SHARE), radius,
                Paint.solid(HIGHLIGHT),
            ),
        ),
        gradients=(BoxGradient(GRADIENT_ID, stops, 0, 0, 0, 100),),
        overlay=(Text(
            MARGIN + width / 2,
            MARGIN + height / 2 + FONT_SIZE / 3,
            req.text,
            font_size=FONT_SIZE,
            paint=Paint.solid(req.text_color),
            baseline="",
            weight="500",
        ),),
        mode="pill",
    )


def render_pill(params: Mapping[str, str]) -> str:
    return to_svg(plan_pill(parse_pill_request(params)))
