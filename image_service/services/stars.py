"""Star rating images."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Mapping

from image_service.services.colors import Color, parse_color
from image_service.services.params import check_range, clamped_float, first_param, to_float
from image_service.services.svg import Paint, RenderPlan, StarPath, num, to_svg

EMPTY_STROKE = Color(0xD1, 0xD5, 0xDB)
INNER_RATIO = 0.382  # inner/outer radius of a regular five-pointed star
STAR_SHARE = 0.8     # star width as a share of its slot


@dataclass(frozen=True)
class StarsRequest:
    total: int = 5
    value: float = 0
    color: Color = Color(0xFF, 0xD7, 0x00)
    size: float = 200
    padding: float = 10


def star_path(radius: float) -> str:
    """Five-pointed star centred on the origin, first point at the top."""
    points = []
    for i in range(10):
        angle = i * math.pi / 5 - math.pi / 2
        r = radius if i % 2 == 0 else radius * INNER_RATIO
        points.append(f"{num(math.cos(angle) * r)},{num(math.sin(angle) * r)}")
    return "M " + " L ".join(points) + " Z"


def parse_stars_request(params: Mapping[str, str]) -> StarsRequest:
    total_raw = to_float(first_param(params, "total"))
    total = int(min(10, max(1, total_raw))) if total_raw else 5
    value = clamped_float(first_param(params, "value"), 0.0, float(total), 0.0)

    size = to_float(first_param(params, "size")) or 200
    check_range("size", size, 32, 512)
    padding = to_float(first_param(params, "padding"))
    padding = 10 if padding is None else padding
    check_range("padding", padding, 0, 100)

    color = parse_color(first_param(params, "color") or "#FFD700", param="color")
    return StarsRequest(total=total, value=value, color=color, size=size, padding=padding)


def plan_stars(req: StarsRequest) -> RenderPlan:
    spacing = req.size / req.total
    star_size = spacing * STAR_SHARE
    d = star_path(star_size / 2)
    filled = Paint.solid(req.color)
    outline = Paint.solid(EMPTY_STROKE)
    whole = int(math.floor(req.value))
    partial = req.value - whole

    stars = []
    for i in range(req.total):
        x = req.padding + i * spacing + spacing / 2
        y = req.padding + star_size / 2
        if i < whole:
            stars.append(StarPath(d, x, y, fill=filled, stroke=filled))
        elif i == whole and partial > 0:
            # clip box is in the star's own (translated) coordinates
            clip = (-star_size / 2, -star_size / 2, star_size * partial, star_size)
            stars.append(StarPath(d, x, y, fill=filled, stroke=filled, clip=clip))
            stars.append(StarPath(d, x, y, fill=None, stroke=outline))
        else:
            stars.append(StarPath(d, x, y, fill=None, stroke=outline))

    return RenderPlan(
        width=req.total * spacing + 2 * req.padding,
        height=star_size + 2 * req.padding,
        fill=tuple(stars),
        mode="stars",
    )


def render_stars(params: Mapping[str, str]) -> str:
    return to_svg(plan_stars(parse_stars_request(params)))
