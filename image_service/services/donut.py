"""Circular progress (donut) geometry."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass

from image_service.services.colors import DEFAULT_BACKGROUND, DEFAULT_COLOR, Color
from image_service.services.gradients import FillMode, GradientSpan
from image_service.services.paint import progress_paint
from image_service.services.svg import ArcPath, Circle, Paint, RenderPlan, Text, num

logger = logging.getLogger(__name__)

GRADIENT_ID = "donutGradient"
LABEL_COLOR = Color(0, 0, 0)
LABEL_SIZE_RATIO = 0.22
START_ANGLE = -90  # 12 o'clock


@dataclass(frozen=True)
class DonutRequest:
    value: float = 50
    palette: tuple[Color, ...] = (DEFAULT_COLOR,)
    background: Color = DEFAULT_BACKGROUND
    size: float = 200
    stroke_width: float = 20
    padding: float = 10
    gradient_span: GradientSpan = GradientSpan.FULL_TRACK
    fill_mode: FillMode = FillMode.GRADIENT

    @property
    def canvas(self) -> float:
        return self.size + 2 * self.padding

    @property
    def center(self) -> float:
        return self.canvas / 2

    @property
    def radius(self) -> float:
        return (self.size - self.stroke_width) / 2


def polar_to_cartesian(cx: float, cy: float, r: float, degrees: float) -> tuple[float, float]:
    rad = math.radians(degrees)
    return cx + r * math.cos(rad), cy + r * math.sin(rad)


def progress_angle(value: float) -> float:
    return min(max(value, 0.0), 100.0) / 100 * 360


def _same_point(a: tuple[float, float], b: tuple[float, float]) -> bool:
    return (num(a[0]), num(a[1])) == (num(b[0]), num(b[1]))


def plan_donut(req: DonutRequest) -> RenderPlan:
    """Background ring, progress arc (or full circle at 100%), and label.

    The gradient runs along the horizontal diameter rather than the arc.
    """
    c, r, w = req.center, req.radius, req.stroke_width
    angle = progress_angle(req.value)
    logger.debug("Planning donut: value=%.2f angle=%.1f", req.value, angle)

    paint, gradients = progress_paint(
        req.palette,
        req.value,
        fill_mode=req.fill_mode,
        span=req.gradient_span,
        gradient_id=GRADIENT_ID,
        track_start=c - r,
        track_end=c + r,
        filled_end=c - r + 2 * r * angle / 360,
        axis_y=c,
    )

    start = polar_to_cartesian(c, c, r, START_ANGLE)
    end = polar_to_cartesian(c, c, r, START_ANGLE + angle)
    # an arc whose written endpoints coincide is dropped by SVG renderers
    closed = _same_point(start, end)
    if req.value >= 100 or (closed and angle > 180):
        fill = (Circle(c, c, r, paint, w),)
    elif angle > 0 and not closed:
        fill = (ArcPath(
            start=start,
            end=end,
            radius=r,
            large_arc=angle > 180,
            stroke=paint,
            stroke_width=w,
        ),)
    else:
        fill = ()

    label = Text(
        c, c,
        f"{int(math.floor(req.value))}%",
        font_size=round(req.size * LABEL_SIZE_RATIO),
        paint=Paint.solid(LABEL_COLOR),
    )
    return RenderPlan(
        width=req.canvas,
        height=req.canvas,
        background=(Circle(c, c, r, Paint.solid(req.background), w),),
        fill=fill,
        gradients=gradients if fill else (),
        overlay=(label,),
        mode="donut",
    )
