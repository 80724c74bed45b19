"""Progress bar geometry.

Three layouts share one shape builder:

- single: one track, one fill
- segmented: equal cells separated by a gap, filled cell by cell
- multi: stacked colored sections, each sized by its own value

Rounding is only ever applied at the true ends of the filled run, so two
abutting pieces are never both rounded at their shared edge.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Optional

from image_service.services.colors import (
    DEFAULT_BACKGROUND,
    DEFAULT_COLOR,
    Color,
    section_color,
)
from image_service.services.gradients import FillMode, GradientSpan
from image_service.services.paint import progress_paint
from image_service.services.svg import (
    AsymmetricRoundedRect,
    Ellipse,
    Paint,
    Rect,
    RenderPlan,
    RoundedRect,
)

logger = logging.getLogger(__name__)

GRADIENT_ID = "progressGradient"

TRACK_HEIGHT_RATIO = 0.6  # track height as a share of canvas height
COMPLETE_THRESHOLD = 95   # right edge is rounded from here on
_EPS = 1e-9


def _round_half_up(x: float) -> int:
    return int(math.floor(x + 0.5))


@dataclass(frozen=True)
class Section:
    value: float
    color: Optional[Color] = None


@dataclass(frozen=True)
class BarRequest:
    value: float = 50
    palette: tuple[Color, ...] = (DEFAULT_COLOR,)
    background: Color = DEFAULT_BACKGROUND
    width: float = 500
    aspect_ratio: float = 4
    padding: float = 20
    radius: Optional[float] = None  # None = auto (half the track height)
    gradient_span: GradientSpan = GradientSpan.FULL_TRACK
    fill_mode: FillMode = FillMode.GRADIENT
    segments: int = 1
    gap: float = 4
    sections: Optional[tuple[Section, ...]] = None

    @property
    def height(self) -> int:
        return _round_half_up(self.width / self.aspect_ratio)

    @property
    def track_height(self) -> int:
        return _round_half_up(self.height * TRACK_HEIGHT_RATIO)

    @property
    def track_y(self) -> float:
        return (self.height - self.track_height) / 2

    @property
    def inner_width(self) -> float:
        return self.width - 2 * self.padding

    @property
    def cell_width(self) -> float:
        return (self.inner_width - self.gap * (self.segments - 1)) / self.segments

    @property
    def mode(self) -> str:
        if self.segments > 1:
            return "segmented"
        if self.sections is not None:
            return "multi"
        return "single"


def corner_radius(radius: Optional[float], *limits: float) -> float:
    """Resolve a tri-state radius: None is auto (the tightest limit), an
    explicit value (including 0) is kept but never exceeds any limit."""
    cap = min(limits)
    if radius is None:
        return cap
    return min(max(radius, 0.0), cap)


def choose_shape(
    x: float,
    y: float,
    width: float,
    height: float,
    r_left: float,
    r_right: float,
    paint: Paint,
    *,
    isolated: bool = True,
):
    """Pick the primitive for a horizontal piece with the given end radii.

    Returns None for zero width. An isolated piece too narrow for its left
    cap becomes an ellipse; otherwise radii shrink to fit the width.
    """
    if width <= _EPS:
        return None
    half_h = height / 2
    rl = min(max(r_left, 0.0), half_h)
    rr = min(max(r_right, 0.0), half_h)

    if isolated and rl > 0 and width < 2 * rl:
        return Ellipse(x + width / 2, y + half_h, width / 2, half_h, paint)

    rl = min(rl, width / 2)
    rr = min(rr, width / 2)
    if rl == 0 and rr == 0:
        return Rect(x, y, width, height, paint)
    if rl == rr:
        return RoundedRect(x, y, width, height, rl, paint)
    return AsymmetricRoundedRect(x, y, width, height, rl, rr, paint)


def filled_cells(value: float, count: int) -> list[tuple[int, float]]:
    """(cell index, filled fraction) for each cell with any fill."""
    cells = min(max(value, 0.0), 100.0) * count / 100
    full = min(int(math.floor(cells + _EPS)), count)
    partial = cells - full
    pieces = [(i, 1.0) for i in range(full)]
    if full < count and partial > _EPS:
        pieces.append((full, partial))
    return pieces


def layout_sections(sections, palette) -> list[tuple[float, float, Color]]:
    """(start %, width %, color) per visible section, truncated at 100%."""
    laid_out = []
    cursor = 0.0
    for index, section in enumerate(sections):
        if cursor >= 100 - _EPS:
            break
        share = min(section.value, 100 - cursor)
        if share <= 0:
            continue
        color = section.color or section_color(palette, index)
        laid_out.append((cursor, share, color))
        cursor += share
    return laid_out


# ── Planners ────────────────────────────────────────────────


def _fill(req: BarRequest, filled_end: float):
    return progress_paint(
        req.palette,
        req.value,
        fill_mode=req.fill_mode,
        span=req.gradient_span,
        gradient_id=GRADIENT_ID,
        track_start=req.padding,
        track_end=req.padding + req.inner_width,
        filled_end=filled_end,
        axis_y=req.track_y + req.track_height / 2,
    )


def _plan(req: BarRequest, background, fill, gradients) -> RenderPlan:
    fill = tuple(p for p in fill if p is not None)
    return RenderPlan(
        width=req.width,
        height=req.height,
        background=tuple(p for p in background if p is not None),
        fill=fill,
        gradients=gradients if fill else (),
        mode=req.mode,
    )


def _track(req: BarRequest, radius: float):
    return choose_shape(
        req.padding, req.track_y, req.inner_width, req.track_height,
        radius, radius, Paint.solid(req.background), isolated=False,
    )


def plan_single(req: BarRequest) -> RenderPlan:
    h = req.track_height
    r = corner_radius(req.radius, h / 2)
    fill_width = req.value / 100 * req.inner_width
    paint, gradients = _fill(req, req.padding + fill_width)
    right = r if req.value >= COMPLETE_THRESHOLD else 0.0
    shape = choose_shape(req.padding, req.track_y, fill_width, h, r, right, paint)
    return _plan(req, [_track(req, r)], [shape], gradients)


def plan_segmented(req: BarRequest) -> RenderPlan:
    h = req.track_height
    cell_w = req.cell_width
    r = corner_radius(req.radius, h / 2, cell_w / 2)
    step = cell_w + req.gap
    bg = Paint.solid(req.background)
    last_cell = req.segments - 1

    background = [
        choose_shape(
            req.padding + i * step, req.track_y, cell_w, h,
            r if i == 0 else 0.0, r if i == last_cell else 0.0, bg, isolated=False,
        )
        for i in range(req.segments)
    ]

    pieces = filled_cells(req.value, req.segments)
    filled_end = req.padding
    if pieces:
        i, frac = pieces[-1]
        filled_end = req.padding + i * step + cell_w * frac
    paint, gradients = _fill(req, filled_end)

    fill = []
    for k, (i, frac) in enumerate(pieces):
        is_last = k == len(pieces) - 1
        fill.append(choose_shape(
            req.padding + i * step, req.track_y, cell_w * frac, h,
            r if i == 0 else 0.0,
            r if is_last and frac >= 1.0 else 0.0,
            paint,
        ))
    return _plan(req, background, fill, gradients)


def plan_multi(req: BarRequest) -> RenderPlan:
    h = req.track_height
    r = corner_radius(req.radius, h / 2)
    laid_out = layout_sections(req.sections or (), req.palette)
    if not laid_out:
        logger.debug("Multi-value bar has no visible sections")
        return _plan(req, [_track(req, r)], [], ())

    reaches_end = laid_out[-1][0] + laid_out[-1][1] >= 100 - _EPS
    last = len(laid_out) - 1
    fill = []
    for k, (start, share, color) in enumerate(laid_out):
        fill.append(choose_shape(
            req.padding + start / 100 * req.inner_width, req.track_y,
            share / 100 * req.inner_width, h,
            r if k == 0 else 0.0,
            r if k == last and reaches_end else 0.0,
            Paint.solid(color),
            isolated=len(laid_out) == 1,
        ))
    return _plan(req, [_track(req, r)], fill, ())


_PLANNERS = {
    "single": plan_single,
    "segmented": plan_segmented,
    "multi": plan_multi,
}


def plan_bar(req: BarRequest) -> RenderPlan:
    """Build the render plan for a progress bar."""
    logger.debug("Planning bar: mode=%s value=%.2f", req.mode, req.value)
    return _PLANNERS[req.mode](req)
