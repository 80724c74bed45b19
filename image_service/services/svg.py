"""Render plans and their SVG serialization.

Planners build a `RenderPlan` of frozen primitives; `to_svg` is the only
place that produces markup. Layer order is fixed: background, fill,
gradient defs, overlay.
"""

from __future__ import annotations

import html as _html
from dataclasses import dataclass
from typing import Optional, Union

from image_service.services.colors import Color
from image_service.services.gradients import GradientMapping, GradientStop


def _esc(text) -> str:
    """HTML-escape a string."""
    return _html.escape(str(text)) if text else ""


def num(value: float) -> str:
    """Compact number formatting for attributes (max 2 decimals)."""
    text = f"{value:.2f}".rstrip("0").rstrip(".")
    return "0" if text == "-0" else text


# ── Paint ───────────────────────────────────────────────────


@dataclass(frozen=True)
class Paint:
    """Solid color or a reference to a gradient in the plan's defs."""
    color: Optional[Color] = None
    gradient_id: Optional[str] = None

    @classmethod
    def solid(cls, color: Color) -> "Paint":
        return cls(color=color)

    @classmethod
    def gradient(cls, gradient_id: str) -> "Paint":
        return cls(gradient_id=gradient_id)

    def attrs(self, prop: str = "fill") -> str:
        if self.gradient_id:
            return f'{prop}="url(#{self.gradient_id})"'
        out = f'{prop}="{self.color.hex}"'
        if not self.color.opaque:
            out += f' {prop}-opacity="{num(self.color.a)}"'
        return out


# ── Primitives ──────────────────────────────────────────────


@dataclass(frozen=True)
class Rect:
    x: float
    y: float
    width: float
    height: float
    paint: Paint


@dataclass(frozen=True)
class RoundedRect:
    x: float
    y: float
    width: float
    height: float
    radius: float
    paint: Paint
    stroke: Optional[Paint] = None
    stroke_width: float = 0


@dataclass(frozen=True)
class AsymmetricRoundedRect:
    """Rectangle with independent left/right corner radii."""
    x: float
    y: float
    width: float
    height: float
    r_left: float
    r_right: float
    paint: Paint

    def path(self) -> str:
        x, y, w, h = self.x, self.y, self.width, self.height
        rl, rr = self.r_left, self.r_right
        d = [f"M {num(x + rl)} {num(y)}", f"H {num(x + w - rr)}"]
        if rr > 0:
            d.append(f"A {num(rr)} {num(rr)} 0 0 1 {num(x + w)} {num(y + rr)}")
        if h - 2 * rr > 0:
            d.append(f"V {num(y + h - rr)}")
        if rr > 0:
            d.append(f"A {num(rr)} {num(rr)} 0 0 1 {num(x + w - rr)} {num(y + h)}")
        d.append(f"H {num(x + rl)}")
        if rl > 0:
            d.append(f"A {num(rl)} {num(rl)} 0 0 1 {num(x)} {num(y + h - rl)}")
        if h - 2 * rl > 0:
            d.append(f"V {num(y + rl)}")
        if rl > 0:
            d.append(f"A {num(rl)} {num(rl)} 0 0 1 {num(x + rl)} {num(y)}")
        d.append("Z")
        return " ".join(d)


@dataclass(frozen=True)
class Ellipse:
    cx: float
    cy: float
    rx: float
    ry: float
    paint: Paint


@dataclass(frozen=True)
class Circle:
    """Stroked ring (donut track, complete donut fill, clock face)."""
    cx: float
    cy: float
    r: float
    stroke: Paint
    stroke_width: float
    fill: Optional[Paint] = None


@dataclass(frozen=True)
class Disc:
    cx: float
    cy: float
    r: float
    paint: Paint


@dataclass(frozen=True)
class Line:
    """Stroked segment with round caps."""
    x1: float
    y1: float
    x2: float
    y2: float
    stroke: Paint
    stroke_width: float


@dataclass(frozen=True)
class Path:
    """Filled outline given as raw path data."""
    d: str
    paint: Paint


@dataclass(frozen=True)
class ArcPath:
    """Stroked circular arc with round caps."""
    start: tuple[float, float]
    end: tuple[float, float]
    radius: float
    large_arc: bool
    stroke: Paint
    stroke_width: float

    def path(self) -> str:
        (x1, y1), (x2, y2) = self.start, self.end
        flag = 1 if self.large_arc else 0
        return (
            f"M {num(x1)} {num(y1)} "
            f"A {num(self.radius)} {num(self.radius)} 0 {flag} 1 {num(x2)} {num(y2)}"
        )


@dataclass(frozen=True)
class StarPath:
    """Closed polygon translated to (x, y), optionally clipped."""
    d: str
    x: float
    y: float
    fill: Optional[Paint]
    stroke: Paint
    clip: Optional[tuple[float, float, float, float]] = None  # x, y, w, h


@dataclass(frozen=True)
class Text:
    x: float
    y: float
    text: str
    font_size: float
    paint: Paint
    anchor: str = "middle"
    baseline: str = "middle"
    weight: str = ""


Primitive = Union[
    Rect, RoundedRect, AsymmetricRoundedRect, Ellipse, Circle, Disc, Line, Path,
    ArcPath, StarPath, Text,
]


@dataclass(frozen=True)
class GradientDef:
    """Horizontal gradient in user space along y = `y`."""
    id: str
    mapping: GradientMapping
    y: float


@dataclass(frozen=True)
class BoxGradient:
    """Gradient whose endpoints are percentages of the painted shape's box."""
    id: str
    stops: tuple[GradientStop, ...]
    x1: float
    y1: float
    x2: float
    y2: float


@dataclass(frozen=True)
class RenderPlan:
    width: float
    height: float
    background: tuple = ()
    fill: tuple = ()
    gradients: tuple = ()
    overlay: tuple = ()
    mode: str = ""


# ── Serialization ───────────────────────────────────────────


def _svg_open(width: float, height: float) -> str:
    return (
        f'<svg width="{num(width)}" height="{num(height)}" '
        f'viewBox="0 0 {num(width)} {num(height)}" '
        f'xmlns="http://www.w3.org/2000/svg">'
    )


def _svg_close() -> str:
    return "</svg>"


def _stops(stops) -> str:
    return "".join(
        f'<stop offset="{num(s.offset)}%" stop-color="{s.color.hex}"'
        + ("" if s.color.opaque else f' stop-opacity="{num(s.color.a)}"')
        + "/>"
        for s in stops
    )


def _gradient_def(g) -> str:
    if isinstance(g, BoxGradient):
        return (
            f'<linearGradient id="{g.id}" x1="{num(g.x1)}%" y1="{num(g.y1)}%" '
            f'x2="{num(g.x2)}%" y2="{num(g.y2)}%">{_stops(g.stops)}</linearGradient>'
        )
    return (
        f'<linearGradient id="{g.id}" gradientUnits="userSpaceOnUse" '
        f'x1="{num(g.mapping.start)}" y1="{num(g.y)}" '
        f'x2="{num(g.mapping.end)}" y2="{num(g.y)}">{_stops(g.mapping.stops)}</linearGradient>'
    )


def _outline(stroke: Optional[Paint], width: float) -> str:
    if stroke is None:
        return ""
    return f' {stroke.attrs("stroke")} stroke-width="{num(width)}"'


def _clip_id(p: StarPath) -> str:
    return f"clip-{num(p.x).replace('.', '_')}"


def render_primitive(p) -> str:
    """Serialize one primitive to an SVG element."""
    if isinstance(p, Rect):
        return (
            f'<rect x="{num(p.x)}" y="{num(p.y)}" width="{num(p.width)}" '
            f'height="{num(p.height)}" {p.paint.attrs()}/>'
        )
    if isinstance(p, RoundedRect):
        return (
            f'<rect x="{num(p.x)}" y="{num(p.y)}" width="{num(p.width)}" '
            f'height="{num(p.height)}" rx="{num(p.radius)}" ry="{num(p.radius)}" '
            f'{p.paint.attrs()}{_outline(p.stroke, p.stroke_width)}/>'
        )
    if isinstance(p, AsymmetricRoundedRect):
        return f'<path d="{p.path()}" {p.paint.attrs()}/>'
    if isinstance(p, Ellipse):
        return (
            f'<ellipse cx="{num(p.cx)}" cy="{num(p.cy)}" rx="{num(p.rx)}" '
            f'ry="{num(p.ry)}" {p.paint.attrs()}/>'
        )
    if isinstance(p, Circle):
        fill = p.fill.attrs() if p.fill else 'fill="none"'
        return (
            f'<circle cx="{num(p.cx)}" cy="{num(p.cy)}" r="{num(p.r)}" {fill} '
            f'{p.stroke.attrs("stroke")} stroke-width="{num(p.stroke_width)}"/>'
        )
    if isinstance(p, Disc):
        return f'<circle cx="{num(p.cx)}" cy="{num(p.cy)}" r="{num(p.r)}" {p.paint.attrs()}/>'
    if isinstance(p, Line):
        return (
            f'<line x1="{num(p.x1)}" y1="{num(p.y1)}" x2="{num(p.x2)}" y2="{num(p.y2)}" '
            f'{p.stroke.attrs("stroke")} stroke-width="{num(p.stroke_width)}" '
            f'stroke-linecap="round"/>'
        )
    if isinstance(p, Path):
        return f'<path d="{p.d}" {p.paint.attrs()}/>'
    if isinstance(p, ArcPath):
        return (
            f'<path d="{p.path()}" fill="none" {p.stroke.attrs("stroke")} '
            f'stroke-width="{num(p.stroke_width)}" stroke-linecap="round"/>'
        )
    if isinstance(p, StarPath):
        fill = p.fill.attrs() if p.fill else 'fill="none"'
        element = (
            f'<path d="{p.d}" transform="translate({num(p.x)}, {num(p.y)})" '
            f'{fill} {p.stroke.attrs("stroke")} stroke-width="1"'
        )
        if p.clip is None:
            return element + "/>"
        clip_id = _clip_id(p)
        cx, cy, cw, ch = p.clip
        return (
            f'<defs><clipPath id="{clip_id}"><rect x="{num(cx)}" y="{num(cy)}" '
            f'width="{num(cw)}" height="{num(ch)}"/></clipPath></defs>'
            f'{element} clip-path="url(#{clip_id})"/>'
        )
    if isinstance(p, Text):
        parts = [f'<text x="{num(p.x)}" y="{num(p.y)}"']
        if p.anchor != "start":
            parts.append(f' text-anchor="{p.anchor}"')
        if p.baseline:
            parts.append(f' dominant-baseline="{p.baseline}"')
        parts.append(f' font-family="Arial, sans-serif" font-size="{num(p.font_size)}"')
        if p.weight:
            parts.append(f' font-weight="{p.weight}"')
        parts.append(f" {p.paint.attrs()}>{_esc(p.text)}</text>")
        return "".join(parts)
    raise TypeError(f"Unknown primitive: {type(p).__name__}")


def to_svg(plan: RenderPlan) -> str:
    """Serialize a plan: background, fill, defs, overlay."""
    body = [_svg_open(plan.width, plan.height)]
    body.extend(render_primitive(p) for p in plan.background)
    body.extend(render_primitive(p) for p in plan.fill)
    if plan.gradients:
        body.append("<defs>" + "".join(_gradient_def(g) for g in plan.gradients) + "</defs>")
    body.extend(render_primitive(p) for p in plan.overlay)
    body.append(_svg_close())
    return "".join(body)
