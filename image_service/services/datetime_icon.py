"""Calendar icon with a small clock overlay showing a given date and time.

All geometry scales with `size`: a rounded card with a colored month
header, the day number below it, and an analog clock in the bottom-right
corner. The date is drawn in its own wall-clock time (no conversion).
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Mapping, Optional

from image_service.services.colors import Color, parse_color
from image_service.services.donut import polar_to_cartesian
from image_service.services.errors import InvalidDate
from image_service.services.params import check_range, first_param, to_float
from image_service.services.svg import (
    Circle,
    Disc,
    Line,
    Paint,
    Path,
    RenderPlan,
    RoundedRect,
    Text,
    num,
    to_svg,
)

logger = logging.getLogger(__name__)

MONTHS = ("JAN", "FEB", "MAR", "APR", "MAY", "JUN", "JUL", "AUG", "SEP", "OCT", "NOV", "DEC")
WHITE = Color(255, 255, 255)

# shares of the icon size
STROKE = 0.05
CORNER = 0.1
HEADER = 0.28
CLOCK_RADIUS = 0.12
CLOCK_MARGIN = 0.08


@dataclass(frozen=True)
class DateTimeRequest:
    moment: datetime = field(default_factory=datetime.now)
    size: float = 128
    header: Color = Color(0xEF, 0x53, 0x50)
    stroke: Color = Color(0x0B, 0x0B, 0x0B)


def parse_date(raw: Optional[str], now: Optional[datetime] = None) -> datetime:
    """ISO 8601 text (a trailing Z is accepted) or a millisecond timestamp."""
    if raw is None:
        return now or datetime.now()
    millis = to_float(raw)
    try:
        if millis is not None:
            return datetime.fromtimestamp(millis / 1000, tz=timezone.utc)
        return datetime.fromisoformat(raw.replace("Z", "+00:00"))
    except (ValueError, OverflowError, OSError) as e:
        raise InvalidDate(
            f"Invalid date '{raw}'. Use an ISO date or a timestamp in milliseconds",
            param="date",
        ) from e


def parse_datetime_request(params: Mapping[str, str], now: Optional[datetime] = None) -> DateTimeRequest:
    size = to_float(first_param(params, "size")) or 128
    check_range("size", size, 32, 512)
    return DateTimeRequest(
        moment=parse_date(first_param(params, "date"), now),
        size=size,
        header=parse_color(first_param(params, "header") or "#EF5350", param="header"),
        stroke=parse_color(first_param(params, "stroke") or "#0B0B0B", param="stroke"),
    )


def hand_angles(moment: datetime) -> tuple[float, float]:
    """(hour, minute) hand angles in degrees clockwise from 12 o'clock."""
    minute = moment.minute * 6
    hour = (moment.hour % 12 + moment.minute / 60) * 30
    return hour, minute


def _header_path(s: float, sw: float, r: float, header_h: float) -> str:
    """Header band with only its top corners rounded."""
    left, top, right = sw / 2, sw / 2, s - sw / 2
    return " ".join([
        f"M {num(left + r)} {num(top)}",
        f"L {num(right - r)} {num(top)}",
        f"A {num(r)} {num(r)} 0 0 1 {num(right)} {num(top + r)}",
        f"L {num(right)} {num(header_h)}",
        f"L {num(left)} {num(header_h)}",
        f"L {num(left)} {num(top + r)}",
        f"A {num(r)} {num(r)} 0 0 1 {num(left + r)} {num(top)}",
        "Z",
    ])


def plan_datetime(req: DateTimeRequest) -> RenderPlan:
    s = req.size
    sw = s * STROKE
    corner = s * CORNER
    header_h = s * HEADER
    clock_r = s * CLOCK_RADIUS
    cx = cy = s - s * CLOCK_MARGIN - clock_r
    ink = Paint.solid(req.stroke)
    white = Paint.solid(WHITE)

    hour_deg, minute_deg = hand_angles(req.moment)
    # polar_to_cartesian measures from 3 o'clock
    minute_end = polar_to_cartesian(cx, cy, clock_r * 0.75, minute_deg - 90)
    hour_end = polar_to_cartesian(cx, cy, clock_r * 0.5, hour_deg - 90)
    marker = clock_r * 0.7
    logger.debug("Planning datetime icon for %s", req.moment.isoformat())

    return RenderPlan(
        width=s,
        height=s,
        background=(
            RoundedRect(sw / 2, sw / 2, s - sw, s - sw, corner, white, stroke=ink, stroke_width=sw),
            Path(_header_path(s, sw, corner, header_h), Paint.solid(req.header)),
        ),
        fill=(
            Text(s / 2, header_h * 0.65, MONTHS[req.moment.month - 1],
                 font_size=header_h * 0.35, paint=white, weight="bold"),
            Text(s / 2, header_h + (s - header_h) * 0.45, str(req.moment.day),
                 font_size=(s - header_h) * 0.6, paint=ink, weight="bold"),
        ),
        overlay=(
            Circle(cx, cy, clock_r, ink, sw * 0.8, fill=white),
            Disc(cx, cy - marker, sw * 0.25, ink),
            Disc(cx + marker, cy, sw * 0.25, ink),
            Disc(cx, cy + marker, sw * 0.25, ink),
            Disc(cx - marker, cy, sw * 0.25, ink),
            Line(cx, cy, *minute_end, stroke=ink, stroke_width=sw * 0.4),
            Line(cx, cy, *hour_end, stroke=ink, stroke_width=sw * 0.6),
            Disc(cx, cy, sw * 0.4, ink),
        ),
        mode="datetime",
    )


def render_datetime(params: Mapping[str, str]) -> str:
    return to_svg(plan_datetime(parse_datetime_request(params)))
