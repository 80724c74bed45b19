"""Generator catalogue used by the preview page."""

from __future__ import annotations

from typing import Mapping, Optional
from urllib.parse import urlencode

_GRADIENT_SPAN = {
    "name": "gradientSpan", "label": "Gradient Span", "type": "select", "default": "bar",
    "options": [("bar", "Full Track"), ("progress", "Progress Only")],
}
_FILL = {
    "name": "fill", "label": "Fill", "type": "select", "default": "gradient",
    "options": [("gradient", "Gradient"), ("solid", "Solid (color at progress)")],
}

ENDPOINTS = [
    {
        "id": "progress-bar",
        "name": "Progress Bar",
        "description": "Horizontal progress bars with gradients, segments or stacked values",
        "path": "/progress-bar.svg",
        "png_path": "/progress-bar.png",
        "parameters": [
            {"name": "value", "label": "Progress Value", "type": "number", "default": "50"},
            {"name": "color", "label": "Color(s)", "type": "text", "default": "#3B82F6"},
            {"name": "bg", "label": "Background Color", "type": "text", "default": "#E5E7EB"},
            {"name": "aspectRatio", "label": "Aspect Ratio", "type": "text", "default": "4"},
            {"name": "padding", "label": "Padding", "type": "number", "default": "20"},
            {"name": "radius", "label": "Corner Radius (empty = auto)", "type": "number", "default": ""},
            _GRADIENT_SPAN,
            _FILL,
            {"name": "segments", "label": "Segments", "type": "number", "default": "1"},
            {"name": "gap", "label": "Segment Gap", "type": "number", "default": "4"},
            {"name": "values", "label": "Stacked Values (e.g. 30,20,10)", "type": "text", "default": ""},
        ],
    },
    {
        "id": "progress-donut",
        "name": "Progress Donut",
        "description": "Circular progress indicators",
        "path": "/progress-donut.svg",
        "png_path": "/progress-donut.png",
        "parameters": [
            {"name": "value", "label": "Progress Value", "type": "number", "default": "50"},
            {"name": "color", "label": "Color(s)", "type": "text", "default": "#3B82F6"},
            {"name": "bg", "label": "Background Color", "type": "text", "default": "#E5E7EB"},
            {"name": "size", "label": "Size", "type": "number", "default": "200"},
            {"name": "strokeWidth", "label": "Stroke Width", "type": "number", "default": "20"},
            {"name": "padding", "label": "Padding", "type": "number", "default": "10"},
            _GRADIENT_SPAN,
            _FILL,
        ],
    },
    {
        "id": "stars",
        "name": "Star Rating",
        "description": "Star ratings with partial stars",
        "path": "/stars.svg",
        "png_path": None,
        "parameters": [
            {"name": "value", "label": "Rating", "type": "number", "default": "3.5"},
            {"name": "total", "label": "Total Stars", "type": "number", "default": "5"},
            {"name": "color", "label": "Color", "type": "text", "default": "#FFD700"},
            {"name": "size", "label": "Size", "type": "number", "default": "200"},
            {"name": "padding", "label": "Padding", "type": "number", "default": "10"},
        ],
    },
    {
        "id": "badge",
        "name": "Badge",
        "description": "Pill-shaped text badges",
        "path": "/badge.svg",
        "png_path": None,
        "parameters": [
            {"name": "text", "label": "Text", "type": "text", "default": "New"},
            {"name": "color", "label": "Text Color", "type": "text", "default": "#3B82F6"},
            {"name": "backgroundColor", "label": "Background (empty = auto)", "type": "text", "default": ""},
            {"name": "padding", "label": "Padding", "type": "number", "default": "8"},
            {"name": "verticalPadding", "label": "Vertical Padding", "type": "number", "default": "6"},
            {"name": "radius", "label": "Radius (empty = pill)", "type": "number", "default": ""},
        ],
    },
    {
        "id": "pill",
        "name": "Pill",
        "description": "Rounded pill buttons with a soft fade",
        "path": "/pill.svg",
        "png_path": None,
        "parameters": [
            {"name": "text", "label": "Text", "type": "text", "default": "Pill"},
            {"name": "color", "label": "Color", "type": "text", "default": "#3B82F6"},
            {"name": "textColor", "label": "Text Color", "type": "text", "default": "#FFFFFF"},
            {"name": "padding", "label": "Padding", "type": "number", "default": "20"},
            {"name": "verticalPadding", "label": "Vertical Padding", "type": "number", "default": "12"},
        ],
    },
    {
        "id": "datetime",
        "name": "Date & Time",
        "description": "Calendar icon with a clock showing a given date and time",
        "path": "/datetime.svg",
        "png_path": None,
        "parameters": [
            {"name": "date", "label": "Date (ISO, empty = now)", "type": "text", "default": ""},
            {"name": "size", "label": "Size", "type": "number", "default": "128"},
            {"name": "header", "label": "Header Color", "type": "text", "default": "#EF5350"},
            {"name": "stroke", "label": "Stroke Color", "type": "text", "default": "#0B0B0B"},
        ],
    },
    {
        "id": "gradient",
        "name": "Gradient",
        "description": "Linear gradient images",
        "path": "/gradient.svg",
        "png_path": None,
        "parameters": [
            {"name": "colors", "label": "Colors", "type": "text", "default": "#3B82F6,#8B5CF6"},
            {"name": "direction", "label": "Direction", "type": "text", "default": "to right"},
            {"name": "width", "label": "Width", "type": "number", "default": "500"},
            {"name": "height", "label": "Height", "type": "number", "default": "300"},
        ],
    },
]

_BY_ID = {e["id"]: e for e in ENDPOINTS}


def get_endpoint(endpoint_id: str) -> Optional[dict]:
    return _BY_ID.get(endpoint_id)


def form_values(endpoint: dict, query: Mapping[str, str]) -> dict[str, str]:
    """Current form values: query overrides, defaults otherwise."""
    return {
        p["name"]: query.get(p["name"], p["default"])
        for p in endpoint["parameters"]
    }


def image_url(path: str, values: Mapping[str, str]) -> str:
    """Image URL with the non-empty parameters encoded."""
    params = {k: v for k, v in values.items() if v not in (None, "")}
    return f"{path}?{urlencode(params)}" if params else path
