"""
Color helpers
Figma paint -> CSS rgba() conversion and the text contrast rule
"""

import math
import re
from typing import Any, Dict, Iterable, Optional, Tuple

from .utils import format_number

WHITE = "rgba(255,255,255,1)"
BLACK = "rgba(0,0,0,1)"
DEFAULT_TEXT_COLOR = BLACK

BRIGHTNESS_THRESHOLD = 128

_RGBA_PATTERN = re.compile(
    r"rgba?\(\s*(\d+)\s*,\s*(\d+)\s*,\s*(\d+)\s*(?:,\s*([\d.]*)\s*)?\)"
)


def _channel(value: float) -> int:
    # half-up, so 0.5/255 steps match the browser's rounding
    return int(math.floor(value * 255 + 0.5))


def figma_color_to_rgba(color: Dict[str, Any], opacity: Optional[float] = 1) -> str:
    """Convert a Figma color (0-1 channels) into an rgba() string."""
    if opacity is None:
        opacity = 1
    r = _channel(color.get("r", 0))
    g = _channel(color.get("g", 0))
    b = _channel(color.get("b", 0))
    return f"rgba({r},{g},{b},{format_number(opacity)})"


def paint_to_rgba(paint: Dict[str, Any]) -> str:
    return figma_color_to_rgba(paint.get("color") or {}, paint.get("opacity", 1))


def parse_rgba(value: str) -> Optional[Tuple[int, int, int]]:
    """Return the (r, g, b) triple of an rgb()/rgba() string, or None."""
    if not value:
        return None
    match = _RGBA_PATTERN.search(value)
    if not match:
        return None
    return int(match.group(1)), int(match.group(2)), int(match.group(3))


def first_solid_paint(paints: Optional[Iterable[Dict[str, Any]]]) -> Optional[Dict[str, Any]]:
    if not paints or not isinstance(paints, list):
        return None
    for paint in paints:
        if paint.get("type") == "SOLID":
            return paint
    return None


def get_visible_color_fill(fills: Optional[Iterable[Dict[str, Any]]]) -> Optional[Dict[str, Any]]:
    """First SOLID fill whose opacity is above zero."""
    if not fills or not isinstance(fills, list):
        return None
    for fill in fills:
        opacity = fill.get("opacity", 1)
        if opacity is None:
            opacity = 1
        if fill.get("type") == "SOLID" and opacity > 0:
            return fill
    return None


def brightness(rgb: Tuple[int, int, int]) -> float:
    r, g, b = rgb
    return (r * 299 + g * 587 + b * 114) / 1000


def ensure_readable_text_color(bg_color: Optional[str], text_color: Optional[str]) -> str:
    """
    배경 밝기에 따라 텍스트 색상을 흰색 또는 검정색으로 강제

    Any parseable background replaces the extracted text color with opaque
    white (brightness below 128) or opaque black (128 and above).
    Without a usable background the candidate color is kept.
    """
    if not bg_color:
        return text_color or DEFAULT_TEXT_COLOR
    rgb = parse_rgba(bg_color)
    if rgb is None:
        return text_color or DEFAULT_TEXT_COLOR
    return WHITE if brightness(rgb) < BRIGHTNESS_THRESHOLD else BLACK
