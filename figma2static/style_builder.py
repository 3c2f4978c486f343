"""
CSS Style Builder
Build one CSS rule body from a StyleNode's populated style fields
"""

import re
from typing import Dict, List, Optional, Union

from .model.style_node import CornerRadii, NodeStyles, Padding
from .utils import format_number

FLEX_DIRECTIONS = {
    "HORIZONTAL": "row",
    "VERTICAL": "column",
}


def px(value) -> str:
    return f"{format_number(value)}px"


def css_url(url: str) -> str:
    escaped = url.replace("\\", "\\\\").replace('"', '\\"')
    escaped = re.sub(r"[\r\n]", "", escaped)
    return f'url("{escaped}")'


def normalize_flex_direction(layout_mode: str) -> str:
    return FLEX_DIRECTIONS.get(layout_mode, layout_mode.lower())


class CSSStyleBuilder:
    """Build CSS styles for nodes"""

    def __init__(self):
        self.styles: Dict[str, str] = {}

    def add_style(self, property: str, value: Optional[str]) -> "CSSStyleBuilder":
        """Add a CSS property-value pair"""
        if value is not None:
            self.styles[property] = value
        return self

    def add_position_styles(self, styles: NodeStyles) -> "CSSStyleBuilder":
        if styles.position is not None:
            self.add_style("position", "absolute")
            self.add_style("left", px(styles.position.x))
            self.add_style("top", px(styles.position.y))
        if styles.size is not None:
            self.add_style("width", px(styles.size.width))
            self.add_style("height", px(styles.size.height))
        return self

    def add_background_styles(
        self, styles: NodeStyles, asset_url: Optional[str] = None
    ) -> "CSSStyleBuilder":
        self.add_style("background-color", styles.background_color)
        if asset_url:
            self.add_style("background-image", css_url(asset_url))
            self.add_style("background-size", "cover")
            self.add_style("background-repeat", "no-repeat")
        return self

    def add_border_styles(self, styles: NodeStyles) -> "CSSStyleBuilder":
        if styles.border:
            # one declaration only; the last stroke wins
            border = styles.border[-1]
            self.add_style("border", f"{px(border.weight)} solid {border.color}")
        if styles.border_radius is not None:
            self.add_style("border-radius", self._radius_value(styles.border_radius))
        return self

    def add_layout_styles(self, styles: NodeStyles) -> "CSSStyleBuilder":
        self.add_style("display", styles.display)
        if styles.flex_direction:
            self.add_style("flex-direction", normalize_flex_direction(styles.flex_direction))
        if styles.padding is not None:
            self.add_style("padding", self._padding_value(styles.padding))
        if styles.item_spacing is not None:
            self.add_style("gap", px(styles.item_spacing))
        return self

    def add_text_styles(self, styles: NodeStyles) -> "CSSStyleBuilder":
        self.add_style("color", styles.color)
        if styles.font_size is not None:
            self.add_style("font-size", px(styles.font_size))
        if styles.font_family:
            self.add_style("font-family", f"'{styles.font_family}'")
        if styles.font_weight is not None:
            self.add_style("font-weight", format_number(styles.font_weight))
        if styles.line_height is not None:
            self.add_style("line-height", px(styles.line_height))
        if styles.letter_spacing is not None:
            self.add_style("letter-spacing", px(styles.letter_spacing))
        return self

    def build(self) -> List[str]:
        return [f"{prop}: {value};" for prop, value in self.styles.items()]

    @staticmethod
    def _radius_value(radius: Union[int, float, CornerRadii]) -> str:
        if isinstance(radius, CornerRadii):
            corners = (radius.top_left, radius.top_right, radius.bottom_right, radius.bottom_left)
            return " ".join(px(corner) for corner in corners)
        return px(radius)

    @staticmethod
    def _padding_value(padding: Padding) -> str:
        sides = (padding.top, padding.right, padding.bottom, padding.left)
        return " ".join(px(side) for side in sides)
