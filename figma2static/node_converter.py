"""
Style Node Converter
Figma 노드 트리를 StyleNode 트리로 변환하는 컨버터
"""

import logging
from numbers import Number
from typing import Any, Dict, Optional

from .colors import (
    DEFAULT_TEXT_COLOR,
    ensure_readable_text_color,
    first_solid_paint,
    get_visible_color_fill,
    paint_to_rgba,
)
from .model.style_node import (
    TEXT_NODE_TYPE,
    Border,
    CornerRadii,
    DesignDocument,
    NodeStyles,
    Padding,
    Position,
    Size,
    StyleNode,
)
from .utils import build_safe_class, sanitize_node_id

logger = logging.getLogger("figma2static.converter")

POSITION_RELATIVE = "relative"
POSITION_ABSOLUTE = "absolute"

_BOX_KEYS = ("x", "y", "width", "height")


def read_bounding_box(node: Dict[str, Any]) -> Optional[Dict[str, float]]:
    """Return the node's absoluteBoundingBox, or None when missing or malformed."""
    box = node.get("absoluteBoundingBox")
    if not isinstance(box, dict):
        return None
    for key in _BOX_KEYS:
        value = box.get(key)
        if not isinstance(value, Number) or isinstance(value, bool):
            return None
    return box


class StyleNodeConverter:
    """Figma 노드를 StyleNode로 변환하고 이미지 참조를 수집"""

    def __init__(self, position_mode: str = POSITION_RELATIVE):
        if position_mode not in (POSITION_RELATIVE, POSITION_ABSOLUTE):
            raise ValueError(f"Unknown position mode: {position_mode}")
        self.position_mode = position_mode
        self.image_refs: Dict[str, str] = {}
        self.performance_counters = {
            "nodes_processed": 0,
            "nodes_without_geometry": 0,
            "image_refs": 0,
        }

    def reset_counters(self):
        """새로운 변환을 위한 카운터 초기화"""
        self.image_refs = {}
        self.performance_counters = {
            "nodes_processed": 0,
            "nodes_without_geometry": 0,
            "image_refs": 0,
        }

    def convert_document(self, file_data: Dict[str, Any]) -> DesignDocument:
        """
        Convert a GET /v1/files response into a DesignDocument.

        One StyleNode is produced per page; image references found along the
        way are left in self.image_refs for the URL resolution pass.
        """
        self.reset_counters()
        pages = (file_data.get("document") or {}).get("children") or []
        nodes = [self.convert_node(page) for page in pages]

        logger.debug(
            f"[StyleNodeConverter] 처리된 노드: {self.performance_counters['nodes_processed']}개, "
            f"geometry 없음: {self.performance_counters['nodes_without_geometry']}개, "
            f"이미지 참조: {self.performance_counters['image_refs']}개"
        )
        return DesignDocument(nodes=nodes)

    def convert_node(
        self, node: Dict[str, Any], parent_box: Optional[Dict[str, float]] = None
    ) -> StyleNode:
        source_id = str(node.get("id", ""))
        name = node.get("name") or ""
        node_type = node.get("type", "")
        safe_id = sanitize_node_id(source_id)

        styles = NodeStyles()
        self._collect_image_refs(node, source_id)

        box = read_bounding_box(node)
        if box is not None:
            self._process_geometry(styles, box, parent_box)
        else:
            self.performance_counters["nodes_without_geometry"] += 1
            logger.debug(f"absoluteBoundingBox 없음: {name} ({source_id})")

        self._process_background(styles, node)
        self._process_strokes(styles, node)
        self._process_corner_radius(styles, node)
        self._process_layout_info(styles, node)

        text = None
        if node_type == TEXT_NODE_TYPE:
            text = self._process_text_node(styles, node)

        style_node = StyleNode(
            id=safe_id,
            source_id=source_id,
            name=name,
            safe_class=build_safe_class(name, safe_id),
            type=node_type,
            styles=styles,
            text=text,
        )

        for child in node.get("children") or []:
            style_node.children.append(self.convert_node(child, box))

        self.performance_counters["nodes_processed"] += 1
        return style_node

    def _collect_image_refs(self, node: Dict[str, Any], source_id: str) -> None:
        paints = list(node.get("fills") or []) + list(node.get("background") or [])
        for paint in paints:
            if paint.get("type") == "IMAGE" and paint.get("imageRef"):
                if source_id not in self.image_refs:
                    self.image_refs[source_id] = paint["imageRef"]
                    self.performance_counters["image_refs"] += 1
                return

    def _process_geometry(
        self,
        styles: NodeStyles,
        box: Dict[str, float],
        parent_box: Optional[Dict[str, float]],
    ) -> None:
        """크기 및 위치 처리"""
        x, y = box["x"], box["y"]
        if self.position_mode == POSITION_RELATIVE and parent_box is not None:
            x -= parent_box["x"]
            y -= parent_box["y"]
        styles.position = Position(x=x, y=y)
        styles.size = Size(width=box["width"], height=box["height"])

    def _process_background(self, styles: NodeStyles, node: Dict[str, Any]) -> None:
        solid = first_solid_paint(node.get("fills")) or first_solid_paint(node.get("background"))
        if solid is not None:
            styles.background_color = paint_to_rgba(solid)

    def _process_strokes(self, styles: NodeStyles, node: Dict[str, Any]) -> None:
        weight = node.get("strokeWeight")
        if weight is None:
            weight = 1
        borders = [
            Border(color=paint_to_rgba(stroke), weight=weight)
            for stroke in node.get("strokes") or []
            if stroke.get("color")
        ]
        if borders:
            styles.border = borders

    def _process_corner_radius(self, styles: NodeStyles, node: Dict[str, Any]) -> None:
        radius = node.get("cornerRadius")
        if radius is not None:
            styles.border_radius = radius
            return
        corners = node.get("rectangleCornerRadii")
        if isinstance(corners, list) and len(corners) == 4:
            top_left, top_right, bottom_right, bottom_left = corners
            styles.border_radius = CornerRadii(
                top_left=top_left,
                top_right=top_right,
                bottom_right=bottom_right,
                bottom_left=bottom_left,
            )

    def _process_layout_info(self, styles: NodeStyles, node: Dict[str, Any]) -> None:
        """자동 레이아웃 정보 처리"""
        layout_mode = node.get("layoutMode")
        if not layout_mode or layout_mode == "NONE":
            return
        styles.display = "flex"
        # renderer lower-cases this
        styles.flex_direction = layout_mode
        styles.padding = Padding(
            top=node.get("paddingTop") or 0,
            right=node.get("paddingRight") or 0,
            bottom=node.get("paddingBottom") or 0,
            left=node.get("paddingLeft") or 0,
        )
        if node.get("itemSpacing") is not None:
            styles.item_spacing = node["itemSpacing"]

    def _process_text_node(self, styles: NodeStyles, node: Dict[str, Any]) -> str:
        """텍스트 노드 처리"""
        text_style = node.get("style") or {}
        styles.font_size = text_style.get("fontSize")
        styles.font_family = text_style.get("fontFamily")
        styles.font_weight = text_style.get("fontWeight")
        styles.line_height = text_style.get("lineHeightPx")
        styles.letter_spacing = text_style.get("letterSpacing")

        text_fill = get_visible_color_fill(node.get("fills"))
        text_color = paint_to_rgba(text_fill) if text_fill else DEFAULT_TEXT_COLOR

        bg_paint = first_solid_paint(node.get("background")) or first_solid_paint(node.get("fills"))
        bg_color = paint_to_rgba(bg_paint) if bg_paint else None

        styles.color = ensure_readable_text_color(bg_color, text_color)
        return node.get("characters", "")
