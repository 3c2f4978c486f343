from typing import Any, Dict, Optional
from unittest.mock import MagicMock

import pytest

from figma2static.core.config import Settings

RED = {"r": 1, "g": 0, "b": 0, "a": 1}
GREEN = {"r": 0, "g": 1, "b": 0, "a": 1}
BLUE = {"r": 0, "g": 0, "b": 1, "a": 1}
WHITE = {"r": 1, "g": 1, "b": 1, "a": 1}


@pytest.fixture
def settings(tmp_path) -> Settings:
    return Settings(
        _env_file=None,
        FIGMA_TOKEN="test-token",
        FIGMA_FILE_ID="FILE123",
        DESIGN_JSON_PATH=tmp_path / "design.json",
        HTML_OUTPUT_PATH=tmp_path / "result.html",
        CSS_OUTPUT_PATH=tmp_path / "style.css",
    )


@pytest.fixture
def make_response():
    def _make(status_code: int = 200, payload: Optional[Any] = None, text: str = ""):
        response = MagicMock()
        response.status_code = status_code
        response.ok = 200 <= status_code < 300
        response.text = text
        if isinstance(payload, Exception):
            response.json.side_effect = payload
        else:
            response.json.return_value = payload
        return response

    return _make


@pytest.fixture
def text_node() -> Dict[str, Any]:
    return {
        "id": "1:3",
        "name": "Label",
        "type": "TEXT",
        "absoluteBoundingBox": {"x": 110, "y": 210, "width": 100, "height": 20},
        "fills": [{"type": "SOLID", "color": RED}],
        "style": {
            "fontFamily": "Inter",
            "fontWeight": 700,
            "fontSize": 16,
            "lineHeightPx": 19.5,
            "letterSpacing": 0,
        },
        "characters": "Buy now",
    }


@pytest.fixture
def image_node() -> Dict[str, Any]:
    return {
        "id": "1:4",
        "name": "Hero Image",
        "type": "RECTANGLE",
        "absoluteBoundingBox": {"x": 150, "y": 260, "width": 50, "height": 50},
        "fills": [{"type": "IMAGE", "imageRef": "abc123", "scaleMode": "FILL"}],
        "rectangleCornerRadii": [1, 2, 3, 4],
    }


@pytest.fixture
def frame_node(text_node, image_node) -> Dict[str, Any]:
    return {
        "id": "1:2",
        "name": "3 Buttons!",
        "type": "FRAME",
        "absoluteBoundingBox": {"x": 100, "y": 200, "width": 400, "height": 300},
        "fills": [{"type": "SOLID", "color": RED}],
        "strokes": [
            {"type": "SOLID", "color": BLUE},
            {"type": "SOLID", "color": GREEN},
        ],
        "strokeWeight": 2,
        "cornerRadius": 8,
        "layoutMode": "HORIZONTAL",
        "paddingTop": 5,
        "paddingRight": 10,
        "paddingBottom": 5,
        "paddingLeft": 10,
        "itemSpacing": 12,
        "children": [text_node, image_node],
    }


@pytest.fixture
def figma_file(frame_node) -> Dict[str, Any]:
    return {
        "name": "Test File",
        "document": {
            "id": "0:0",
            "name": "Document",
            "type": "DOCUMENT",
            "children": [
                {
                    "id": "0:1",
                    "name": "Page 1",
                    "type": "CANVAS",
                    "background": [{"type": "SOLID", "color": WHITE}],
                    "children": [frame_node],
                }
            ],
        },
    }
