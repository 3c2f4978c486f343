"""
Style model shared by the extractor and the renderer.

The extractor writes a DesignDocument as JSON; the renderer reads it back
through DesignDocument.model_validate_json, so both sides agree on one
versioned schema instead of an implicit one.
"""

from __future__ import annotations

from typing import List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

SCHEMA_VERSION = 1

TEXT_NODE_TYPE = "TEXT"

SAFE_CLASS_PATTERN = r"^[A-Za-z_][A-Za-z0-9_-]*$"

Number = Union[int, float]


class CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )


class Position(CamelModel):
    x: Number
    y: Number


class Size(CamelModel):
    width: Number
    height: Number


class Border(CamelModel):
    color: str
    weight: Number = 1


class CornerRadii(CamelModel):
    top_left: Number = 0
    top_right: Number = 0
    bottom_right: Number = 0
    bottom_left: Number = 0


class Padding(CamelModel):
    top: Number = 0
    right: Number = 0
    bottom: Number = 0
    left: Number = 0


class NodeStyles(CamelModel):
    position: Optional[Position] = None
    size: Optional[Size] = None
    background_color: Optional[str] = None
    border: Optional[List[Border]] = None
    border_radius: Optional[Union[Number, CornerRadii]] = None
    display: Optional[str] = None
    flex_direction: Optional[str] = None
    padding: Optional[Padding] = None
    item_spacing: Optional[Number] = None
    font_size: Optional[Number] = None
    font_family: Optional[str] = None
    font_weight: Optional[Number] = None
    line_height: Optional[Number] = None
    letter_spacing: Optional[Number] = None
    color: Optional[str] = None


class StyleNode(CamelModel):
    id: str
    source_id: str
    name: str
    safe_class: str = Field(pattern=SAFE_CLASS_PATTERN)
    type: str
    styles: NodeStyles = Field(default_factory=NodeStyles)
    text: Optional[str] = None
    asset_url: Optional[str] = None
    children: List[StyleNode] = Field(default_factory=list)

    @property
    def is_text(self) -> bool:
        return self.type == TEXT_NODE_TYPE

    def walk(self):
        """Yield this node and its descendants in pre-order."""
        yield self
        for child in self.children:
            yield from child.walk()


class DesignDocument(CamelModel):
    schema_version: int = SCHEMA_VERSION
    nodes: List[StyleNode] = Field(default_factory=list)

    def walk(self):
        for node in self.nodes:
            yield from node.walk()

    def to_json(self) -> str:
        return self.model_dump_json(by_alias=True, exclude_none=True, indent=2)
