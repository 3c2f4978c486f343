from figma2static.model.style_node import (
    SCHEMA_VERSION,
    Border,
    CornerRadii,
    DesignDocument,
    NodeStyles,
    Padding,
    Position,
    Size,
    StyleNode,
)

__all__ = [
    "SCHEMA_VERSION",
    "Border",
    "CornerRadii",
    "DesignDocument",
    "NodeStyles",
    "Padding",
    "Position",
    "Size",
    "StyleNode",
]
