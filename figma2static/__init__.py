"""
figma2static
Fetch a Figma file, flatten it into design.json and render static HTML/CSS
"""

__version__ = "1.0.0"

from .colors import ensure_readable_text_color, figma_color_to_rgba
from .extractor import DesignExtractor
from .figma_api_client import FigmaApiClient
from .html_generator import HtmlGenerator, load_document
from .image_resolver import ImageUrlResolver
from .model.style_node import DesignDocument, StyleNode
from .node_converter import StyleNodeConverter

__all__ = [
    "DesignDocument",
    "DesignExtractor",
    "FigmaApiClient",
    "HtmlGenerator",
    "ImageUrlResolver",
    "StyleNode",
    "StyleNodeConverter",
    "ensure_readable_text_color",
    "figma_color_to_rgba",
    "load_document",
]
