"""
HTML Generator
design.json(StyleNode 트리)을 HTML/CSS로 변환하는 생성기
"""

import html
import logging
from pathlib import Path
from typing import Dict, List, Tuple

from pydantic import ValidationError

from .core.exception import ErrorCode, ServiceException
from .model.style_node import SCHEMA_VERSION, DesignDocument, StyleNode
from .style_builder import CSSStyleBuilder
from .utils import indent_string

logger = logging.getLogger("figma2static.renderer")

DEFAULT_STYLESHEET_HREF = "style.css"


def load_document(path: Path) -> DesignDocument:
    """
    Read and validate the extractor's artifact.

    Raises:
        ServiceException: the file is missing, is not valid JSON, does not
            match the StyleNode schema or carries an unsupported version
    """
    path = Path(path)
    try:
        raw = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ServiceException(ErrorCode.DESIGN_DOCUMENT_INVALID, str(e)) from e

    try:
        document = DesignDocument.model_validate_json(raw)
    except ValidationError as e:
        logger.error(f"{path} 스키마 검증 실패: {e}")
        raise ServiceException(ErrorCode.DESIGN_DOCUMENT_INVALID, f"{path}: {e.error_count()} errors") from e

    if document.schema_version != SCHEMA_VERSION:
        raise ServiceException(
            ErrorCode.DESIGN_DOCUMENT_INVALID,
            f"unsupported schema version {document.schema_version}",
        )
    return document


class HtmlGenerator:
    """StyleNode 트리를 HTML 조각과 CSS 규칙으로 변환"""

    def __init__(self, stylesheet_href: str = DEFAULT_STYLESHEET_HREF):
        self.stylesheet_href = stylesheet_href
        self.css_rules: List[str] = []

    def generate(self, document: DesignDocument) -> Dict[str, str]:
        """
        메인 HTML 생성 함수

        Returns:
            'html'과 'css' 키를 가진 딕셔너리
        """
        self.css_rules = []
        html_parts = [self._convert_node(node) for node in document.nodes]
        return {
            "html": "\n".join(html_parts),
            "css": "\n".join(self.css_rules),
        }

    def _convert_node(self, node: StyleNode) -> str:
        """단일 노드를 HTML로 변환하고 CSS 규칙을 수집"""
        self.css_rules.append(self._build_rule(node))

        tag = "span" if node.is_text else "div"
        content = html.escape(node.text) if node.text else ""
        children_html = "\n".join(self._convert_node(child) for child in node.children)

        if not children_html:
            return f'<{tag} class="{node.safe_class}">{content}</{tag}>'
        inner = "\n".join(part for part in (content, children_html) if part)
        return f'<{tag} class="{node.safe_class}">\n{indent_string(inner)}\n</{tag}>'

    def _build_rule(self, node: StyleNode) -> str:
        builder = CSSStyleBuilder()
        builder.add_position_styles(node.styles)
        builder.add_background_styles(node.styles, node.asset_url)
        builder.add_border_styles(node.styles)
        builder.add_layout_styles(node.styles)
        builder.add_text_styles(node.styles)
        body = "".join(f"  {line}\n" for line in builder.build())
        return f".{node.safe_class} {{\n{body}}}\n"

    def build_page(self, html_content: str) -> str:
        return f"""<!DOCTYPE html>
<html>
  <head>
    <meta charset="UTF-8">
    <link rel="stylesheet" href="{self.stylesheet_href}">
  </head>
  <body style="position:relative;">
{indent_string(html_content, 4)}
  </body>
</html>
"""

    def render_to_files(
        self, document: DesignDocument, html_path: Path, css_path: Path
    ) -> Tuple[Path, Path]:
        """Write the page and its stylesheet, overwriting previous output."""
        result = self.generate(document)
        html_path, css_path = Path(html_path), Path(css_path)
        for path in (html_path, css_path):
            path.parent.mkdir(parents=True, exist_ok=True)
        html_path.write_text(self.build_page(result["html"]), encoding="utf-8")
        css_path.write_text(result["css"], encoding="utf-8")
        logger.info(f"{html_path}, {css_path} 저장 완료 (노드 {len(self.css_rules)}개)")
        return html_path, css_path
