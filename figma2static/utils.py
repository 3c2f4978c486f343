"""
Common utility functions for Figma to static HTML conversion
"""

import re
from typing import Any, Optional, Tuple
from urllib.parse import parse_qs, unquote, urlparse

NODE_ID_PREFIX = "node-"
DIGIT_PREFIX = "n"


def sanitize_node_id(node_id: str) -> str:
    """
    Figma 노드 ID를 HTML/CSS에서 쓸 수 있는 식별자로 변환

    "12:34" -> "node-12-34", "I5:6;7:8" -> "node-I5-6-7-8".
    Already sanitized identifiers are returned unchanged.
    """
    if node_id.startswith(NODE_ID_PREFIX) and not re.search(r"[:;]", node_id):
        return node_id
    return NODE_ID_PREFIX + re.sub(r"[:;]", "-", node_id)


def sanitize_name(name: str) -> str:
    """
    노드 이름을 CSS 클래스에 쓸 수 있는 이름으로 변환

    Whitespace runs become underscores first, then everything outside
    [A-Za-z0-9_] is dropped; a leading digit gets an "n" prefix.
    The result may be empty for names made only of symbols.
    """
    safe_name = re.sub(r"\s+", "_", name or "")
    safe_name = re.sub(r"[^a-zA-Z0-9_]", "", safe_name)
    if re.match(r"^[0-9]", safe_name):
        safe_name = DIGIT_PREFIX + safe_name
    return safe_name


def build_safe_class(name: str, safe_id: str) -> str:
    return f"{sanitize_name(name)}_{safe_id}"


def format_number(value: Any) -> str:
    """Render numbers the way CSS expects them: 1.0 -> "1", 0.5 -> "0.5"."""
    if isinstance(value, bool):
        return str(int(value))
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def indent_string(content: str, spaces: int = 2) -> str:
    """
    문자열 들여쓰기

    Args:
        content: 들여쓰기할 내용
        spaces: 공백 수

    Returns:
        들여쓰기된 문자열
    """
    if not content:
        return content

    indent = " " * spaces
    lines = content.split("\n")
    indented_lines = [indent + line if line.strip() else line for line in lines]
    return "\n".join(indented_lines)


def parse_figma_url(url: str) -> Tuple[Optional[str], Optional[str]]:
    """
    Parse a Figma design URL and extract the file key and node id (if present).
    Returns (file_key, node_id or None)
    """
    url = unquote(url.strip())

    # Figma file key is always after /file/, /design/ or /proto/
    match = re.search(r"/(file|design|proto)/([a-zA-Z0-9]+)", url)
    file_key = match.group(2) if match else None

    node_id = None
    parsed = urlparse(url)
    query_str = parsed.query.replace("\\", "")
    if query_str:
        qs = parse_qs(query_str)
        if "node-id" in qs:
            node_id = qs["node-id"][0].replace("-", ":")
    if not node_id and parsed.fragment:
        frag = parse_qs(parsed.fragment)
        if "node-id" in frag:
            node_id = frag["node-id"][0].replace("-", ":")

    return file_key, node_id


def resolve_file_key(value: str) -> Optional[str]:
    """Accept either a bare file key or a full Figma URL."""
    value = value.strip()
    if "/" not in value:
        return value or None
    file_key, _ = parse_figma_url(value)
    return file_key
