"""
Image URL Resolver
이미지 참조가 있는 노드의 다운로드 URL을 조회하고 StyleNode에 연결
"""

import logging
from typing import Dict, List

from .figma_api_client import FigmaApiClient
from .model.style_node import DesignDocument

logger = logging.getLogger("figma2static.images")


class ImageUrlResolver:
    def __init__(self, api_client: FigmaApiClient, image_format: str = "png"):
        self.api_client = api_client
        self.image_format = image_format

    def resolve(self, file_key: str, node_ids: List[str]) -> Dict[str, str]:
        """
        Map Figma node ids to rendered image URLs with one batched request.

        No request is made for an empty id list. A response without an
        "images" field resolves nothing; ids Figma could not render (null
        URL) are dropped.
        """
        if not node_ids:
            return {}

        logger.info(f"이미지 URL {len(node_ids)}개 조회 중")
        images = self.api_client.get_images(file_key, node_ids, format=self.image_format)
        if images is None:
            logger.warning("이미지 응답에 images 필드가 없습니다; URL 없이 계속합니다")
            return {}

        return {node_id: url for node_id, url in images.items() if url}

    @staticmethod
    def attach(document: DesignDocument, url_map: Dict[str, str]) -> int:
        """Set asset_url on every node whose Figma id was resolved. Returns the count."""
        attached = 0
        if not url_map:
            return attached
        for node in document.walk():
            url = url_map.get(node.source_id)
            if url:
                node.asset_url = url
                attached += 1
        return attached
