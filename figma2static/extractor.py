"""
Design Extractor
Figma 파일을 가져와 design.json을 생성하는 배치 작업
"""

import logging
from pathlib import Path
from typing import Optional

from .core.config import Settings
from .core.exception import ErrorCode, ServiceException
from .figma_api_client import FigmaApiClient
from .image_resolver import ImageUrlResolver
from .model.style_node import DesignDocument
from .node_converter import StyleNodeConverter

logger = logging.getLogger("figma2static.extractor")


class DesignExtractor:
    """Fetch -> flatten -> resolve image URLs -> DesignDocument"""

    def __init__(self, settings: Settings, api_client: Optional[FigmaApiClient] = None):
        if not settings.FIGMA_TOKEN or not settings.FIGMA_FILE_ID:
            raise ServiceException(ErrorCode.CONFIG_MISSING)
        self.settings = settings
        self.file_key = settings.FIGMA_FILE_ID
        self.api_client = api_client or FigmaApiClient(settings.FIGMA_TOKEN, settings)
        self.converter = StyleNodeConverter(settings.POSITION_MODE)
        self.image_resolver = ImageUrlResolver(self.api_client, settings.IMAGE_FORMAT)

    def extract(self) -> DesignDocument:
        logger.info(f"Figma 파일 가져오는 중: {self.file_key}")
        file_data = self.api_client.get_file(self.file_key)

        document = self.converter.convert_document(file_data)
        logger.info(
            f"노드 {self.converter.performance_counters['nodes_processed']}개 변환, "
            f"이미지 참조 {len(self.converter.image_refs)}개"
        )

        url_map = self.image_resolver.resolve(self.file_key, list(self.converter.image_refs))
        attached = self.image_resolver.attach(document, url_map)
        logger.info(f"이미지 URL {attached}개 연결")
        return document

    @staticmethod
    def save(document: DesignDocument, path: Path) -> Path:
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(document.to_json(), encoding="utf-8")
        logger.info(f"{path} 저장 완료")
        return path

    def run(self, output_path: Optional[Path] = None) -> Path:
        """Extract and write the artifact. Nothing is written if extraction fails."""
        document = self.extract()
        return self.save(document, output_path or self.settings.DESIGN_JSON_PATH)
