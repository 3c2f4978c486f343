"""
Figma REST API Client
Figma API와 상호작용하는 클라이언트
"""

import logging
from typing import Any, Dict, List, Optional

import requests

from .core.config import Settings, get_setting
from .core.exception import ErrorCode, ServiceException

logger = logging.getLogger("figma2static.api")


class FigmaApiClient:
    """Figma REST API 클라이언트"""

    def __init__(self, api_token: Optional[str] = None, settings: Optional[Settings] = None):
        self.settings = settings or get_setting()
        self.api_token = api_token or self.settings.FIGMA_TOKEN
        if not self.api_token:
            raise ServiceException(ErrorCode.CONFIG_MISSING, "Figma API token is required")
        self.base_url = self.settings.FIGMA_API_BASE_URL.rstrip("/")
        self.timeout = self.settings.FIGMA_API_TIMEOUT
        self.headers = {
            "X-Figma-Token": self.api_token,
        }

    def get_file(self, file_key: str) -> Dict[str, Any]:
        """
        Fetch the whole file. Any failure aborts the run.

        Raises:
            ServiceException: request failed, non-2xx status or no document field
        """
        url = f"{self.base_url}/files/{file_key}"
        try:
            response = requests.get(url, headers=self.headers, timeout=self.timeout)
        except requests.RequestException as e:
            logger.error(f"파일 가져오기 실패: {e}")
            raise ServiceException(ErrorCode.FIGMA_FILE_FETCH_FAILED, str(e)) from e

        logger.info(f"HTTP Status Code: {response.status_code}")
        if not response.ok:
            logger.error(f"파일 가져오기 실패 ({response.status_code}): {response.text}")
            raise ServiceException(
                ErrorCode.FIGMA_FILE_FETCH_FAILED, f"HTTP {response.status_code}"
            )

        try:
            data = response.json()
        except ValueError as e:
            logger.error(f"파일 응답 파싱 실패: {response.text}")
            raise ServiceException(ErrorCode.FIGMA_FILE_FETCH_FAILED, "invalid JSON body") from e

        if not isinstance(data, dict) or not isinstance(data.get("document"), dict):
            raise ServiceException(ErrorCode.FIGMA_DOCUMENT_MISSING)
        return data

    def get_images(
        self,
        file_key: str,
        node_ids: List[str],
        format: str = "png",
    ) -> Optional[Dict[str, Optional[str]]]:
        """
        Batch-request rendered image URLs for node_ids.

        The status code is not checked here and a failed request is only
        logged. Returns None when the request fails or the response carries
        no usable "images" mapping, so callers can tell "field absent" from
        "field present but empty".
        """
        url = f"{self.base_url}/images/{file_key}"
        params = {"ids": ",".join(node_ids), "format": format}
        try:
            response = requests.get(url, headers=self.headers, params=params, timeout=self.timeout)
        except requests.RequestException as e:
            logger.warning(f"이미지 요청 실패: {e}")
            return None
        if not response.ok:
            logger.warning(f"이미지 요청 상태 코드 {response.status_code}: {response.text}")

        try:
            data = response.json()
        except ValueError:
            logger.warning("이미지 응답이 JSON이 아닙니다")
            return None

        if not isinstance(data, dict) or "images" not in data:
            return None
        images = data["images"]
        if images is None:
            return {}
        if not isinstance(images, dict):
            logger.warning(f"images 필드 형식이 잘못되었습니다: {type(images).__name__}")
            return None
        return images
