"""
figma2static
Figma 디자인을 design.json으로 추출하고 정적 HTML/CSS로 렌더링하는 CLI
"""

import os
import sys
from pathlib import Path
from typing import Optional

import click
from colorama import Fore, Style, init

from .core.config import Settings, get_setting
from .core.exception import ErrorCode, ServiceException
from .core.log.logging import get_logging
from .extractor import DesignExtractor
from .html_generator import HtmlGenerator, load_document
from .utils import parse_figma_url, resolve_file_key

# 컬러 출력 초기화
init()


def _override_settings(
    settings: Settings,
    token: Optional[str] = None,
    file_id: Optional[str] = None,
    design_json: Optional[str] = None,
    resolve_file: bool = True,
) -> Settings:
    update = {}
    if token:
        update["FIGMA_TOKEN"] = token
    if file_id:
        update["FIGMA_FILE_ID"] = file_id
    if design_json:
        update["DESIGN_JSON_PATH"] = Path(design_json)
    settings = settings.model_copy(update=update)
    if resolve_file and settings.FIGMA_FILE_ID:
        file_key = resolve_file_key(settings.FIGMA_FILE_ID)
        if not file_key:
            raise ServiceException(ErrorCode.CONFIG_MISSING, f"invalid file id {settings.FIGMA_FILE_ID}")
        settings = settings.model_copy(update={"FIGMA_FILE_ID": file_key})
    return settings


def run_extract(settings: Settings) -> Path:
    logger = get_logging()
    logger.info(f"{Fore.YELLOW}🔄 design.json 추출 중...{Style.RESET_ALL}")
    output_path = DesignExtractor(settings).run()
    logger.info(f"{Fore.GREEN}✅ {output_path} 생성 완료{Style.RESET_ALL}")
    return output_path


def run_render(settings: Settings) -> None:
    logger = get_logging()
    logger.info(f"{Fore.YELLOW}🔄 HTML/CSS 생성 중...{Style.RESET_ALL}")
    document = load_document(settings.DESIGN_JSON_PATH)
    html_path = Path(settings.HTML_OUTPUT_PATH)
    css_path = Path(settings.CSS_OUTPUT_PATH)
    href = Path(os.path.relpath(css_path, html_path.parent)).as_posix()
    HtmlGenerator(stylesheet_href=href).render_to_files(document, html_path, css_path)
    logger.info(f"{Fore.GREEN}✅ {html_path}, {css_path} 생성 완료{Style.RESET_ALL}")


def _fail(e: ServiceException) -> None:
    get_logging().error(f"{Fore.RED}❌ {e}{Style.RESET_ALL}")
    if e.error_code is ErrorCode.CONFIG_MISSING:
        get_logging().warning(
            f"{Fore.YELLOW}💡 FIGMA_TOKEN / FIGMA_FILE_ID 환경변수를 설정하거나 --token / --file-id 옵션을 사용하세요{Style.RESET_ALL}"
        )
    sys.exit(1)


@click.group()
def cli() -> None:
    """Figma 디자인을 design.json -> 정적 HTML/CSS로 변환"""
    pass


@cli.command()
@click.option("--token", "-t", help="Figma API 토큰 (또는 FIGMA_TOKEN 환경변수)")
@click.option("--file-id", "-f", help="Figma 파일 키 또는 URL (또는 FIGMA_FILE_ID 환경변수)")
@click.option("--output", "-o", help="design.json 경로")
def extract(token: Optional[str], file_id: Optional[str], output: Optional[str]) -> None:
    """Figma 파일을 가져와 design.json 생성"""
    try:
        run_extract(_override_settings(get_setting(), token, file_id, output))
    except ServiceException as e:
        _fail(e)


@cli.command()
@click.option("--input", "-i", "design_json", help="design.json 경로")
def render(design_json: Optional[str]) -> None:
    """design.json을 읽어 result.html / style.css 생성"""
    try:
        run_render(_override_settings(get_setting(), design_json=design_json, resolve_file=False))
    except ServiceException as e:
        _fail(e)


@cli.command()
@click.option("--token", "-t", help="Figma API 토큰")
@click.option("--file-id", "-f", help="Figma 파일 키 또는 URL")
def run(token: Optional[str], file_id: Optional[str]) -> None:
    """extract 후 render 실행"""
    try:
        settings = _override_settings(get_setting(), token, file_id)
        run_extract(settings)
        run_render(settings)
    except ServiceException as e:
        _fail(e)


@cli.command()
@click.argument("figma_url", required=False)
def info(figma_url: Optional[str]) -> None:
    """Figma 디자인 URL 정보 확인"""
    logger = get_logging()
    if not figma_url:
        figma_url = click.prompt("Figma 디자인 URL을 입력하세요", type=str)

    file_key, node_id = parse_figma_url(figma_url)
    if file_key:
        logger.info(f"{Fore.GREEN}✅ 유효한 Figma URL{Style.RESET_ALL}")
        logger.info(f"{Fore.CYAN}📂 파일 키: {file_key}{Style.RESET_ALL}")
        if node_id:
            logger.info(f"{Fore.CYAN}🎯 노드 ID: {node_id}{Style.RESET_ALL}")
    else:
        logger.error(f"{Fore.RED}❌ 잘못된 Figma URL{Style.RESET_ALL}")
        logger.warning(
            f"{Fore.YELLOW}💡 예상 형식: https://www.figma.com/design/[file-key]/[name]?node-id=[node-id]{Style.RESET_ALL}"
        )
        sys.exit(1)


if __name__ == "__main__":
    cli()
