from pathlib import Path
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict

ENV_FILE = Path.cwd() / ".env"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=ENV_FILE,
        env_file_encoding="utf-8",
        extra="ignore",
    )

    APP_NAME: str = "figma2static"
    LOG_LEVEL: str = "INFO"

    # Figma API
    FIGMA_TOKEN: str | None = None
    FIGMA_FILE_ID: str | None = None
    FIGMA_API_BASE_URL: str = "https://api.figma.com/v1"
    FIGMA_API_TIMEOUT: int = 30
    IMAGE_FORMAT: str = "png"

    # relative: children are placed against their parent's bounding box
    POSITION_MODE: Literal["relative", "absolute"] = "relative"

    # Artifacts
    DESIGN_JSON_PATH: Path = Path("design.json")
    HTML_OUTPUT_PATH: Path = Path("result.html")
    CSS_OUTPUT_PATH: Path = Path("style.css")


settings = Settings()


def get_setting() -> Settings:
    return settings
