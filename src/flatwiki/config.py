"""Application configuration."""

from pathlib import Path
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    data_dir: Path = Path("data")
    assets_dir: Path | None = None
    render_mode: Literal["markdown", "escape"] = "markdown"
    front_page: str = "FrontPage"
    app_title: str = "FlatWiki"
    debug: bool = False
    host: str = "127.0.0.1"
    port: int = 8080
    log_level: str = "info"

    model_config = SettingsConfigDict(
        env_prefix="FLATWIKI_",
        env_file=".env",
        env_file_encoding="utf-8",
    )


settings = Settings()
