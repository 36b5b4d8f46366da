from __future__ import annotations
from typing import Any, Dict, List, Optional
from pathlib import Path

import yaml
from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from typing_extensions import Annotated
from dotenv import load_dotenv

load_dotenv()


class Settings(BaseSettings):
    env: Annotated[str, Field(default="development")]
    api_title: Annotated[str, Field(default="Paper Management API")]

    database_url: Annotated[str, Field(default="sqlite:///./paper_management.db")]
    database_echo: Annotated[bool, Field(default=False)]

    log_level: Annotated[str, Field(default="INFO")]
    log_file: Annotated[Optional[str], Field(default=None)]

    # Empty means "derive from env": everything in development, the local
    # frontend otherwise.
    cors_origins: Annotated[List[str], Field(default_factory=list)]

    model_config = SettingsConfigDict(
        env_file=".env",
        env_nested_delimiter="__",
        extra="ignore",
    )

    @property
    def is_dev(self) -> bool:
        return self.env == "development"

    @model_validator(mode="after")
    def _default_cors_origins(self) -> "Settings":
        if not self.cors_origins:
            self.cors_origins = (
                ["*"]
                if self.is_dev
                else ["http://localhost:5173", "http://127.0.0.1:5173"]
            )
        return self

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls,
        init_settings,
        env_settings,
        dotenv_settings,
        file_secret_settings,
    ):
        def yaml_settings() -> Dict[str, Any]:
            path = Path("settings.yaml")
            if not path.exists():
                return {}
            return yaml.safe_load(path.read_text(encoding="utf-8")) or {}

        return (
            init_settings,
            env_settings,
            dotenv_settings,
            yaml_settings,
            file_secret_settings,
        )


Config = Settings()
