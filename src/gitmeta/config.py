#!/usr/bin/env python3

from __future__ import annotations

from enum import Enum
from typing import ClassVar

from typing_extensions import override

from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
    YamlConfigSettingsSource,
)
from xdg_base_dirs import xdg_config_home


class LogLevel(Enum):
    DEBUG = "DEBUG"
    INFO = "INFO"
    SUCCESS = "SUCCESS"
    WARNING = "WARNING"
    ERROR = "ERROR"


class Config(BaseSettings):
    log_level: LogLevel = LogLevel.INFO
    # 为空时使用 `git remote` 列出的第一个远程仓库
    remote: str = ""
    base_branch: str = "main"
    web_url: str = "https://github.com"
    repo_dir: str = "."

    model_config: ClassVar[SettingsConfigDict] = SettingsConfigDict(
        env_nested_delimiter="__",
        env_prefix="GITMETA_",
        extra="ignore",
        yaml_file=[
            xdg_config_home() / "gitmeta" / "config.yaml",
            ".gitmeta.yaml",
        ],
        yaml_file_encoding="utf-8",
    )

    @override
    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        return (
            init_settings,
            env_settings,
            dotenv_settings,
            YamlConfigSettingsSource(settings_cls),
        )


if __name__ == "__main__":
    config = Config()
    print(config.model_dump())
