import logging

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    default_font_size: float = 10.0
    log_level: str = "INFO"
    indent: int = 2

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="DOCSTYLE_",
        env_file_encoding="utf-8",
    )

    @field_validator("default_font_size")
    @classmethod
    def font_size_must_be_positive(cls, v: float) -> float:
        if v <= 0:
            raise ValueError("default_font_size must be positive")
        return v

    @field_validator("log_level")
    @classmethod
    def log_level_must_be_known(cls, v: str) -> str:
        level = v.upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"unknown log level: {v}")
        return level

    @field_validator("indent")
    @classmethod
    def indent_must_not_be_negative(cls, v: int) -> int:
        if v < 0:
            raise ValueError("indent must be at least 0")
        return v

    @property
    def log_level_number(self) -> int:
        return logging.getLevelNamesMapping()[self.log_level]
