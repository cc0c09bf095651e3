from __future__ import annotations

from pathlib import Path
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    max_file_size_mb: int = Field(50)
    max_page_number: int = Field(2147483647)
    max_resolved_pages: int = Field(100000)
    log_level: str = Field("INFO")
    log_file_path: str = Field("logs/fastmcp_page_ranges.log")
    server_name: str = Field("page-ranges-fastmcp")
    server_version: str = Field("1.0.0")

    @field_validator("log_level")
    def _upper(cls, v: str) -> str:  # noqa: N805
        return v.upper()

    @field_validator("max_page_number", "max_resolved_pages")
    def _positive(cls, v: int) -> int:  # noqa: N805
        if v < 1:
            raise ValueError("page limits must be >= 1")
        return v

    @property
    def log_path(self) -> Path:
        return Path(self.log_file_path).resolve()


settings = Settings()
