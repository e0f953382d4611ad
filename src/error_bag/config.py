from __future__ import annotations

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    log_level: str = Field(default="WARNING", validation_alias="ERROR_BAG_LOG_LEVEL")
    trace_mutations: bool = Field(default=False, validation_alias="ERROR_BAG_TRACE")

    @field_validator("trace_mutations", mode="before")
    @classmethod
    def _parse_trace(cls, v: bool | str) -> bool | str:
        if v == "":
            return False
        return v

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_level(cls, v: str) -> str:
        return v.upper() if isinstance(v, str) else v

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )
