"""Pydantic models for Stash GraphQL payloads read by the setup wizard."""

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class SystemStatusEnum(str, Enum):
    SETUP = "SETUP"
    NEEDS_MIGRATION = "NEEDS_MIGRATION"
    OK = "OK"


class _GraphQLModel(BaseModel):
    """Accepts camelCase payload keys and snake_case constructor arguments."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class SystemStatus(_GraphQLModel):
    """Result of the systemStatus query. Polled once when the wizard starts."""

    status: SystemStatusEnum
    config_path: str = Field(default="", alias="configPath")
    os: str = "other"
    working_dir: str = Field(default="", alias="workingDir")
    home_dir: str = Field(default="", alias="homeDir")
    database_path: str | None = Field(default=None, alias="databasePath")
    database_schema: int | None = Field(default=None, alias="databaseSchema")
    app_schema: int | None = Field(default=None, alias="appSchema")

    @field_validator("config_path", "working_dir", "home_dir", mode="before")
    @classmethod
    def _null_as_empty(cls, value: Any) -> Any:
        return "" if value is None else value

    @property
    def configured(self) -> bool:
        """True when the server is past first-run setup (including pending migrations)."""
        return self.status is not SystemStatusEnum.SETUP


class StashConfig(_GraphQLModel):
    path: str
    exclude_video: bool = Field(default=False, alias="excludeVideo")
    exclude_image: bool = Field(default=False, alias="excludeImage")


class GeneralConfig(_GraphQLModel):
    stashes: list[StashConfig] = Field(default_factory=list)
    generated_path: str = Field(default="", alias="generatedPath")
    cache_path: str = Field(default="", alias="cachePath")
    blobs_path: str = Field(default="", alias="blobsPath")

    @field_validator("generated_path", "cache_path", "blobs_path", mode="before")
    @classmethod
    def _null_as_empty(cls, value: Any) -> Any:
        return "" if value is None else value

    @field_validator("stashes", mode="before")
    @classmethod
    def _null_as_no_stashes(cls, value: Any) -> Any:
        return [] if value is None else value


class Configuration(_GraphQLModel):
    """Result of the configuration query: existing (possibly partial) settings."""

    general: GeneralConfig = Field(default_factory=GeneralConfig)
    ui: dict[str, Any] = Field(default_factory=dict)

    @field_validator("general", "ui", mode="before")
    @classmethod
    def _null_as_default(cls, value: Any) -> Any:
        return {} if value is None else value
