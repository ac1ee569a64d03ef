from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR"]


class ApiSettings(BaseModel):
    model_config = ConfigDict(extra="forbid")

    base_url: str = "https://jsonplaceholder.typicode.com"
    collection_path: str = "/users"
    timeout_seconds: float = Field(default=10.0, gt=0)
    offline: bool = False

    @field_validator("base_url")
    @classmethod
    def _http_scheme(cls, v: str) -> str:
        if not v.startswith(("http://", "https://")):
            raise ValueError("base_url must start with http:// or https://")
        return v.rstrip("/")

    @field_validator("collection_path")
    @classmethod
    def _leading_slash(cls, v: str) -> str:
        v = v.rstrip("/")
        if not v.startswith("/"):
            v = "/" + v
        return v

class UiSettings(BaseModel):
    model_config = ConfigDict(extra="forbid")

    title: str = "Person Listings"
    # Show a red error line per component when a request fails.
    surface_errors: bool = False

class SyncSettings(BaseModel):
    model_config = ConfigDict(extra="forbid")

    # Lister re-fetches after a sibling creates or deletes someone.
    refresh_after_mutation: bool = False

class LoggingSettings(BaseModel):
    model_config = ConfigDict(extra="forbid")

    level: LogLevel = "INFO"

class AppSettings(BaseModel):
    model_config = ConfigDict(extra="forbid")

    api: ApiSettings = Field(default_factory=ApiSettings)
    ui: UiSettings = Field(default_factory=UiSettings)
    sync: SyncSettings = Field(default_factory=SyncSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)
