from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Dict, List, Optional

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


def _as_list(value) -> List[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return [value] if value.strip() else []
    return [str(v) for v in value]


def _parse_bool(value, default: bool) -> bool:
    if isinstance(value, bool):
        return value
    if value is None or value == "":
        return default
    return str(value).strip().lower() in {"1", "true", "yes", "on"}


class EntrypointsOptions(BaseModel):
    """Where development entrypoints live and which discovered files to skip."""

    paths: List[str] = Field(default_factory=lambda: ["resources/scripts/main.ts"])
    # Regular expressions matched against discovered paths
    ignore: List[str] = Field(default_factory=lambda: [r"\.(d\.ts|json)$"])

    @field_validator("paths", "ignore", mode="before")
    @classmethod
    def _listify(cls, value) -> List[str]:
        return _as_list(value)


class DevServerOptions(BaseModel):
    enabled: bool = True
    url: str = "http://localhost:3000"
    ping_url: Optional[str] = None
    # Seconds
    ping_timeout: float = 1.0
    ping_before_using_manifest: bool = True

    @field_validator("enabled", "ping_before_using_manifest", mode="before")
    @classmethod
    def _parse_flags(cls, value) -> bool:
        return _parse_bool(value, True)

    @field_validator("ping_url", mode="before")
    @classmethod
    def _blank_ping_url(cls, value: str | None) -> Optional[str]:
        if isinstance(value, str) and not value.strip():
            return None
        return value


class ViteConfigOptions(BaseModel):
    """Options of one named Vite configuration."""

    entrypoints: EntrypointsOptions = Field(default_factory=EntrypointsOptions)
    build_path: Optional[str] = "build"
    dev_server: DevServerOptions = Field(default_factory=DevServerOptions)

    @field_validator("build_path", mode="before")
    @classmethod
    def _strip_build_path(cls, value: str | None) -> Optional[str]:
        if value is None:
            return None
        val = str(value).strip().strip("/\\")
        return val or None


class ViteSettings(BaseSettings):
    """Process-wide asset settings pulled from environment/.env."""

    app_env: str = Field("production", alias="APP_ENV")
    default_config: str = Field("default", alias="VITE_DEFAULT_CONFIG")
    testing_use_manifest: bool = Field(False, alias="VITE_TESTING_USE_MANIFEST")
    # Seconds a dev-server probe result is reused; 0 disables caching
    ping_cache_ttl: float = Field(0.0, alias="VITE_PING_CACHE_TTL")
    base_path: Path = Field(default_factory=Path.cwd, alias="VITE_BASE_PATH")
    public_path: Optional[Path] = Field(None, alias="VITE_PUBLIC_PATH")
    asset_url: str = Field("", alias="ASSET_URL")
    configs: Dict[str, ViteConfigOptions] = Field(
        default_factory=lambda: {"default": ViteConfigOptions()},
        alias="VITE_CONFIGS",
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        # VITE_CONFIGS__DEFAULT__BUILD_PATH=dist overrides one option of one configuration
        env_nested_delimiter="__",
        extra="ignore",
        populate_by_name=True,
    )

    @field_validator("app_env", mode="before")
    @classmethod
    def _normalize_env(cls, value: str | None) -> str:
        val = (value or "production").strip().lower()
        return val or "production"

    @field_validator("default_config", mode="before")
    @classmethod
    def _normalize_default(cls, value: str | None) -> str:
        val = (value or "default").strip()
        return val or "default"

    @field_validator("testing_use_manifest", mode="before")
    @classmethod
    def _parse_testing_flag(cls, value) -> bool:
        return _parse_bool(value, False)

    @field_validator("ping_cache_ttl", mode="before")
    @classmethod
    def _clamp_ttl(cls, value) -> float:
        if value is None or value == "":
            return 0.0
        return max(0.0, float(value))

    @field_validator("asset_url", mode="before")
    @classmethod
    def _strip_asset_url(cls, value: str | None) -> str:
        return (value or "").strip().rstrip("/")

    def is_environment(self, *names: str) -> bool:
        return self.app_env in {n.lower() for n in names}

    @property
    def resolved_public_path(self) -> Path:
        # An absolute public_path replaces base_path entirely
        return self.base_path / (self.public_path or "public")


@lru_cache(maxsize=1)
def get_settings() -> ViteSettings:
    return ViteSettings()


def reset_settings_cache() -> None:
    """Testing helper to clear cached settings."""
    get_settings.cache_clear()
