"""Configuration management for the release tools."""

from functools import lru_cache
from pathlib import Path
from typing import Any

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

FALSE_LITERALS = {"0", "false", "f", "no", "n", "off"}


class Settings(BaseSettings):
    """Settings loaded once from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Release flags
    has_publish: bool = False
    has_install_apk: bool = False
    has_install: bool = False
    allowed_devices: str | None = None

    # Release paths
    apk_path: Path = Path("./android/app/build/outputs/apk/release/app-release.apk")
    remote_dir: str = "/storage/emulated/0/Downloads"
    manifest_path: Path = Path("package.json")

    # Version guard
    pin_file: Path = Path(".node-version")

    # External tools
    adb_bin: str = "adb"
    npm_bin: str = "npm"
    node_bin: str = "node"

    # Logging
    log_level: str = "INFO"
    log_to_file: bool = False
    log_dir: Path = Path("data/logs")

    @field_validator("has_publish", "has_install_apk", "has_install", "log_to_file", mode="before")
    @classmethod
    def _parse_flag(cls, value: Any) -> Any:
        """Treat any non-empty value that isn't a false literal as set."""
        if isinstance(value, str):
            value = value.strip()
            return bool(value) and value.lower() not in FALSE_LITERALS
        return value

    @property
    def allowed_device_set(self) -> frozenset[str] | None:
        """Parse the allow-list string into a set of device identifiers."""
        from .release.devices import resolve_allow_list

        return resolve_allow_list(self.allowed_devices)

    @property
    def wants_devices(self) -> bool:
        """Whether any per-device flow is enabled."""
        return self.has_install_apk or self.has_install


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
