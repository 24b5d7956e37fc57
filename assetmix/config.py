"""Process configuration — env-driven, read once per build pass.

Centralized settings using pydantic-settings. Reads from a .env file and
ASSETMIX_* environment variables.
"""

from __future__ import annotations

from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class MixSettings(BaseSettings):
    """Build settings with environment variable overrides.

    All settings can be overridden via ASSETMIX_* environment variables
    or a .env file in the working directory.

    Examples
    --------
    Override via environment::

        export ASSETMIX_ENVIRONMENT=production
        export ASSETMIX_LOG_LEVEL=DEBUG
        export ASSETMIX_MIX_FILE=build/assets.mix.py
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="ASSETMIX_",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Runtime environment
    environment: str = "development"
    log_level: str = "INFO"

    # Project layout
    project_root: Path = Path(".")
    mix_file: str = "webpack.mix.py"
    manifest_name: str = "Mix.json"
    hot_file_name: str = "hot"

    # Framework detection
    sentinel_file: str = "artisan"
    framework_public_path: str = "public"
    framework_cache_path: str = "storage/framework/cache"

    # Dev server
    dev_server_url: str = "http://localhost:8080/"

    @property
    def is_production(self) -> bool:
        """Whether assets are being built for production."""
        return self.environment == "production"
