"""
==============================================================================
Application Settings Module
==============================================================================

Configuration management using Pydantic Settings.

A single cached Settings instance is shared through ``get_settings()``.

Configuration Priority (highest to lowest):
------------------------------------------
1. Environment variables
2. .env file
3. Default values

==============================================================================
"""

from __future__ import annotations

import json
import logging
from functools import lru_cache
from pathlib import Path
from typing import List, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


# Module logger
logger = logging.getLogger(__name__)

# Bundled dataset shipped with the package
DEFAULT_PRODUCTS_FILE = Path(__file__).resolve().parent.parent / "data" / "products.json"


def _parse_json_list(raw: str, field_name: str, default: List[str]) -> List[str]:
    """Parse a JSON array string, falling back to ``default``."""
    try:
        values = json.loads(raw)
    except json.JSONDecodeError:
        logger.warning(f"Invalid {field_name} JSON: {raw}, defaulting to {default}")
        return list(default)
    if isinstance(values, list):
        return [str(v) for v in values]
    return list(default)


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Attributes:
        app_name: Display name for the application
        app_env: Environment mode (development/staging/production)
        debug: Enable debug mode for verbose logging
        host: Server bind address
        port: Server port number
        products_file: Product dataset (JSON file or directory)
        flag_file: Optional flagd-style feature flag file
        flag_timeout_seconds: Upper bound for a single flag lookup
        failure_flag: Flag that forces GetProduct failures
        failure_product_ids: Product ids the failure flag applies to (JSON array string)
        latency_flag: Flag that adds latency to catalog operations
        injected_latency_seconds: Delay added when the latency flag is on
        cors_origins: Allowed CORS origins (JSON array string)

    Example:
        >>> settings = Settings(products_file="tests/products.json")
        >>> settings.failure_product_id_list
        ['OLJCESPC7Z']
    """

    # =========================================================================
    # PYDANTIC SETTINGS CONFIGURATION
    # =========================================================================
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        validate_default=True,
    )

    # =========================================================================
    # APPLICATION SETTINGS
    # =========================================================================
    app_name: str = Field(
        default="Product Catalog Service",
        description="Display name for the application"
    )

    app_env: str = Field(
        default="development",
        description="Environment mode: development, staging, production"
    )

    debug: bool = Field(
        default=False,
        description="Enable debug mode for verbose logging"
    )

    # =========================================================================
    # SERVER SETTINGS
    # =========================================================================
    host: str = Field(
        default="0.0.0.0",
        description="Server bind address"
    )

    port: int = Field(
        default=3550,
        ge=1,
        le=65535,
        description="Server port number"
    )

    # =========================================================================
    # CATALOG SETTINGS
    # =========================================================================
    products_file: str = Field(
        default=str(DEFAULT_PRODUCTS_FILE),
        description="Product dataset: JSON file or directory of JSON files"
    )

    # =========================================================================
    # FEATURE FLAG SETTINGS
    # =========================================================================
    flag_file: Optional[str] = Field(
        default=None,
        description="flagd-style flag definition file; unset means no provider"
    )

    flag_timeout_seconds: float = Field(
        default=0.5,
        gt=0,
        le=30,
        description="Upper bound for a single flag lookup"
    )

    failure_flag: str = Field(
        default="productCatalogFailure",
        min_length=1,
        description="Flag forcing GetProduct failures"
    )

    failure_product_ids: str = Field(
        default='["OLJCESPC7Z"]',
        description="Product ids targeted by the failure flag, JSON array string"
    )

    latency_flag: str = Field(
        default="productCatalogLatency",
        min_length=1,
        description="Flag adding latency to catalog operations"
    )

    injected_latency_seconds: float = Field(
        default=0.0,
        ge=0,
        le=60,
        description="Delay added while the latency flag is on"
    )

    # =========================================================================
    # CORS SETTINGS
    # =========================================================================
    cors_origins: str = Field(
        default='["*"]',
        description="Allowed CORS origins as JSON array string"
    )

    # =========================================================================
    # VALIDATORS
    # =========================================================================
    @field_validator("app_env")
    @classmethod
    def validate_app_env(cls, value: str) -> str:
        """
        Validate and normalize application environment.

        Args:
            value: Raw environment value

        Returns:
            Lowercase normalized environment name
        """
        valid_envs = {"development", "staging", "production"}
        normalized = value.lower().strip()

        if normalized not in valid_envs:
            logger.warning(
                f"Unknown environment '{value}', defaulting to 'development'"
            )
            return "development"

        return normalized

    @field_validator("flag_file")
    @classmethod
    def validate_flag_file(cls, value: Optional[str]) -> Optional[str]:
        """Treat an empty flag file setting as unset."""
        if value is not None and not value.strip():
            return None
        return value

    # =========================================================================
    # COMPUTED PROPERTIES
    # =========================================================================
    @property
    def products_path(self) -> Path:
        """Get products source as Path object."""
        return Path(self.products_file)

    @property
    def flag_path(self) -> Optional[Path]:
        """Get flag file as Path object, if configured."""
        return Path(self.flag_file) if self.flag_file else None

    @property
    def failure_product_id_list(self) -> List[str]:
        """Parse targeted product ids from JSON string to list."""
        return _parse_json_list(self.failure_product_ids, "failure product ids", [])

    @property
    def cors_origins_list(self) -> List[str]:
        """Parse CORS origins from JSON string to list."""
        return _parse_json_list(self.cors_origins, "CORS origins", ["*"])

    def __repr__(self) -> str:
        """String representation for debugging."""
        return (
            f"Settings(app_name={self.app_name!r}, "
            f"app_env={self.app_env!r}, "
            f"products_file={self.products_file!r}, "
            f"flag_file={self.flag_file!r})"
        )


# =============================================================================
# SINGLETON INSTANCE MANAGEMENT
# =============================================================================

@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Get the global Settings instance.

    Returns:
        Cached Settings instance
    """
    settings = Settings()

    if settings.debug:
        logger.info(f"Configuration loaded: {settings}")

    return settings
