"""
Configuration loader for the product catalog client
"""

import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path("config") / "product_api.yml"

# Environment variable -> config field
ENV_OVERRIDES = {
    "PRODUCT_API_BASE_URL": "base_url",
    "PRODUCT_API_STORE_TOKEN": "store_token",
    "PRODUCT_API_TIMEOUT_SECONDS": "timeout_seconds",
}


class ProductApiConfig(BaseModel):
    """Connection settings for the product catalog API"""

    base_url: str = Field(min_length=1)
    store_token: str = Field(min_length=1)
    timeout_seconds: float = Field(gt=0, default=20.0)

    @field_validator("base_url")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/")


def _read_yaml(config_path: Path) -> Dict[str, Any]:
    with open(config_path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Config file must contain a mapping: {config_path}")
    # Allow either a flat file or one nested under `product_api:`
    section = data.get("product_api", data)
    return dict(section or {})


def load_client_config(config_path: Optional[Path] = None) -> ProductApiConfig:
    """
    Load and validate product API configuration

    Values come from the YAML file (when it exists), then environment
    variables override them.

    Args:
        config_path: Path to config file. Defaults to config/product_api.yml

    Returns:
        Validated ProductApiConfig object

    Raises:
        ValidationError: If the merged settings don't match the schema
    """
    if config_path is None:
        config_path = DEFAULT_CONFIG_PATH

    settings: Dict[str, Any] = {}
    if config_path.exists():
        settings.update(_read_yaml(config_path))
        logger.debug(f"Read product API config from {config_path}")
    else:
        logger.debug(f"No config file at {config_path}, using environment only")

    for env_name, field_name in ENV_OVERRIDES.items():
        value = os.getenv(env_name)
        if value:
            settings[field_name] = value

    try:
        config = ProductApiConfig(**settings)
        logger.info(f"Loaded product API config for {config.base_url}")
        return config
    except ValidationError as e:
        logger.error(f"Product API config validation failed: {e}")
        raise
