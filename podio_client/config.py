"""
Client configuration loader (API endpoint, credentials, timeouts).
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, Field, ValidationError

from podio_client import __version__

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path(__file__).parent.parent / "config" / "client_config.yml"

# environment variable -> config key
_ENV_OVERRIDES = {
    "PODIO_API_URL": "api_url",
    "PODIO_ACCESS_TOKEN": "access_token",
    "PODIO_TIMEOUT_SECONDS": "timeout_seconds",
}


class ClientConfig(BaseModel):
    """Settings for the HTTP transport"""

    api_url: str = "https://api.podio.com"
    access_token: Optional[str] = None
    timeout_seconds: float = Field(default=20.0, ge=1, le=300)
    user_agent: str = f"podio-client/{__version__}"


def load_client_config(config_path: Optional[Path] = None) -> ClientConfig:
    """
    Load and validate client configuration.

    Values from the YAML file are overridden by PODIO_* environment
    variables (a local .env file is read first).

    Args:
        config_path: Path to config file. Defaults to config/client_config.yml,
            which may be absent.

    Returns:
        Validated ClientConfig object

    Raises:
        FileNotFoundError: If an explicitly given config file doesn't exist
        ValidationError: If config doesn't match schema
    """
    load_dotenv()

    data: Dict[str, Any] = {}
    if config_path is None:
        if DEFAULT_CONFIG_PATH.exists():
            data = _read_yaml(DEFAULT_CONFIG_PATH)
    else:
        if not config_path.exists():
            raise FileNotFoundError(f"Config file not found: {config_path}")
        data = _read_yaml(config_path)

    for env_name, key in _ENV_OVERRIDES.items():
        value = os.getenv(env_name)
        if value:
            data[key] = value

    try:
        config = ClientConfig(**data)
        logger.info("Loaded client config for %s", config.api_url)
        return config
    except ValidationError as e:
        logger.error(f"Client config validation failed: {e}")
        raise


def _read_yaml(path: Path) -> Dict[str, Any]:
    with open(path, "r", encoding="utf-8") as f:
        return yaml.safe_load(f) or {}
