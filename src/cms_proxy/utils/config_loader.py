"""
Proxy configuration loader.

Non-secret settings (API base URL, page size, cache TTL, response headers)
live in config/proxy_config.yml and are validated with Pydantic. Secrets and
collection IDs come from the environment and are read at request time.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Literal, Mapping, Optional

import yaml
from pydantic import BaseModel, Field, ValidationError

from cms_proxy.error_handler import ConfigurationError

logger = logging.getLogger(__name__)

API_TOKEN_ENV = "WEBFLOW_API_TOKEN"


class WebflowConfig(BaseModel):
    api_base_url: str = "https://api.webflow.com/v2"
    api_version: str = "1.0.0"
    page_size: int = Field(default=100, ge=1, le=100)
    timeout_seconds: Optional[float] = Field(default=None, gt=0)


class CacheConfig(BaseModel):
    ttl_seconds: float = Field(default=300.0, ge=0)


class HTTPConfig(BaseModel):
    cache_control_max_age: int = Field(default=3600, ge=0)
    allow_origins: List[str] = Field(default_factory=lambda: ["*"])


class ResourceConfig(BaseModel):
    collection_env: str
    kind: Literal["monument", "ecosystem"]


def _default_resources() -> Dict[str, ResourceConfig]:
    return {
        "monuments": ResourceConfig(collection_env="MONUMENTS_COLLECTION_ID", kind="monument"),
        "ecosystem": ResourceConfig(collection_env="ECOSYSTEM_COLLECTION_ID", kind="ecosystem"),
    }


class ProxyConfig(BaseModel):
    webflow: WebflowConfig = Field(default_factory=WebflowConfig)
    cache: CacheConfig = Field(default_factory=CacheConfig)
    http: HTTPConfig = Field(default_factory=HTTPConfig)
    resources: Dict[str, ResourceConfig] = Field(default_factory=_default_resources)


@dataclass(frozen=True)
class CollectionCredentials:
    api_token: str
    collection_id: str


def load_proxy_config(config_path: Optional[Path] = None) -> ProxyConfig:
    """
    Load and validate proxy configuration from YAML file.

    Args:
        config_path: Path to config file. Defaults to config/proxy_config.yml

    Returns:
        Validated ProxyConfig object. Built-in defaults are used when the
        default file is absent.

    Raises:
        FileNotFoundError: If an explicit config_path doesn't exist
        ValidationError: If config doesn't match schema
    """
    explicit = config_path is not None
    if config_path is None:
        config_path = Path(__file__).parent.parent.parent.parent / "config" / "proxy_config.yml"

    if not config_path.exists():
        if explicit:
            raise FileNotFoundError(f"Proxy config file not found: {config_path}")
        logger.info("No proxy config at %s, using defaults", config_path)
        return ProxyConfig()

    with open(config_path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    try:
        cfg = ProxyConfig(**data)
        logger.info("Successfully loaded proxy config from %s", config_path)
        return cfg
    except ValidationError as e:
        logger.error("Proxy config validation failed: %s", e)
        raise


def load_collection_credentials(
    resource: ResourceConfig,
    environ: Optional[Mapping[str, str]] = None,
) -> CollectionCredentials:
    """Read the API token and collection ID for one resource from the environment."""
    env = os.environ if environ is None else environ
    api_token = (env.get(API_TOKEN_ENV) or "").strip()
    collection_id = (env.get(resource.collection_env) or "").strip()

    missing = [name for name, value in ((API_TOKEN_ENV, api_token), (resource.collection_env, collection_id)) if not value]
    if missing:
        raise ConfigurationError(missing)

    return CollectionCredentials(api_token=api_token, collection_id=collection_id)
