"""
Collection Service

Composes the paginator, the normalizer and the TTL cache for each named
resource ("monuments", "ecosystem"). Route handlers and scripts call this
service; they never talk to the CMS API directly.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Dict, List, Mapping, Optional

from cms_proxy.database.ttl_cache import TTLCache
from cms_proxy.integrations.clients.real_http.webflow_items import CollectionPaginator
from cms_proxy.processors.collection_normalizer import normalize_items
from cms_proxy.utils.config_loader import ProxyConfig, load_collection_credentials

logger = logging.getLogger(__name__)

PaginatorFactory = Callable[[str], CollectionPaginator]


class CollectionService:
    def __init__(
        self,
        config: ProxyConfig,
        cache: Optional[TTLCache] = None,
        paginator_factory: Optional[PaginatorFactory] = None,
        environ: Optional[Mapping[str, str]] = None,
    ) -> None:
        self.config = config
        self.cache = cache if cache is not None else TTLCache()
        self._paginator_factory = paginator_factory or self._default_paginator
        self._environ = environ

    def _default_paginator(self, api_token: str) -> CollectionPaginator:
        webflow = self.config.webflow
        return CollectionPaginator(
            api_token,
            api_base_url=webflow.api_base_url,
            api_version=webflow.api_version,
            page_size=webflow.page_size,
            timeout_seconds=webflow.timeout_seconds,
        )

    async def get_collection(self, resource: str) -> List[Dict[str, Any]]:
        """
        Return normalized items for a configured resource.

        Raises:
            KeyError: resource is not configured
            ConfigurationError: token or collection ID missing from the environment
            UpstreamHTTPError: a page request failed
        """
        resource_cfg = self.config.resources[resource]
        credentials = load_collection_credentials(resource_cfg, self._environ)

        cached = self.cache.get(resource, self.config.cache.ttl_seconds)
        if cached is not None:
            logger.info("Using cached %s data", resource)
            return cached

        async def _produce() -> List[Dict[str, Any]]:
            paginator = self._paginator_factory(credentials.api_token)
            raw_items = await paginator.fetch_all(credentials.collection_id)
            items = [item.to_dict() for item in normalize_items(raw_items, resource_cfg.kind)]
            logger.info("Cached %d %s", len(items), resource)
            return items

        return await self.cache.get_or_fetch(resource, self.config.cache.ttl_seconds, _produce)

    async def get_monuments(self) -> List[Dict[str, Any]]:
        return await self.get_collection("monuments")

    async def get_ecosystem(self) -> List[Dict[str, Any]]:
        return await self.get_collection("ecosystem")
