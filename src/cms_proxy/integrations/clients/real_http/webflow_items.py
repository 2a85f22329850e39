"""
Webflow CMS collection items client.

Purpose:
- Pages through a collection's items endpoint and returns every raw item

Implementation notes:
- Use httpx for async requests
- Pages are requested one after another; each request depends on whether the
  previous page was the last one
- Non-2xx responses raise UpstreamHTTPError immediately (no retry)

Important:
- This client returns raw vendor records. Field mapping happens in
  cms_proxy.processors.collection_normalizer.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

import httpx

from cms_proxy.error_handler import UpstreamHTTPError

logger = logging.getLogger(__name__)

DEFAULT_API_BASE_URL = "https://api.webflow.com/v2"
DEFAULT_API_VERSION = "1.0.0"
PAGE_SIZE = 100


def _extract_items(data: Any) -> List[Dict[str, Any]]:
    if isinstance(data, dict):
        items = data.get("items")
        if items is None:
            return []
        return list(items) if isinstance(items, list) else []
    if isinstance(data, list):
        return data
    return []


def _extract_total(data: Any) -> Optional[int]:
    if not isinstance(data, dict):
        return None
    pagination = data.get("pagination")
    total = pagination.get("total") if isinstance(pagination, dict) else None
    if total is None:
        total = data.get("total")
    if isinstance(total, bool) or not isinstance(total, (int, float)):
        return None
    return int(total)


class CollectionPaginator:
    def __init__(
        self,
        api_token: str,
        api_base_url: str = DEFAULT_API_BASE_URL,
        api_version: str = DEFAULT_API_VERSION,
        page_size: int = PAGE_SIZE,
        timeout_seconds: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        if page_size < 1:
            raise ValueError("page_size must be at least 1")
        self.api_token = api_token
        self.api_base_url = api_base_url.rstrip("/")
        self.api_version = api_version
        self.page_size = page_size
        self.timeout_seconds = timeout_seconds
        self.transport = transport

    def _headers(self) -> Dict[str, str]:
        return {
            "Authorization": f"Bearer {self.api_token}",
            "Accept-Version": self.api_version,
            "Content-Type": "application/json",
        }

    def collection_url(self, collection: str) -> str:
        """Accept either a collection ID or a full items URL."""
        if collection.startswith(("http://", "https://")):
            return collection
        return f"{self.api_base_url}/collections/{collection}/items"

    def page_url(self, base_url: str, offset: int) -> str:
        separator = "&" if "?" in base_url else "?"
        return f"{base_url}{separator}limit={self.page_size}&offset={offset}"

    def _client(self) -> httpx.AsyncClient:
        kwargs: Dict[str, Any] = {}
        if self.timeout_seconds is not None:
            kwargs["timeout"] = self.timeout_seconds
        if self.transport is not None:
            kwargs["transport"] = self.transport
        return httpx.AsyncClient(**kwargs)

    async def fetch_all(self, collection: str) -> List[Dict[str, Any]]:
        base_url = self.collection_url(collection)
        offset = 0
        all_items: List[Dict[str, Any]] = []

        async with self._client() as client:
            while True:
                url = self.page_url(base_url, offset)
                response = await client.get(url, headers=self._headers())
                if not response.is_success:
                    raise UpstreamHTTPError(response.status_code, response.text)

                data = response.json()
                items = _extract_items(data)
                logger.debug("Fetched %d items from %s", len(items), url)
                if not items:
                    break

                all_items.extend(items)

                total = _extract_total(data)
                if total is not None and len(all_items) >= total:
                    break
                # A short page is the last one even when no total is reported
                if len(items) < self.page_size:
                    break

                offset += self.page_size

        logger.info("Fetched %d total items from %s", len(all_items), base_url)
        return all_items


async def fetch_all_items(collection: str, api_token: str, **kwargs: Any) -> List[Dict[str, Any]]:
    """Fetch every raw item of a collection (ID or full items URL)."""
    return await CollectionPaginator(api_token, **kwargs).fetch_all(collection)
