"""
FastAPI application - Main entry point

Run with:
  uvicorn cms_proxy.api.main:app --host 127.0.0.1 --port 8000
"""

from dotenv import load_dotenv

load_dotenv()

import logging
from datetime import datetime
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from cms_proxy.api.collections_router import collections_api
from cms_proxy.database.ttl_cache import TTLCache
from cms_proxy.integrations.collection_service import CollectionService
from cms_proxy.utils.config_loader import ProxyConfig, load_proxy_config

# Setup logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

SERVICE_NAME = "Webflow CMS Proxy"
VERSION = "1.0.0"


def create_app(config: Optional[ProxyConfig] = None, service: Optional[CollectionService] = None) -> FastAPI:
    if config is None:
        config = service.config if service is not None else load_proxy_config()

    app = FastAPI(
        title=f"{SERVICE_NAME} API",
        description="Paginated, normalized Webflow CMS collections as plain JSON",
        version=VERSION,
    )

    # CORS middleware (handles preflight; GET-only public data)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.http.allow_origins,
        allow_methods=["GET"],
        allow_headers=["Content-Type"],
    )

    # One cache per process, shared by every request
    app.state.collection_service = service or CollectionService(config, cache=TTLCache())

    app.include_router(collections_api, prefix="/api")
    logger.info("Serving collections: %s", ", ".join(sorted(config.resources)))

    @app.get("/", tags=["Health"])
    async def root():
        """Health check endpoint."""
        return {"service": SERVICE_NAME, "status": "healthy", "version": VERSION, "timestamp": datetime.now().isoformat()}

    @app.get("/health", tags=["Health"])
    async def health_check():
        """Detailed health check (configured resources, cache size)."""
        svc: CollectionService = app.state.collection_service
        return {
            "status": "healthy",
            "resources": sorted(svc.config.resources),
            "cache": {"entries": len(svc.cache), "ttl_seconds": svc.config.cache.ttl_seconds},
            "timestamp": datetime.now().isoformat(),
        }

    return app


app = create_app()
