#!/usr/bin/env python3
"""
Fetch normalized CMS collections and dump them as JSON.

Uses the same CollectionService as the API, so credentials come from
WEBFLOW_API_TOKEN / MONUMENTS_COLLECTION_ID / ECOSYSTEM_COLLECTION_ID
(.env is loaded) and settings from config/proxy_config.yml.

Examples:
  python scripts/fetch_collections.py --resource monuments
  python scripts/fetch_collections.py --output data/collections.json
"""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from dotenv import load_dotenv

load_dotenv()

from cms_proxy.error_handler import ConfigurationError, UpstreamHTTPError
from cms_proxy.integrations.collection_service import CollectionService
from cms_proxy.utils.config_loader import load_proxy_config

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool = False) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(level=level, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s")


async def fetch(resources: list[str], config_path: Path | None) -> dict:
    cfg = load_proxy_config(config_path)
    service = CollectionService(cfg)
    return {resource: await service.get_collection(resource) for resource in resources}


def main() -> int:
    parser = argparse.ArgumentParser(description="Fetch normalized Webflow CMS collections")
    parser.add_argument("--resource", default="all", help="monuments, ecosystem or all (default: all)")
    parser.add_argument("--config", type=Path, default=None, help="Path to proxy_config.yml")
    parser.add_argument("--output", type=Path, default=None, help="Write JSON here instead of stdout")
    parser.add_argument("--verbose", "-v", action="store_true", help="Log every page request")
    args = parser.parse_args()

    setup_logging(args.verbose)

    resources = ["monuments", "ecosystem"] if args.resource == "all" else [args.resource]

    try:
        result = asyncio.run(fetch(resources, args.config))
    except ConfigurationError as e:
        logger.error("%s. Set them in the environment or .env", e)
        return 2
    except UpstreamHTTPError as e:
        logger.error("Upstream request failed: %s", e)
        return 1
    except KeyError as e:
        logger.error("Unknown resource %s", e)
        return 2

    text = json.dumps(result, indent=2, ensure_ascii=False)
    if args.output:
        args.output.parent.mkdir(parents=True, exist_ok=True)
        args.output.write_text(text, encoding="utf-8")
        logger.info("Wrote %s", args.output)
    else:
        print(text)
    return 0


if __name__ == "__main__":
    sys.exit(main())
