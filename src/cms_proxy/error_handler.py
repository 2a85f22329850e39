"""Error types and handling helpers for the collection proxy."""
from typing import Dict, List
import logging

logger = logging.getLogger(__name__)


class UpstreamHTTPError(RuntimeError):
    """A page request to the CMS API returned a non-2xx status."""

    def __init__(self, status_code: int, body: str = "") -> None:
        super().__init__(f"Webflow API {status_code}: {body}")
        self.status_code = status_code
        self.body = body


class ConfigurationError(RuntimeError):
    """Required credentials or collection identifiers are not configured."""

    def __init__(self, missing: List[str]) -> None:
        super().__init__(f"Missing configuration: {', '.join(missing)}")
        self.missing = list(missing)


MISSING_CREDENTIALS_MESSAGE = "Missing API credentials"


class ErrorHandler:
    def handle_exception(self, exc: Exception, resource: str) -> Dict[str, str]:
        if isinstance(exc, ConfigurationError):
            logger.error("Cannot serve %s: %s", resource, exc)
            return {"error": MISSING_CREDENTIALS_MESSAGE}

        logger.error("Error fetching %s: %s", resource, exc, exc_info=True)
        return {"error": f"Failed to fetch {resource}"}
