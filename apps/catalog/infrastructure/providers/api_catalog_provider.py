"""
REST catalog provider.
"""
import logging
from typing import Any, Dict, List, Optional
from urllib.parse import quote

import requests
from django.conf import settings

from shared.infrastructure.cache.redis_cache import RedisCache
from ...domain.exceptions import CatalogUnavailableError
from .base_payload_provider import PayloadCatalogProvider

logger = logging.getLogger(__name__)


class ApiCatalogProvider(PayloadCatalogProvider):
    """Reads products and customization options from the storefront backend."""

    def __init__(
        self,
        base_url: str,
        timeout: float = 10,
        currency: str = "IQD",
        cache_timeout: int = 0,
        session: Optional[requests.Session] = None,
    ):
        super().__init__(currency=currency)
        self.base_url = base_url.rstrip('/')
        self.timeout = timeout
        self.cache_timeout = cache_timeout
        self.session = session or requests.Session()
        self.session.headers.update({'Content-Type': 'application/json'})
        self.cache = RedisCache(namespace="catalog", timeout=cache_timeout)

    @classmethod
    def from_settings(cls) -> 'ApiCatalogProvider':
        return cls(
            base_url=settings.CATALOG_API_URL,
            timeout=settings.CATALOG_API_TIMEOUT,
            currency=settings.STOREFRONT_CURRENCY,
            cache_timeout=settings.CATALOG_CACHE_TIMEOUT,
        )

    def _get(self, path: str) -> Any:
        url = f"{self.base_url}{path}"
        logger.info(f"Catalog GET {url}")
        try:
            response = self.session.get(url, timeout=self.timeout)
            response.raise_for_status()
            return response.json()
        except requests.RequestException as e:
            logger.error(f"Catalog request failed: GET {url}: {e}")
            raise CatalogUnavailableError(str(e)) from e
        except ValueError as e:
            logger.error(f"Catalog returned invalid JSON: GET {url}: {e}")
            raise CatalogUnavailableError(f"invalid JSON from {path}") from e

    def _cached_get(self, key: str, path: str) -> Any:
        return self.cache.fetch(key, lambda: self._get(path))

    def _product_payloads(self) -> List[Dict[str, Any]]:
        return self._cached_get("products", "/products") or []

    def _customization_payloads(self) -> List[Dict[str, Any]]:
        return self._cached_get("customization_options", "/customizationoptions") or []

    def _product_payload(self, code: str) -> Optional[Dict[str, Any]]:
        url = f"{self.base_url}/products/by-code/{quote(code, safe='')}"
        try:
            response = self.session.get(url, timeout=self.timeout)
            if response.ok:
                payload = response.json()
                if isinstance(payload, dict) and payload.get('productCode') == code:
                    return payload
                logger.warning(f"Ignoring by-code response for {code!r} that does not describe it")
        except (requests.RequestException, ValueError) as e:
            logger.warning(f"Product lookup by code failed for {code!r}, scanning product list: {e}")
        return super()._product_payload(code)
