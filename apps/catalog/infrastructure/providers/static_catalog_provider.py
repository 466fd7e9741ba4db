"""
Catalog provider over a bundled JSON menu.
"""
import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional

from django.conf import settings

from .base_payload_provider import PayloadCatalogProvider

logger = logging.getLogger(__name__)


class StaticCatalogProvider(PayloadCatalogProvider):
    """
    Serves a fixed menu document shaped like the backend's responses::

        {"products": [...], "customizationOptions": [...]}
    """

    def __init__(self, document: Dict[str, Any], currency: str = "IQD"):
        super().__init__(currency=currency)
        self.document = document

    @classmethod
    def from_file(cls, path, currency: Optional[str] = None) -> 'StaticCatalogProvider':
        path = Path(path)
        logger.info(f"Loading static menu from {path}")
        with path.open(encoding='utf-8') as fp:
            document = json.load(fp)
        return cls(document, currency=currency or settings.STOREFRONT_CURRENCY)

    def _product_payloads(self) -> List[Dict[str, Any]]:
        return self.document.get('products', [])

    def _customization_payloads(self) -> List[Dict[str, Any]]:
        return self.document.get('customizationOptions', [])
