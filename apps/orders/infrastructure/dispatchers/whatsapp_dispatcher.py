"""
WhatsApp click-to-chat checkout dispatcher.
"""
import logging
import re
from urllib.parse import quote

from ...domain.exceptions import InvalidDestinationError
from ...domain.services.checkout_dispatcher import CheckoutDispatcher, DispatchReceipt

logger = logging.getLogger(__name__)

WHATSAPP_BASE_URL = "https://wa.me"

# Characters encodeURIComponent leaves as they are.
URI_COMPONENT_SAFE = "!~*'()"


class WhatsAppDispatcher(CheckoutDispatcher):
    """Turns the order message into a wa.me deep link for the customer to open."""

    channel = "whatsapp"

    def __init__(self, base_url: str = WHATSAPP_BASE_URL):
        self.base_url = base_url.rstrip('/')

    @staticmethod
    def _normalize(destination: str) -> str:
        number = re.sub(r'[\s\-()]', '', destination or '').lstrip('+')
        if not number.isdigit():
            raise InvalidDestinationError(destination)
        return number

    def dispatch(self, message: str, destination: str) -> DispatchReceipt:
        number = self._normalize(destination)
        url = f"{self.base_url}/{number}?text={quote(message, safe=URI_COMPONENT_SAFE)}"
        logger.info(f"Order message handed to WhatsApp for {number} ({len(message)} chars)")
        return DispatchReceipt(channel=self.channel, destination=number, url=url)
