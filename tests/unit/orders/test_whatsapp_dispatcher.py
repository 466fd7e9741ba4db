"""
WhatsApp dispatcher tests.
"""
from urllib.parse import parse_qs, urlparse

import pytest

from apps.orders.domain.exceptions import InvalidDestinationError
from apps.orders.infrastructure.dispatchers.whatsapp_dispatcher import WhatsAppDispatcher


def test_builds_click_to_chat_link():
    message = "🍵 *Dr.Coffee Order*\n\n1. *Latte* (medium)\n*Total: 3,500 IQD*"

    receipt = WhatsAppDispatcher().dispatch(message, '+964 777 227-0005')

    assert receipt.channel == 'whatsapp'
    assert receipt.destination == '9647772270005'
    parsed = urlparse(receipt.url)
    assert f'{parsed.scheme}://{parsed.netloc}{parsed.path}' == 'https://wa.me/9647772270005'
    assert parse_qs(parsed.query)['text'] == [message]


def test_encodes_like_encode_uri_component():
    receipt = WhatsAppDispatcher().dispatch("a b&c=d!(x)*'~", '123')
    assert receipt.url.endswith("?text=a%20b%26c%3Dd!(x)*'~")


@pytest.mark.parametrize('destination', ['', 'not-a-number', '+'])
def test_rejects_invalid_destination(destination):
    with pytest.raises(InvalidDestinationError):
        WhatsAppDispatcher().dispatch('hi', destination)
