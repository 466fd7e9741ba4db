"""
Liveness and readiness probes for the storefront API.
"""
import logging

from django.conf import settings
from django.contrib.sessions.backends.cache import SessionStore
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import APIView

from apps.catalog.infrastructure.providers import get_catalog_provider

logger = logging.getLogger(__name__)

PROBE_KEY = 'health:probe'


class HealthCheckView(APIView):
    def get(self, request):
        return Response({'status': 'healthy'})


class LivenessCheckView(APIView):
    def get(self, request):
        return Response({'status': 'alive'})


class ReadinessCheckView(APIView):
    """Ready once carts can be stored and the menu can be read."""

    def get(self, request):
        checks = {
            'sessions': self._probe(self._check_sessions),
            'catalog': self._probe(self._check_catalog),
            'checkout': self._check_checkout(),
        }
        ready = all(check['healthy'] for check in checks.values())
        return Response(
            {'status': 'ready' if ready else 'not_ready', 'checks': checks},
            status=status.HTTP_200_OK if ready else status.HTTP_503_SERVICE_UNAVAILABLE,
        )

    @staticmethod
    def _probe(check):
        try:
            return check()
        except Exception as e:
            logger.warning(f"Readiness check {check.__name__} failed: {e}")
            return {'healthy': False, 'error': str(e)}

    @staticmethod
    def _check_sessions():
        store = SessionStore()
        store[PROBE_KEY] = 'ok'
        store.save()
        try:
            healthy = SessionStore(session_key=store.session_key).get(PROBE_KEY) == 'ok'
        finally:
            store.delete()
        return {'healthy': healthy}

    @staticmethod
    def _check_catalog():
        products = get_catalog_provider().list_products()
        return {'healthy': True, 'products': len(products)}

    @staticmethod
    def _check_checkout():
        if settings.CHECKOUT_WHATSAPP_NUMBER:
            return {'healthy': True, 'channel': 'whatsapp'}
        return {'healthy': False, 'error': 'CHECKOUT_WHATSAPP_NUMBER is not set'}
