"""
Test settings.
"""
from .base import *  # noqa: F401,F403

DEBUG = False
ALLOWED_HOSTS = ['testserver', 'localhost']

DATABASES = {
    'default': {
        'ENGINE': 'django.db.backends.sqlite3',
        'NAME': ':memory:',
    }
}

CACHES = {
    'default': {
        'BACKEND': 'django.core.cache.backends.locmem.LocMemCache',
        'LOCATION': 'storefront-tests',
    }
}

CATALOG_API_URL = 'http://catalog.test/api'
CATALOG_CACHE_TIMEOUT = 0
CATALOG_FALLBACK_PATH = ''
CHECKOUT_WHATSAPP_NUMBER = '9647772270005'
