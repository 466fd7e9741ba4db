"""
Base Django settings for the storefront service.
"""
import os
from pathlib import Path

from dotenv import load_dotenv

BASE_DIR = Path(__file__).resolve().parents[2]
load_dotenv(BASE_DIR / '.env')


def env_bool(name: str, default: bool = False) -> bool:
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in ('1', 'true', 'yes', 'on')


SECRET_KEY = os.environ.get('DJANGO_SECRET_KEY', 'insecure-development-key')
DEBUG = env_bool('DJANGO_DEBUG', False)
ALLOWED_HOSTS = [host for host in os.environ.get('DJANGO_ALLOWED_HOSTS', 'localhost,127.0.0.1').split(',') if host]

INSTALLED_APPS = [
    'django.contrib.contenttypes',
    'django.contrib.auth',
    'django.contrib.sessions',
    'rest_framework',
    'drf_spectacular',
    'apps.catalog',
    'apps.orders',
]

MIDDLEWARE = [
    'django.middleware.security.SecurityMiddleware',
    'django.contrib.sessions.middleware.SessionMiddleware',
    'django.middleware.common.CommonMiddleware',
]

ROOT_URLCONF = 'config.urls'
WSGI_APPLICATION = 'config.wsgi.application'

# The cart lives in the session; the catalog lives behind the REST backend.
DATABASES = {
    'default': {
        'ENGINE': 'django.db.backends.sqlite3',
        'NAME': BASE_DIR / 'db.sqlite3',
    }
}

REDIS_URL = os.environ.get('REDIS_URL', 'redis://localhost:6379/0')

CACHES = {
    'default': {
        'BACKEND': 'django.core.cache.backends.redis.RedisCache',
        'LOCATION': REDIS_URL,
    }
}

SESSION_ENGINE = 'django.contrib.sessions.backends.cache'
SESSION_COOKIE_AGE = int(os.environ.get('SESSION_COOKIE_AGE', 60 * 60 * 24 * 7))

LANGUAGE_CODE = 'en-us'
TIME_ZONE = 'Asia/Baghdad'
USE_I18N = True
USE_TZ = True

REST_FRAMEWORK = {
    'DEFAULT_AUTHENTICATION_CLASSES': [],
    'DEFAULT_PERMISSION_CLASSES': ['rest_framework.permissions.AllowAny'],
    'UNAUTHENTICATED_USER': None,
    'DEFAULT_SCHEMA_CLASS': 'drf_spectacular.openapi.AutoSchema',
    'EXCEPTION_HANDLER': 'shared.interfaces.custom_exception_handler',
}

SPECTACULAR_SETTINGS = {
    'TITLE': 'Coffee Storefront API',
    'DESCRIPTION': 'Menu browsing, cart and messaging checkout for the coffee storefront.',
    'VERSION': '1.0.0',
}

# Catalog backend
CATALOG_API_URL = os.environ.get('CATALOG_API_URL', 'https://localhost:7022/api')
CATALOG_API_TIMEOUT = float(os.environ.get('CATALOG_API_TIMEOUT', 30))
CATALOG_CACHE_TIMEOUT = int(os.environ.get('CATALOG_CACHE_TIMEOUT', 60))
CATALOG_FALLBACK_PATH = os.environ.get(
    'CATALOG_FALLBACK_PATH',
    str(BASE_DIR / 'apps' / 'catalog' / 'fixtures' / 'menu.json'),
)

# Storefront
STOREFRONT_CURRENCY = os.environ.get('STOREFRONT_CURRENCY', 'IQD')
STOREFRONT_BRAND_NAME = os.environ.get('STOREFRONT_BRAND_NAME', 'Dr.Coffee')
CHECKOUT_WHATSAPP_NUMBER = os.environ.get('CHECKOUT_WHATSAPP_NUMBER', '9647772270005')

LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')

LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'verbose': {
            'format': '%(asctime)s | %(levelname)s | %(name)s | %(message)s',
        },
    },
    'handlers': {
        'console': {
            'class': 'logging.StreamHandler',
            'formatter': 'verbose',
        },
    },
    'root': {
        'handlers': ['console'],
        'level': LOG_LEVEL,
    },
    'loggers': {
        'django': {
            'handlers': ['console'],
            'level': 'WARNING',
            'propagate': False,
        },
    },
}
