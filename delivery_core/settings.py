"""
Django settings for the delivery dispatch service.

Values come from the environment, optionally seeded from an ``env_var.env``
file next to this package or in the project root.
"""
import os
import sys
from pathlib import Path

from route_optimizer.core.constants import (
    MAX_ORDERS_PER_DRIVER,
    BACKTRACK_RATIO,
    DEFAULT_GEO_SNAPSHOT_CACHE_TIMEOUT,
)
from route_optimizer.utils.env_loader import load_env_from_file, env_bool, env_int, env_float

BASE_DIR = Path(__file__).resolve().parent.parent

# Try different possible locations for the env file
for env_path in (BASE_DIR / 'delivery_core' / 'env_var.env', BASE_DIR / 'env_var.env'):
    if load_env_from_file(str(env_path)):
        break

# Determine if we're in test mode
TESTING = 'test' in sys.argv or 'pytest' in sys.modules

SECRET_KEY = os.getenv('DJANGO_SECRET_KEY', 'insecure-dev-key-change-me')
DEBUG = env_bool('DJANGO_DEBUG', False)
ALLOWED_HOSTS = [h.strip() for h in os.getenv('DJANGO_ALLOWED_HOSTS', 'localhost,127.0.0.1').split(',') if h.strip()]

INSTALLED_APPS = [
    'django.contrib.admin',
    'django.contrib.auth',
    'django.contrib.contenttypes',
    'django.contrib.sessions',
    'django.contrib.messages',
    'django.contrib.staticfiles',
    'rest_framework',
    'django_filters',
    'drf_yasg',
    'route_optimizer',
    'fleet',
    'orders',
    'assignment',
]

MIDDLEWARE = [
    'django.middleware.security.SecurityMiddleware',
    'django.contrib.sessions.middleware.SessionMiddleware',
    'django.middleware.common.CommonMiddleware',
    'django.middleware.csrf.CsrfViewMiddleware',
    'django.contrib.auth.middleware.AuthenticationMiddleware',
    'django.contrib.messages.middleware.MessageMiddleware',
    'django.middleware.clickjacking.XFrameOptionsMiddleware',
]

ROOT_URLCONF = 'delivery_core.urls'
WSGI_APPLICATION = 'delivery_core.wsgi.application'

TEMPLATES = [
    {
        'BACKEND': 'django.template.backends.django.DjangoTemplates',
        'DIRS': [],
        'APP_DIRS': True,
        'OPTIONS': {
            'context_processors': [
                'django.template.context_processors.debug',
                'django.template.context_processors.request',
                'django.contrib.auth.context_processors.auth',
                'django.contrib.messages.context_processors.messages',
            ],
        },
    },
]

DATABASES = {
    'default': {
        'ENGINE': 'django.db.backends.sqlite3',
        'NAME': os.getenv('DELIVERY_DB_PATH', str(BASE_DIR / 'delivery.db')),
    }
}

DEFAULT_AUTO_FIELD = 'django.db.models.BigAutoField'

LANGUAGE_CODE = 'en-us'
TIME_ZONE = 'UTC'
USE_I18N = True
USE_TZ = True

STATIC_URL = 'static/'

# The dashboard posts JSON without a session, so no authentication is enforced
REST_FRAMEWORK = {
    'DEFAULT_AUTHENTICATION_CLASSES': [],
    'DEFAULT_PERMISSION_CLASSES': ['rest_framework.permissions.AllowAny'],
    'DEFAULT_FILTER_BACKENDS': ['django_filters.rest_framework.DjangoFilterBackend'],
}

SWAGGER_SETTINGS = {
    'USE_SESSION_AUTH': False,
    'SECURITY_DEFINITIONS': {},
}

# Cache settings
# LocMemCache is per process. Run several workers against a shared backend,
# e.g. django.core.cache.backends.db.DatabaseCache or a Redis cache.
CACHES = {
    'default': {
        'BACKEND': os.getenv('DELIVERY_CACHE_BACKEND', 'django.core.cache.backends.locmem.LocMemCache'),
        'LOCATION': os.getenv('DELIVERY_CACHE_LOCATION', 'delivery-dispatch'),
    }
}
GEO_SNAPSHOT_CACHE_TIMEOUT = env_int('GEO_SNAPSHOT_CACHE_TIMEOUT', DEFAULT_GEO_SNAPSHOT_CACHE_TIMEOUT)

# Dispatch tuning
DISPATCH_MAX_ORDERS_PER_DRIVER = env_int('DISPATCH_MAX_ORDERS_PER_DRIVER', MAX_ORDERS_PER_DRIVER)
DISPATCH_BACKTRACK_RATIO = env_float('DISPATCH_BACKTRACK_RATIO', BACKTRACK_RATIO)

LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO').upper()

LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'verbose': {
            'format': '{asctime} {levelname} {name}: {message}',
            'style': '{',
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
        'level': 'WARNING',
    },
    'loggers': {
        'django': {
            'handlers': ['console'],
            'level': 'INFO',
            'propagate': False,
        },
        'route_optimizer': {
            'handlers': ['console'],
            'level': LOG_LEVEL,
            'propagate': False,
        },
        'fleet': {
            'handlers': ['console'],
            'level': LOG_LEVEL,
            'propagate': False,
        },
        'orders': {
            'handlers': ['console'],
            'level': LOG_LEVEL,
            'propagate': False,
        },
        'assignment': {
            'handlers': ['console'],
            'level': LOG_LEVEL,
            'propagate': False,
        },
    },
}
