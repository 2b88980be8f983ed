import os
import tempfile

from delivery_core.settings import *  # noqa: F401,F403

SECRET_KEY = 'dummy-secret-key-for-testing-delivery-dispatch'
DEBUG = False  # Tests should generally run with DEBUG=False unless specifically testing debug features
TESTING = True

ALLOWED_HOSTS = ['testserver', 'localhost', '127.0.0.1']  # 'testserver' is used by Django's test client

# File-backed so that threaded tests get their own connections to one database
DATABASES = {
    'default': {
        'ENGINE': 'django.db.backends.sqlite3',
        'NAME': os.path.join(tempfile.gettempdir(), 'delivery_dispatch.db'),
        'TEST': {
            'NAME': os.path.join(tempfile.gettempdir(), 'test_delivery_dispatch.db'),
        },
    }
}

# Every snapshot is rebuilt from the database
CACHES = {
    'default': {
        'BACKEND': 'django.core.cache.backends.dummy.DummyCache',
    }
}
GEO_SNAPSHOT_CACHE_TIMEOUT = 60

DISPATCH_MAX_ORDERS_PER_DRIVER = 3
DISPATCH_BACKTRACK_RATIO = 1.5

LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'handlers': {
        'console': {
            'class': 'logging.StreamHandler',
        },
    },
    'root': {
        'handlers': ['console'],
        'level': 'WARNING',
    },
}
