"""
Settings used by the pytest suite.
"""
from .base import *

SECRET_KEY = 'django-insecure-test-key'

DEBUG = False

ALLOWED_HOSTS = ['testserver', 'localhost']

CACHES = {
    'default': {
        'BACKEND': 'django.core.cache.backends.locmem.LocMemCache',
        'LOCATION': 'beart-tests',
    }
}

EMAIL_BACKEND = 'django.core.mail.backends.locmem.EmailBackend'

CONTACT_SUBMISSION_HANDLER = 'contact.handlers.send_contact_email'
CONTACT_ENFORCE_SUBJECT_CATALOG = False

LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'handlers': {
        'null': {
            'class': 'logging.NullHandler',
        },
    },
    'root': {
        'handlers': ['null'],
        'level': 'DEBUG',
    },
}
