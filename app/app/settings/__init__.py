import os
from .base import *  # noqa

# DJANGO_ENV picks the environment module layered over base; anything
# other than production or local gets the development settings.
_env = os.getenv('DJANGO_ENV', 'development')

if _env == 'production':
    from .production import *  # noqa
elif _env == 'local':
    from .local import *  # noqa
else:
    from .development import *  # noqa
