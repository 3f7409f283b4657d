# Error handlers are referenced by dotted path from app/urls.py
from .views import (
    custom_400,
    custom_403,
    custom_404,
    custom_500,
    csrf_failure
)
from .health import HealthCheckView

__all__ = [
    'custom_400',
    'custom_403',
    'custom_404',
    'custom_500',
    'csrf_failure',
    'HealthCheckView',
]
