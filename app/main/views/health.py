from django.http import JsonResponse
from django.views import View
from django.core.cache import cache
from django.core.exceptions import ImproperlyConfigured
import logging

from contact.submission import get_submission_handler

logger = logging.getLogger(__name__)


class HealthCheckView(View):
    """
    Health check endpoint for the website.
    Returns 200 if the cache (sessions, submission guard) and the contact
    submission handler are usable, 503 otherwise.
    """

    def get(self, request, *args, **kwargs):
        checks = {
            'cache': self.check_cache(),
            'submission_handler': self.check_submission_handler(),
        }

        status = 200 if all(checks.values()) else 503
        return JsonResponse({
            'status': 'healthy' if status == 200 else 'unhealthy',
            'checks': checks
        }, status=status)

    def check_cache(self):
        """Check if the cache is accessible."""
        try:
            cache.set('health_check', 'ok', 5)
            return cache.get('health_check') == 'ok'
        except Exception as e:
            logger.error(f"Cache health check failed: {str(e)}")
            return False

    def check_submission_handler(self):
        """Check that the configured contact submission handler imports."""
        try:
            return callable(get_submission_handler())
        except ImproperlyConfigured as e:
            logger.error(f"Submission handler health check failed: {str(e)}")
            return False
