import logging

from django.shortcuts import render
from django.template import TemplateDoesNotExist
from django.template.loader import render_to_string
from django.views.decorators.csrf import requires_csrf_token
from django.views.defaults import ERROR_500_TEMPLATE_NAME
from django.http import HttpResponseServerError

logger = logging.getLogger(__name__)


def _error_page(request, status, template=None):
    template = template or f'main/errors/{status}.html'
    return render(request, template, status=status)


def custom_400(request, exception=None):
    logger.warning(f"Bad request to {request.path}: {exception}")
    return _error_page(request, 400)


def custom_403(request, exception=None):
    return _error_page(request, 403)


def custom_404(request, exception=None):
    return _error_page(request, 404)


@requires_csrf_token
def custom_500(request):
    """
    Server error page. Falls back to Django's stock template if ours is missing.
    """
    try:
        return _error_page(request, 500)
    except TemplateDoesNotExist:
        return HttpResponseServerError(
            render_to_string(ERROR_500_TEMPLATE_NAME),
            content_type='text/html'
        )


@requires_csrf_token
def csrf_failure(request, reason=""):
    """
    Shown when a contact form post arrives with a missing or stale CSRF token,
    usually because the session expired while the page sat open.
    """
    logger.info(f"CSRF failure on {request.path}: {reason}")
    return _error_page(request, 403, template='main/errors/403_csrf.html')
