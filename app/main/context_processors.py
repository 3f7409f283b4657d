"""
Custom context processors for the main app.
"""
from django.conf import settings


def site_info(request):
    """
    Add site and contact details to the template context.
    """
    return {
        'SITE_NAME': getattr(settings, 'SITE_NAME', 'Beart India'),
        'CONTACT_EMAIL': getattr(settings, 'CONTACT_EMAIL', 'info@beartindia.com'),
        'CONTACT_PHONE': getattr(settings, 'CONTACT_PHONE_DISPLAY', settings.CONTACT_PHONE_NUMBER),
        'DEBUG': settings.DEBUG,
        'GOOGLE_ANALYTICS_ID': getattr(settings, 'GOOGLE_ANALYTICS_ID', None),
    }
