"""
URL configuration for the Beart website.

The `urlpatterns` list routes URLs to views. For more information please see:
    https://docs.djangoproject.com/en/5.0/topics/http/urls/
"""
from django.urls import path, include
from django.views.generic import RedirectView

from main.views.health import HealthCheckView

urlpatterns = [
    # Health check
    path('health/', HealthCheckView.as_view(), name='health_check'),

    # The contact page is the only page this project serves
    path('', RedirectView.as_view(pattern_name='contact:contact', permanent=False), name='home'),
    path('contact/', include('contact.urls', namespace='contact')),

    # JSON endpoints
    path('api/', include('api.urls')),
]

# Custom error handlers
handler400 = 'main.views.custom_400'
handler403 = 'main.views.custom_403'
handler404 = 'main.views.custom_404'
handler500 = 'main.views.custom_500'
