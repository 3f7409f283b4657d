from django.urls import path
from . import views

urlpatterns = [
    # API root
    path('', views.api_root, name='api-root'),

    # Contact form submission for script-driven clients
    path('contact/submit/', views.ContactSubmitAPIView.as_view(), name='contact-submit'),
]
