"""
Registrations API v1 URLs.
"""
from django.urls import path

from .views import EventRegistrationView

urlpatterns = [
    path('<str:event_id>/registrations/', EventRegistrationView.as_view(), name='event-registrations'),
]
