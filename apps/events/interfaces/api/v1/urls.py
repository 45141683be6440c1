"""
Events API v1 URLs.
"""
from django.urls import path

from .views import EventDetailView

urlpatterns = [
    path('<str:event_id>/', EventDetailView.as_view(), name='event-detail'),
]
