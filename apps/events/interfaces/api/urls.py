"""
Events API URLs, mounting the current version.
"""
from django.urls import path, include

urlpatterns = [
    path('', include('apps.events.interfaces.api.v1.urls')),
]
