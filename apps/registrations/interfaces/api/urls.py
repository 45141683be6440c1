"""
Registrations API URLs, mounting the current version.
"""
from django.urls import path, include

urlpatterns = [
    path('', include('apps.registrations.interfaces.api.v1.urls')),
]
