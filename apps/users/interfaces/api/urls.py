"""
Users API URLs, mounting the current version.
"""
from django.urls import path, include

urlpatterns = [
    path('', include('apps.users.interfaces.api.v1.urls')),
]
