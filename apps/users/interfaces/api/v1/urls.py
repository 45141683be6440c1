"""
Users API v1 URLs.
"""
from django.urls import path
from rest_framework_simplejwt.views import TokenRefreshView

from .views import (
    SignupView,
    LoginView,
    UserMeView,
    UserRegisteredEventsView,
)

urlpatterns = [
    # Auth
    path('signup/', SignupView.as_view(), name='user-signup'),
    path('login/', LoginView.as_view(), name='user-login'),
    path('token/refresh/', TokenRefreshView.as_view(), name='token-refresh'),

    # User
    path('me/', UserMeView.as_view(), name='user-me'),
    path('me/registrations/', UserRegisteredEventsView.as_view(), name='user-registrations'),
]
