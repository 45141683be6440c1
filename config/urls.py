"""
Root URL configuration.
"""
from django.contrib import admin
from django.urls import path, include
from drf_spectacular.views import SpectacularAPIView, SpectacularSwaggerView

from shared.interfaces.health_views import LivenessCheckView, ReadinessCheckView

urlpatterns = [
    path('admin/', admin.site.urls),

    # API
    path('api/v1/users/', include('apps.users.interfaces.api.urls')),
    path('api/v1/events/', include('apps.events.interfaces.api.urls')),
    path('api/v1/events/', include('apps.registrations.interfaces.api.urls')),

    # Schema
    path('api/schema/', SpectacularAPIView.as_view(), name='schema'),
    path('api/docs/', SpectacularSwaggerView.as_view(url_name='schema'), name='swagger-ui'),

    # Health
    path('health/live/', LivenessCheckView.as_view(), name='health-live'),
    path('health/ready/', ReadinessCheckView.as_view(), name='health-ready'),
]
