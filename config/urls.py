"""
Root URL configuration.
"""
from django.urls import include, path
from drf_spectacular.views import SpectacularAPIView

from shared.interfaces.health_views import HealthCheckView, LivenessCheckView, ReadinessCheckView

urlpatterns = [
    path('health/', HealthCheckView.as_view(), name='health'),
    path('health/live/', LivenessCheckView.as_view(), name='health-live'),
    path('health/ready/', ReadinessCheckView.as_view(), name='health-ready'),
    path('api/schema/', SpectacularAPIView.as_view(), name='schema'),
    path('api/v1/catalog/', include('apps.catalog.interfaces.api.v1.urls')),
    path('api/v1/orders/', include('apps.orders.interfaces.api.v1.urls')),
]
