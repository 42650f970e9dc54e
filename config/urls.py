"""
Root URL configuration.
"""
from django.contrib import admin
from django.urls import path, include
from drf_spectacular.views import SpectacularAPIView, SpectacularSwaggerView

from shared.interfaces.health_views import HealthCheckView, ReadinessCheckView

urlpatterns = [
    path('admin/', admin.site.urls),

    # Health
    path('health/', HealthCheckView.as_view(), name='health'),
    path('health/ready/', ReadinessCheckView.as_view(), name='health-ready'),

    # API
    path('api/auth/', include('modules.users.urls')),
    path('api/categories/', include('modules.categories.urls')),
    path('api/products/', include('modules.products.urls')),
    path('api/orders/', include('modules.orders.urls')),

    # Docs
    path('api/schema/', SpectacularAPIView.as_view(), name='schema'),
    path('api/docs/', SpectacularSwaggerView.as_view(url_name='schema'), name='swagger-ui'),
]
