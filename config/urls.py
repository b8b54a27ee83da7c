"""
URL configuration for the citizen registry service.
"""

from django.contrib import admin
from django.urls import path, include
from registry.api.health import health_check, readiness_check

urlpatterns = [
    path("admin/", admin.site.urls),
    path("api/", include("registry.api.urls")),
    path("health", health_check, name="health_check"),
    path("api/ready/", readiness_check, name="readiness_check"),
]
