"""
URL configuration for the League Platform.
"""

from django.conf import settings
from django.conf.urls.static import static
from django.contrib import admin
from django.urls import include, path

urlpatterns = [
    path("admin/", admin.site.urls),
    path("api/auth/", include("users.urls")),
    path("api/", include("organizations.urls")),
    path("api/league/", include("league.urls")),
] + static(settings.MEDIA_URL, document_root=settings.MEDIA_ROOT)
