from django.conf import settings
from django.conf.urls.static import static
from django.contrib import admin
from django.urls import include, path

urlpatterns = [
    path("django-admin/", admin.site.urls),
    # admin panel
    path("admin/", include("accounts.urls")),
    path("admin/", include("winners.urls")),
    path("admin/", include("banking.urls")),
    path("admin/prizes/", include("prizes.urls")),
    # JSON API
    path("api/", include("api.urls")),
    # public site
    path("", include("public.urls")),
]

if settings.DEBUG:
    urlpatterns += static(settings.MEDIA_URL, document_root=settings.MEDIA_ROOT)
