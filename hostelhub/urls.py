from django.conf import settings
from django.conf.urls.static import static
from django.contrib import admin
from django.urls import include, path

urlpatterns = [
    path("django-admin/", admin.site.urls),
    path("panel/", include("accounts.admin_panel_urls")),
    path("", include("accounts.urls")),
    path("", include("hostels.urls")),
    path("", include("bookings.urls")),
    path("", include("siteconfig.urls")),
]

if settings.DEBUG:
    urlpatterns += static(settings.MEDIA_URL, document_root=settings.MEDIA_ROOT)
