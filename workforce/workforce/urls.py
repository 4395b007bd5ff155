"""
URL configuration for workforce project.

The `urlpatterns` list routes URLs to views. For more information please see:
    https://docs.djangoproject.com/en/5.2/topics/http/urls/
"""
# workforce/urls.py
from django.contrib import admin
from django.urls import path, include
from drf_spectacular.views import SpectacularAPIView, SpectacularSwaggerView

urlpatterns = [
    path("admin/", admin.site.urls),

    # OpenAPI
    path("api/schema", SpectacularAPIView.as_view(), name="schema"),
    path("api/docs", SpectacularSwaggerView.as_view(url_name="schema"), name="swagger-ui"),

    # /dept, /emp, /project
    path("", include("hr.urls")),
]

# route không khớp / lỗi ngoài DRF vẫn trả JSON
handler404 = "hr.views.error_view.page_not_found"
handler500 = "hr.views.error_view.server_error"
