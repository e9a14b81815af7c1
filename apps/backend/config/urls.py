from django.contrib import admin
from django.urls import include, path

from core.views import ProcedureCallView, healthcheck

from .procedures import PROCEDURES

urlpatterns = [
    path("admin/", admin.site.urls),
    path("healthz", healthcheck, name="healthcheck"),
    path("api/v1/", include("config.api_urls")),
    path("api/rpc/<str:procedure_name>", ProcedureCallView.as_view(procedures=PROCEDURES), name="procedure-call"),
]
