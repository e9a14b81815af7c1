from django.urls import include, path
from rest_framework.routers import DefaultRouter

from asset.views import AssetViewSet, IncidentViewSet, VulnerabilityViewSet
from governance.views import AuditFindingViewSet, ControlViewSet, PolicyViewSet
from risk.views import RiskViewSet

router = DefaultRouter()
router.register(r"policies", PolicyViewSet, basename="policy")
router.register(r"controls", ControlViewSet, basename="control")
router.register(r"risks", RiskViewSet, basename="risk")
router.register(r"assets", AssetViewSet, basename="asset")
router.register(r"vulnerabilities", VulnerabilityViewSet, basename="vulnerability")
router.register(r"incidents", IncidentViewSet, basename="incident")
router.register(r"audit-findings", AuditFindingViewSet, basename="audit-finding")

urlpatterns = [
    path("", include(router.urls)),
]
