from core.views import RecordViewSet

from . import services
from .serializers import AssetSerializer, IncidentSerializer, VulnerabilitySerializer


class AssetViewSet(RecordViewSet):
    serializer_class = AssetSerializer
    create_operation = staticmethod(services.create_asset)
    list_operation = staticmethod(services.get_assets)


class VulnerabilityViewSet(RecordViewSet):
    serializer_class = VulnerabilitySerializer
    create_operation = staticmethod(services.create_vulnerability)
    list_operation = staticmethod(services.get_vulnerabilities)


class IncidentViewSet(RecordViewSet):
    serializer_class = IncidentSerializer
    create_operation = staticmethod(services.create_incident)
    list_operation = staticmethod(services.get_incidents)
