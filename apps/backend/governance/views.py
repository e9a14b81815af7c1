from core.views import RecordViewSet

from . import services
from .serializers import AuditFindingSerializer, ControlSerializer, PolicySerializer


class PolicyViewSet(RecordViewSet):
    serializer_class = PolicySerializer
    create_operation = staticmethod(services.create_policy)
    list_operation = staticmethod(services.get_policies)


class ControlViewSet(RecordViewSet):
    serializer_class = ControlSerializer
    create_operation = staticmethod(services.create_control)
    list_operation = staticmethod(services.get_controls)


class AuditFindingViewSet(RecordViewSet):
    serializer_class = AuditFindingSerializer
    create_operation = staticmethod(services.create_audit_finding)
    list_operation = staticmethod(services.get_audit_findings)
