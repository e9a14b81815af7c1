from core.views import RecordViewSet

from . import services
from .serializers import RiskSerializer


class RiskViewSet(RecordViewSet):
    serializer_class = RiskSerializer
    create_operation = staticmethod(services.create_risk)
    list_operation = staticmethod(services.get_risks)
