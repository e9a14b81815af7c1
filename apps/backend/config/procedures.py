from asset import services as asset_services
from asset.serializers import AssetSerializer, IncidentSerializer, VulnerabilitySerializer
from core.views import Procedure, healthcheck_payload
from governance import services as governance_services
from governance.serializers import AuditFindingSerializer, ControlSerializer, PolicySerializer
from risk import services as risk_services
from risk.serializers import RiskSerializer

PROCEDURES = {
    "healthcheck": Procedure("GET", healthcheck_payload),
    "createPolicy": Procedure("POST", governance_services.create_policy, PolicySerializer),
    "getPolicies": Procedure("GET", governance_services.get_policies, PolicySerializer),
    "createControl": Procedure("POST", governance_services.create_control, ControlSerializer),
    "getControls": Procedure("GET", governance_services.get_controls, ControlSerializer),
    "createRisk": Procedure("POST", risk_services.create_risk, RiskSerializer),
    "getRisks": Procedure("GET", risk_services.get_risks, RiskSerializer),
    "createAsset": Procedure("POST", asset_services.create_asset, AssetSerializer),
    "getAssets": Procedure("GET", asset_services.get_assets, AssetSerializer),
    "createVulnerability": Procedure("POST", asset_services.create_vulnerability, VulnerabilitySerializer),
    "getVulnerabilities": Procedure("GET", asset_services.get_vulnerabilities, VulnerabilitySerializer),
    "createIncident": Procedure("POST", asset_services.create_incident, IncidentSerializer),
    "getIncidents": Procedure("GET", asset_services.get_incidents, IncidentSerializer),
    "createAuditFinding": Procedure("POST", governance_services.create_audit_finding, AuditFindingSerializer),
    "getAuditFindings": Procedure("GET", governance_services.get_audit_findings, AuditFindingSerializer),
}
