from enum import Enum


class InputField(str, Enum):
    EMPLOYEE_COUNT = "employee_count"
    SECURITY_INCIDENTS_PER_MONTH = "security_incidents_per_month"
    AVERAGE_INCIDENT_RESPONSE_TIME = "average_incident_response_time"
    FALSE_POSITIVE_RATE = "false_positive_rate"
    PRICE_PER_SECURITY_INCIDENT = "price_per_security_incident"
    HUMAN_SOC_ANALYSTS = "human_soc_analysts"
    HUMAN_SOC_MANAGER = "human_soc_manager"
    HUMAN_SOC_ENGINEER = "human_soc_engineer"
    HUMAN_SOC_DIRECTOR = "human_soc_director"
    LEGACY_SIEM_PRICE_PER_GB = "legacy_siem_price_per_gb"
    STELLAR_XDR_COST_PER_GB = "stellar_xdr_cost_per_gb"
    SWITCH_FROM_LEGACY_SIEM = "switch_from_legacy_siem"
    LOG_VOLUME_INCIDENT_RATIO = "log_volume_incident_ratio"
    MONTHLY_LOG_VOLUME_GB = "monthly_log_volume_gb"
    STELLAR_XDR_PLATFORM_COSTS = "stellar_xdr_platform_costs"
    SIEM_LICENSING_COSTS = "siem_licensing_costs"


class ViewMode(str, Enum):
    DARK = "dark"
    LIGHT = "light"
