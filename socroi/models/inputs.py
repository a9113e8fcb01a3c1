"""The input record every calculation starts from.

Attribute names are snake_case; the camelCase names used by the browser
calculator (and by persisted state) are accepted as aliases.
"""

from __future__ import annotations

from typing import Union

from pydantic import BaseModel, ConfigDict, Field

from .enums import InputField


class InputRecord(BaseModel):
    """Immutable snapshot of all calculator inputs, base and derived."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    # Company size
    employee_count: float = Field(default=500, alias="employeeCount")

    # Security metrics
    security_incidents_per_month: int = Field(
        default=2400, alias="securityIncidentsPerMonth"
    )
    average_incident_response_time: float = Field(
        default=4.0, alias="averageIncidentResponseTime", description="Hours"
    )
    false_positive_rate: float = Field(
        default=30.0, alias="falsePositiveRate", description="Percentage, 0-100"
    )

    # Autonomous SOC pricing
    price_per_security_incident: float = Field(
        default=10.0, alias="pricePerSecurityIncident"
    )

    # Human SOC staffing
    human_soc_analysts: int = Field(default=3, alias="humanSOCAnalysts")
    human_soc_manager: int = Field(default=1, alias="humanSOCManager")
    human_soc_engineer: int = Field(default=1, alias="humanSOCEngineer")
    human_soc_director: int = Field(default=1, alias="humanSOCDirector")

    # Platform / log volume
    legacy_siem_price_per_gb: float = Field(default=3.0, alias="legacySIEMPricePerGB")
    stellar_xdr_cost_per_gb: float = Field(default=2.0, alias="stellarXDRCostPerGB")
    switch_from_legacy_siem: bool = Field(
        default=False,
        alias="switchFromLegacySIEM",
        description="Reserved; not read by any formula",
    )
    log_volume_incident_ratio: float = Field(
        default=1.5, alias="logVolumeIncidentRatio", description="GB per incident"
    )
    monthly_log_volume_gb: int = Field(default=3600, alias="monthlyLogVolumeGB")
    stellar_xdr_platform_costs: float = Field(
        default=86_400.0, alias="stellarXDRPlatformCosts"
    )
    siem_licensing_costs: float = Field(default=129_600.0, alias="siemLicensingCosts")


DEFAULT_INPUTS = InputRecord()

# Fields the user controls directly. Everything else is regenerated from these.
BASE_FIELDS: tuple[InputField, ...] = (
    InputField.EMPLOYEE_COUNT,
    InputField.AVERAGE_INCIDENT_RESPONSE_TIME,
    InputField.FALSE_POSITIVE_RATE,
    InputField.PRICE_PER_SECURITY_INCIDENT,
    InputField.LEGACY_SIEM_PRICE_PER_GB,
    InputField.STELLAR_XDR_COST_PER_GB,
    InputField.SWITCH_FROM_LEGACY_SIEM,
    InputField.LOG_VOLUME_INCIDENT_RATIO,
)

DERIVED_FIELDS: tuple[InputField, ...] = tuple(
    f for f in InputField if f not in BASE_FIELDS
)


def _build_lookup() -> dict[str, InputField]:
    lookup: dict[str, InputField] = {}
    for name, info in InputRecord.model_fields.items():
        field = InputField(name)
        lookup[name] = field
        if info.alias:
            lookup[info.alias] = field
    return lookup


_FIELD_LOOKUP = _build_lookup()


def resolve_field(name: Union[InputField, str]) -> InputField:
    """Map an InputField, attribute name or camelCase alias to an InputField."""
    if isinstance(name, InputField):
        return name
    try:
        return _FIELD_LOOKUP[name]
    except KeyError:
        raise ValueError(f"Unknown input field: {name!r}") from None


def field_alias(field: InputField) -> str:
    """Return the camelCase alias for a field."""
    return InputRecord.model_fields[field.value].alias or field.value
