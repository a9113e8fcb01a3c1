"""Field derivation: keeps dependent input fields consistent after an edit.

Employee count and monthly incidents are linked both ways. Rather than
binding them to each other, recomputation is keyed on whichever field was
edited, so one edit always resolves in a single pass.
"""

from __future__ import annotations

import logging
import math
from typing import Any, Optional, Union

from socroi.assumptions.loader import get_default_assumptions
from socroi.assumptions.schema import AssumptionsConfig, DerivationConfig
from socroi.models.enums import InputField
from socroi.models.inputs import BASE_FIELDS, InputRecord, field_alias, resolve_field

logger = logging.getLogger(__name__)

MONTHS_PER_YEAR = 12


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from negative infinity."""
    return math.floor(value + 0.5)


def _platform_costs(
    monthly_log_volume_gb: float,
    stellar_xdr_cost_per_gb: float,
    legacy_siem_price_per_gb: float,
) -> dict[str, float]:
    return {
        InputField.STELLAR_XDR_PLATFORM_COSTS.value: (
            monthly_log_volume_gb * stellar_xdr_cost_per_gb * MONTHS_PER_YEAR
        ),
        InputField.SIEM_LICENSING_COSTS.value: (
            monthly_log_volume_gb * legacy_siem_price_per_gb * MONTHS_PER_YEAR
        ),
    }


def _cascade(
    incidents: float,
    record: InputRecord,
    rules: DerivationConfig,
) -> dict[str, Any]:
    """Staffing, log volume and platform costs for an incident count."""
    volume = round_half_up(incidents * record.log_volume_incident_ratio)
    update: dict[str, Any] = {
        InputField.HUMAN_SOC_ANALYSTS.value: math.ceil(
            incidents / rules.incidents_per_analyst
        ),
        InputField.HUMAN_SOC_MANAGER.value: math.ceil(
            incidents / rules.incidents_per_manager
        ),
        InputField.HUMAN_SOC_ENGINEER.value: math.ceil(
            incidents / rules.incidents_per_engineer
        ),
        InputField.HUMAN_SOC_DIRECTOR.value: math.ceil(
            incidents / rules.incidents_per_director
        ),
        InputField.MONTHLY_LOG_VOLUME_GB.value: volume,
    }
    update.update(
        _platform_costs(
            volume, record.stellar_xdr_cost_per_gb, record.legacy_siem_price_per_gb
        )
    )
    return update


def derive_fields(
    record: InputRecord,
    changed_field: Union[InputField, str],
    new_value: Any,
    assumptions: Optional[AssumptionsConfig] = None,
) -> InputRecord:
    """Apply a single edit and recompute every field that depends on it.

    The edited value is assigned as given, without validation. Fields with no
    dependents (including direct overrides of derived fields such as
    ``human_soc_analysts``) are assigned with no further recomputation.

    Returns a new record; ``record`` is left untouched.
    """
    field = resolve_field(changed_field)
    rules = (assumptions or get_default_assumptions()).derivation

    update: dict[str, Any] = {field.value: new_value}
    # Cascades read the edited value, not the stale one on ``record``.
    edited = record.model_copy(update={field.value: new_value})

    if field is InputField.EMPLOYEE_COUNT:
        incidents = round_half_up(new_value * rules.incident_ratio)
        update[InputField.SECURITY_INCIDENTS_PER_MONTH.value] = incidents
        update.update(_cascade(incidents, edited, rules))
    elif field is InputField.SECURITY_INCIDENTS_PER_MONTH:
        update[InputField.EMPLOYEE_COUNT.value] = round_half_up(
            new_value / rules.incident_ratio
        )
        update.update(_cascade(new_value, edited, rules))
    elif field is InputField.LOG_VOLUME_INCIDENT_RATIO:
        volume = round_half_up(record.security_incidents_per_month * new_value)
        update[InputField.MONTHLY_LOG_VOLUME_GB.value] = volume
        update.update(
            _platform_costs(
                volume, record.stellar_xdr_cost_per_gb, record.legacy_siem_price_per_gb
            )
        )
    elif field is InputField.STELLAR_XDR_COST_PER_GB:
        update[InputField.STELLAR_XDR_PLATFORM_COSTS.value] = (
            record.monthly_log_volume_gb * new_value * MONTHS_PER_YEAR
        )
    elif field is InputField.LEGACY_SIEM_PRICE_PER_GB:
        update[InputField.SIEM_LICENSING_COSTS.value] = (
            record.monthly_log_volume_gb * new_value * MONTHS_PER_YEAR
        )

    logger.debug(
        "Derived %d field(s) from %s=%r", len(update) - 1, field.value, new_value
    )
    return record.model_copy(update=update)


def calculate_computed_fields(
    record: InputRecord,
    assumptions: Optional[AssumptionsConfig] = None,
) -> InputRecord:
    """Regenerate every derived field from the record's employee count."""
    return derive_fields(
        record, InputField.EMPLOYEE_COUNT, record.employee_count, assumptions
    )


def base_fields(record: InputRecord) -> dict[str, Any]:
    """Return the user-controlled subset of ``record``, keyed by alias."""
    return {field_alias(f): getattr(record, f.value) for f in BASE_FIELDS}
