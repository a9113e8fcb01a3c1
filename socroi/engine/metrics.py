"""Human SOC vs. autonomous SOC financial comparison."""

from __future__ import annotations

import logging
from typing import Optional

from socroi.assumptions.loader import get_default_assumptions
from socroi.assumptions.schema import (
    AssumptionsConfig,
    EfficiencyModel,
    IncidentResponseModel,
    SalaryTable,
)
from socroi.engine.result import ResultRecord
from socroi.models.inputs import InputRecord

logger = logging.getLogger(__name__)

MONTHS_PER_YEAR = 12


def personnel_cost(record: InputRecord, salaries: SalaryTable) -> float:
    """Annual salary cost of the human SOC team."""
    return (
        record.human_soc_analysts * salaries.analyst
        + record.human_soc_manager * salaries.manager
        + record.human_soc_engineer * salaries.engineer
        + record.human_soc_director * salaries.director
    )


def efficiency_improvement(record: InputRecord, model: EfficiencyModel) -> float:
    """Percentage of human effort the autonomous SOC takes over, capped."""
    excess_volume = max(0, record.monthly_log_volume_gb - model.log_volume_threshold_gb)
    total = (
        model.base
        + model.false_positive.apply(record.false_positive_rate)
        + model.response_time.apply(record.average_incident_response_time)
        + model.log_volume.apply(excess_volume)
    )
    return min(model.ceiling, total)


def incident_response_improvement(
    record: InputRecord, model: IncidentResponseModel
) -> float:
    """Percentage reduction in incident response time, capped."""
    total = (
        model.base
        + model.response_time.apply(record.average_incident_response_time)
        + model.false_positive.apply(record.false_positive_rate)
    )
    return min(model.ceiling, total)


def compute_results(
    record: InputRecord,
    assumptions: Optional[AssumptionsConfig] = None,
) -> ResultRecord:
    """Compute the annual cost comparison for a fully derived input record."""
    assumptions = assumptions or get_default_assumptions()

    personnel = personnel_cost(record, assumptions.salaries)
    human_total = personnel + record.siem_licensing_costs

    autonomous_total = (
        record.security_incidents_per_month
        * record.price_per_security_incident
        * MONTHS_PER_YEAR
    )

    efficiency = efficiency_improvement(record, assumptions.efficiency)
    response = incident_response_improvement(record, assumptions.incident_response)

    # Residual human effort once automation absorbs the efficiency gain
    adjusted = human_total * (1 - efficiency / 100)
    platform_savings = record.siem_licensing_costs - record.stellar_xdr_platform_costs
    annual_savings = human_total - (adjusted + autonomous_total) + platform_savings

    if autonomous_total == 0:
        roi = 0.0
    else:
        roi = annual_savings / autonomous_total * 100

    logger.debug(
        "Results: human=%.2f autonomous=%.2f savings=%.2f roi=%.2f%%",
        human_total,
        autonomous_total,
        annual_savings,
        roi,
    )

    return ResultRecord(
        human_soc_personnel_cost=personnel,
        human_soc_total_cost=human_total,
        autonomous_soc_total_cost=autonomous_total,
        adjusted_annual_soc_cost=adjusted,
        platform_savings=platform_savings,
        annual_savings=annual_savings,
        roi_percentage=roi,
        # No setup cost in this model, so payback is immediate.
        payback_period=0.0,
        efficiency_improvement=efficiency,
        incident_response_improvement=response,
    )
