"""Value-category formulas: annual value created beyond direct cost savings.

Each function is a pure calculation over the derived input record and the
assumptions config. Results are clamped at zero, so a category never
subtracts from the total.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from socroi.models.inputs import InputRecord
from socroi.value_library.registry import register_value_category

if TYPE_CHECKING:
    from socroi.assumptions.schema import AssumptionsConfig

MONTHS_PER_YEAR = 12


@register_value_category(
    category_id="false_positive_reduction",
    label="False Positive Reduction",
    description="Reduced analyst burnout and wasted time",
)
def calc_false_positive_reduction(
    record: InputRecord, assumptions: AssumptionsConfig
) -> float:
    """FP_Value = (current_fp - target_fp) * incidents/yr * hours_per_fp * hourly_rate"""
    v = assumptions.value
    yearly_incidents = record.security_incidents_per_month * MONTHS_PER_YEAR
    current = yearly_incidents * (record.false_positive_rate / 100)
    reduced = yearly_incidents * (v.target_false_positive_rate / 100)
    value = (
        (current - reduced)
        * v.hours_per_false_positive
        * assumptions.analyst_hourly_rate()
    )
    return max(0.0, value)


@register_value_category(
    category_id="risk_reduction",
    label="Risk Reduction",
    description="Prevented incident escalation costs",
)
def calc_risk_reduction(record: InputRecord, assumptions: AssumptionsConfig) -> float:
    """Risk_Value = incidents/yr * escalation_cost * risk_reduction_rate"""
    v = assumptions.value
    value = (
        record.security_incidents_per_month
        * MONTHS_PER_YEAR
        * v.escalation_cost_per_incident
        * v.risk_reduction_rate
    )
    return max(0.0, value)


@register_value_category(
    category_id="productivity_improvement",
    label="Productivity Improvement",
    description="Analysts focus on high-value tasks",
)
def calc_productivity_improvement(
    record: InputRecord, assumptions: AssumptionsConfig
) -> float:
    """Productivity = analysts * hours/yr * time_saved * hourly_rate * multiplier"""
    v = assumptions.value
    hours_saved = (
        record.human_soc_analysts * v.analyst_hours_per_year * v.productivity_time_saved
    )
    value = hours_saved * assumptions.analyst_hourly_rate() * v.productivity_multiplier
    return max(0.0, value)


@register_value_category(
    category_id="faster_response_time",
    label="Faster Response Time",
    description="Reduced incident impact and costs",
)
def calc_faster_response_time(
    record: InputRecord, assumptions: AssumptionsConfig
) -> float:
    """Response_Value = incidents/yr * hours_saved * hourly_rate * analysts_per_incident"""
    v = assumptions.value
    time_reduction = record.average_incident_response_time * v.response_time_reduction
    value = (
        record.security_incidents_per_month
        * MONTHS_PER_YEAR
        * time_reduction
        * assumptions.analyst_hourly_rate()
        * v.analysts_per_incident
    )
    return max(0.0, value)


@register_value_category(
    category_id="analyst_retention",
    label="Analyst Retention",
    description="Reduced turnover and training costs",
)
def calc_analyst_retention(
    record: InputRecord, assumptions: AssumptionsConfig
) -> float:
    """Retention = analysts * (salary * turnover_cost_ratio) * turnover_reduction"""
    v = assumptions.value
    turnover_cost = assumptions.salaries.analyst * v.turnover_cost_ratio
    return max(0.0, record.human_soc_analysts * turnover_cost * v.turnover_reduction)


@register_value_category(
    category_id="compliance_efficiency",
    label="Compliance Efficiency",
    description="Streamlined compliance processes",
)
def calc_compliance_efficiency(
    record: InputRecord, assumptions: AssumptionsConfig
) -> float:
    """Compliance = analysts * compliance_hours * hourly_rate * efficiency_gain"""
    v = assumptions.value
    hours = record.human_soc_analysts * v.compliance_hours_per_analyst
    value = hours * assumptions.analyst_hourly_rate() * v.compliance_efficiency_gain
    return max(0.0, value)


@register_value_category(
    category_id="threat_intelligence",
    label="Threat Intelligence",
    description="Better threat detection and prevention",
)
def calc_threat_intelligence(
    record: InputRecord, assumptions: AssumptionsConfig
) -> float:
    """Threat_Intel = employees * value_per_employee"""
    value = record.employee_count * assumptions.value.threat_intel_value_per_employee
    return max(0.0, value)


@register_value_category(
    category_id="automation_value",
    label="Automation Value",
    description="Automated repetitive tasks",
)
def calc_automation_value(record: InputRecord, assumptions: AssumptionsConfig) -> float:
    """Automation = analysts * hours/yr * automation_share * hourly_rate"""
    v = assumptions.value
    hours = record.human_soc_analysts * v.analyst_hours_per_year * v.automation_time_share
    return max(0.0, hours * assumptions.analyst_hourly_rate())


@register_value_category(
    category_id="stress_reduction",
    label="Stress Reduction",
    description="Improved analyst well-being and decision making",
)
def calc_stress_reduction(record: InputRecord, assumptions: AssumptionsConfig) -> float:
    value = record.human_soc_analysts * assumptions.value.stress_value_per_analyst
    return max(0.0, value)


@register_value_category(
    category_id="shift_coverage",
    label="24/7 Coverage",
    description="Continuous monitoring without shift premiums",
)
def calc_shift_coverage(record: InputRecord, assumptions: AssumptionsConfig) -> float:
    value = record.human_soc_analysts * assumptions.value.shift_coverage_value_per_analyst
    return max(0.0, value)
