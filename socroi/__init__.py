"""Autonomous SOC vs. human SOC ROI calculation engine."""

from socroi.engine import (
    ResultRecord,
    ValueBreakdown,
    calculate_computed_fields,
    compute_results,
    compute_value_breakdown,
    derive_fields,
    donut_slices,
)
from socroi.models import DEFAULT_INPUTS, InputField, InputRecord
from socroi.session import CalculatorSession, create_session

__all__ = [
    "CalculatorSession",
    "DEFAULT_INPUTS",
    "InputField",
    "InputRecord",
    "ResultRecord",
    "ValueBreakdown",
    "calculate_computed_fields",
    "compute_results",
    "compute_value_breakdown",
    "create_session",
    "derive_fields",
    "donut_slices",
]
