"""Value breakdown: annual value created beyond direct cost savings."""

from __future__ import annotations

import logging
from typing import Optional

# Ensure all value formulas are registered on import
import socroi.value_library.formulas  # noqa: F401
from socroi.assumptions.loader import get_default_assumptions
from socroi.assumptions.schema import AssumptionsConfig
from socroi.engine.result import (
    ResultRecord,
    ValueBreakdown,
    ValueCategoryResult,
    ValueInsights,
)
from socroi.models.inputs import InputRecord
from socroi.value_library.registry import get_value_category

logger = logging.getLogger(__name__)


def share_percentage(value: float, total: float) -> float:
    """``value`` as a percentage of ``total``; 0 when the total is 0."""
    if total == 0:
        return 0.0
    return value / total * 100


def compute_value_breakdown(
    record: InputRecord,
    results: ResultRecord,
    assumptions: Optional[AssumptionsConfig] = None,
) -> ValueBreakdown:
    """Evaluate every enabled value category, largest first."""
    assumptions = assumptions or get_default_assumptions()

    values: list[tuple[str, str, str, float]] = []
    for category_config in assumptions.enabled_categories():
        definition = get_value_category(category_config.id)
        if definition is None:
            logger.warning("Value category %r not found in registry", category_config.id)
            continue
        value = definition.formula_fn(record, assumptions)
        values.append(
            (
                definition.id,
                category_config.label or definition.label,
                category_config.description or definition.description,
                value,
            )
        )

    total = sum(v[3] for v in values)

    categories = [
        ValueCategoryResult(
            category_id=category_id,
            name=name,
            value=value,
            description=description,
            percentage=share_percentage(value, total),
        )
        for category_id, name, description, value in values
    ]
    # Stable sort keeps config order for ties, which fixes the chart order.
    categories.sort(key=lambda c: c.value, reverse=True)

    breakdown = ValueBreakdown(
        categories=categories,
        total_value=total,
        direct_cost_savings=results.annual_savings,
        total_roi_value=results.annual_savings + total,
        insights=_insights(record, assumptions, categories),
    )
    logger.debug("Value breakdown: %d categories, total=%.2f", len(categories), total)
    return breakdown


def _insights(
    record: InputRecord,
    assumptions: AssumptionsConfig,
    categories: list[ValueCategoryResult],
) -> ValueInsights:
    fp_rate = record.false_positive_rate
    if fp_rate == 0:
        fp_reduction = 0.0
    else:
        fp_reduction = (
            (fp_rate - assumptions.value.target_false_positive_rate) / fp_rate * 100
        )

    automation = next(
        (c.value for c in categories if c.category_id == "automation_value"), 0.0
    )
    analyst_payroll = record.human_soc_analysts * assumptions.salaries.analyst
    return ValueInsights(
        false_positive_reduction_pct=fp_reduction,
        automation_time_freed_pct=share_percentage(automation, analyst_payroll),
    )
