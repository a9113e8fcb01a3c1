"""Immutable result data structures."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ResultRecord:
    """Annual human SOC vs. autonomous SOC financial comparison."""

    human_soc_personnel_cost: float
    human_soc_total_cost: float
    autonomous_soc_total_cost: float
    adjusted_annual_soc_cost: float
    platform_savings: float
    annual_savings: float
    roi_percentage: float
    payback_period: float  # months
    efficiency_improvement: float  # percentage
    incident_response_improvement: float  # percentage


@dataclass(frozen=True)
class ValueCategoryResult:
    """One slice of the value breakdown."""

    category_id: str
    name: str
    value: float
    description: str
    percentage: float


@dataclass(frozen=True)
class ValueInsights:
    """Headline figures shown alongside the breakdown."""

    false_positive_reduction_pct: float
    automation_time_freed_pct: float


@dataclass(frozen=True)
class ValueBreakdown:
    """Value created beyond direct cost savings, largest category first."""

    categories: list[ValueCategoryResult]
    total_value: float
    direct_cost_savings: float
    total_roi_value: float
    insights: ValueInsights

    def get(self, category_id: str) -> ValueCategoryResult | None:
        for category in self.categories:
            if category.category_id == category_id:
                return category
        return None
