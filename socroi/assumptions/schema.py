"""Pydantic models for the calculation assumptions config."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field, field_validator, model_validator


class SalaryTable(BaseModel):
    """Fully loaded annual salary per human SOC role."""

    analyst: float = Field(default=85_000, ge=0)
    manager: float = Field(default=120_000, ge=0)
    engineer: float = Field(default=150_000, ge=0)
    director: float = Field(default=200_000, ge=0)


class DerivationConfig(BaseModel):
    """Baseline ratios used to derive dependent input fields."""

    baseline_employee_count: float = Field(default=500, gt=0)
    baseline_incidents_per_month: float = Field(default=2400, gt=0)
    incidents_per_analyst: float = Field(default=1000, gt=0)
    incidents_per_manager: float = Field(default=3000, gt=0)
    incidents_per_engineer: float = Field(default=3000, gt=0)
    incidents_per_director: float = Field(default=6000, gt=0)

    @property
    def incident_ratio(self) -> float:
        """Monthly incidents per employee."""
        return self.baseline_incidents_per_month / self.baseline_employee_count


class ImprovementFactor(BaseModel):
    """One capped linear contribution to an improvement percentage."""

    weight: float = Field(ge=0)
    cap: float = Field(ge=0)

    def apply(self, value: float) -> float:
        return min(value * self.weight, self.cap)


class EfficiencyModel(BaseModel):
    base: float = Field(default=38, ge=0)
    ceiling: float = Field(default=80, ge=0)
    false_positive: ImprovementFactor = ImprovementFactor(weight=0.2, cap=15)
    response_time: ImprovementFactor = ImprovementFactor(weight=3, cap=25)
    log_volume: ImprovementFactor = ImprovementFactor(weight=0.001, cap=15)
    log_volume_threshold_gb: float = Field(default=1024, ge=0)

    @model_validator(mode="after")
    def base_le_ceiling(self) -> EfficiencyModel:
        if self.base > self.ceiling:
            raise ValueError(
                f"Efficiency base ({self.base}) must not exceed ceiling ({self.ceiling})"
            )
        return self


class IncidentResponseModel(BaseModel):
    base: float = Field(default=45, ge=0)
    ceiling: float = Field(default=80, ge=0)
    response_time: ImprovementFactor = ImprovementFactor(weight=2, cap=15)
    false_positive: ImprovementFactor = ImprovementFactor(weight=0.15, cap=8)

    @model_validator(mode="after")
    def base_le_ceiling(self) -> IncidentResponseModel:
        if self.base > self.ceiling:
            raise ValueError(
                f"Incident response base ({self.base}) must not exceed "
                f"ceiling ({self.ceiling})"
            )
        return self


class ValueAssumptions(BaseModel):
    """Constants behind the value-category formulas."""

    analyst_hours_per_year: float = Field(default=2080, gt=0)
    target_false_positive_rate: float = Field(
        default=5, ge=0, le=100, description="Percentage after automation"
    )
    hours_per_false_positive: float = Field(default=2, ge=0)
    escalation_cost_per_incident: float = Field(default=5000, ge=0)
    risk_reduction_rate: float = Field(default=0.3, ge=0, le=1.0)
    productivity_time_saved: float = Field(default=0.4, ge=0, le=1.0)
    productivity_multiplier: float = Field(default=1.5, ge=0)
    response_time_reduction: float = Field(default=0.85, ge=0, le=1.0)
    analysts_per_incident: float = Field(default=2, ge=0)
    turnover_cost_ratio: float = Field(default=0.5, ge=0)
    turnover_reduction: float = Field(default=0.6, ge=0, le=1.0)
    compliance_hours_per_analyst: float = Field(default=200, ge=0)
    compliance_efficiency_gain: float = Field(default=0.7, ge=0, le=1.0)
    threat_intel_value_per_employee: float = Field(default=50, ge=0)
    automation_time_share: float = Field(default=0.3, ge=0, le=1.0)
    stress_value_per_analyst: float = Field(default=15_000, ge=0)
    shift_coverage_value_per_analyst: float = Field(default=20_000, ge=0)


class ValueCategoryConfig(BaseModel):
    """A value category enabled (or not) in this assumptions set."""

    id: str = Field(description="Must match a registered value category")
    label: Optional[str] = Field(default=None, description="Display name override")
    description: Optional[str] = None
    enabled: bool = True

    @field_validator("id")
    @classmethod
    def id_must_be_registered(cls, v: str) -> str:
        # Import formulas to ensure registration has happened
        import socroi.value_library.formulas  # noqa: F401
        from socroi.value_library.registry import get_value_category

        if get_value_category(v) is None:
            raise ValueError(f"Value category '{v}' is not registered")
        return v


class AssumptionsConfig(BaseModel):
    """Top-level assumptions config: every constant the engine reads."""

    id: str
    name: str
    version: str
    salaries: SalaryTable = Field(default_factory=SalaryTable)
    derivation: DerivationConfig = Field(default_factory=DerivationConfig)
    efficiency: EfficiencyModel = Field(default_factory=EfficiencyModel)
    incident_response: IncidentResponseModel = Field(
        default_factory=IncidentResponseModel
    )
    value: ValueAssumptions = Field(default_factory=ValueAssumptions)
    value_categories: list[ValueCategoryConfig] = Field(min_length=1)

    @model_validator(mode="after")
    def categories_unique_and_enabled(self) -> AssumptionsConfig:
        ids = [c.id for c in self.value_categories]
        duplicates = sorted({i for i in ids if ids.count(i) > 1})
        if duplicates:
            raise ValueError(f"Duplicate value categories: {duplicates}")
        if not self.enabled_categories():
            raise ValueError("At least one value category must be enabled")
        return self

    def enabled_categories(self) -> list[ValueCategoryConfig]:
        return [c for c in self.value_categories if c.enabled]

    def analyst_hourly_rate(self) -> float:
        return self.salaries.analyst / self.value.analyst_hours_per_year
