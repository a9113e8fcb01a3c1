"""Tests for assumptions config validation and loading."""

import json

import pytest
from pydantic import ValidationError

from socroi.assumptions.loader import get_default_assumptions, load_assumptions
from socroi.assumptions.schema import AssumptionsConfig, ImprovementFactor
from socroi.models.inputs import DEFAULT_INPUTS


class TestDefaultAssumptions:
    def test_loads(self, assumptions):
        assert assumptions.id == "autonomous-soc-v1"
        assert len(assumptions.enabled_categories()) == 10

    def test_incident_ratio(self, assumptions):
        assert assumptions.derivation.incident_ratio == pytest.approx(4.8)

    def test_baseline_matches_default_inputs(self, assumptions):
        assert assumptions.derivation.baseline_employee_count == DEFAULT_INPUTS.employee_count
        assert (
            assumptions.derivation.baseline_incidents_per_month
            == DEFAULT_INPUTS.security_incidents_per_month
        )

    def test_canonical_salary_table(self, assumptions):
        salaries = assumptions.salaries
        assert (salaries.analyst, salaries.manager, salaries.engineer, salaries.director) == (
            85_000,
            120_000,
            150_000,
            200_000,
        )

    def test_cached(self):
        assert get_default_assumptions() is get_default_assumptions()

    def test_analyst_hourly_rate(self, assumptions):
        assert assumptions.analyst_hourly_rate() == pytest.approx(85_000 / 2080)


class TestValidation:
    def test_unregistered_category_rejected(self, raw_config):
        raw_config["value_categories"].append({"id": "office_plants"})
        with pytest.raises(ValidationError, match="not registered"):
            AssumptionsConfig.model_validate(raw_config)

    def test_duplicate_category_rejected(self, raw_config):
        raw_config["value_categories"].append({"id": "risk_reduction"})
        with pytest.raises(ValidationError, match="Duplicate"):
            AssumptionsConfig.model_validate(raw_config)

    def test_all_disabled_rejected(self, raw_config):
        for entry in raw_config["value_categories"]:
            entry["enabled"] = False
        with pytest.raises(ValidationError, match="At least one"):
            AssumptionsConfig.model_validate(raw_config)

    def test_empty_category_list_rejected(self, raw_config):
        raw_config["value_categories"] = []
        with pytest.raises(ValidationError):
            AssumptionsConfig.model_validate(raw_config)

    def test_base_above_ceiling_rejected(self, raw_config):
        raw_config["efficiency"]["base"] = 90
        with pytest.raises(ValidationError, match="must not exceed"):
            AssumptionsConfig.model_validate(raw_config)

    def test_zero_baseline_rejected(self, raw_config):
        raw_config["derivation"]["baseline_employee_count"] = 0
        with pytest.raises(ValidationError):
            AssumptionsConfig.model_validate(raw_config)

    def test_zero_staffing_divisor_rejected(self, raw_config):
        raw_config["derivation"]["incidents_per_analyst"] = 0
        with pytest.raises(ValidationError):
            AssumptionsConfig.model_validate(raw_config)

    def test_negative_salary_rejected(self, raw_config):
        raw_config["salaries"]["director"] = -1
        with pytest.raises(ValidationError):
            AssumptionsConfig.model_validate(raw_config)


class TestImprovementFactor:
    def test_linear_below_cap(self):
        assert ImprovementFactor(weight=0.2, cap=15).apply(30) == pytest.approx(6)

    def test_capped(self):
        assert ImprovementFactor(weight=3, cap=25).apply(100) == 25


class TestLoader:
    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_assumptions(tmp_path / "missing.json")

    def test_custom_file(self, tmp_path, raw_config):
        raw_config["id"] = "eight-category"
        raw_config["value_categories"] = raw_config["value_categories"][:8]
        path = tmp_path / "custom.json"
        path.write_text(json.dumps(raw_config))

        config = load_assumptions(path)
        assert config.id == "eight-category"
        assert len(config.enabled_categories()) == 8
