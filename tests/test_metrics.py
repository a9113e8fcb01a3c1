"""Tests for the human SOC vs. autonomous SOC comparison."""

import math

import pytest

from socroi.assumptions.schema import SalaryTable
from socroi.engine.derivation import derive_fields
from socroi.engine.metrics import (
    compute_results,
    efficiency_improvement,
    incident_response_improvement,
    personnel_cost,
)
from socroi.models.enums import InputField


class TestDefaultScenario:
    def test_human_soc_cost(self, default_record):
        result = compute_results(default_record)
        # 3 * 85k + 120k + 150k + 200k = 725k, plus 129.6k SIEM licensing
        assert result.human_soc_personnel_cost == pytest.approx(725_000)
        assert result.human_soc_total_cost == pytest.approx(854_600)

    def test_autonomous_soc_cost(self, default_record):
        # 2400 incidents * $10 * 12 months
        result = compute_results(default_record)
        assert result.autonomous_soc_total_cost == pytest.approx(288_000)

    def test_improvements(self, default_record):
        result = compute_results(default_record)
        # 38 + 6 (fp) + 12 (response) + 2.576 (log volume)
        assert result.efficiency_improvement == pytest.approx(58.576)
        # 45 + 8 (response) + 4.5 (fp)
        assert result.incident_response_improvement == pytest.approx(57.5)

    def test_savings_and_roi(self, default_record):
        result = compute_results(default_record)
        adjusted = 854_600 * (1 - 0.58576)
        savings = 854_600 - (adjusted + 288_000) + 43_200
        assert result.adjusted_annual_soc_cost == pytest.approx(adjusted)
        assert result.platform_savings == pytest.approx(43_200)
        assert result.annual_savings == pytest.approx(savings)
        assert result.roi_percentage == pytest.approx(savings / 288_000 * 100)

    def test_payback_is_immediate(self, default_record):
        assert compute_results(default_record).payback_period == 0


class TestZeroCostGuard:
    def test_zero_price_gives_zero_roi(self, default_record):
        record = derive_fields(default_record, InputField.PRICE_PER_SECURITY_INCIDENT, 0)
        result = compute_results(record)
        assert result.autonomous_soc_total_cost == 0
        assert result.roi_percentage == 0
        assert not math.isnan(result.annual_savings)

    def test_zero_incidents_gives_zero_roi(self, default_record):
        record = derive_fields(default_record, InputField.SECURITY_INCIDENTS_PER_MONTH, 0)
        result = compute_results(record)
        assert result.autonomous_soc_total_cost == 0
        assert result.roi_percentage == 0

    def test_nonzero_cost_gives_nonzero_roi(self, default_record):
        assert compute_results(default_record).roi_percentage != 0


class TestEfficiencyImprovement:
    def test_base_with_no_inputs(self, default_record, assumptions):
        record = default_record.model_copy(
            update={
                "false_positive_rate": 0,
                "average_incident_response_time": 0,
                "monthly_log_volume_gb": 0,
            }
        )
        assert efficiency_improvement(record, assumptions.efficiency) == 38

    def test_capped_at_eighty(self, default_record, assumptions):
        record = default_record.model_copy(
            update={
                "false_positive_rate": 100,
                "average_incident_response_time": 100,
                "monthly_log_volume_gb": 1_000_000,
            }
        )
        assert efficiency_improvement(record, assumptions.efficiency) == 80

    def test_volume_below_threshold_adds_nothing(self, default_record, assumptions):
        low = default_record.model_copy(update={"monthly_log_volume_gb": 1000})
        at = default_record.model_copy(update={"monthly_log_volume_gb": 1024})
        assert efficiency_improvement(low, assumptions.efficiency) == pytest.approx(
            efficiency_improvement(at, assumptions.efficiency)
        )

    @pytest.mark.parametrize(
        "field, values",
        [
            ("false_positive_rate", [0, 10, 50, 75, 100]),
            ("average_incident_response_time", [0, 1, 4, 8, 24, 72]),
            ("monthly_log_volume_gb", [0, 1024, 2048, 10_000, 50_000]),
        ],
    )
    def test_monotonic_and_bounded(self, default_record, assumptions, field, values):
        previous = None
        for value in values:
            record = default_record.model_copy(update={field: value})
            current = efficiency_improvement(record, assumptions.efficiency)
            assert 38 <= current <= 80
            if previous is not None:
                assert current >= previous
            previous = current


class TestIncidentResponseImprovement:
    def test_base_with_no_inputs(self, default_record, assumptions):
        record = default_record.model_copy(
            update={"false_positive_rate": 0, "average_incident_response_time": 0}
        )
        assert incident_response_improvement(record, assumptions.incident_response) == 45

    def test_factor_caps(self, default_record, assumptions):
        record = default_record.model_copy(
            update={"false_positive_rate": 100, "average_incident_response_time": 100}
        )
        # 45 + 15 + 8
        assert incident_response_improvement(
            record, assumptions.incident_response
        ) == pytest.approx(68)

    @pytest.mark.parametrize(
        "field, values",
        [
            ("false_positive_rate", [0, 10, 50, 100]),
            ("average_incident_response_time", [0, 1, 4, 8, 24]),
        ],
    )
    def test_monotonic_and_bounded(self, default_record, assumptions, field, values):
        previous = None
        for value in values:
            record = default_record.model_copy(update={field: value})
            current = incident_response_improvement(record, assumptions.incident_response)
            assert 45 <= current <= 80
            if previous is not None:
                assert current >= previous
            previous = current


class TestPlatformSavings:
    def test_negative_when_new_platform_costs_more(self, default_record):
        record = derive_fields(default_record, InputField.STELLAR_XDR_COST_PER_GB, 5)
        # 129,600 - 3600 * 5 * 12
        assert compute_results(record).platform_savings == pytest.approx(-86_400)


class TestAssumptionOverrides:
    def test_custom_salary_table(self, default_record, assumptions):
        custom = assumptions.model_copy(
            update={
                "salaries": SalaryTable(
                    analyst=85_000, manager=120_000, engineer=110_000, director=150_000
                )
            }
        )
        assert personnel_cost(default_record, custom.salaries) == pytest.approx(635_000)
        result = compute_results(default_record, custom)
        assert result.human_soc_total_cost == pytest.approx(635_000 + 129_600)

    def test_switch_flag_is_not_read(self, default_record):
        switched = derive_fields(default_record, InputField.SWITCH_FROM_LEGACY_SIEM, True)
        assert compute_results(switched) == compute_results(default_record)
