"""Shared test fixtures for the socroi test suite."""

import json

import pytest

from socroi.assumptions.loader import DEFAULT_CONFIG_FILE, get_default_assumptions
from socroi.models.inputs import DEFAULT_INPUTS, InputRecord


@pytest.fixture
def assumptions():
    return get_default_assumptions()


@pytest.fixture
def raw_config() -> dict:
    """The bundled assumptions config as a plain dict, safe to modify."""
    return json.loads(DEFAULT_CONFIG_FILE.read_text())


@pytest.fixture
def default_record() -> InputRecord:
    """500 employees, 2400 incidents/month -- the calculator's starting point."""
    return DEFAULT_INPUTS


@pytest.fixture
def empty_soc() -> InputRecord:
    """No employees, no incidents, no staff: every value category is zero."""
    return DEFAULT_INPUTS.model_copy(
        update={
            "employee_count": 0,
            "security_incidents_per_month": 0,
            "human_soc_analysts": 0,
            "human_soc_manager": 0,
            "human_soc_engineer": 0,
            "human_soc_director": 0,
        }
    )
