"""Pytest fixtures for payroll calculator tests."""

from __future__ import annotations

from typing import Any, Callable

import pytest

from payroll_calc.calculators.types import WorkerRecord


def make_worker(**overrides: Any) -> WorkerRecord:
    """Worker with the reference compensation package, overridable per field."""
    values: dict[str, Any] = {
        "id": "w-001",
        "name": "Reference Worker",
        "basic_salary": 6000.0,
        "housing": 1000.0,
        "work_nature_allowance": 500.0,
        "transport_allowance": 300.0,
        "phone_allowance": 100.0,
        "food_allowance": 200.0,
    }
    values.update(overrides)
    return WorkerRecord(**values)


@pytest.fixture
def worker_factory() -> Callable[..., WorkerRecord]:
    return make_worker


@pytest.fixture
def reference_worker() -> WorkerRecord:
    """Worker from the reference case: 10 overtime hours, 2 absent days."""
    return make_worker(total_overtime_hours=10.0, absent_days=2.0)


@pytest.fixture
def worker_payload() -> dict[str, Any]:
    """Raw camelCase mapping for the reference worker."""
    return {
        "id": "w-001",
        "name": "Reference Worker",
        "basicSalary": 6000,
        "housing": 1000,
        "workNatureAllowance": 500,
        "transportAllowance": 300,
        "phoneAllowance": 100,
        "foodAllowance": 200,
        "totalOvertimeHours": 10,
        "absentDays": 2,
    }
