"""Payroll calculation core."""

from payroll_calc.calculators.batch import BatchProcessor, compute_all, simulate_bulk
from payroll_calc.calculators.calculator import PayrollCalculator, compute, round_to_cents
from payroll_calc.calculators.proration import (
    InvalidStartDayError,
    pro_rata_salary,
    pro_rata_salary_actual_days,
)
from payroll_calc.calculators.types import (
    PayPeriod,
    PayrollBreakdown,
    PayrollResult,
    WorkerRecord,
)

__all__ = [
    "BatchProcessor",
    "InvalidStartDayError",
    "PayPeriod",
    "PayrollBreakdown",
    "PayrollCalculator",
    "PayrollResult",
    "WorkerRecord",
    "compute",
    "compute_all",
    "pro_rata_salary",
    "pro_rata_salary_actual_days",
    "round_to_cents",
    "simulate_bulk",
]
