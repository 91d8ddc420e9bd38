"""Monthly payroll formula."""

from __future__ import annotations

import math

from payroll_calc.calculators.types import (
    PayPeriod,
    PayrollBreakdown,
    PayrollResult,
    WorkerRecord,
)

DAYS_PER_MONTH = 30.0
REGULAR_HOURS_PER_DAY = 8.0
OVERTIME_MULTIPLIER = 1.5


def _or_zero(value: float | None) -> float:
    return 0.0 if value is None else value


def round_half_away_from_zero(value: float) -> float:
    """Round to the nearest integer, ties away from zero.

    Infinities and NaN are returned unchanged.
    """
    if not math.isfinite(value):
        return value
    truncated = math.trunc(value)
    if abs(value - truncated) >= 0.5:
        truncated += math.copysign(1.0, value)
    return float(truncated)


def round_to_cents(amount: float) -> float:
    """Round a float amount to 2 decimal places.

    Scales by 100 in binary floating point before rounding, so a value
    such as 1.005 (stored as 1.00499999...) rounds down to 1.0 while
    0.125 rounds up to 0.13. Python's ``round`` would give 0.12 for the
    latter since it rounds ties to even.
    """
    return round_half_away_from_zero(amount * 100.0) / 100.0


class PayrollCalculator:
    """Computes a worker's monthly payroll.

    Calculation order:
    1) Total allowances (five fixed allowances plus commission)
    2) Deductible gross = basic + allowances
    3) Daily rate = deductible gross / 30 (fixed 30-day month)
    4) Hourly rate = basic / 30 / 8 (overtime is on basic only)
    5) Overtime pay = hours * hourly rate * 1.5
    6) Absence deduction = daily rate * (absent + annual leave + sick leave days)
    7) Gross = deductible gross + overtime
    8) Total deductions = absence deduction + advances + penalties
    9) Net = gross - total deductions

    Amounts are rounded to cents only on output.
    """

    @staticmethod
    def breakdown(worker: WorkerRecord) -> PayrollBreakdown:
        """Evaluate the formula without rounding."""
        total_allowances = (
            worker.housing
            + worker.work_nature_allowance
            + worker.transport_allowance
            + worker.phone_allowance
            + worker.food_allowance
            + _or_zero(worker.commission)
        )
        deductible_gross_salary = worker.basic_salary + total_allowances

        daily_rate = deductible_gross_salary / DAYS_PER_MONTH
        hourly_rate = (worker.basic_salary / DAYS_PER_MONTH) / REGULAR_HOURS_PER_DAY

        overtime_pay = (
            _or_zero(worker.total_overtime_hours) * hourly_rate * OVERTIME_MULTIPLIER
        )
        absence_and_leave_days = (
            _or_zero(worker.absent_days)
            + _or_zero(worker.annual_leave_days)
            + _or_zero(worker.sick_leave_days)
        )
        absence_deduction = daily_rate * absence_and_leave_days

        gross_salary = deductible_gross_salary + overtime_pay
        total_deductions = (
            absence_deduction
            + _or_zero(worker.advances)
            + _or_zero(worker.penalties)
        )
        net_salary = gross_salary - total_deductions

        return PayrollBreakdown(
            total_allowances=total_allowances,
            deductible_gross_salary=deductible_gross_salary,
            daily_rate=daily_rate,
            hourly_rate=hourly_rate,
            overtime_pay=overtime_pay,
            absence_and_leave_days=absence_and_leave_days,
            absence_deduction=absence_deduction,
            gross_salary=gross_salary,
            total_deductions=total_deductions,
            net_salary=net_salary,
        )

    @classmethod
    def compute(
        cls, worker: WorkerRecord, period: PayPeriod | None = None
    ) -> PayrollResult:
        """Compute the rounded payroll result for one worker.

        ``period`` is accepted but does not affect the result: the month
        is always 30 days.
        """
        b = cls.breakdown(worker)
        return PayrollResult(
            overtime_pay=round_to_cents(b.overtime_pay),
            absence_deduction=round_to_cents(b.absence_deduction),
            net_salary=round_to_cents(b.net_salary),
            total_allowances=round_to_cents(b.total_allowances),
            gross_salary=round_to_cents(b.gross_salary),
            total_deductions=round_to_cents(b.total_deductions),
        )


def compute(worker: WorkerRecord, period: PayPeriod | None = None) -> PayrollResult:
    """Module-level shortcut for :meth:`PayrollCalculator.compute`."""
    return PayrollCalculator.compute(worker, period)
