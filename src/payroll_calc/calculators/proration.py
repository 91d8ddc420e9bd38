"""Pro-rated salary for employees joining mid-month."""

from __future__ import annotations

from payroll_calc.calculators.calculator import DAYS_PER_MONTH, round_to_cents


class InvalidStartDayError(ValueError):
    """Raised when the start day falls outside the month."""

    def __init__(self, start_day: int, days_in_month: int):
        self.start_day = start_day
        self.days_in_month = days_in_month
        super().__init__("Start day must be between 1 and days in month")


def days_worked(start_day: int, days_in_month: int) -> int:
    """Days from ``start_day`` to the end of the month, inclusive."""
    if start_day < 1 or start_day > days_in_month:
        raise InvalidStartDayError(start_day, days_in_month)
    return days_in_month - start_day + 1


def pro_rata_salary(
    monthly_salary: float, start_day: int, days_in_month: int
) -> float:
    """Partial-month salary at the fixed 30-day daily rate.

    Args:
        monthly_salary: Full monthly salary
        start_day: Day of month the employee started (1-based)
        days_in_month: Calendar days in the month

    Returns:
        Salary for days ``start_day..days_in_month``, rounded to cents

    Raises:
        InvalidStartDayError: If ``start_day`` is outside ``1..days_in_month``
    """
    worked = days_worked(start_day, days_in_month)
    return round_to_cents(monthly_salary / DAYS_PER_MONTH * worked)


def pro_rata_salary_actual_days(
    monthly_salary: float, start_day: int, days_in_month: int
) -> float:
    """Partial-month salary using the month's actual length as divisor."""
    worked = days_worked(start_day, days_in_month)
    return round_to_cents(monthly_salary / days_in_month * worked)
