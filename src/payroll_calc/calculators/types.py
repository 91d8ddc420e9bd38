"""Type definitions for the payroll calculation."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class PayPeriod:
    """Payroll period (year, month).

    Accepted alongside a worker for future use; the current formula does
    not consult it.
    """

    year: int
    month: int


@dataclass(frozen=True)
class WorkerRecord:
    """One employee's compensation inputs for a month.

    Optional variable components are ``None`` when absent and count as 0.
    """

    id: str
    name: str

    # Fixed monthly components
    basic_salary: float
    housing: float
    work_nature_allowance: float
    transport_allowance: float
    phone_allowance: float
    food_allowance: float

    # Variable monthly components
    commission: float | None = None
    advances: float | None = None
    penalties: float | None = None
    total_overtime_hours: float | None = None  # hours, not pay
    absent_days: float | None = None
    annual_leave_days: float | None = None
    sick_leave_days: float | None = None


@dataclass(frozen=True)
class PayrollBreakdown:
    """Unrounded intermediate values of a payroll computation."""

    total_allowances: float
    deductible_gross_salary: float
    daily_rate: float
    hourly_rate: float
    overtime_pay: float
    absence_and_leave_days: float
    absence_deduction: float
    gross_salary: float
    total_deductions: float
    net_salary: float


@dataclass(frozen=True)
class PayrollResult:
    """Payroll outcome for one worker, every amount rounded to cents."""

    overtime_pay: float
    absence_deduction: float
    net_salary: float
    total_allowances: float
    gross_salary: float
    total_deductions: float

    def to_dict(self) -> dict[str, Any]:
        """Return the camelCase mapping used at the boundary."""
        return {
            "overtimePay": self.overtime_pay,
            "absenceDeduction": self.absence_deduction,
            "netSalary": self.net_salary,
            "totalAllowances": self.total_allowances,
            "grossSalary": self.gross_salary,
            "totalDeductions": self.total_deductions,
        }
