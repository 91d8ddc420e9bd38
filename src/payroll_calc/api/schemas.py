"""Pydantic schemas for API request/response models."""

from pydantic import BaseModel, Field, model_validator

from payroll_calc.calculators.types import PayPeriod, PayrollResult
from payroll_calc.schemas import Amount, WorkerIn

__all__ = [
    "Amount",
    "BatchCalculateRequest",
    "BatchCalculateResponse",
    "CalculateRequest",
    "ErrorResponse",
    "PayrollResultOut",
    "ProRataRequest",
    "ProRataResponse",
    "WorkerIn",
]


# ============================================================================
# Calculation schemas
# ============================================================================


class PayrollResultOut(BaseModel):
    """Rounded payroll result."""

    overtime_pay: float = Field(serialization_alias="overtimePay")
    absence_deduction: float = Field(serialization_alias="absenceDeduction")
    net_salary: float = Field(serialization_alias="netSalary")
    total_allowances: float = Field(serialization_alias="totalAllowances")
    gross_salary: float = Field(serialization_alias="grossSalary")
    total_deductions: float = Field(serialization_alias="totalDeductions")

    @classmethod
    def from_result(cls, result: PayrollResult) -> "PayrollResultOut":
        return cls(
            overtime_pay=result.overtime_pay,
            absence_deduction=result.absence_deduction,
            net_salary=result.net_salary,
            total_allowances=result.total_allowances,
            gross_salary=result.gross_salary,
            total_deductions=result.total_deductions,
        )


class CalculateRequest(BaseModel):
    """Single worker calculation request.

    ``year`` and ``month`` are accepted together but do not change the
    result.
    """

    worker: WorkerIn
    year: int | None = None
    month: int | None = Field(default=None, ge=1, le=12)

    @model_validator(mode="after")
    def check_period_pair(self) -> "CalculateRequest":
        if (self.year is None) != (self.month is None):
            raise ValueError("year and month must be given together")
        return self

    def period(self) -> PayPeriod | None:
        if self.year is None or self.month is None:
            return None
        return PayPeriod(year=self.year, month=self.month)


class BatchCalculateRequest(BaseModel):
    """Batch calculation request; any malformed worker rejects the batch."""

    workers: list[WorkerIn]


class BatchCalculateResponse(BaseModel):
    """Batch results in the same order as the request's workers."""

    results: list[PayrollResultOut]
    count: int


# ============================================================================
# Pro-rata schemas
# ============================================================================


class ProRataRequest(BaseModel):
    """Pro-rated salary request for a mid-month joiner."""

    monthly_salary: Amount = Field(alias="monthlySalary")
    start_day: int = Field(alias="startDay")
    days_in_month: int = Field(alias="daysInMonth")
    actual_days: bool = Field(default=False, alias="actualDays")


class ProRataResponse(BaseModel):
    """Pro-rated salary response."""

    pro_rata_salary: float = Field(serialization_alias="proRataSalary")
    days_worked: int = Field(serialization_alias="daysWorked")


# ============================================================================
# Error schemas
# ============================================================================


class ErrorResponse(BaseModel):
    """Standard error response."""

    detail: str
    code: str | None = None
