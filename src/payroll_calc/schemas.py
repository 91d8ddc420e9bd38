"""Pydantic models shared by every input boundary (API and CLI)."""

from typing import Annotated

from pydantic import AliasChoices, AllowInfNan, BaseModel, Field, Strict

from payroll_calc.calculators.types import WorkerRecord

# Numbers only: strings and booleans are rejected, as are NaN and infinity.
Amount = Annotated[float, Strict(), AllowInfNan(False)]


class WorkerIn(BaseModel):
    """Worker compensation record as received at the boundary.

    Keys are camelCase. The legacy names ``workNature``, ``transport``,
    ``phone``, ``food`` and ``totalOvertime`` are accepted as aliases.
    ``totalOvertimeHours`` is a number of hours, every other amount is in
    currency units per month.
    """

    id: str
    name: str

    basic_salary: Amount = Field(alias="basicSalary")
    housing: Amount
    work_nature_allowance: Amount = Field(
        validation_alias=AliasChoices("workNatureAllowance", "workNature"),
        serialization_alias="workNatureAllowance",
    )
    transport_allowance: Amount = Field(
        validation_alias=AliasChoices("transportAllowance", "transport"),
        serialization_alias="transportAllowance",
    )
    phone_allowance: Amount = Field(
        validation_alias=AliasChoices("phoneAllowance", "phone"),
        serialization_alias="phoneAllowance",
    )
    food_allowance: Amount = Field(
        validation_alias=AliasChoices("foodAllowance", "food"),
        serialization_alias="foodAllowance",
    )

    commission: Amount | None = None
    advances: Amount | None = None
    penalties: Amount | None = None
    total_overtime_hours: Amount | None = Field(
        default=None,
        validation_alias=AliasChoices("totalOvertimeHours", "totalOvertime"),
        serialization_alias="totalOvertimeHours",
    )
    absent_days: Amount | None = Field(default=None, alias="absentDays")
    annual_leave_days: Amount | None = Field(default=None, alias="annualLeaveDays")
    sick_leave_days: Amount | None = Field(default=None, alias="sickLeaveDays")

    def to_record(self) -> WorkerRecord:
        """Convert to the calculator's record type."""
        return WorkerRecord(**self.model_dump())
