"""Monthly payroll calculator."""

from payroll_calc.calculators import (
    BatchProcessor,
    PayPeriod,
    PayrollCalculator,
    PayrollResult,
    WorkerRecord,
    compute,
    compute_all,
)

__version__ = "1.0.0"

__all__ = [
    "BatchProcessor",
    "PayPeriod",
    "PayrollCalculator",
    "PayrollResult",
    "WorkerRecord",
    "compute",
    "compute_all",
]
