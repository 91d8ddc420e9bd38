"""Batch payroll computation."""

from __future__ import annotations

from collections.abc import Iterable
from concurrent.futures import ThreadPoolExecutor

from payroll_calc.calculators.calculator import PayrollCalculator
from payroll_calc.calculators.types import PayrollResult, WorkerRecord


class BatchProcessor:
    """Applies :class:`PayrollCalculator` to each worker independently.

    ``results[i]`` always corresponds to ``workers[i]``. With
    ``max_workers`` set above 1 the records are computed on a thread pool;
    ``Executor.map`` yields results in submission order.
    """

    def __init__(self, max_workers: int | None = None):
        self.max_workers = max_workers

    def compute_all(self, workers: Iterable[WorkerRecord]) -> list[PayrollResult]:
        """Compute payroll for every worker, preserving order."""
        workers = list(workers)
        if not workers:
            return []

        if not self.max_workers or self.max_workers <= 1:
            return [PayrollCalculator.compute(w) for w in workers]

        with ThreadPoolExecutor(max_workers=self.max_workers) as pool:
            return list(pool.map(PayrollCalculator.compute, workers))


def compute_all(workers: Iterable[WorkerRecord]) -> list[PayrollResult]:
    """Sequential shortcut for :meth:`BatchProcessor.compute_all`."""
    return BatchProcessor().compute_all(workers)


def synthetic_worker(i: int) -> WorkerRecord:
    """Build the i-th synthetic worker used for bulk simulation."""
    return WorkerRecord(
        id=f"emp_{i}",
        name=f"Employee {i}",
        basic_salary=5000.0 + i * 100.0,
        housing=1000.0,
        work_nature_allowance=500.0,
        transport_allowance=300.0,
        phone_allowance=100.0,
        food_allowance=200.0,
        commission=0.0,
        advances=0.0,
        penalties=0.0,
        total_overtime_hours=i * 2.0,
        absent_days=float(i % 5),
        annual_leave_days=float(i % 3),
        sick_leave_days=float(i % 2),
    )


def simulate_bulk(count: int) -> float:
    """Compute ``count`` synthetic workers and return their summed net salary."""
    total = 0.0
    for i in range(count):
        total += PayrollCalculator.compute(synthetic_worker(i)).net_salary
    return total
