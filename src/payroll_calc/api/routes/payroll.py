"""Payroll calculation endpoints."""

import logging

from fastapi import APIRouter, status

from payroll_calc.api.dependencies import Batch
from payroll_calc.api.schemas import (
    BatchCalculateRequest,
    BatchCalculateResponse,
    CalculateRequest,
    ErrorResponse,
    PayrollResultOut,
    ProRataRequest,
    ProRataResponse,
)
from payroll_calc.calculators.calculator import PayrollCalculator
from payroll_calc.calculators.proration import (
    days_worked,
    pro_rata_salary,
    pro_rata_salary_actual_days,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/payroll", tags=["payroll"])


@router.post(
    "/calculate",
    response_model=PayrollResultOut,
    status_code=status.HTTP_200_OK,
)
async def calculate(payload: CalculateRequest) -> PayrollResultOut:
    """Compute the payroll breakdown for one worker."""
    result = PayrollCalculator.compute(payload.worker.to_record(), payload.period())
    logger.info("Calculated payroll for worker %s", payload.worker.id)
    return PayrollResultOut.from_result(result)


@router.post(
    "/calculate-batch",
    response_model=BatchCalculateResponse,
    status_code=status.HTTP_200_OK,
)
async def calculate_batch(
    payload: BatchCalculateRequest,
    processor: Batch,
) -> BatchCalculateResponse:
    """Compute payroll for each worker, in request order.

    The request is validated as a whole: one malformed worker rejects the
    batch with 422 before any computation.
    """
    results = processor.compute_all(w.to_record() for w in payload.workers)
    logger.info("Calculated payroll batch of %d workers", len(results))
    return BatchCalculateResponse(
        results=[PayrollResultOut.from_result(r) for r in results],
        count=len(results),
    )


@router.post(
    "/pro-rata",
    response_model=ProRataResponse,
    status_code=status.HTTP_200_OK,
    responses={400: {"model": ErrorResponse}},
)
async def pro_rata(payload: ProRataRequest) -> ProRataResponse:
    """Compute the partial-month salary of a mid-month joiner."""
    if payload.actual_days:
        amount = pro_rata_salary_actual_days(
            payload.monthly_salary, payload.start_day, payload.days_in_month
        )
    else:
        amount = pro_rata_salary(
            payload.monthly_salary, payload.start_day, payload.days_in_month
        )
    return ProRataResponse(
        pro_rata_salary=amount,
        days_worked=days_worked(payload.start_day, payload.days_in_month),
    )
