"""FastAPI dependencies for dependency injection."""

from typing import Annotated

from fastapi import Depends

from payroll_calc.calculators.batch import BatchProcessor
from payroll_calc.config import Settings, get_settings


def get_batch_processor(
    settings: Annotated[Settings, Depends(get_settings)],
) -> BatchProcessor:
    """Batch processor sized from settings."""
    return BatchProcessor(max_workers=settings.batch_max_workers)


# Type aliases for cleaner dependency injection
AppSettings = Annotated[Settings, Depends(get_settings)]
Batch = Annotated[BatchProcessor, Depends(get_batch_processor)]
