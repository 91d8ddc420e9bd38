"""Conversion of raw worker mappings into calculator records.

Required fields must be present and numeric; they are never defaulted.
Optional variable components may be omitted or null and then count as 0.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from pydantic import ValidationError

from payroll_calc.calculators.types import WorkerRecord
from payroll_calc.schemas import WorkerIn

logger = logging.getLogger(__name__)


class MalformedInputError(ValueError):
    """Raised when a worker mapping cannot be turned into a WorkerRecord."""

    def __init__(self, errors: list[dict[str, Any]], index: int | None = None):
        self.errors = errors
        self.index = index
        problems = "; ".join(
            "{}: {}".format(
                ".".join(str(part) for part in err.get("loc", ())) or "<record>",
                err.get("msg", "invalid"),
            )
            for err in errors
        )
        prefix = f"Worker at index {index}" if index is not None else "Worker"
        super().__init__(f"{prefix} is malformed: {problems}")


class BatchErrorPolicy(str, Enum):
    """How a batch reacts to a malformed record."""

    FAIL_FAST = "fail"
    COLLECT = "collect"


@dataclass
class RecordError:
    """A rejected record within a batch."""

    index: int
    errors: list[dict[str, Any]]

    def to_dict(self) -> dict[str, Any]:
        return {
            "index": self.index,
            "errors": [
                {"loc": list(err.get("loc", ())), "msg": err.get("msg", "")}
                for err in self.errors
            ],
        }


@dataclass
class ParsedBatch:
    """Outcome of parsing a batch of worker mappings."""

    records: list[WorkerRecord] = field(default_factory=list)
    indices: list[int] = field(default_factory=list)  # source index of each record
    errors: list[RecordError] = field(default_factory=list)

    @property
    def has_errors(self) -> bool:
        return len(self.errors) > 0


def parse_worker(data: Any, index: int | None = None) -> WorkerRecord:
    """Validate one raw mapping and build a WorkerRecord.

    Raises:
        MalformedInputError: If the input is not a mapping, or a required
            field is missing, non-numeric or not finite
    """
    if not isinstance(data, Mapping):
        raise MalformedInputError(
            [{"loc": (), "msg": "Worker must be an object", "type": "dict_type"}],
            index=index,
        )
    try:
        return WorkerIn.model_validate(dict(data)).to_record()
    except ValidationError as e:
        raise MalformedInputError(e.errors(), index=index) from e


def parse_workers(
    items: Iterable[Any],
    policy: BatchErrorPolicy = BatchErrorPolicy.FAIL_FAST,
) -> ParsedBatch:
    """Parse a sequence of raw worker mappings.

    With ``FAIL_FAST`` the first malformed record raises
    :class:`MalformedInputError` carrying its index. With ``COLLECT`` every
    malformed record is reported in ``errors`` and the valid ones are kept in
    their original relative order.
    """
    batch = ParsedBatch()
    for i, item in enumerate(items):
        try:
            record = parse_worker(item, index=i)
        except MalformedInputError as e:
            if policy is BatchErrorPolicy.FAIL_FAST:
                raise
            logger.warning("Skipping malformed worker at index %d: %s", i, e)
            batch.errors.append(RecordError(index=i, errors=e.errors))
            continue
        batch.records.append(record)
        batch.indices.append(i)
    return batch
