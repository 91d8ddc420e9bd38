"""Tests for converting raw worker mappings into records."""

import subprocess
import sys

import pytest

from payroll_calc.boundary import (
    BatchErrorPolicy,
    MalformedInputError,
    parse_worker,
    parse_workers,
)
from payroll_calc.calculators.calculator import compute


class TestParseWorker:
    """Single mapping validation."""

    def test_camel_case_mapping(self, worker_payload, reference_worker):
        record = parse_worker(worker_payload)

        assert record.id == "w-001"
        assert record.basic_salary == 6000
        assert record.work_nature_allowance == 500
        assert record.total_overtime_hours == 10
        assert compute(record) == compute(reference_worker)

    def test_legacy_field_names(self, worker_payload):
        """workNature/transport/phone/food/totalOvertime are accepted."""
        legacy = {
            "id": "w-001",
            "name": "Reference Worker",
            "basicSalary": 6000,
            "housing": 1000,
            "workNature": 500,
            "transport": 300,
            "phone": 100,
            "food": 200,
            "totalOvertime": 10,
            "absentDays": 2,
        }

        assert parse_worker(legacy) == parse_worker(worker_payload)

    def test_absent_optional_fields_are_none(self, worker_payload):
        del worker_payload["totalOvertimeHours"]
        del worker_payload["absentDays"]

        record = parse_worker(worker_payload)

        assert record.total_overtime_hours is None
        assert record.absent_days is None
        assert record.commission is None

    def test_null_optional_field_is_none(self, worker_payload):
        worker_payload["advances"] = None
        assert parse_worker(worker_payload).advances is None

    def test_explicit_zero_is_kept(self, worker_payload):
        worker_payload["penalties"] = 0
        assert parse_worker(worker_payload).penalties == 0

    def test_unknown_keys_are_ignored(self, worker_payload):
        worker_payload["jobTitle"] = "Engineer"
        assert parse_worker(worker_payload).name == "Reference Worker"

    def test_missing_required_field(self, worker_payload):
        """Required fields are never defaulted to zero."""
        del worker_payload["basicSalary"]

        with pytest.raises(MalformedInputError) as exc_info:
            parse_worker(worker_payload)

        locs = [err["loc"] for err in exc_info.value.errors]
        assert ("basicSalary",) in locs
        assert "basicSalary" in str(exc_info.value)

    def test_non_numeric_required_field(self, worker_payload):
        worker_payload["housing"] = "1000"

        with pytest.raises(MalformedInputError):
            parse_worker(worker_payload)

    def test_non_numeric_optional_field(self, worker_payload):
        worker_payload["absentDays"] = "two"

        with pytest.raises(MalformedInputError):
            parse_worker(worker_payload)

    @pytest.mark.parametrize("value", [float("nan"), float("inf"), float("-inf")])
    def test_non_finite_amount(self, worker_payload, value):
        worker_payload["basicSalary"] = value

        with pytest.raises(MalformedInputError):
            parse_worker(worker_payload)

    def test_not_a_mapping(self):
        with pytest.raises(MalformedInputError) as exc_info:
            parse_worker([1, 2, 3])

        assert exc_info.value.index is None

    def test_negative_amounts_pass_through(self, worker_payload):
        worker_payload["penalties"] = -25
        assert parse_worker(worker_payload).penalties == -25


class TestParseWorkers:
    """Batch parsing policies."""

    @pytest.fixture
    def mixed_batch(self, worker_payload):
        bad = dict(worker_payload)
        del bad["housing"]
        second = dict(worker_payload, id="w-002")
        return [worker_payload, bad, second, "not a worker"]

    def test_all_valid(self, worker_payload):
        batch = parse_workers([worker_payload, dict(worker_payload, id="w-002")])

        assert [r.id for r in batch.records] == ["w-001", "w-002"]
        assert batch.indices == [0, 1]
        assert not batch.has_errors

    def test_empty(self):
        batch = parse_workers([])

        assert batch.records == []
        assert batch.errors == []

    def test_fail_fast_reports_index(self, mixed_batch):
        with pytest.raises(MalformedInputError) as exc_info:
            parse_workers(mixed_batch, policy=BatchErrorPolicy.FAIL_FAST)

        assert exc_info.value.index == 1
        assert "index 1" in str(exc_info.value)

    def test_collect_keeps_valid_records_in_order(self, mixed_batch):
        batch = parse_workers(mixed_batch, policy=BatchErrorPolicy.COLLECT)

        assert [r.id for r in batch.records] == ["w-001", "w-002"]
        assert batch.indices == [0, 2]
        assert [e.index for e in batch.errors] == [1, 3]
        assert batch.has_errors

    def test_record_error_to_dict(self, mixed_batch):
        batch = parse_workers(mixed_batch, policy=BatchErrorPolicy.COLLECT)
        data = batch.errors[0].to_dict()

        assert data["index"] == 1
        assert data["errors"][0]["loc"] == ["housing"]


class TestBoundaryIsolation:
    """The boundary works without the HTTP layer."""

    def test_cli_path_does_not_import_api(self):
        code = (
            "import sys, payroll_calc.boundary, payroll_calc.cli; "
            "loaded = [m for m in sys.modules if m.startswith('payroll_calc.api')]; "
            "print(','.join(loaded))"
        )
        out = subprocess.run(
            [sys.executable, "-c", code],
            capture_output=True,
            text=True,
            check=True,
        )

        assert out.stdout.strip() == ""
