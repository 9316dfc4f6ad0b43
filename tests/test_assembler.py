# tests/test_assembler.py
import pytest
from plate_inspection.domain import assembler
from plate_inspection.domain.models import FailureKind, Outcome, PlateReading

CLIENT_ERRORS = {
    FailureKind.EMPTY_UPLOAD,
    FailureKind.UNSUPPORTED_MEDIA_TYPE,
    FailureKind.EMPTY_UPLOAD_DATA,
}


@pytest.mark.parametrize("kind", list(FailureKind))
def test_every_failure_kind_is_mapped(kind):
    inspection = assembler.failure(kind)
    expected = Outcome.CLIENT_ERROR if kind in CLIENT_ERRORS else Outcome.SERVER_ERROR

    assert inspection.outcome is expected
    assert inspection.failure is kind
    assert inspection.payload["isClean"] is False
    assert inspection.payload["confidence"] == 0.0
    assert inspection.payload["plateNumber"] == ""
    assert inspection.payload["error"]

def test_failure_detail_is_appended():
    inspection = assembler.failure(FailureKind.UNEXPECTED_FAULT, "KeyError: 'x'")
    assert inspection.payload["error"] == "Unexpected error: KeyError: 'x'"

def test_success_payload():
    inspection = assembler.success(PlateReading(plate_number="", is_clean=False, confidence=1.7))
    assert inspection.outcome is Outcome.SUCCESS
    assert inspection.payload == {"isClean": False, "confidence": 1.7, "plateNumber": "", "error": None}
