# tests/conftest.py
import io
import pytest
from plate_inspection.core.config import DEFAULT_MEDIA_TYPES
from plate_inspection.domain.models import EngineBinding, EngineError, UploadedImage
from plate_inspection.domain.services import InspectionService
from plate_inspection.domain.validation import UploadValidator


class FakeEngine:
    name = "fake"

    def __init__(self, plate="ABC123", clean=True, confidence=0.95, fail_on=None):
        self.plate = plate
        self.clean = clean
        self.confidence = confidence
        self.fail_on = fail_on or set()
        self.calls = []

    def _call(self, op, value):
        self.calls.append(op)
        if op in self.fail_on:
            raise EngineError(f"{op} crashed")
        return value

    def extract_plate_number(self, data):
        return self._call("extract_plate_number", self.plate)

    def is_plate_clean(self, data):
        return self._call("is_plate_clean", self.clean)

    def compute_confidence(self, data):
        return self._call("compute_confidence", self.confidence)


class BrokenSource:
    def read(self):
        raise OSError("disk gone")


@pytest.fixture
def allowed_types():
    return frozenset(DEFAULT_MEDIA_TYPES.split(","))

@pytest.fixture
def validator(allowed_types):
    return UploadValidator(allowed_types)

@pytest.fixture
def engine():
    return FakeEngine()

@pytest.fixture
def service(engine, validator):
    return InspectionService(EngineBinding(available=True, engine=engine, backend="fake"), validator)

@pytest.fixture
def make_upload():
    def _make(data=b"\x89PNG" + b"\x00" * 96, content_type="image/png", size=None):
        return UploadedImage(
            source=io.BytesIO(data),
            content_type=content_type,
            size=len(data) if size is None else size,
        )
    return _make
