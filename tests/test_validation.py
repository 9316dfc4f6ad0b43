# tests/test_validation.py
import pytest
from plate_inspection.domain.models import FailureKind, UploadedImage
from conftest import BrokenSource


def test_missing_upload_is_empty(validator):
    outcome = validator.validate(None)
    assert outcome.failure is FailureKind.EMPTY_UPLOAD
    assert not outcome.ok

def test_zero_declared_size_is_empty(validator, make_upload):
    outcome = validator.validate(make_upload(data=b"abc", size=0))
    assert outcome.failure is FailureKind.EMPTY_UPLOAD

def test_empty_upload_checked_before_media_type(validator, make_upload):
    outcome = validator.validate(make_upload(data=b"", content_type="text/plain", size=0))
    assert outcome.failure is FailureKind.EMPTY_UPLOAD

@pytest.mark.parametrize("content_type", [
    "text/plain", "IMAGE/PNG", "Image/Jpeg", "image/png; charset=x", "image/bmp", "", None,
])
def test_unsupported_media_types(validator, make_upload, content_type):
    outcome = validator.validate(make_upload(data=b"0123456789", content_type=content_type))
    assert outcome.failure is FailureKind.UNSUPPORTED_MEDIA_TYPE

@pytest.mark.parametrize("content_type", ["image/jpeg", "image/png", "image/gif", "image/webp"])
def test_allowed_media_types(validator, make_upload, content_type):
    outcome = validator.validate(make_upload(data=b"imagebytes", content_type=content_type))
    assert outcome.ok
    assert outcome.data == b"imagebytes"

def test_empty_data_despite_declared_size(validator, make_upload):
    outcome = validator.validate(make_upload(data=b"", size=100))
    assert outcome.failure is FailureKind.EMPTY_UPLOAD_DATA

def test_unknown_size_with_empty_data(validator, make_upload):
    upload = make_upload(data=b"")
    upload.size = None
    assert validator.validate(upload).failure is FailureKind.EMPTY_UPLOAD_DATA

def test_read_fault_is_read_failure(validator):
    upload = UploadedImage(source=BrokenSource(), content_type="image/png", size=10)
    outcome = validator.validate(upload)
    assert outcome.failure is FailureKind.READ_FAILURE
    assert outcome.detail == "disk gone"

def test_validation_does_not_touch_metadata(validator, make_upload):
    upload = make_upload(data=b"imagebytes", content_type="image/webp")
    validator.validate(upload)
    assert upload.content_type == "image/webp"
    assert upload.size == 10
