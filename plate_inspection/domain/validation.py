from typing import FrozenSet, Optional

from plate_inspection.domain.models import FailureKind, UploadedImage, ValidationOutcome


class UploadValidator:
    """
    Structural and content-type checks run before any engine call.
    Checks short-circuit on the first failure.
    """
    def __init__(self, allowed_media_types: FrozenSet[str]):
        self.allowed_media_types = frozenset(allowed_media_types)

    def validate(self, upload: Optional[UploadedImage]) -> ValidationOutcome:
        if upload is None or upload.size == 0:
            return ValidationOutcome(failure=FailureKind.EMPTY_UPLOAD)

        if upload.content_type not in self.allowed_media_types:
            return ValidationOutcome(failure=FailureKind.UNSUPPORTED_MEDIA_TYPE)

        try:
            data = upload.read()
        except OSError as exc:
            return ValidationOutcome(failure=FailureKind.READ_FAILURE, detail=str(exc))

        if not data:
            return ValidationOutcome(failure=FailureKind.EMPTY_UPLOAD_DATA)

        return ValidationOutcome(data=data)
