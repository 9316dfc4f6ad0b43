from typing import Optional

from plate_inspection.domain.models import (
    FailureKind,
    Inspection,
    InspectionResult,
    Outcome,
    PlateReading,
)

# =========================
# Failure -> response mapping
# =========================

FAILURES = {
    FailureKind.ENGINE_UNAVAILABLE: (Outcome.SERVER_ERROR, "Recognition engine not available"),
    FailureKind.EMPTY_UPLOAD: (Outcome.CLIENT_ERROR, "No file provided or file is empty"),
    FailureKind.UNSUPPORTED_MEDIA_TYPE: (Outcome.CLIENT_ERROR, "File must be an image"),
    FailureKind.EMPTY_UPLOAD_DATA: (Outcome.CLIENT_ERROR, "Empty file data"),
    FailureKind.ENGINE_INVOCATION_FAILURE: (Outcome.SERVER_ERROR, "Recognition engine failed"),
    FailureKind.READ_FAILURE: (Outcome.SERVER_ERROR, "Error reading file"),
    FailureKind.UNEXPECTED_FAULT: (Outcome.SERVER_ERROR, "Unexpected error"),
}


def success(reading: PlateReading) -> Inspection:
    return Inspection(
        outcome=Outcome.SUCCESS,
        result=InspectionResult(
            is_clean=reading.is_clean,
            confidence=reading.confidence,
            plate_number=reading.plate_number,
        ),
    )


def failure(kind: FailureKind, detail: Optional[str] = None) -> Inspection:
    """
    Failure payload: isClean=False, confidence=0.0, plateNumber="" and a
    descriptive error, suffixed with `detail` when given.
    """
    outcome, message = FAILURES[kind]
    if detail:
        message = f"{message}: {detail}"
    return Inspection(
        outcome=outcome,
        result=InspectionResult(error=message),
        failure=kind,
    )
