import logging
import math
from typing import Optional

from pydantic import ValidationError

from plate_inspection.domain import assembler
from plate_inspection.domain.models import (
    EngineBinding,
    EngineError,
    FailureKind,
    Inspection,
    PlateReading,
    UploadedImage,
)
from plate_inspection.domain.validation import UploadValidator
from plate_inspection.ports.recognition_engine_port import RecognitionEnginePort

logger = logging.getLogger(__name__)


def read_plate(engine: RecognitionEnginePort, data: bytes) -> PlateReading:
    """
    Runs the three engine capabilities as one inspection over the same bytes.
    Any failing call aborts the whole read; partial values are discarded.
    Non-EngineError faults, mistyped values and non-finite confidence are
    all raised as EngineError.
    """
    try:
        plate_number = engine.extract_plate_number(data)
        is_clean = engine.is_plate_clean(data)
        confidence = engine.compute_confidence(data)
        reading = PlateReading(
            plate_number=plate_number or "",
            is_clean=is_clean,
            confidence=confidence,
        )
    except EngineError:
        raise
    except ValidationError as exc:
        fields = ", ".join(str(err["loc"][0]) for err in exc.errors() if err["loc"])
        raise EngineError(f"Invalid engine output for: {fields}") from exc
    except Exception as exc:
        raise EngineError(f"{type(exc).__name__}: {exc}") from exc

    # JSON has no NaN/Infinity
    if not math.isfinite(reading.confidence):
        raise EngineError(f"Non-finite confidence: {reading.confidence}")
    return reading


class InspectionService:
    """
    validation -> engine invocation -> result mapping.
    Holds no per-request state; the binding is read-only.
    """
    def __init__(self, binding: EngineBinding, validator: UploadValidator):
        self.binding = binding
        self.validator = validator

    def inspect(self, upload: Optional[UploadedImage]) -> Inspection:
        try:
            return self._inspect(upload)
        except Exception as exc:
            logger.exception("Unexpected inspection fault")
            return assembler.failure(FailureKind.UNEXPECTED_FAULT, str(exc))

    def _inspect(self, upload: Optional[UploadedImage]) -> Inspection:
        if not self.binding.available:
            logger.error("Inspection rejected: engine not bound (%s)", self.binding.reason)
            return assembler.failure(FailureKind.ENGINE_UNAVAILABLE)

        validation = self.validator.validate(upload)
        if not validation.ok:
            if validation.failure is FailureKind.READ_FAILURE:
                logger.error("Could not read upload: %s", validation.detail)
            else:
                logger.warning("Upload rejected: %s", validation.failure.value)
            return assembler.failure(validation.failure, validation.detail)

        data = validation.data
        logger.info("Processing %d bytes", len(data))

        try:
            reading = read_plate(self.binding.engine, data)
        except EngineError as exc:
            logger.error("Engine invocation failed: %s", exc)
            return assembler.failure(FailureKind.ENGINE_INVOCATION_FAILURE, str(exc))

        logger.info(
            "Success: clean=%s, confidence=%s, plate=%s",
            reading.is_clean, reading.confidence, reading.plate_number,
        )
        return assembler.success(reading)
