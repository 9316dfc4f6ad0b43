from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field


class FailureKind(str, Enum):
    ENGINE_UNAVAILABLE = "EngineUnavailable"
    EMPTY_UPLOAD = "EmptyUpload"
    UNSUPPORTED_MEDIA_TYPE = "UnsupportedMediaType"
    EMPTY_UPLOAD_DATA = "EmptyUploadData"
    ENGINE_INVOCATION_FAILURE = "EngineInvocationFailure"
    READ_FAILURE = "ReadFailure"
    UNEXPECTED_FAULT = "UnexpectedFault"


class Outcome(str, Enum):
    SUCCESS = "success"
    CLIENT_ERROR = "client_error"
    SERVER_ERROR = "server_error"


class EngineError(Exception):
    """Raised by recognition engines on any internal fault."""


class UploadedImage(BaseModel):
    """
    Single inbound file. `source` is read once by the validator;
    `size` is the declared size and may be unknown (None).
    """
    source: Any
    content_type: Optional[str] = None
    size: Optional[int] = None
    file_name: Optional[str] = None

    def read(self) -> bytes:
        return self.source.read()


class BoundingBox(BaseModel):
    x: int
    y: int
    w: int
    h: int


class PlateReading(BaseModel):
    plate_number: str
    is_clean: bool
    confidence: float


class InspectionResult(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    is_clean: bool = Field(False, alias="isClean")
    confidence: float = 0.0
    plate_number: str = Field("", alias="plateNumber")
    error: Optional[str] = None


class ValidationOutcome(BaseModel):
    data: Optional[bytes] = None
    failure: Optional[FailureKind] = None
    detail: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.failure is None


class Inspection(BaseModel):
    """Assembled response: payload plus its outcome classification."""
    outcome: Outcome
    result: InspectionResult
    failure: Optional[FailureKind] = None

    @property
    def payload(self) -> dict:
        return self.result.model_dump(by_alias=True)


class EngineBinding(BaseModel):
    """
    Result of the one-time startup bind. Immutable for the process
    lifetime; a failed bind stays failed.
    """
    model_config = ConfigDict(frozen=True)

    available: bool
    engine: Any = None
    backend: str = ""
    reason: Optional[str] = None
