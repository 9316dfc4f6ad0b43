from functools import lru_cache
from typing import Optional
from fastapi import APIRouter, UploadFile, File, Depends
from fastapi.responses import JSONResponse
from plate_inspection.core.config import settings
from plate_inspection.core.engine import bind_engine
from plate_inspection.domain.models import EngineBinding, Outcome, UploadedImage
from plate_inspection.domain.services import InspectionService
from plate_inspection.domain.validation import UploadValidator

router = APIRouter()

INSPECT_PATH = "/inspect-plate"

OUTCOME_STATUS = {
    Outcome.SUCCESS: 200,
    Outcome.CLIENT_ERROR: 400,
    Outcome.SERVER_ERROR: 500,
}

# Dependency Injection (Cached)
@lru_cache()
def get_engine_binding() -> EngineBinding:
    return bind_engine(settings)

@lru_cache()
def get_validator() -> UploadValidator:
    return UploadValidator(settings.allowed_media_types)

def get_inspection_service(
    binding: EngineBinding = Depends(get_engine_binding),
    validator: UploadValidator = Depends(get_validator),
) -> InspectionService:
    return InspectionService(binding, validator)


def _to_upload(file: Optional[UploadFile]) -> Optional[UploadedImage]:
    if file is None:
        return None
    return UploadedImage(
        source=file.file,
        content_type=file.content_type,
        size=file.size,
        file_name=file.filename,
    )


# Sync handler: Starlette runs it on the threadpool, one thread per request
@router.post(INSPECT_PATH)
def inspect_plate(
    file: Optional[UploadFile] = File(None),
    service: InspectionService = Depends(get_inspection_service),
):
    inspection = service.inspect(_to_upload(file))
    return JSONResponse(
        status_code=OUTCOME_STATUS[inspection.outcome],
        content=inspection.payload,
    )


@router.get("/health")
def health(binding: EngineBinding = Depends(get_engine_binding)):
    return {
        "status": "ok",
        "engineAvailable": binding.available,
        "engine": binding.backend,
    }
