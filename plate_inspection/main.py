from fastapi import FastAPI, Request
from fastapi.exception_handlers import request_validation_exception_handler
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from plate_inspection.api.routers import router, get_engine_binding, OUTCOME_STATUS, INSPECT_PATH
from plate_inspection.core.config import settings
from plate_inspection.core.logging_config import setup_logging
from plate_inspection.domain import assembler
from plate_inspection.domain.models import FailureKind

app = FastAPI(title="Plate Inspection Service", version="1.0.0")


@app.on_event("startup")
def bind_recognition_engine():
    setup_logging(settings.log_level)
    # Bind once before serving traffic; the result is cached for the process
    get_engine_binding()


@app.exception_handler(RequestValidationError)
async def inspection_validation_handler(request: Request, exc: RequestValidationError):
    # A `file` field that is not a file upload counts as no upload
    if request.url.path != INSPECT_PATH:
        return await request_validation_exception_handler(request, exc)
    binding = app.dependency_overrides.get(get_engine_binding, get_engine_binding)()
    if binding.available:
        inspection = assembler.failure(FailureKind.EMPTY_UPLOAD)
    else:
        inspection = assembler.failure(FailureKind.ENGINE_UNAVAILABLE)
    return JSONResponse(
        status_code=OUTCOME_STATUS[inspection.outcome],
        content=inspection.payload,
    )


app.include_router(router)
