import logging

import pytesseract

from plate_inspection.adapters.engine.stub_engine_adapter import StubEngineAdapter
from plate_inspection.adapters.engine.tesseract_engine_adapter import TesseractEngineAdapter
from plate_inspection.core.config import Settings
from plate_inspection.domain.models import EngineBinding

logger = logging.getLogger(__name__)


def _bind_tesseract(settings: Settings) -> EngineBinding:
    if settings.tesseract_cmd:
        pytesseract.pytesseract.tesseract_cmd = settings.tesseract_cmd

    try:
        version = pytesseract.get_tesseract_version()
    except (pytesseract.TesseractNotFoundError, OSError) as exc:
        return EngineBinding(available=False, backend="tesseract", reason=f"Tesseract not found: {exc}")

    detector = None
    if settings.model_path:
        try:
            # ultralytics is only imported when plate localization is configured
            from plate_inspection.adapters.detector.yolo_adapter import YoloAdapter
            detector = YoloAdapter(settings.model_path, conf=settings.conf, img_size=settings.img_size)
        except Exception as exc:
            return EngineBinding(
                available=False, backend="tesseract",
                reason=f"Plate detector failed to load: {type(exc).__name__}: {exc}",
            )

    logger.info("Tesseract %s bound (detector=%s)", version, "yolo" if detector else "none")
    engine = TesseractEngineAdapter(
        config=settings.tesseract_config,
        clean_threshold=settings.clean_threshold,
        detector=detector,
        debug_dir=settings.debug_dir,
    )
    return EngineBinding(available=True, engine=engine, backend=engine.name)


def bind_engine(settings: Settings) -> EngineBinding:
    """
    One-time engine bind, run before serving traffic. Never raises:
    a failure yields an unavailable binding for the life of the process.
    """
    backend = settings.engine_backend.lower()
    if backend == "stub":
        binding = EngineBinding(available=True, engine=StubEngineAdapter(), backend="stub")
    elif backend == "tesseract":
        binding = _bind_tesseract(settings)
    else:
        binding = EngineBinding(available=False, backend=backend, reason=f"Unknown engine backend: {backend!r}")

    if binding.available:
        logger.info("Recognition engine loaded: %s", binding.backend)
    else:
        logger.error("Failed to load recognition engine: %s", binding.reason)
    return binding
