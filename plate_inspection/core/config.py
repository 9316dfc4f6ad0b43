from pydantic import BaseModel
import os
from typing import FrozenSet, Optional

DEFAULT_MEDIA_TYPES = "image/jpeg,image/png,image/gif,image/webp"


def _media_types(raw: str) -> FrozenSet[str]:
    # Exact strings, case preserved
    return frozenset(t.strip() for t in raw.split(",") if t.strip())


class Settings(BaseModel):
    engine_backend: str = os.getenv("ENGINE_BACKEND", "tesseract")
    allowed_media_types: FrozenSet[str] = _media_types(
        os.getenv("ALLOWED_MEDIA_TYPES", DEFAULT_MEDIA_TYPES)
    )

    tesseract_cmd: Optional[str] = os.getenv("TESSERACT_CMD")
    tesseract_config: str = os.getenv(
        "TESSERACT_CONFIG",
        r"--oem 3 --psm 7 -c tessedit_char_whitelist=ABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789-",
    )
    clean_threshold: float = float(os.getenv("CLEAN_THRESHOLD", "0.6"))

    # Optional YOLO plate localization before OCR
    model_path: Optional[str] = os.getenv("MODEL_PATH") or None
    conf: float = float(os.getenv("CONF", "0.25"))
    img_size: int = int(os.getenv("IMG_SIZE", "640"))

    debug_dir: Optional[str] = os.getenv("DEBUG_DIR") or None
    log_level: str = os.getenv("LOG_LEVEL", "INFO")

settings = Settings()
