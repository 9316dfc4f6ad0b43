from functools import lru_cache
import logging
import os
import re
import uuid
from typing import Optional

import cv2
import numpy as np
import pytesseract

from plate_inspection.domain import image_utils
from plate_inspection.domain.models import EngineError, PlateReading
from plate_inspection.ports.detector_port import PlateDetectorPort
from plate_inspection.ports.recognition_engine_port import RecognitionEnginePort

logger = logging.getLogger(__name__)

PLATE_CHARS_RE = re.compile(r"[^A-Za-z0-9-]")


def clean_plate_text(raw_text: str) -> str:
    return PLATE_CHARS_RE.sub("", raw_text or "")


def mean_confidence(confs) -> float:
    """Mean of Tesseract word confidences (0-100) scaled to 0-1; -1 marks non-words."""
    values = [float(c) for c in confs if float(c) >= 0]
    if not values:
        return 0.0
    return sum(values) / len(values) / 100.0


class TesseractEngineAdapter(RecognitionEnginePort):
    """
    Single-line Tesseract OCR over the (optionally YOLO-cropped) plate.
    The three capability calls share one memoized analysis per input.
    """
    name = "tesseract"

    def __init__(
        self,
        config: str,
        clean_threshold: float = 0.6,
        detector: Optional[PlateDetectorPort] = None,
        debug_dir: Optional[str] = None,
        cache_size: int = 16,
        crop_pad: int = 10,
    ):
        self.config = config
        self.crop_pad = crop_pad
        self.clean_threshold = clean_threshold
        self.detector = detector
        self.debug_dir = debug_dir
        self._analyze = lru_cache(maxsize=cache_size)(self._run_ocr)

    def extract_plate_number(self, data: bytes) -> str:
        return self._analyze(data).plate_number

    def is_plate_clean(self, data: bytes) -> bool:
        return self._analyze(data).is_clean

    def compute_confidence(self, data: bytes) -> float:
        return self._analyze(data).confidence

    def _locate(self, img: np.ndarray) -> np.ndarray:
        if self.detector is None:
            return img
        box = self.detector.locate_plate(img)
        if box is None:
            logger.info("No plate located, using full frame")
            return img
        # Pad the box, clamped to the frame
        img_h, img_w = img.shape[:2]
        top, left = max(0, box.y - self.crop_pad), max(0, box.x - self.crop_pad)
        bottom = min(img_h, box.y + box.h + self.crop_pad)
        right = min(img_w, box.x + box.w + self.crop_pad)
        return img[top:bottom, left:right]

    def _save_debug(self, thr: np.ndarray):
        os.makedirs(self.debug_dir, exist_ok=True)
        path = f"{self.debug_dir}/{uuid.uuid4().hex[:8]}_processed.png"
        if cv2.imwrite(path, thr):
            logger.debug("Processed image saved at: %s", path)
        else:
            logger.warning("Failed to save processed image at: %s", path)

    def _run_ocr(self, data: bytes) -> PlateReading:
        img = image_utils.decode_image(data)
        if img is None:
            raise EngineError("Could not decode image")

        try:
            thr = image_utils.preprocess_for_ocr(self._locate(img))
        except (ValueError, cv2.error) as exc:
            raise EngineError(f"Preprocessing failed: {exc}") from exc

        if self.debug_dir:
            self._save_debug(thr)

        try:
            ocr = pytesseract.image_to_data(
                thr, config=self.config, output_type=pytesseract.Output.DICT
            )
        except (pytesseract.TesseractError, RuntimeError) as exc:
            raise EngineError(f"OCR failed: {exc}") from exc

        words = [(t, c) for t, c in zip(ocr.get("text", []), ocr.get("conf", [])) if str(t).strip()]
        plate_number = clean_plate_text("".join(str(t) for t, _ in words))
        confidence = mean_confidence(c for _, c in words)
        is_clean = bool(plate_number) and confidence >= self.clean_threshold

        logger.debug("OCR detected plate: %r (confidence=%.2f)", plate_number, confidence)
        return PlateReading(plate_number=plate_number, is_clean=is_clean, confidence=confidence)
