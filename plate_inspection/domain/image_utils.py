from typing import Optional
import numpy as np
import cv2


def decode_image(data: bytes) -> Optional[np.ndarray]:
    img_array = np.frombuffer(data, np.uint8)
    return cv2.imdecode(img_array, cv2.IMREAD_COLOR)


def preprocess_for_ocr(plate_bgr: np.ndarray, min_w: int = 100, min_h: int = 30) -> np.ndarray:
    """
    Binary image ready for single-line OCR (white text, black background).
    Small crops are upscaled to 300x60.
    """
    if plate_bgr is None or plate_bgr.size == 0:
        raise ValueError("Empty plate image")

    # 1) Gray
    gray = cv2.cvtColor(plate_bgr, cv2.COLOR_BGR2GRAY)

    # 2) Adaptive threshold for character contrast
    thr = cv2.adaptiveThreshold(
        gray, 255,
        cv2.ADAPTIVE_THRESH_GAUSSIAN_C,
        cv2.THRESH_BINARY,
        31, 15
    )

    # 3) Invert
    thr = cv2.bitwise_not(thr)

    # 4) Upscale tiny crops
    if thr.shape[0] < min_h or thr.shape[1] < min_w:
        thr = cv2.resize(thr, (300, 60), interpolation=cv2.INTER_CUBIC)

    return thr
