from typing import Optional
import numpy as np
from ultralytics import YOLO
from plate_inspection.ports.detector_port import PlateDetectorPort
from plate_inspection.domain.models import BoundingBox


class YoloAdapter(PlateDetectorPort):
    def __init__(self, model_path: str, conf: float = 0.25, img_size: int = 640):
        self.model = YOLO(model_path)
        self.conf = conf
        self.img_size = img_size

    def locate_plate(self, img_bgr: np.ndarray) -> Optional[BoundingBox]:
        results = self.model.predict(
            img_bgr,
            imgsz=self.img_size,
            conf=self.conf,
            verbose=False
        )[0]

        if results.boxes is None or len(results.boxes) == 0:
            return None

        boxes = results.boxes
        conf_arr = boxes.conf.cpu().numpy().reshape(-1)
        best = boxes[int(conf_arr.argmax())]
        x1, y1, x2, y2 = map(float, best.xyxy[0])

        img_h, img_w = img_bgr.shape[:2]
        x1 = max(0, min(int(x1), img_w - 1))
        y1 = max(0, min(int(y1), img_h - 1))
        x2 = max(x1 + 1, min(int(x2), img_w))
        y2 = max(y1 + 1, min(int(y2), img_h))

        return BoundingBox(x=x1, y=y1, w=x2 - x1, h=y2 - y1)
