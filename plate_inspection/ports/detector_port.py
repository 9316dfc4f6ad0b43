from typing import Protocol, Optional
import numpy as np
from plate_inspection.domain.models import BoundingBox


class PlateDetectorPort(Protocol):
    def locate_plate(self, img_bgr: np.ndarray) -> Optional[BoundingBox]:
        ...
