from typing import Protocol


class RecognitionEnginePort(Protocol):
    """
    Capabilities of a plate-recognition backend. Each call raises
    EngineError on internal fault and must be safe to call concurrently.
    """
    name: str

    def extract_plate_number(self, data: bytes) -> str:
        ...

    def is_plate_clean(self, data: bytes) -> bool:
        ...

    def compute_confidence(self, data: bytes) -> float:
        ...
