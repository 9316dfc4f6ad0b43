from plate_inspection.ports.recognition_engine_port import RecognitionEnginePort


class StubEngineAdapter(RecognitionEnginePort):
    """Temporary stub that returns a fixed reading.
    Useful for running the service without Tesseract installed.
    """
    name = "stub"

    def __init__(self, plate_number: str = "ABC1234", is_clean: bool = True, confidence: float = 0.91):
        self.plate_number = plate_number
        self.is_clean = is_clean
        self.confidence = confidence

    def extract_plate_number(self, data: bytes) -> str:
        return self.plate_number

    def is_plate_clean(self, data: bytes) -> bool:
        return self.is_clean

    def compute_confidence(self, data: bytes) -> float:
        return self.confidence
