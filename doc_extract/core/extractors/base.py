from abc import ABC, abstractmethod
from typing import Optional

from .models import ExtractionResult

class BaseExtractor(ABC):
    def __init__(self, config: Optional[dict] = None):
        self.config = config or {}

    @abstractmethod
    async def extract(self, data: bytes) -> ExtractionResult:
        """
        Extract text from the raw file bytes.
        Failures are returned as ExtractionResult.fail, not raised.
        """
        pass
