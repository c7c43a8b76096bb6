import logging
from .base import BaseExtractor
from .models import ExtractionResult

logger = logging.getLogger(__name__)


def extract_plain_text(data: bytes) -> ExtractionResult:
    # Empty text is still a success for plain files
    try:
        text = data.decode("utf-8")
    except UnicodeDecodeError as e:
        logger.warning(f"Plain text decode failed: {e}")
        return ExtractionResult.fail(f"Failed to decode text file: {e}")
    return ExtractionResult.ok(text)


class PlainTextExtractor(BaseExtractor):
    async def extract(self, data: bytes) -> ExtractionResult:
        return extract_plain_text(data)
