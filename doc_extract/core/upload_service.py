import logging
from typing import Any, Dict, Optional

from doc_extract.core.config_loader import get_limits
from doc_extract.core.extractors.dispatcher import ExtractionDispatcher
from doc_extract.core.extractors.models import ExtractionResult
from doc_extract.core.validation import validate_uploaded_file, validate_transcript_content

logger = logging.getLogger(__name__)

class UploadService:
    """
    Runs an uploaded file through validation, extraction and content checks.
    """

    def __init__(self, config: Optional[Dict[str, Any]] = None, check_content: bool = True):
        self.config = config or {}
        self.limits = get_limits(self.config)
        self.check_content = check_content
        self.dispatcher = ExtractionDispatcher(self.config)

    async def process(self, file_buffer: bytes, file_name: str, mime_type: Optional[str]) -> ExtractionResult:
        validation = validate_uploaded_file(file_name, len(file_buffer), self.limits["max_file_size_mb"])
        if not validation.valid:
            logger.info(f"Upload rejected for {file_name!r}: {validation.error}")
            return ExtractionResult.fail(validation.error)

        result = await self.dispatcher.extract(file_buffer, file_name, mime_type)
        if not result.success:
            return result

        if self.check_content:
            content = validate_transcript_content(
                result.text,
                self.limits["min_words"],
                self.limits["max_words"],
            )
            if not content.valid:
                logger.info(f"Content rejected for {file_name!r}: {content.error}")
                return ExtractionResult.fail(content.error)

        return result


async def process_upload(
    file_buffer: bytes,
    file_name: str,
    mime_type: Optional[str],
    config: Optional[Dict[str, Any]] = None,
) -> ExtractionResult:
    return await UploadService(config).process(file_buffer, file_name, mime_type)
