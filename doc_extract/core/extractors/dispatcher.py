import logging
from typing import Optional

from .models import DocumentKind, ExtractionResult
from .registry import ExtractorRegistry

logger = logging.getLogger(__name__)

SUPPORTED_EXTENSIONS = (".txt", ".md", ".pdf", ".docx")

MIME_PLAIN = "text/plain"
MIME_MARKDOWN = "text/markdown"
MIME_PDF = "application/pdf"
MIME_DOCX = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"


def file_extension(file_name: str) -> str:
    """Lower-cased text after the last '.', or the whole name if there is none."""
    return file_name.lower().rsplit(".", 1)[-1]


def classify(file_name: str, mime_type: Optional[str]) -> DocumentKind:
    """
    Pick a document kind. Extension is checked before MIME type within each
    rule and the first matching rule wins.
    """
    ext = file_extension(file_name)

    if ext == "txt" or mime_type == MIME_PLAIN:
        return DocumentKind.PLAIN_TEXT
    if ext == "md" or mime_type == MIME_MARKDOWN:
        return DocumentKind.PLAIN_TEXT
    if ext == "pdf" or mime_type == MIME_PDF:
        return DocumentKind.PDF
    if ext == "docx" or mime_type == MIME_DOCX:
        return DocumentKind.DOCX
    return DocumentKind.UNSUPPORTED


def unsupported_type_error(ext: str) -> str:
    return f"Unsupported file type: {ext}. Supported: {', '.join(SUPPORTED_EXTENSIONS)}"


class ExtractionDispatcher:
    def __init__(self, config: Optional[dict] = None):
        self.config = config or {}
        self.registry = ExtractorRegistry(self.config)

    async def extract(self, file_buffer: bytes, file_name: str, mime_type: Optional[str]) -> ExtractionResult:
        """
        Extract text from an uploaded file. Never raises: every failure is
        reported through ExtractionResult.error.
        """
        try:
            kind = classify(file_name, mime_type)
            extractor = self.registry.get(kind)

            if extractor is None:
                # Unsupported, or the strategy is switched off in config
                return ExtractionResult.fail(unsupported_type_error(file_extension(file_name)))

            logger.debug(f"Extracting {file_name!r} as {kind.value}")
            return await extractor.extract(file_buffer)
        except Exception as e:
            logger.exception(f"Error extracting text from {file_name!r}")
            return ExtractionResult.fail(f"Failed to extract text: {e}")


async def extract_text_from_file(
    file_buffer: bytes,
    file_name: str,
    mime_type: Optional[str],
    config: Optional[dict] = None,
) -> ExtractionResult:
    return await ExtractionDispatcher(config).extract(file_buffer, file_name, mime_type)
