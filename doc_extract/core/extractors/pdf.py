import asyncio
import io
import logging

from pypdf import PdfReader
from pypdf.errors import FileNotDecryptedError, WrongPasswordError

from .base import BaseExtractor
from .models import ExtractionResult

logger = logging.getLogger(__name__)

EMPTY_PDF_ERROR = "PDF contains no extractable text. It may be image-only or corrupted."
PROTECTED_PDF_ERROR = "PDF is password-protected. Please provide an unprotected version."


def is_password_error(exc: BaseException) -> bool:
    """
    True when the parse failed because the PDF is encrypted.
    pypdf raises FileNotDecryptedError / WrongPasswordError for that; the message
    check catches other versions that only say so in text.
    """
    if isinstance(exc, (FileNotDecryptedError, WrongPasswordError)):
        return True
    return "password" in str(exc)


def _read_pdf_text(data: bytes) -> str:
    reader = PdfReader(io.BytesIO(data))
    if reader.is_encrypted and not reader.decrypt(""):
        raise FileNotDecryptedError("PDF requires a password to open")

    pages = []
    for page in reader.pages:
        pages.append(page.extract_text() or "")
    return "\n".join(pages)


async def extract_pdf(data: bytes) -> ExtractionResult:
    try:
        text = await asyncio.to_thread(_read_pdf_text, data)
    except Exception as e:
        if is_password_error(e):
            logger.warning(f"PDF is encrypted: {e}")
            return ExtractionResult.fail(PROTECTED_PDF_ERROR)
        logger.warning(f"PDF extraction failed: {e}")
        return ExtractionResult.fail(f"Failed to extract text from PDF: {e}")

    if not text or not text.strip():
        # Scanned / image-only documents have no text layer
        return ExtractionResult.fail(EMPTY_PDF_ERROR)

    return ExtractionResult.ok(text)


class PdfExtractor(BaseExtractor):
    async def extract(self, data: bytes) -> ExtractionResult:
        return await extract_pdf(data)
