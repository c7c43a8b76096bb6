import asyncio
import io
import logging

from docx import Document
from docx.table import Table
from docx.text.paragraph import Paragraph

from .base import BaseExtractor
from .models import ExtractionResult

logger = logging.getLogger(__name__)

EMPTY_DOCX_ERROR = "DOCX contains no extractable text. It may be empty or corrupted."


def _block_texts(container) -> list:
    """Paragraph texts of a document body or table cell, tables included, in order."""
    text = []
    for block in container.iter_inner_content():
        if isinstance(block, Table):
            text.extend(_table_texts(block))
        elif isinstance(block, Paragraph):
            text.append(block.text)
    return text


def _table_texts(table: Table) -> list:
    text = []
    # Merged cells are repeated in row.cells, across columns and across rows
    seen = []
    for row in table.rows:
        for cell in row.cells:
            if cell._tc in seen:
                continue
            seen.append(cell._tc)
            text.extend(_block_texts(cell))
    return text


def _read_docx_text(data: bytes) -> str:
    doc = Document(io.BytesIO(data))
    return "\n".join(_block_texts(doc))


async def extract_docx(data: bytes) -> ExtractionResult:
    try:
        text = await asyncio.to_thread(_read_docx_text, data)
    except Exception as e:
        logger.warning(f"DOCX extraction failed: {e}")
        return ExtractionResult.fail(f"Failed to extract text from DOCX: {e}")

    if not text or not text.strip():
        return ExtractionResult.fail(EMPTY_DOCX_ERROR)

    return ExtractionResult.ok(text)


class DocxExtractor(BaseExtractor):
    async def extract(self, data: bytes) -> ExtractionResult:
        return await extract_docx(data)
