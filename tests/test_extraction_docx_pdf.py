import asyncio
import io
import pytest
from unittest.mock import MagicMock, patch
from docx import Document
from docx.text.paragraph import Paragraph
from pypdf import PdfWriter
from pypdf.errors import FileNotDecryptedError, PdfReadError
from doc_extract.core.extractors.dispatcher import extract_text_from_file
from doc_extract.core.extractors.docx import DocxExtractor, EMPTY_DOCX_ERROR
from doc_extract.core.extractors.models import ExtractionResult
from doc_extract.core.extractors.pdf import (
    PdfExtractor,
    is_password_error,
    EMPTY_PDF_ERROR,
    PROTECTED_PDF_ERROR,
)

# Library doubles let us test our own handling without real documents.

@pytest.fixture
def mock_pdf_reader():
    with patch("doc_extract.core.extractors.pdf.PdfReader") as m:
        pdf_mock = MagicMock()
        pdf_mock.is_encrypted = False
        page_mock = MagicMock()
        page_mock.extract_text.return_value = "Pdf Page Content"
        pdf_mock.pages = [page_mock]
        m.return_value = pdf_mock
        yield m

@pytest.fixture
def mock_docx():
    with patch("doc_extract.core.extractors.docx.Document") as m:
        doc_mock = MagicMock()
        para_mock = MagicMock(spec=Paragraph)
        para_mock.text = "Body text"
        doc_mock.iter_inner_content.return_value = [para_mock]
        m.return_value = doc_mock
        yield m


def test_pdf_extractor_text(mock_pdf_reader):
    res = asyncio.run(PdfExtractor({}).extract(b"%PDF-1.7"))
    assert res == ExtractionResult(success=True, text="Pdf Page Content", error=None)

def test_pdf_pages_joined_untrimmed(mock_pdf_reader):
    first, second = MagicMock(), MagicMock()
    first.extract_text.return_value = "  Page one "
    second.extract_text.return_value = "Page two\n"
    mock_pdf_reader.return_value.pages = [first, second]

    res = asyncio.run(PdfExtractor().extract(b"%PDF"))
    assert res.text == "  Page one \nPage two\n"

def test_pdf_whitespace_only(mock_pdf_reader):
    mock_pdf_reader.return_value.pages[0].extract_text.return_value = "   "
    res = asyncio.run(PdfExtractor().extract(b"%PDF"))
    assert res == ExtractionResult.fail(EMPTY_PDF_ERROR)
    assert res.error == "PDF contains no extractable text. It may be image-only or corrupted."

def test_pdf_password_message(mock_pdf_reader):
    mock_pdf_reader.side_effect = Exception("Incorrect password")
    res = asyncio.run(PdfExtractor().extract(b"%PDF"))
    assert res.error == "PDF is password-protected. Please provide an unprotected version."
    assert res.text == ""

def test_pdf_not_decrypted_error(mock_pdf_reader):
    mock_pdf_reader.side_effect = FileNotDecryptedError("File has not been decrypted")
    res = asyncio.run(PdfExtractor().extract(b"%PDF"))
    assert res.error == PROTECTED_PDF_ERROR

def test_pdf_other_failure(mock_pdf_reader):
    mock_pdf_reader.side_effect = PdfReadError("EOF marker not found")
    res = asyncio.run(PdfExtractor().extract(b"%PDF"))
    assert res.error == "Failed to extract text from PDF: EOF marker not found"

def test_is_password_error():
    assert is_password_error(FileNotDecryptedError("x"))
    assert is_password_error(ValueError("bad password supplied"))
    assert not is_password_error(ValueError("broken xref"))


def test_real_blank_pdf_has_no_text():
    writer = PdfWriter()
    writer.add_blank_page(width=200, height=200)
    buf = io.BytesIO()
    writer.write(buf)

    res = asyncio.run(extract_text_from_file(buf.getvalue(), "scan.pdf", "application/pdf"))
    assert res.error == EMPTY_PDF_ERROR

def test_real_encrypted_pdf():
    writer = PdfWriter()
    writer.add_blank_page(width=200, height=200)
    writer.encrypt("secret")
    buf = io.BytesIO()
    writer.write(buf)

    res = asyncio.run(extract_text_from_file(buf.getvalue(), "locked.pdf", "application/pdf"))
    assert res.error == PROTECTED_PDF_ERROR


def test_docx_extractor(mock_docx):
    res = asyncio.run(DocxExtractor({}).extract(b"PK"))
    assert res == ExtractionResult(success=True, text="Body text", error=None)

def test_docx_whitespace_only(mock_docx):
    mock_docx.return_value.iter_inner_content.return_value[0].text = " \n\t"
    res = asyncio.run(DocxExtractor().extract(b"PK"))
    assert res.error == EMPTY_DOCX_ERROR

def test_docx_failure(mock_docx):
    mock_docx.side_effect = ValueError("not a zip file")
    res = asyncio.run(DocxExtractor().extract(b"PK"))
    assert res.error == "Failed to extract text from DOCX: not a zip file"

def test_real_docx_round_trip():
    doc = Document()
    doc.add_paragraph("Decision: ship on Friday")
    doc.add_paragraph("Owner: platform team")
    buf = io.BytesIO()
    doc.save(buf)

    res = asyncio.run(extract_text_from_file(buf.getvalue(), "minutes.docx", None))
    assert res.success
    assert res.text == "Decision: ship on Friday\nOwner: platform team"

def test_real_empty_docx():
    buf = io.BytesIO()
    Document().save(buf)
    res = asyncio.run(extract_text_from_file(buf.getvalue(), "blank.docx", None))
    assert res.error == EMPTY_DOCX_ERROR

def test_real_docx_table_only():
    doc = Document()
    table = doc.add_table(rows=1, cols=2)
    table.cell(0, 0).text = "Decision"
    table.cell(0, 1).text = "Ship Friday"
    buf = io.BytesIO()
    doc.save(buf)

    res = asyncio.run(extract_text_from_file(buf.getvalue(), "minutes.docx", None))
    assert res == ExtractionResult.ok("Decision\nShip Friday")

def test_real_docx_tables_in_document_order():
    doc = Document()
    doc.add_paragraph("Attendees")
    table = doc.add_table(rows=2, cols=2)
    table.cell(0, 0).text = "Owner"
    table.cell(0, 1).text = "Item"
    table.cell(1, 0).text = "Dana"
    table.cell(1, 1).text = "Budget"
    doc.add_paragraph("Next meeting: Monday")
    buf = io.BytesIO()
    doc.save(buf)

    res = asyncio.run(extract_text_from_file(buf.getvalue(), "minutes.docx", None))
    assert res.text == "Attendees\nOwner\nItem\nDana\nBudget\nNext meeting: Monday"

def test_real_docx_merged_cells_read_once():
    doc = Document()
    table = doc.add_table(rows=2, cols=2)
    merged = table.cell(0, 0).merge(table.cell(0, 1))
    merged.text = "Action items"
    table.cell(1, 0).text = "Draft plan"
    table.cell(1, 1).text = "Review"
    buf = io.BytesIO()
    doc.save(buf)

    res = asyncio.run(extract_text_from_file(buf.getvalue(), "minutes.docx", None))
    assert res.text == "Action items\nDraft plan\nReview"
