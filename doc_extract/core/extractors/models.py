from dataclasses import dataclass
from enum import Enum
from typing import Optional


class DocumentKind(str, Enum):
    PLAIN_TEXT = "plain_text"
    PDF = "pdf"
    DOCX = "docx"
    UNSUPPORTED = "unsupported"


@dataclass(frozen=True)
class ExtractionResult:
    """
    Uniform outcome of an extraction.
    Either success=True with error=None, or success=False with text='' and an error message.
    """
    success: bool
    text: str = ""
    error: Optional[str] = None

    @classmethod
    def ok(cls, text: str) -> "ExtractionResult":
        return cls(success=True, text=text, error=None)

    @classmethod
    def fail(cls, error: str) -> "ExtractionResult":
        return cls(success=False, text="", error=error)

    def to_dict(self) -> dict:
        return {"success": self.success, "text": self.text, "error": self.error}
