import re
from dataclasses import dataclass
from typing import Optional

from doc_extract.core.extractors.dispatcher import SUPPORTED_EXTENSIONS

_WHITESPACE_RE = re.compile(r"\s+")
_CONTROL_CHARS_RE = re.compile(r"[\x00-\x08\x0B\x0C\x0E-\x1F\x7F]")


@dataclass(frozen=True)
class ValidationResult:
    valid: bool
    error: Optional[str] = None


def validate_uploaded_file(file_name: str, size_bytes: int, max_size_mb: float = 10) -> ValidationResult:
    """Checks the file name against the supported extensions and the size against the limit."""
    name = (file_name or "").lower()
    if not name.endswith(SUPPORTED_EXTENSIONS):
        return ValidationResult(False, f"Invalid file type. Supported formats: {', '.join(SUPPORTED_EXTENSIONS)}")

    if size_bytes > max_size_mb * 1024 * 1024:
        size_mb = size_bytes / (1024 * 1024)
        return ValidationResult(False, f"File too large ({size_mb:.2f}MB). Maximum size: {max_size_mb:g}MB")

    return ValidationResult(True)


def count_words(text: str) -> int:
    return len(text.split())


def validate_transcript_content(content, min_words: int = 100, max_words: int = 50000) -> ValidationResult:
    if not content or not isinstance(content, str):
        return ValidationResult(False, "Content is empty or invalid")

    trimmed = content.strip()
    if not trimmed:
        return ValidationResult(False, "File contains no text content")

    word_count = count_words(trimmed)
    if word_count < min_words:
        return ValidationResult(False, f"Transcript too short ({word_count} words). Minimum: {min_words:,} words")
    if word_count > max_words:
        return ValidationResult(False, f"Transcript too long ({word_count} words). Maximum: {max_words:,} words")

    return ValidationResult(True)


def sanitize_transcript_text(text: Optional[str]) -> str:
    """Collapse whitespace runs, drop control characters and trim."""
    if not text:
        return ""
    sanitized = _WHITESPACE_RE.sub(" ", text)
    sanitized = _CONTROL_CHARS_RE.sub("", sanitized)
    return sanitized.strip()
