from typing import Dict, Optional
from .base import BaseExtractor
from .models import DocumentKind
from .plain import PlainTextExtractor
from .pdf import PdfExtractor
from .docx import DocxExtractor

class ExtractorRegistry:
    def __init__(self, config: Optional[dict] = None):
        self._extractors: Dict[DocumentKind, BaseExtractor] = {}
        self.config = config or {}
        self.features = self.config.get("features", {}).get("extraction", {})

        self.register_defaults()

    def register(self, kind: DocumentKind, extractor: BaseExtractor):
        self._extractors[kind] = extractor

    def get(self, kind: DocumentKind) -> Optional[BaseExtractor]:
        return self._extractors.get(kind)

    def register_defaults(self):
        self.register(DocumentKind.PLAIN_TEXT, PlainTextExtractor(self.config))

        # DOCX
        if self.features.get("docx", True):
            self.register(DocumentKind.DOCX, DocxExtractor(self.config))

        # PDF
        if self.features.get("pdf", True):
            self.register(DocumentKind.PDF, PdfExtractor(self.config))
