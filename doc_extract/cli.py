from __future__ import annotations

import argparse
import asyncio
import json
import mimetypes
import sys
from pathlib import Path

from doc_extract.core.config_loader import load_config
from doc_extract.core.extractors.dispatcher import extract_text_from_file
from doc_extract.core.logging_setup import configure_logging
from doc_extract.core.upload_service import UploadService


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="doc-extract", description="Extract plain text from .txt, .md, .pdf or .docx files.")
    parser.add_argument("file", help="Path to the document.")
    parser.add_argument("--mime", default=None, help="Declared MIME type (guessed from the name when omitted).")
    parser.add_argument("--config", default=None, help="Path to config YAML.")
    parser.add_argument("--validate", action="store_true", help="Apply upload size and transcript length checks.")
    parser.add_argument("--json", action="store_true", help="Print the result record as JSON on stdout.")
    args = parser.parse_args(argv)

    cfg = load_config(str(Path(args.config).resolve()) if args.config else None)
    if cfg["status"] == "ERROR":
        print(f"Config error: {cfg['error']}", file=sys.stderr)
        return 2
    configure_logging(cfg["data"])

    path = Path(args.file)
    if not path.is_file():
        print(f"File not found: {path}", file=sys.stderr)
        return 2

    mime = args.mime or mimetypes.guess_type(path.name)[0]
    data = path.read_bytes()

    if args.validate:
        result = asyncio.run(UploadService(cfg["data"]).process(data, path.name, mime))
    else:
        result = asyncio.run(extract_text_from_file(data, path.name, mime, cfg["data"]))

    if args.json:
        print(json.dumps(result.to_dict(), ensure_ascii=False))
    elif result.success:
        print(result.text)
    else:
        print(result.error, file=sys.stderr)

    return 0 if result.success else 1


if __name__ == "__main__":
    raise SystemExit(main())
