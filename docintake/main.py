import argparse
import json
import sys
from pathlib import Path

from docintake.config.settings import Settings
from docintake.logging.logger import Log
from docintake.pdf.factory import PdfExtractorFactory
from docintake.processor.exceptions import FileReadError, UploadRejectedError
from docintake.processor.file_loader import FileLoader
from docintake.processor.processor import build_processor


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="docintake",
        description="Extract and analyze text from a PDF, DOCX or TXT upload.",
    )
    parser.add_argument("path", type=Path, help="File to process")
    parser.add_argument(
        "--engine",
        choices=PdfExtractorFactory.engine_names(),
        help="Primary PDF library; overrides PDF_ENGINE",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Entry point: load file -> validate -> extract -> analyze -> print JSON."""
    args = parse_args(argv)
    settings = Settings()
    if args.engine:
        settings = settings.model_copy(update={"pdf_engine": args.engine})
    Log.configure(settings.log_level)
    Log.info(f"docintake starting (env={settings.app_env}, pdf_engine={settings.pdf_engine})")

    processor = build_processor(settings)
    try:
        raw_bytes = FileLoader().load(args.path)
        document = processor.process(raw_bytes, args.path.name)
    except (FileNotFoundError, FileReadError, UploadRejectedError) as exc:
        print(str(exc), file=sys.stderr)
        return 2

    json.dump(document.as_dict(), sys.stdout, ensure_ascii=False, indent=2)
    sys.stdout.write("\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
