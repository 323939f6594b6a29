import argparse
import logging
import sys
from pathlib import Path
from typing import Iterator, List, Optional

from config import ConfigError, get_settings
from pdf_backends import LIBRARY_BACKENDS, convert_pdf_file
from text_outputs import is_pdf


USAGE = (
    "Usage: pdf2txt --input <PDF dir> [--output <TXT dir>]\n"
    "   or start the web interface: pdf2txt --web [--port 8082]"
)


def iter_pdfs(root: Path) -> Iterator[Path]:
    for path in sorted(root.rglob("*")):
        if path.is_file() and is_pdf(path.name):
            yield path


def build_parser() -> argparse.ArgumentParser:
    settings = get_settings()
    parser = argparse.ArgumentParser(prog="pdf2txt", description="Batch convert PDF files to TXT")
    parser.add_argument("--input", help="Directory containing PDF files (required in CLI mode)")
    parser.add_argument("--output", help="Directory for TXT files (default: same as --input)")
    parser.add_argument("--web", action="store_true", help="Start the web server instead")
    parser.add_argument("--host", default=settings.host, help=f"Web server host (default: {settings.host})")
    parser.add_argument("--port", type=int, default=settings.port, help=f"Web server port (default: {settings.port})")
    parser.add_argument(
        "--library",
        choices=sorted(LIBRARY_BACKENDS),
        default=settings.library,
        help="PDF library tried before pdftotext",
    )
    return parser


def run_web(host: str, port: int) -> int:
    import uvicorn

    from app import app

    print(f"Web server running at http://{host}:{port}")
    uvicorn.run(app, host=host, port=port, log_level=get_settings().log_level.lower())
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    try:
        parser = build_parser()
    except ConfigError as exc:
        print(f"Configuration error: {exc}")
        return 2
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=get_settings().log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.web:
        return run_web(args.host, args.port)

    if not args.input:
        print("Error: an input directory is required")
        print(USAGE)
        return 1

    input_dir = Path(args.input)
    output_dir = Path(args.output) if args.output else input_dir

    if not input_dir.is_dir():
        print(f"Error: input directory not found: {input_dir}")
        return 1

    try:
        output_dir.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        print(f"Failed to create output directory: {exc}")
        return 1

    for pdf in iter_pdfs(input_dir):
        try:
            convert_pdf_file(pdf, output_dir, library=args.library)
            print(f"Converted: {pdf}")
        except Exception as exc:
            print(f"Failed {pdf}: {exc}")

    print("\nBatch conversion complete!")
    return 0


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))
