import io
import logging
import shutil
import subprocess
import tempfile
from pathlib import Path
from typing import Callable, Dict, Optional

import fitz  # PyMuPDF
from pdfminer.high_level import extract_text

from config import get_settings


logger = logging.getLogger(__name__)


class ConversionError(Exception):
    pass


def extract_with_pdfminer(data: bytes) -> str:
    return extract_text(io.BytesIO(data))


def extract_with_pymupdf(data: bytes) -> str:
    parts: list[str] = []
    with fitz.open(stream=data, filetype="pdf") as doc:
        for page in doc:
            parts.append(page.get_text("text"))
            parts.append("\n")
    return "".join(parts)


def extract_with_pdftotext(data: bytes, binary: str = "pdftotext") -> str:
    """Run the poppler `pdftotext` tool over the bytes via a temporary file."""
    if shutil.which(binary) is None:
        raise ConversionError(f"{binary} command not available, install poppler-utils")

    tmp_path: Path | None = None
    try:
        with tempfile.NamedTemporaryFile(delete=False, prefix="pdf2txt-", suffix=".pdf") as tmp:
            tmp_path = Path(tmp.name)
            tmp.write(data)
        result = subprocess.run(
            [binary, "-layout", str(tmp_path), "-"],
            check=False,
            capture_output=True,
        )
    finally:
        if tmp_path and tmp_path.exists():
            tmp_path.unlink()

    if result.returncode != 0:
        detail = result.stderr.decode("utf-8", errors="replace").strip() or f"exit code {result.returncode}"
        raise ConversionError(f"{binary} failed: {detail}")
    return result.stdout.decode("utf-8", errors="replace")


LIBRARY_BACKENDS: Dict[str, Callable[[bytes], str]] = {
    "pdfminer": extract_with_pdfminer,
    "pymupdf": extract_with_pymupdf,
}


def pdftotext_available() -> bool:
    return shutil.which(get_settings().pdftotext_bin) is not None


def convert_pdf_bytes(data: bytes, library: Optional[str] = None) -> str:
    """Extract text with the library backend, falling back to pdftotext on any error."""
    settings = get_settings()
    name = (library or settings.library).lower()
    backend = LIBRARY_BACKENDS.get(name)
    if backend is None:
        raise ConversionError(f"unknown library backend: {name!r}")

    try:
        return backend(data)
    except Exception as exc:
        logger.warning("%s conversion failed: %s, trying pdftotext", name, exc)
        library_error = exc

    try:
        return extract_with_pdftotext(data, binary=settings.pdftotext_bin)
    except Exception as exc:
        raise ConversionError(
            f"all conversion methods failed ({name}: {library_error}; pdftotext: {exc})"
        ) from exc


def convert_pdf_file(pdf_path: Path, output_dir: Path, library: Optional[str] = None) -> Path:
    try:
        data = pdf_path.read_bytes()
    except OSError as exc:
        raise ConversionError(f"failed to read PDF file: {exc}") from exc

    text = convert_pdf_bytes(data, library=library)

    output_path = output_dir / (pdf_path.stem + ".txt")
    try:
        output_path.write_text(text, encoding="utf-8")
    except OSError as exc:
        raise ConversionError(f"failed to write TXT file: {exc}") from exc
    return output_path
