import logging
from typing import List, Optional

from fastapi import FastAPI, File, Form, HTTPException, UploadFile
from fastapi.responses import HTMLResponse, Response
from starlette.concurrency import run_in_threadpool

from config import get_settings
from index_page import render_index
from pdf_backends import convert_pdf_bytes, pdftotext_available
from text_outputs import (
    build_zip,
    is_pdf,
    open_folder,
    relative_output_path,
    resolve_output_root,
    txt_name,
)


logger = logging.getLogger(__name__)

app = FastAPI(title="PDF to TXT Converter")


@app.get("/", response_class=HTMLResponse)
def index():
    return render_index(get_settings().default_folder)


@app.get("/healthz")
def health():
    return {
        "status": "OK",
        "pdftotext": pdftotext_available(),
        "library": get_settings().library,
    }


@app.post("/api/upload-convert")
async def upload_convert(files: Optional[List[UploadFile]] = File(None)):
    """Convert uploaded PDFs and return the texts as a zip download."""
    if not files:
        raise HTTPException(status_code=400, detail="no files uploaded")

    entries: list[tuple[str, str]] = []
    failed = 0
    for upload in files:
        if not is_pdf(upload.filename):
            continue
        try:
            data = await upload.read()
            text = await run_in_threadpool(convert_pdf_bytes, data)
        except Exception as exc:
            logger.error("Conversion failed %s: %s", upload.filename, exc)
            failed += 1
            continue
        entries.append((txt_name(upload.filename), text))
        logger.info("Converted: %s", upload.filename)

    if not entries:
        raise HTTPException(status_code=500, detail="all files failed to convert")

    archive = build_zip(entries)
    logger.info("Conversion finished: %d succeeded, %d failed", len(entries), failed)
    return Response(
        content=archive,
        media_type="application/zip",
        headers={"Content-Disposition": "attachment; filename=converted-texts.zip"},
    )


@app.post("/api/upload-save-local")
async def upload_save_local(
    files: Optional[List[UploadFile]] = File(None),
    paths: List[str] = Form([]),
    output_dir: str = Form("", alias="outputDir"),
):
    """Convert uploaded PDFs into a local folder mirroring the uploaded tree, then open it."""
    if not files:
        raise HTTPException(status_code=400, detail="no files uploaded")

    settings = get_settings()
    output_root = resolve_output_root(output_dir, paths, settings.default_output_dir)
    try:
        output_root.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise HTTPException(status_code=500, detail=f"failed to create output directory: {exc}")

    success = 0
    failed = 0
    for i, upload in enumerate(files):
        if not is_pdf(upload.filename):
            continue
        rel_path = paths[i] if i < len(paths) else None
        output_path = relative_output_path(output_root, rel_path, upload.filename)
        try:
            data = await upload.read()
            text = await run_in_threadpool(convert_pdf_bytes, data)
            output_path.parent.mkdir(parents=True, exist_ok=True)
            output_path.write_text(text, encoding="utf-8")
        except Exception as exc:
            logger.error("Conversion failed %s: %s", upload.filename, exc)
            failed += 1
            continue
        success += 1
        logger.info("Converted: %s -> %s", upload.filename, output_path)

    if settings.open_folder:
        try:
            open_folder(output_root)
        except OSError as exc:
            logger.warning("Failed to open folder %s: %s", output_root, exc)

    logger.info("Saved locally: %d succeeded, %d failed, output: %s", success, failed, output_root)
    return {
        "success": True,
        "successCount": success,
        "failedCount": failed,
        "outputPath": str(output_root),
    }
