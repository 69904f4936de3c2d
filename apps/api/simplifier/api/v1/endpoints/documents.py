import logging

from fastapi import APIRouter, File, UploadFile, status
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import JSONResponse

from simplifier.core.config import get_settings
from simplifier.schemas.summary import ErrorResponse, ExtractedText
from simplifier.services.document_extractor import DocumentExtractionError, extract_text

logger = logging.getLogger(__name__)

router = APIRouter(
    tags=["documents"],
)


@router.post(
    "/extract-pdf",
    response_model=ExtractedText,
    status_code=status.HTTP_200_OK,
    responses={
        400: {"model": ErrorResponse},
        422: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)
async def extract_pdf(file: UploadFile | None = File(None)):
    """
    Pull plain text out of an uploaded document so the UI can submit it
    to /simplify. Accepts PDF (default), HTML and plain text.
    """
    if file is None:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"error": "No file uploaded."},
        )

    data = await file.read()

    try:
        text = await run_in_threadpool(
            extract_text,
            data,
            filename=file.filename,
            content_type=file.content_type,
        )
    except DocumentExtractionError as exc:
        logger.exception("/extract-pdf parse error for %r", file.filename)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": str(exc) or "Failed to parse PDF"},
        )

    if not text.strip():
        return JSONResponse(
            status_code=422,
            content={"error": "No text could be extracted."},
        )

    max_chars = get_settings().max_extract_chars
    return ExtractedText(text=text.strip()[:max_chars])
