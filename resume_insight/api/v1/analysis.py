import asyncio

from fastapi import APIRouter, File, Form, HTTPException, Request, UploadFile, status
from fastapi.responses import JSONResponse

from resume_insight.core.config import settings
from resume_insight.core.rate_limit import rate_limit
from resume_insight.errors import TerminalProviderError
from resume_insight.parsing import RawDocument, detect_source_type
from resume_insight.schemas.analysis import (
    AnalysisResult,
    AnalyzeTextRequest,
    ParseResponse,
    ProviderErrorResponse,
)
from resume_insight.services.analysis_service import analyze, parse_with_keywords

router = APIRouter()

ALLOWED_EXTENSIONS = {"pdf", "docx", "txt", "md"}


def _provider_error_response(exc: TerminalProviderError) -> JSONResponse:
    body = ProviderErrorResponse(detail=str(exc), provider_status=exc.status_code)
    return JSONResponse(status_code=status.HTTP_502_BAD_GATEWAY, content=body.model_dump(by_alias=True))


async def _read_upload(file: UploadFile) -> RawDocument:
    filename = file.filename or "uploaded-file"
    ext = filename.rsplit(".", 1)[-1].lower() if "." in filename else ""
    if ext not in ALLOWED_EXTENSIONS and detect_source_type(filename, file.content_type) != "pdf":
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Unsupported file type '.{ext}'. Allowed: {', '.join(sorted(ALLOWED_EXTENSIONS))}.",
        )

    chunks: list[bytes] = []
    total = 0
    while True:
        chunk = await file.read(1024 * 64)
        if not chunk:
            break
        total += len(chunk)
        if total > settings.max_upload_bytes:
            raise HTTPException(
                status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
                detail=f"File too large. Maximum allowed size is {settings.max_upload_bytes // (1024 * 1024)} MB.",
            )
        chunks.append(chunk)
    return RawDocument(content=b"".join(chunks), filename=filename, declared_mime=file.content_type)


@router.post("/parse", response_model=ParseResponse)
@rate_limit()
async def parse_resume(request: Request, file: UploadFile = File(...)):
    _ = request
    document = await _read_upload(file)
    return await asyncio.to_thread(parse_with_keywords, document)


@router.post("/analyze", response_model=AnalysisResult, responses={502: {"model": ProviderErrorResponse}})
@rate_limit("analyze")
async def analyze_resume(
    request: Request,
    file: UploadFile | None = File(default=None),
    text: str | None = Form(default=None),
    ai: bool = Form(default=True),
):
    _ = request
    if file is not None:
        source: RawDocument | str = await _read_upload(file)
    elif text and text.strip():
        source = text
    else:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="No file or text provided")

    try:
        return await asyncio.to_thread(analyze, source, ai)
    except TerminalProviderError as exc:
        return _provider_error_response(exc)


@router.post("/analyze/text", response_model=AnalysisResult, responses={502: {"model": ProviderErrorResponse}})
@rate_limit("analyze")
async def analyze_resume_text(request: Request, payload: AnalyzeTextRequest):
    _ = request
    try:
        return await asyncio.to_thread(analyze, payload.text, payload.ai)
    except TerminalProviderError as exc:
        return _provider_error_response(exc)
