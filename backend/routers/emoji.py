"""Emoji removal API endpoints"""

from __future__ import annotations

from fastapi import APIRouter, File, Form, HTTPException, UploadFile
from starlette.concurrency import run_in_threadpool

from models.emoji import (
    EmojiRemovalResponse,
    EmojiScanRequest,
    EmojiScanResponse,
    EmojiSpan,
    RemovalMode,
)
from models.error import ErrorResponse
from services.config_manager import ConfigManager
from services.emoji_stripper import find_emoji_spans, strip_emoji

router = APIRouter()

NO_FILE = "No file provided"
INVALID_MODE = "Invalid mode. Use 'simple' or 'thorough'."
PROCESS_FAILED = "Failed to process the file."

_MIB = 1024 * 1024


def parse_mode(value: str | None) -> RemovalMode:
    """Map the form value to a mode, defaulting to simple"""
    if not value:
        return RemovalMode.SIMPLE
    try:
        return RemovalMode(value.strip().lower())
    except ValueError:
        raise HTTPException(status_code=400, detail=INVALID_MODE)


def too_large_message(limit: int) -> str:
    if limit % _MIB == 0:
        return f"File too large. Max size is {limit // _MIB}MB."
    return f"File too large. Max size is {limit} bytes."


def decode_upload(raw: bytes) -> str:
    """Decode uploaded bytes as UTF-8, dropping a BOM and replacing bad bytes"""
    return raw.decode("utf-8-sig", errors="replace")


@router.post(
    "",
    response_model=EmojiRemovalResponse,
    responses={
        400: {"model": ErrorResponse},
        413: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)
async def remove_emoji(
    file: UploadFile | None = File(None),
    mode: str | None = Form(None),
) -> EmojiRemovalResponse:
    """Strip emoji from an uploaded text file"""
    if file is None:
        raise HTTPException(status_code=400, detail=NO_FILE)

    removal_mode = parse_mode(mode)
    max_size = ConfigManager.get_instance().get_max_file_size()

    if file.size is not None and file.size > max_size:
        raise HTTPException(status_code=413, detail=too_large_message(max_size))

    try:
        raw = await file.read()
    except Exception as e:
        print(f"[EmojiRemover] Failed to read upload {file.filename!r}: {e}")
        raise HTTPException(status_code=500, detail=PROCESS_FAILED)

    if len(raw) > max_size:
        raise HTTPException(status_code=413, detail=too_large_message(max_size))

    try:
        text = await run_in_threadpool(decode_upload, raw)
        cleaned_text = await run_in_threadpool(strip_emoji, text, removal_mode)
    except Exception as e:
        print(f"[EmojiRemover] Failed to process {file.filename!r}: {e}")
        raise HTTPException(status_code=500, detail=PROCESS_FAILED)

    return EmojiRemovalResponse(
        originalText=text,
        cleanedText=cleaned_text,
        fileName=file.filename or "",
        originalSize=len(text),
        cleanedSize=len(cleaned_text),
        emojisRemoved=len(text) - len(cleaned_text),
    )


@router.post("/scan", response_model=EmojiScanResponse)
async def scan_emoji(request: EmojiScanRequest) -> EmojiScanResponse:
    """Locate the characters a removal would strip, without removing them"""
    spans = [
        EmojiSpan(start=start, end=end, text=text)
        for start, end, text in find_emoji_spans(request.text, request.mode)
    ]
    return EmojiScanResponse(
        spans=spans,
        count=sum(span.end - span.start for span in spans),
    )
