"""Code diff API endpoints"""

from __future__ import annotations

from fastapi import APIRouter, HTTPException, Request
from starlette.concurrency import run_in_threadpool

from models.diff import DiffRequest, DiffResult
from models.error import ErrorResponse
from services.diff_generator import DiffGenerator

router = APIRouter()
diff_generator = DiffGenerator()

BOTH_EMPTY = "Both inputs are empty."
DIFF_FAILED = "Failed to compute diff."


@router.post(
    "",
    response_model=DiffResult,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
    openapi_extra={
        "requestBody": {
            "content": {"application/json": {"schema": DiffRequest.model_json_schema()}},
            "required": True,
        }
    },
)
async def compute_diff(request: Request) -> DiffResult:
    """Compare two texts line by line, ignoring whitespace style"""
    # Parsed by hand so a malformed body is reported like any other failure
    try:
        diff_request = DiffRequest.model_validate_json(await request.body())
    except Exception as e:
        print(f"[Diff] Invalid request body: {e}")
        raise HTTPException(status_code=500, detail=DIFF_FAILED)

    text_a = diff_request.textA or ""
    text_b = diff_request.textB or ""

    if not text_a and not text_b:
        raise HTTPException(status_code=400, detail=BOTH_EMPTY)

    try:
        return await run_in_threadpool(diff_generator.generate_diff, text_a, text_b)
    except Exception as e:
        print(f"[Diff] Failed to compute diff: {e}")
        raise HTTPException(status_code=500, detail=DIFF_FAILED)
