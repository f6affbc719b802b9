"""Error response model"""

from __future__ import annotations

from pydantic import BaseModel


class ErrorResponse(BaseModel):
    """Error body returned by every endpoint"""

    error: str
