"""Models module - Pydantic data models"""

from .diff import ChangeType, DiffLine, DiffOp, DiffRequest, DiffResult
from .emoji import (
    EmojiRemovalResponse,
    EmojiScanRequest,
    EmojiScanResponse,
    EmojiSpan,
    RemovalMode,
)
from .error import ErrorResponse

__all__ = [
    # Diff models
    "ChangeType",
    "DiffLine",
    "DiffOp",
    "DiffRequest",
    "DiffResult",
    # Emoji models
    "EmojiRemovalResponse",
    "EmojiScanRequest",
    "EmojiScanResponse",
    "EmojiSpan",
    "RemovalMode",
    # Error model
    "ErrorResponse",
]
