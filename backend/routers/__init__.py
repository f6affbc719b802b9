"""Routers module - FastAPI route handlers"""

from . import config, diff, emoji

__all__ = ["config", "diff", "emoji"]
