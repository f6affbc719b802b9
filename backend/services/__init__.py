"""Services module - Business logic layer"""

from .config_manager import ConfigManager
from .diff_generator import (
    DiffGenerator,
    backtrack,
    build_lcs_table,
    normalize_line,
    similarity_score,
)
from .emoji_stripper import find_emoji_spans, is_strippable, strip_emoji

__all__ = [
    "ConfigManager",
    "DiffGenerator",
    "backtrack",
    "build_lcs_table",
    "normalize_line",
    "similarity_score",
    "find_emoji_spans",
    "is_strippable",
    "strip_emoji",
]
