"""
Emoji Stripper Service - Remove emoji and symbol characters from text

Each mode is an inclusive table of code point ranges. Matching is done per
code point, so whatever is left after a pass never matches again.
"""

from __future__ import annotations

import re

from models.emoji import RemovalMode

# Standard emoji: faces, animals, objects, flags and their joiners/modifiers.
SIMPLE_RANGES: tuple[tuple[int, int], ...] = (
    (0x1F1E0, 0x1F1FF),  # regional indicators (flags)
    (0x1F300, 0x1F5FF),  # pictographs, incl. skin tones 1F3FB-1F3FF
    (0x1F600, 0x1F64F),  # emoticons
    (0x1F680, 0x1F6FF),  # transport and map
    (0x1F900, 0x1F9FF),  # supplemental pictographs
    (0x1FA00, 0x1FA6F),  # chess symbols
    (0x1FA70, 0x1FAFF),  # pictographs extended-A
    (0x200D, 0x200D),  # zero width joiner
    (0x20E3, 0x20E3),  # combining keycap
    (0xFE0E, 0xFE0F),  # text/emoji presentation selectors
    (0xE0020, 0xE007F),  # tag sequences
    (0x2B50, 0x2B50),
    (0x2B55, 0x2B55),
    (0x3030, 0x3030),
    (0x303D, 0x303D),
    (0x3297, 0x3297),
    (0x3299, 0x3299),
)

# Everything non-textual on top of the simple set.
THOROUGH_EXTRA_RANGES: tuple[tuple[int, int], ...] = (
    (0x200B, 0x200F),  # zero width space/non-joiner, LRM, RLM
    (0x2028, 0x202E),  # line/paragraph separators, bidi embeddings
    (0x2060, 0x2064),  # word joiner, invisible operators
    (0x2066, 0x206F),  # bidi isolates, deprecated format chars
    (0xFEFF, 0xFEFF),  # zero width no-break space
    (0x2022, 0x2023),  # bullets
    (0x2139, 0x2139),  # information source
    (0x2190, 0x21FF),  # arrows
    (0x2300, 0x23FF),  # misc technical
    (0x2500, 0x257F),  # box drawing
    (0x2580, 0x259F),  # block elements
    (0x25A0, 0x25FF),  # geometric shapes
    (0x2600, 0x26FF),  # misc symbols
    (0x2700, 0x27BF),  # dingbats
    (0x27F0, 0x27FF),  # supplemental arrows-A
    (0x2900, 0x297F),  # supplemental arrows-B
    (0x2B00, 0x2BFF),  # misc symbols and arrows
    (0xFE00, 0xFE0D),  # remaining variation selectors
    (0x1F000, 0x1F02F),  # mahjong tiles
    (0x1F0A0, 0x1F0FF),  # playing cards
    (0x1F100, 0x1F1FF),  # enclosed alphanumeric supplement
    (0x1F200, 0x1F2FF),  # enclosed ideographic supplement
    (0x1F700, 0x1F8FF),  # alchemical, geometric extended, arrows-C
    (0xE0001, 0xE001F),  # language tag
)


def merge_ranges(ranges) -> list[tuple[int, int]]:
    """Sort inclusive ranges and merge overlapping or touching ones"""
    merged: list[tuple[int, int]] = []
    for first, last in sorted(ranges):
        if merged and first <= merged[-1][1] + 1:
            merged[-1] = (merged[-1][0], max(merged[-1][1], last))
        else:
            merged.append((first, last))
    return merged


MODE_RANGES: dict[RemovalMode, list[tuple[int, int]]] = {
    RemovalMode.SIMPLE: merge_ranges(SIMPLE_RANGES),
    RemovalMode.THOROUGH: merge_ranges(SIMPLE_RANGES + THOROUGH_EXTRA_RANGES),
}


def _char_class(ranges: list[tuple[int, int]]) -> str:
    parts = []
    for first, last in ranges:
        if first == last:
            parts.append(f"\\U{first:08X}")
        else:
            parts.append(f"\\U{first:08X}-\\U{last:08X}")
    return "[" + "".join(parts) + "]"


_PATTERNS: dict[RemovalMode, re.Pattern[str]] = {
    mode: re.compile(_char_class(ranges)) for mode, ranges in MODE_RANGES.items()
}
_RUN_PATTERNS: dict[RemovalMode, re.Pattern[str]] = {
    mode: re.compile(_char_class(ranges) + "+") for mode, ranges in MODE_RANGES.items()
}


def is_strippable(char: str, mode: RemovalMode = RemovalMode.SIMPLE) -> bool:
    """Check whether a single character falls inside the mode's ranges"""
    code_point = ord(char)
    for first, last in MODE_RANGES[RemovalMode(mode)]:
        if code_point < first:
            return False
        if code_point <= last:
            return True
    return False


def strip_emoji(text: str, mode: RemovalMode = RemovalMode.SIMPLE) -> str:
    """Remove every strippable character, keeping everything else in place"""
    return _PATTERNS[RemovalMode(mode)].sub("", text)


def find_emoji_spans(
    text: str,
    mode: RemovalMode = RemovalMode.SIMPLE,
) -> list[tuple[int, int, str]]:
    """Locate maximal runs of strippable characters as (start, end, text)"""
    return [
        (match.start(), match.end(), match.group(0))
        for match in _RUN_PATTERNS[RemovalMode(mode)].finditer(text)
    ]
