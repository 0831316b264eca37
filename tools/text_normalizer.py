from __future__ import annotations

import re

BRACKETED = re.compile(r"\[[^\[\]]*\]")
PARENTHETICAL = re.compile(r"\([^()]*\)")
STRAY_DELIMITERS = re.compile(r"[\[\]()]")
ABBREVIATIONS = re.compile(r"\b(?:etc|e\.g|i\.e|viz)\b\.?", re.IGNORECASE)
SPACE_BEFORE_PUNCTUATION = re.compile(r"\s+([.,;:!?])")
WHITESPACE = re.compile(r"\s+")


def _remove_until_stable(pattern: re.Pattern, text: str) -> str:
    while True:
        stripped = pattern.sub(" ", text)
        if stripped == text:
            return text
        text = stripped


def _normalize_once(text: str) -> str:
    text = _remove_until_stable(BRACKETED, text)
    text = _remove_until_stable(PARENTHETICAL, text)
    text = STRAY_DELIMITERS.sub(" ", text)
    text = _remove_until_stable(ABBREVIATIONS, text)
    text = WHITESPACE.sub(" ", text)
    text = SPACE_BEFORE_PUNCTUATION.sub(r"\1", text)
    return text.strip()


def normalize_text(text: str | None) -> str:
    """Strip asides, abbreviations and extra whitespace from raw note text.

    Bracketed and parenthetical content is dropped together with its
    delimiters (nested groups innermost first), then the abbreviations
    "etc", "e.g", "i.e" and "viz" are removed. The result is single-spaced
    and trimmed. Cleanup repeats until nothing changes, so normalizing the
    output again returns it unchanged.
    """
    if not text:
        return ""

    previous = None
    while text != previous:
        previous = text
        text = _normalize_once(text)
    return text
