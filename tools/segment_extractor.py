from __future__ import annotations

import re

MIN_SEGMENT_LENGTH = 20
MAX_SEGMENT_LENGTH = 150
SPLIT_SEGMENT_LENGTH = 120
MIN_SUBSEGMENT_LENGTH = 15

SENTENCE_BOUNDARY = re.compile(r"(?<=[.!?])\s+")
# comma, semicolon, colon, en dash, em dash or a hyphen with spaces around it
CLAUSE_BOUNDARY = re.compile(r"\s*[,;:–—]\s*|\s+-\s+")
LEADING_CONNECTIVE = re.compile(
    r"^(?:and|or|but|however|therefore|because)\b", re.IGNORECASE
)


def split_sentences(text: str) -> list[str]:
    """Split at sentence-ending punctuation, keeping the terminator."""
    return [s.strip() for s in SENTENCE_BOUNDARY.split(text) if s.strip()]


def split_clauses(sentence: str) -> list[str]:
    """Break an overlong sentence at secondary delimiters."""
    parts = [p.strip() for p in CLAUSE_BOUNDARY.split(sentence)]
    return [p for p in parts if len(p) > MIN_SUBSEGMENT_LENGTH]


def is_candidate(segment: str) -> bool:
    if not MIN_SEGMENT_LENGTH < len(segment) < MAX_SEGMENT_LENGTH:
        return False
    return not LEADING_CONNECTIVE.match(segment)


def extract_segments(text: str | None) -> list[str]:
    """Return the candidate segments of normalized text in source order.

    Sentences longer than ``SPLIT_SEGMENT_LENGTH`` characters are split into
    clauses first. Segments outside the length bounds, or opening with a
    connective such as "however" or "because", are dropped.
    """
    if not text:
        return []

    segments = []
    for sentence in split_sentences(text):
        if len(sentence) > SPLIT_SEGMENT_LENGTH:
            segments.extend(split_clauses(sentence))
        else:
            segments.append(sentence)
    return [s for s in segments if is_candidate(s)]
