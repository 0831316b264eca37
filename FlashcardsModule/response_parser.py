"""Parse "Q:/A:" model output into flashcards and reject weak cards."""
import logging
import re

from .config import MAX_FLASHCARDS, MIN_ANSWER_LENGTH, MIN_QUESTION_LENGTH
from .models import CardOrigin, Flashcard

logger = logging.getLogger(__name__)

PAIR_SEPARATOR = re.compile(r"\n\s*\n")
TRAILING_PERIODS = re.compile(r"\.+$")
WHITESPACE = re.compile(r"\s+")

LOW_QUALITY_PATTERNS = (
    re.compile(r"^what\s+is\s+.+\s+(?:about|used\s+for)\s*\??$", re.IGNORECASE),
    re.compile(r"\bcan\s+you\s+explain\b", re.IGNORECASE),
    re.compile(r"^describe\b", re.IGNORECASE),
    re.compile(r"^what\s+is\b", re.IGNORECASE),
)


def clean_text(text: str) -> str:
    text = WHITESPACE.sub(" ", text).strip()
    return TRAILING_PERIODS.sub("", text).strip()


def _strip_label(line: str, label: str) -> str:
    line = line.strip()
    if line.startswith(label):
        return line[len(label):]
    return line


def is_low_quality(question: str) -> bool:
    return any(p.search(question) for p in LOW_QUALITY_PATTERNS)


def _rejection_reason(question: str, answer: str):
    if not question or not answer:
        return "empty field"
    if len(question) < MIN_QUESTION_LENGTH:
        return "question too short"
    if len(answer) < MIN_ANSWER_LENGTH:
        return "answer too short"
    if is_low_quality(question):
        return "generic question"
    return None


def parse_flashcard_response(raw_output: str, max_cards: int = MAX_FLASHCARDS) -> list[Flashcard]:
    """
    Split a completion into Q/A pairs and keep those that pass the filters.

    Only the first ``max_cards`` pairs are considered, so one rejected pair
    leaves the result short; callers treat a short result as a failure.
    """
    if not raw_output or not raw_output.strip():
        return []

    candidates = PAIR_SEPARATOR.split(raw_output.strip())[:max_cards]
    cards = []
    for block in candidates:
        question_line, _, answer_text = block.strip().partition("\n")
        question = clean_text(_strip_label(question_line, "Q:"))
        answer = clean_text(_strip_label(answer_text, "A:"))

        reason = _rejection_reason(question, answer)
        if reason:
            logger.info("Rejected model card (%s): %r", reason, question)
            continue
        cards.append(Flashcard(question=question, answer=answer, origin=CardOrigin.MODEL))

    return cards
