"""Rule-based flashcards for when the language model is unavailable.

Note text is normalized, cut into segments, and each usable segment becomes
one card: a templated question with the segment itself as the answer.
"""
import logging

from tools.segment_extractor import extract_segments
from tools.text_normalizer import normalize_text

from .config import MAX_FLASHCARDS
from .models import CardOrigin, Flashcard
from .question_synthesizer import synthesize_question
from .templates import match_template

MIN_SEGMENT_WORDS = 5
MAX_SEGMENT_WORDS = 25

logger = logging.getLogger(__name__)


def _usable(segment: str, used: set) -> bool:
    if segment in used:
        return False
    return MIN_SEGMENT_WORDS <= len(segment.split()) <= MAX_SEGMENT_WORDS


def generate_fallback_flashcards(text: str, max_cards: int = MAX_FLASHCARDS) -> list[Flashcard]:
    """Build up to ``max_cards`` cards from ``text`` without a model.

    Deterministic for a given input. Returns an empty list when no segment
    qualifies, including for empty text.
    """
    segments = extract_segments(normalize_text(text))
    used = set()
    cards = []

    for segment in segments:
        if len(cards) >= max_cards:
            break
        if not _usable(segment, used):
            continue
        template = match_template(segment)
        question = synthesize_question(segment, template)
        used.add(segment)
        cards.append(
            Flashcard(question=question, answer=segment, origin=CardOrigin.FALLBACK)
        )
        logger.debug("Fallback card from %r template: %s", template.name, question)

    logger.info(
        "Fallback generator produced %d card(s) from %d segment(s)",
        len(cards),
        len(segments),
    )
    return cards
