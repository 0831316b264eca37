"""Card and result types shared by both generation paths."""
from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional


class CardOrigin(str, Enum):
    MODEL = "model"
    FALLBACK = "fallback"


def _single_spaced(text: str) -> str:
    return re.sub(r"\s+", " ", text or "").strip()


class Flashcard:
    """
    Represents a single flashcard with a question, an answer and a mastery flag.
    """

    def __init__(
        self,
        question: str,
        answer: str,
        origin: CardOrigin = CardOrigin.MODEL,
        mastered: bool = False,
    ):
        self.question = _single_spaced(question)
        self.answer = _single_spaced(answer)
        self.origin = CardOrigin(origin)
        self.mastered = bool(mastered)

    def toggle_mastered(self) -> bool:
        self.mastered = not self.mastered
        return self.mastered

    def to_dict(self):
        return {
            "question": self.question,
            "answer": self.answer,
            "mastered": self.mastered,
            "origin": self.origin.value,
        }

    @staticmethod
    def from_dict(data):
        return Flashcard(
            question=data["question"],
            answer=data["answer"],
            origin=data.get("origin", CardOrigin.MODEL),
            mastered=data.get("mastered", False),
        )

    def __eq__(self, other):
        if not isinstance(other, Flashcard):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def __repr__(self):
        return f"Flashcard(question={self.question!r}, origin={self.origin.value})"


@dataclass
class GenerationResult:
    """Outcome of one generation request.

    ``busy`` is set when the request was turned away because another
    generation on the same set was still running; ``model_error`` holds the
    reason the model path was abandoned, if it was.
    """

    cards: List[Flashcard] = field(default_factory=list)
    busy: bool = False
    used_fallback: bool = False
    model_error: Optional[str] = None

    def to_dict(self):
        return {
            "cards": [card.to_dict() for card in self.cards],
            "busy": self.busy,
            "used_fallback": self.used_fallback,
            "model_error": self.model_error,
        }
