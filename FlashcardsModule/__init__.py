"""
FlashcardsModule
----------------
This module turns free-form study notes into question/answer flashcards.
A language model is tried first; a rule-based generator takes over when the
model is unavailable or its cards do not pass the quality checks.
"""

from .models import CardOrigin, Flashcard, GenerationResult
from .flashcards import (
    FlashcardSet,
    FlashcardGenerationError,
    InsufficientQualityError,
    MalformedInputError,
    ModelUnavailableError,
)
from .fallback_generator import generate_fallback_flashcards
from .response_parser import parse_flashcard_response

__all__ = [
    "CardOrigin",
    "Flashcard",
    "FlashcardSet",
    "GenerationResult",
    "FlashcardGenerationError",
    "InsufficientQualityError",
    "MalformedInputError",
    "ModelUnavailableError",
    "generate_fallback_flashcards",
    "parse_flashcard_response",
]
