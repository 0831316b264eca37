"""Flashcard generation from study notes.

A ``FlashcardSet`` first asks the language model for cards in the strict
"Q:/A:" format. When the model cannot be reached, or fewer than
``MAX_FLASHCARDS`` of its cards survive the quality filters, the partial
result is discarded and the rule-based fallback generator is used instead.
Every successful generation and every mastery toggle is saved to the
flashcard history.
"""
import logging
import threading
from typing import Optional

from langchain_core.runnables import RunnableLambda
from langchain_openai import ChatOpenAI

from StorageModule.history_store import FlashcardHistory, get_history_store, make_snapshot
from tools.flashcard_prompts import build_flashcard_prompt
from tools.llm_logger import get_llm_logger

from .config import (
    LLM_MAX_RETRIES,
    LLM_TIMEOUT,
    MAX_FLASHCARDS,
    MAX_OUTPUT_TOKENS,
    STOP_SEQUENCES,
    TEMPERATURE,
    api_key,
    base_url,
    model_name,
)
from .fallback_generator import generate_fallback_flashcards
from .models import CardOrigin, Flashcard, GenerationResult
from .response_parser import parse_flashcard_response

logger = logging.getLogger(__name__)


class FlashcardGenerationError(Exception):
    pass


class ModelUnavailableError(FlashcardGenerationError):
    """The completion service could not be initialised or reached."""


class InsufficientQualityError(FlashcardGenerationError):
    """The model answered, but too few of its cards passed the filters."""


class MalformedInputError(FlashcardGenerationError, ValueError):
    """The note text is empty or whitespace only."""


def build_llm():
    if not api_key:
        raise ModelUnavailableError("api_key is not set")
    try:
        llm = ChatOpenAI(
            model=model_name,
            temperature=TEMPERATURE,
            max_tokens=MAX_OUTPUT_TOKENS,
            timeout=LLM_TIMEOUT,
            max_retries=LLM_MAX_RETRIES,
            base_url=base_url,
            api_key=api_key,
        )
    except Exception as e:
        raise ModelUnavailableError(f"Could not initialise {model_name}: {e}") from e
    if STOP_SEQUENCES:
        llm = llm.bind(stop=STOP_SEQUENCES)
    return llm


def generate_with_model(note: str) -> list[Flashcard]:
    """Ask the model for cards; raise instead of returning a short result."""
    llm = build_llm()

    def _build_prompt(inputs):
        return build_flashcard_prompt(inputs["note"], card_count=MAX_FLASHCARDS)

    chain = RunnableLambda(_build_prompt) | llm
    prompt = _build_prompt({"note": note})
    llm_logger = get_llm_logger()

    try:
        response = chain.invoke({"note": note})
    except Exception as e:
        llm_logger.log_llm_call(
            prompt=prompt,
            response=e,
            model=model_name,
            module="FlashcardsModule.flashcards",
            metadata={"function": "generate_with_model"},
        )
        raise ModelUnavailableError(f"Model call failed: {e}") from e

    raw_output = getattr(response, "content", str(response))
    cards = parse_flashcard_response(raw_output, max_cards=MAX_FLASHCARDS)
    llm_logger.log_llm_call(
        prompt=prompt,
        response=response,
        model=model_name,
        module="FlashcardsModule.flashcards",
        metadata={"function": "generate_with_model", "accepted_cards": len(cards)},
    )

    if len(cards) < MAX_FLASHCARDS:
        raise InsufficientQualityError(
            f"Only {len(cards)} of {MAX_FLASHCARDS} model flashcards passed the quality checks"
        )
    return cards


class FlashcardSet:
    """
    Manages the flashcards generated from one study session: generation,
    mastery tracking and saving.
    """

    def __init__(
        self,
        flashcards=None,
        history: Optional[FlashcardHistory] = None,
        use_model: bool = True,
    ):
        self.flashcards = flashcards if flashcards else []
        self.history = history if history is not None else get_history_store()
        self.use_model = use_model
        self._busy = False
        self._busy_lock = threading.Lock()

    @property
    def busy(self) -> bool:
        return self._busy

    @property
    def mastered_count(self) -> int:
        return sum(1 for card in self.flashcards if card.mastered)

    def _try_start(self) -> bool:
        with self._busy_lock:
            if self._busy:
                return False
            self._busy = True
            return True

    def _finish(self):
        with self._busy_lock:
            self._busy = False

    def generate_from_note(self, note: str) -> GenerationResult:
        """
        Replace the set with cards generated from ``note``.

        Raises MalformedInputError for a blank note. A call made while another
        generation on this set is running returns a result with ``busy=True``
        and leaves the current cards alone.
        """
        if not note or not note.strip():
            raise MalformedInputError("Note text is empty")

        if not self._try_start():
            logger.info("Flashcard generation already in progress; request ignored")
            return GenerationResult(busy=True)
        try:
            result = self._generate(note)
        finally:
            self._finish()

        self.flashcards = list(result.cards)
        if self.flashcards:
            self.save_snapshot()
        else:
            logger.warning("No flashcards could be generated from the note")
        return result

    def _generate(self, note: str) -> GenerationResult:
        model_error = None
        if self.use_model:
            try:
                cards = generate_with_model(note)
                logger.info("Generated %d flashcards with %s", len(cards), model_name)
                return GenerationResult(cards=cards)
            except (ModelUnavailableError, InsufficientQualityError) as e:
                model_error = str(e)
                logger.warning("Falling back to rule-based flashcards: %s", e)
        else:
            model_error = "Model generation disabled"

        cards = generate_fallback_flashcards(note, max_cards=MAX_FLASHCARDS)
        return GenerationResult(cards=cards, used_fallback=True, model_error=model_error)

    def toggle_mastered(self, index: int) -> bool:
        """Flip the mastered flag of card ``index`` and save the set."""
        if not 0 <= index < len(self.flashcards):
            raise IndexError(f"No flashcard at position {index}")
        mastered = self.flashcards[index].toggle_mastered()
        self.save_snapshot()
        return mastered

    def save_snapshot(self) -> bool:
        return self.history.append(make_snapshot(self.flashcards))

    @classmethod
    def restore_latest(cls, history: Optional[FlashcardHistory] = None, **kwargs):
        """Rebuild a set from the most recent history snapshot, if any."""
        history = history if history is not None else get_history_store()
        snapshot = history.latest()
        cards = [Flashcard.from_dict(c) for c in snapshot["cards"]] if snapshot else []
        return cls(flashcards=cards, history=history, **kwargs)

    def run_cli_review(self):
        """Simple CLI loop for reviewing the flashcards."""
        if not self.flashcards:
            print("⚠️ Unable to generate flashcards from this note.")
            return
        for i, card in enumerate(self.flashcards, start=1):
            marker = "🤖" if card.origin is CardOrigin.MODEL else "📝"
            print(f"\n{marker} {i}. {card.question}")
            input("Press Enter to reveal the answer...")
            print(f"✅ Answer: {card.answer}")
            if input("Mark as mastered? [y/N] ").strip().lower() == "y":
                if not card.mastered:
                    self.toggle_mastered(i - 1)
        print(f"\n📚 Mastered {self.mastered_count}/{len(self.flashcards)} flashcards.")

    def to_dict_list(self):
        """
        Returns list of flashcards as list of dicts (e.g. for JSON API).
        """
        return [fc.to_dict() for fc in self.flashcards]
