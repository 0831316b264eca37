from langchain_core.prompts import PromptTemplate

DEFAULT_CARD_COUNT = 3
MAX_ANSWER_WORDS = 25

FLASHCARD_PROMPT = PromptTemplate.from_template(
    """You are an expert educator turning a student's study notes into flashcards.

Create exactly {card_count} flashcards from the notes below.

Mix the question types roughly as follows:
- Concept (20%): the meaning of a key idea in the notes
- Process (30%): how something happens, step by step
- Relationship (30%): how two ideas in the notes affect or differ from each other
- Application (20%): how the idea is used or what follows from it

Rules:
- Do NOT ask generic "What is ..." questions, and never ask what something is "about" or "used for".
- Each question must be specific and answerable from the notes alone.
- Keep every answer under {max_answer_words} words.
- Use exactly this format, with one blank line between flashcards and nothing else:

Q: <question>
A: <answer>

Example 1:
Q: How does an increase in temperature affect enzyme activity up to the optimum?
A: Activity rises because molecules collide more often and with more energy

Example 2:
Q: Why does the Treaty of Versailles count as a cause of the Second World War?
A: Its harsh reparations fuelled German resentment that extremist parties exploited

Notes:
{note}"""
)


def build_flashcard_prompt(
    note: str,
    card_count: int = DEFAULT_CARD_COUNT,
    max_answer_words: int = MAX_ANSWER_WORDS,
) -> str:
    """Return the instruction sent to the model for ``note``.

    The note is passed as a template value, so braces inside it are kept
    verbatim. Callers make sure the note is not blank.
    """
    return FLASHCARD_PROMPT.format(
        card_count=card_count, max_answer_words=max_answer_words, note=note
    )
