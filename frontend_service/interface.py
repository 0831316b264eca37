import os
import logging
import html
import gradio as gr
from dotenv import load_dotenv

from FlashcardsModule import CardOrigin, FlashcardSet, GenerationResult, MalformedInputError

dotenv_path = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", ".env"))
load_dotenv(dotenv_path)

logger = logging.getLogger(__name__)
flashcard_set = FlashcardSet.restore_latest()

UNABLE_TO_GENERATE = (
    "⚠️ Unable to generate flashcards from this note. "
    "Try adding a few complete sentences."
)
CSS = """
* { font-family: 'Segoe UI', Tahoma, sans-serif; }
.flashcard details { margin-top: 6px; }
.flashcard summary { cursor: pointer; font-weight: bold; }
"""


def render_cards(cards) -> str:
    """Render cards as Markdown with collapsible answers."""
    if not cards:
        return UNABLE_TO_GENERATE
    blocks = []
    for i, card in enumerate(cards, start=1):
        badge = "✅ mastered" if card.mastered else ""
        source = "🤖" if card.origin is CardOrigin.MODEL else "📝"
        blocks.append(
            f'<div class="flashcard">\n\n**{i}. {html.escape(card.question)}** {source} {badge}\n\n'
            f"<details><summary>Show answer</summary>{html.escape(card.answer)}</details>\n\n</div>"
        )
    return "\n\n---\n\n".join(blocks)


def describe_result(result: GenerationResult) -> str:
    if result.busy:
        return "⏳ A generation is already running, please wait."
    if not result.cards:
        return UNABLE_TO_GENERATE
    if result.used_fallback:
        reason = f" ({result.model_error})" if result.model_error else ""
        return f"📝 Created with the offline generator{reason}."
    return "🤖 Created with the language model."


def mastered_summary() -> str:
    return f"📚 Mastered: {flashcard_set.mastered_count}/{len(flashcard_set.flashcards)}"


def generate_cards(note: str) -> tuple[str, str, str]:
    try:
        result = flashcard_set.generate_from_note(note)
    except MalformedInputError:
        return render_cards(flashcard_set.flashcards), "✏️ Please enter some notes first.", mastered_summary()
    if result.busy:
        return render_cards(flashcard_set.flashcards), describe_result(result), mastered_summary()
    return render_cards(result.cards), describe_result(result), mastered_summary()


def toggle_card(number) -> tuple[str, str, str]:
    try:
        index = int(number) - 1
        mastered = flashcard_set.toggle_mastered(index)
        status = f"Card {index + 1} marked as {'mastered' if mastered else 'not mastered'}."
    except (TypeError, ValueError, IndexError):
        status = "⚠️ There is no card with that number."
    return render_cards(flashcard_set.flashcards), status, mastered_summary()


def build_interface() -> gr.Blocks:
    with gr.Blocks(css=CSS, theme=gr.themes.Soft()) as demo:
        gr.Markdown("<h1>Study Notes Flashcards 🎓</h1>")
        with gr.Row():
            with gr.Column(scale=2):
                note_input = gr.Textbox(label="Your notes", lines=10)
                generate_btn = gr.Button("Generate flashcards", variant="primary")
                status = gr.Markdown()
            with gr.Column(scale=3):
                cards_output = gr.Markdown(
                    render_cards(flashcard_set.flashcards) if flashcard_set.flashcards else ""
                )
                with gr.Row():
                    card_number = gr.Number(label="Card number", value=1, precision=0)
                    toggle_btn = gr.Button("Toggle mastered")
                mastered = gr.Markdown(mastered_summary())

        generate_btn.click(
            generate_cards, [note_input], [cards_output, status, mastered]
        )
        toggle_btn.click(toggle_card, [card_number], [cards_output, status, mastered])

    return demo


def launch_gradio() -> None:

    demo = build_interface()
    demo.queue()
    demo.launch()
