from dotenv import load_dotenv
from FlashcardsModule import FlashcardSet, MalformedInputError
import logging
import os
import sys

# Load environment variables from .env
dotenv_path = os.path.join(os.path.dirname(__file__), ".env")
load_dotenv(dotenv_path)


def review_notes_cli(path: str) -> None:
    """Generate flashcards for the note in ``path`` and review them in the terminal."""
    if not os.getenv("api_key"):
        print("Warning: api_key environment variable is not set. "
              "Flashcards will be created with the offline generator.")
    try:
        with open(path, encoding="utf-8") as f:
            note = f.read()
        flashcards = FlashcardSet()
        result = flashcards.generate_from_note(note)
    except MalformedInputError:
        print(f"Error: {path} is empty.")
        return
    except OSError as e:
        print(f"Error: could not read the note: {e}")
        return

    if result.used_fallback:
        print(f"ℹ️ Using the offline generator: {result.model_error}")
    flashcards.run_cli_review()


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    if len(sys.argv) > 1:
        review_notes_cli(sys.argv[1])
    else:
        from frontend_service.interface import launch_gradio

        launch_gradio()
