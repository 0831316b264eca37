"""Settings shared by the flashcard generation pipeline.

Model settings come from the environment (a ``.env`` file is
loaded first); the text-processing limits are fixed constants.
"""
import os

from dotenv import load_dotenv

load_dotenv()

model_name = os.environ.get("model_name", "gpt-3.5-turbo")
base_url = os.environ.get("base_url")
api_key = os.environ.get("api_key")

TEMPERATURE = float(os.getenv("FLASHCARD_TEMPERATURE", 0.7))
MAX_OUTPUT_TOKENS = int(os.getenv("FLASHCARD_MAX_TOKENS", 512))
STOP_SEQUENCES = [
    s for s in os.getenv("FLASHCARD_STOP_SEQUENCES", "").split(",") if s.strip()
]
LLM_TIMEOUT = float(os.getenv("LLM_TIMEOUT", 60))
LLM_MAX_RETRIES = int(os.getenv("LLM_MAX_RETRIES", 1))

# Card limits
MAX_FLASHCARDS = 3
MIN_QUESTION_LENGTH = 15
MIN_ANSWER_LENGTH = 10
