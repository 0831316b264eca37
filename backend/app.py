from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel
from typing import List, Dict, Any, Optional
import logging

from FlashcardsModule import FlashcardSet, MalformedInputError
from StorageModule import get_history_store

app = FastAPI(title="Study Notes Flashcards API")

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

logger = logging.getLogger(__name__)
history = get_history_store()
flashcard_set = FlashcardSet.restore_latest(history=history)


class NoteRequest(BaseModel):
    note: str


class FlashcardOut(BaseModel):
    question: str
    answer: str
    mastered: bool
    origin: str


class GenerationResponse(BaseModel):
    cards: List[FlashcardOut]
    busy: bool = False
    used_fallback: bool = False
    model_error: Optional[str] = None


class MasteredResponse(BaseModel):
    index: int
    mastered: bool
    mastered_count: int


@app.get("/")
async def root():
    return {"status": "ok", "app": app.title}


@app.post("/api/flashcards", response_model=GenerationResponse)
def generate_flashcards(data: NoteRequest):
    """Generate flashcards for a note, falling back to rule-based cards."""
    logger.info("📨 Flashcard request (%d chars)", len(data.note))
    try:
        result = flashcard_set.generate_from_note(data.note)
    except MalformedInputError as e:
        raise HTTPException(status_code=400, detail=str(e))

    logger.info(
        "✅ %d flashcards generated. Fallback: %s, busy: %s",
        len(result.cards),
        result.used_fallback,
        result.busy,
    )
    return result.to_dict()


@app.get("/api/flashcards", response_model=GenerationResponse)
async def current_flashcards():
    return {"cards": flashcard_set.to_dict_list(), "busy": flashcard_set.busy}


@app.post("/api/flashcards/{index}/mastered", response_model=MasteredResponse)
def toggle_mastered(index: int):
    try:
        mastered = flashcard_set.toggle_mastered(index)
    except IndexError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return {
        "index": index,
        "mastered": mastered,
        "mastered_count": flashcard_set.mastered_count,
    }


@app.get("/api/flashcards/history")
async def flashcard_history() -> List[Dict[str, Any]]:
    return flashcard_set.history.load()
