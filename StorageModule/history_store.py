"""JSON-file history of generated flashcard sets.

Each snapshot is ``{"timestamp": ..., "cards": [...]}``. The newest snapshot
is stored first and only the most recent ``limit`` snapshots are kept.
Write failures are logged and reported through the return value of
``append``; they never raise.
"""
import json
import logging
import os
import tempfile
import threading
from datetime import datetime
from typing import Dict, Iterable, List, Optional

from dotenv import load_dotenv

load_dotenv()

HISTORY_PATH = os.getenv("FLASHCARD_HISTORY_PATH", "data/flashcards/history.json")
HISTORY_LIMIT = int(os.getenv("FLASHCARD_HISTORY_LIMIT", 50))

logger = logging.getLogger(__name__)


def make_snapshot(cards: Iterable, timestamp: Optional[str] = None) -> Dict:
    """Build a snapshot dict from Flashcard objects or card dicts."""
    return {
        "timestamp": timestamp or datetime.now().isoformat(timespec="seconds"),
        "cards": [c.to_dict() if hasattr(c, "to_dict") else dict(c) for c in cards],
    }


class FlashcardHistory:
    """Most-recent-first list of snapshots persisted to one JSON file."""

    def __init__(self, path: str = HISTORY_PATH, limit: int = HISTORY_LIMIT):
        self.path = path
        self.limit = limit
        self._lock = threading.Lock()

    def append(self, snapshot: Dict) -> bool:
        """Prepend ``snapshot`` and trim the history; return False if it was not saved."""
        with self._lock:
            snapshots = self._read()
            snapshots.insert(0, snapshot)
            del snapshots[self.limit:]
            try:
                self._write(snapshots)
            except (OSError, TypeError, ValueError) as e:
                logger.error("Failed to save flashcard history to %s: %s", self.path, e)
                return False
        logger.info("Saved flashcard snapshot (%d kept)", len(snapshots))
        return True

    def load(self) -> List[Dict]:
        with self._lock:
            return self._read()

    def latest(self) -> Optional[Dict]:
        snapshots = self.load()
        return snapshots[0] if snapshots else None

    def _read(self) -> List[Dict]:
        if not os.path.exists(self.path):
            return []
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            logger.error("Failed to load flashcard history from %s: %s", self.path, e)
            return []
        return data if isinstance(data, list) else []

    def _write(self, snapshots: List[Dict]):
        # the existing file is only replaced once the new one is complete
        directory = os.path.dirname(self.path) or "."
        os.makedirs(directory, exist_ok=True)
        fd, tmp_path = tempfile.mkstemp(dir=directory, suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(snapshots, f, indent=4, ensure_ascii=False)
            os.replace(tmp_path, self.path)
        except BaseException:
            os.remove(tmp_path)
            raise


_store: Optional[FlashcardHistory] = None
_store_lock = threading.Lock()


def get_history_store() -> FlashcardHistory:
    """Get the shared FlashcardHistory instance"""
    global _store
    if _store is None:
        with _store_lock:
            if _store is None:
                _store = FlashcardHistory()
    return _store
