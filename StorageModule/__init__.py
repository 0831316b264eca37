"""
StorageModule
-------------
Keeps the history of generated flashcard sets as JSON snapshots on disk.
"""

from .history_store import FlashcardHistory, get_history_store, make_snapshot

__all__ = ["FlashcardHistory", "get_history_store", "make_snapshot"]
