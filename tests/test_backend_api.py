import pytest
from fastapi.testclient import TestClient

import backend.app as api
from FlashcardsModule import FlashcardSet

NOTE = (
    "Photosynthesis allows plants to convert light into chemical energy "
    "because chlorophyll absorbs specific wavelengths."
)


@pytest.fixture
def client(monkeypatch, history):
    monkeypatch.setattr(api, "flashcard_set", FlashcardSet(history=history, use_model=False))
    return TestClient(api.app)


def test_root(client):
    assert client.get("/").json()["status"] == "ok"


def test_generate_flashcards(client):
    response = client.post("/api/flashcards", json={"note": NOTE})
    assert response.status_code == 200
    body = response.json()
    assert body["used_fallback"] is True
    assert body["busy"] is False
    assert len(body["cards"]) == 1
    assert body["cards"][0]["origin"] == "fallback"
    assert body["cards"][0]["question"].endswith("?")


def test_blank_note_is_bad_request(client):
    response = client.post("/api/flashcards", json={"note": "   "})
    assert response.status_code == 400


def test_current_cards_and_toggle(client):
    client.post("/api/flashcards", json={"note": NOTE})
    assert len(client.get("/api/flashcards").json()["cards"]) == 1

    response = client.post("/api/flashcards/0/mastered")
    assert response.status_code == 200
    assert response.json() == {"index": 0, "mastered": True, "mastered_count": 1}
    assert client.get("/api/flashcards").json()["cards"][0]["mastered"] is True


def test_toggle_unknown_card(client):
    assert client.post("/api/flashcards/3/mastered").status_code == 404


def test_history(client):
    client.post("/api/flashcards", json={"note": NOTE})
    client.post("/api/flashcards/0/mastered")
    snapshots = client.get("/api/flashcards/history").json()
    assert len(snapshots) == 2
    assert snapshots[0]["cards"][0]["mastered"] is True


def test_surfaces_share_one_history_store():
    from StorageModule import get_history_store

    assert api.history is get_history_store()
    assert FlashcardSet.restore_latest().history is api.history
