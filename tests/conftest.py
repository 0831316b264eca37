import pytest
import tools.llm_logger as ll
from StorageModule.history_store import FlashcardHistory


@pytest.fixture
def history(tmp_path):
    return FlashcardHistory(str(tmp_path / "history.json"))


@pytest.fixture(autouse=True)
def temp_llm_log(tmp_path, monkeypatch):
    llm_log = ll.LLMLogger(str(tmp_path / "llm_log.json"))
    monkeypatch.setattr(ll, "_instance", llm_log)
    return llm_log
