from tools.llm_logger import LLMLogger


class FakeMessage:
    content = "Q: How do enzymes work?\nA: They lower activation energy"
    response_metadata = {
        "finish_reason": "stop",
        "token_usage": {"prompt_tokens": 120, "completion_tokens": 30, "total_tokens": 150},
    }


def test_logs_content_and_usage(tmp_path):
    log = LLMLogger(str(tmp_path / "log.json"))
    log.log_llm_call("prompt", FakeMessage(), "gpt-test", "tests", {"k": 1})

    entry = log.read_entries()[0]
    assert entry["model"] == "gpt-test"
    assert entry["metadata"] == {"k": 1}
    assert entry["response"]["content"] == FakeMessage.content
    assert entry["response"]["finish_reason"] == "stop"
    assert entry["response"]["usage"]["total_tokens"] == 150


def test_logs_exceptions(tmp_path):
    log = LLMLogger(str(tmp_path / "log.json"))
    log.log_llm_call("prompt", TimeoutError("too slow"), "gpt-test", "tests")
    assert log.read_entries()[0]["response"] == {"error": "TimeoutError: too slow"}


def test_keeps_only_recent_entries(tmp_path):
    log = LLMLogger(str(tmp_path / "log.json"), max_entries=2)
    for i in range(3):
        log.log_llm_call(f"prompt {i}", FakeMessage(), "gpt-test", "tests")
    assert [e["prompt"] for e in log.read_entries()] == ["prompt 1", "prompt 2"]


def test_unwritable_log_does_not_raise(tmp_path):
    log = LLMLogger(str(tmp_path))
    log.log_llm_call("prompt", FakeMessage(), "gpt-test", "tests")
    assert log.read_entries() == []
