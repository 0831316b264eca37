import json
import logging
import os
import threading
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Optional

logger = logging.getLogger(__name__)

DEFAULT_LOG_PATH = "data/Log/llm_log.json"
MAX_LOG_ENTRIES = 500


class LLMLogger:
    """Append-only JSON record of model calls.

    Logging is best effort: a failure to read or write the file is reported
    through ``logging`` and never reaches the caller.
    """

    _lock = threading.Lock()

    def __init__(self, log_file: Optional[str] = None, max_entries: int = MAX_LOG_ENTRIES):
        self.log_file = Path(log_file or os.getenv("LLM_LOG_PATH", DEFAULT_LOG_PATH))
        self.max_entries = max_entries

    def log_llm_call(
        self,
        prompt: str,
        response: Any,
        model: str,
        module: str,
        metadata: Optional[Dict] = None,
    ):
        """Record one prompt/response pair; ``response`` may be a message or an exception."""
        entry = {
            "timestamp": datetime.now().isoformat(),
            "module": module,
            "model": model,
            "metadata": metadata or {},
            "prompt": prompt,
            "response": self._extract_response_data(response),
        }
        try:
            with self._lock:
                logs = self._read_logs()
                logs.append(entry)
                self._write_logs(logs[-self.max_entries:])
        except (OSError, TypeError, ValueError) as e:
            logger.warning("Failed to log LLM call: %s", e)

    def read_entries(self) -> List[Dict]:
        with self._lock:
            return self._read_logs()

    @staticmethod
    def _extract_response_data(response: Any) -> Dict:
        if isinstance(response, BaseException):
            return {"error": f"{type(response).__name__}: {response}"}

        metadata = getattr(response, "response_metadata", None) or {}
        usage = metadata.get("token_usage", {}) or {}
        return {
            "content": getattr(response, "content", str(response)),
            "finish_reason": metadata.get("finish_reason", ""),
            "usage": {
                "prompt_tokens": usage.get("prompt_tokens", 0),
                "completion_tokens": usage.get("completion_tokens", 0),
                "total_tokens": usage.get("total_tokens", 0),
            },
        }

    def _read_logs(self) -> List[Dict]:
        if not self.log_file.exists():
            return []
        try:
            with open(self.log_file, "r", encoding="utf-8") as f:
                logs = json.load(f)
        except (OSError, ValueError):
            return []
        return logs if isinstance(logs, list) else []

    def _write_logs(self, logs: List[Dict]):
        self.log_file.parent.mkdir(parents=True, exist_ok=True)
        with open(self.log_file, "w", encoding="utf-8") as f:
            json.dump(logs, f, indent=2, ensure_ascii=False)


_instance: Optional[LLMLogger] = None
_instance_lock = threading.Lock()


def get_llm_logger() -> LLMLogger:
    """Get the shared LLMLogger instance"""
    global _instance
    if _instance is None:
        with _instance_lock:
            if _instance is None:
                _instance = LLMLogger()
    return _instance
