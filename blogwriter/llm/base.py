from __future__ import annotations
from typing import Any, Dict, Optional
from abc import ABC, abstractmethod

import requests

from .errors import raise_for_status

NO_RESPONSE = "No response generated."


def dig(data: Any, *path: Any, default: Optional[str] = None) -> Any:
    """Walk nested dicts/lists; return ``default`` on the first missing step."""
    cur = data
    for step in path:
        try:
            cur = cur[step]
        except (KeyError, IndexError, TypeError):
            return default
    return cur


class BaseLLM(ABC):
    model: str = ""
    timeout: Optional[float] = None
    session: requests.Session

    @abstractmethod
    def generate(self, prompt: str, **kwargs) -> str:
        """Return the completion text for a single user prompt."""
        raise NotImplementedError

    def _post_json(self, url: str, payload: Dict[str, Any]) -> Any:
        """Single POST, no retries. Non-2xx raises a GenerationError subclass."""
        resp = self.session.post(url, json=payload, timeout=self.timeout)
        if not 200 <= resp.status_code < 300:
            err_payload = {}
            try:
                err_payload = resp.json()
            except ValueError:
                pass
            raise_for_status(resp.status_code, message=f"POST {url}", payload=err_payload)
        return resp.json()

    @staticmethod
    def _text_or_fallback(data: Any, *path: Any) -> str:
        text = dig(data, *path)
        if not isinstance(text, str) or not text:
            return NO_RESPONSE
        return text
