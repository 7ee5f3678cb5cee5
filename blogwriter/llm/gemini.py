from __future__ import annotations
from typing import Any, Dict, Optional
import requests

from .base import BaseLLM

DEFAULT_API_BASE = "https://generativelanguage.googleapis.com/v1beta"
DEFAULT_MODEL = "gemini-2.0-flash"


class GeminiLLM(BaseLLM):
    def __init__(self, api_key: str, model: str = DEFAULT_MODEL,
                 api_base: str = DEFAULT_API_BASE, timeout: Optional[float] = None):
        self.api_base = api_base.rstrip("/")
        self.api_key = api_key
        self.model = model
        # None leaves the timeout to requests (wait indefinitely)
        self.timeout = timeout
        self.session = requests.Session()
        self.session.headers.update({
            "x-goog-api-key": self.api_key or "",
            "Content-Type": "application/json",
        })

    def generate(self, prompt: str, **kwargs) -> str:
        url = f"{self.api_base}/models/{self.model}:generateContent"
        payload: Dict[str, Any] = {
            "contents": [
                {
                    "role": "user",
                    "parts": [{"text": prompt}],
                }
            ]
        }
        if "temperature" in kwargs:
            payload["generationConfig"] = {"temperature": kwargs["temperature"]}

        data = self._post_json(url, payload)
        return self._text_or_fallback(data, "candidates", 0, "content", "parts", 0, "text")
