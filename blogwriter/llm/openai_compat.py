from __future__ import annotations
from typing import Optional
import requests

from .base import BaseLLM


class OpenAICompatLLM(BaseLLM):
    def __init__(self, api_base: str, api_key: str, model: str, timeout: Optional[float] = None):
        self.api_base = api_base.rstrip("/")
        self.api_key = api_key
        self.model = model
        self.timeout = timeout
        self.session = requests.Session()
        self.session.headers.update({
            "Authorization": f"Bearer {self.api_key}",
            "Content-Type": "application/json",
        })

    def generate(self, prompt: str, **kwargs) -> str:
        url = f"{self.api_base}/chat/completions"
        payload = {
            "model": self.model,
            "messages": [{"role": "user", "content": prompt}],
            "temperature": kwargs.get("temperature", 0.7),
            "stream": False,
        }
        if "max_tokens" in kwargs:
            payload["max_tokens"] = kwargs["max_tokens"]
        data = self._post_json(url, payload)
        return self._text_or_fallback(data, "choices", 0, "message", "content")
