from __future__ import annotations
from typing import Optional
import requests

from .base import BaseLLM


class OllamaLLM(BaseLLM):
    def __init__(self, base_url: str = "http://localhost:11434", model: str = "mistral:latest",
                 timeout: Optional[float] = None):
        self.base_url = base_url.rstrip("/")
        self.model = model
        self.timeout = timeout
        self.session = requests.Session()
        self.session.headers.update({"Content-Type": "application/json"})

    def generate(self, prompt: str, **kwargs) -> str:
        # /api/generate takes a bare prompt; stream=false returns one JSON object
        url = f"{self.base_url}/api/generate"
        payload = {
            "model": self.model,
            "prompt": prompt,
            "stream": False,
            "options": {
                "temperature": kwargs.get("temperature", 0.7),
            },
        }
        data = self._post_json(url, payload)
        return self._text_or_fallback(data, "response")
