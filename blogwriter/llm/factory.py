from __future__ import annotations

from typing import Any, Dict, Optional

import click

from .base import BaseLLM
from .gemini import GeminiLLM, DEFAULT_API_BASE, DEFAULT_MODEL
from .openai_compat import OpenAICompatLLM
from .ollama import OllamaLLM

PROVIDERS = ("gemini", "openai_compat", "ollama")


def _timeout(cfg: Dict[str, Any]) -> Optional[float]:
    raw = cfg.get("timeout")
    if raw in (None, ""):
        return None
    try:
        return float(raw)
    except (TypeError, ValueError):
        raise click.UsageError(f"timeout must be a number of seconds, got {raw!r}")


def pick_llm(cfg: Dict[str, Any], api_key: Optional[str] = None) -> BaseLLM:
    """
    Build the generation client from the active profile.

    Supports either a nested table (cfg['llm']) or flat keys in the profile.
    The API key is not checked here: a missing key only shows up as a failed call.
    """
    llm = cfg.get("llm") if isinstance(cfg.get("llm"), dict) else {}

    def get(key: str, default: str = "") -> str:
        value = llm.get(key) or cfg.get(key) or default
        return str(value).strip()

    provider = get("provider", "gemini").lower()
    key = (api_key or get("api_key")).strip()
    timeout = _timeout({**cfg, **llm})

    if provider == "gemini":
        return GeminiLLM(
            api_key=key,
            model=get("model", DEFAULT_MODEL),
            api_base=get("api_base", DEFAULT_API_BASE),
            timeout=timeout,
        )

    if provider == "openai_compat":
        api_base = get("api_base")
        model = get("model")
        missing = [k for k, v in [("api_base", api_base), ("model", model)] if not v]
        if missing:
            raise click.UsageError(f"provider=openai_compat requires: {', '.join(missing)}")
        return OpenAICompatLLM(api_base=api_base, api_key=key, model=model, timeout=timeout)

    if provider == "ollama":
        return OllamaLLM(
            base_url=get("ollama_base", "http://localhost:11434"),
            model=get("model", "mistral:latest"),
            timeout=timeout,
        )

    raise click.UsageError(f"Unknown provider {provider!r}. Use one of: {', '.join(PROVIDERS)}.")
