from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Dict

import click


try:
    import tomllib  # Python 3.11+
except Exception:  # pragma: no cover
    tomllib = None  # type: ignore


CONFIG_DIR = Path.home() / ".config" / "blogwriter"
DEFAULT_CONFIG_PATH = CONFIG_DIR / "config.toml"

API_KEY_ENV = "GEMINI_API_KEY"

KNOWN_KEYS = (
    "provider", "model", "api_base", "ollama_base", "api_key", "timeout",
    "tone", "audience", "word_count", "out_dir",
)
SECRET_KEYS = ("api_key",)


def get_default_config_path() -> Path:
    return DEFAULT_CONFIG_PATH


def resolve_config_path(config_path: str | Path | None) -> Path:
    """A directory means <dir>/config.toml; nothing means the default location."""
    path = Path(config_path) if config_path else DEFAULT_CONFIG_PATH
    if path.is_dir():
        path = path / "config.toml"
    return path


def _toml_dump(data: Dict[str, Dict[str, Any]]) -> str:
    lines: list[str] = []
    for section, values in data.items():
        lines.append(f"[{section}]")
        tables = {k: v for k, v in values.items() if isinstance(v, dict)}
        for k, v in values.items():
            if k in tables:
                continue
            if isinstance(v, bool):
                sval = "true" if v else "false"
            elif isinstance(v, (int, float)):
                sval = str(v)
            elif v is None:
                sval = '""'
            else:
                sval = str(v).replace("\\", "\\\\").replace('"', '\\"')
                sval = f"\"{sval}\""
            lines.append(f"{k} = {sval}")
        lines.append("")
        # nested tables such as [<profile>.llm]
        if tables:
            lines.append(_toml_dump({f"{section}.{k}": v for k, v in tables.items()}).rstrip())
            lines.append("")
    return "\n".join(lines).rstrip() + "\n"


def load_config(config_path: str | None, profile: str = "default") -> dict[str, Any]:
    """
    Return the profile's keys plus a ``_meta`` entry describing where they came from.
    A missing or unreadable file yields an empty profile.
    """
    path = resolve_config_path(config_path)
    cfg: dict[str, Any] = {"_meta": {"config_path": str(path), "source": "none", "profile": profile}}
    if not path.exists() or not tomllib:
        return cfg
    try:
        data = tomllib.loads(path.read_text(encoding="utf-8"))
    except (OSError, tomllib.TOMLDecodeError) as e:
        cfg["_meta"]["source"] = f"unreadable ({e})"
        return cfg
    if profile in data:
        cfg.update(data.get(profile, {}))
        cfg["_meta"]["source"] = f"file [{profile}]"
    elif "default" in data:
        cfg.update(data.get("default", {}))
        cfg["_meta"]["source"] = "file [default]"
    return cfg


def save_config(config_path: str | Path, profile: str, updates: Dict[str, Any], *, replace_profile: bool = False) -> None:
    path = resolve_config_path(config_path)
    path.parent.mkdir(parents=True, exist_ok=True)

    existing: Dict[str, Dict[str, Any]] = {}
    if path.exists() and tomllib:
        try:
            existing = tomllib.loads(path.read_text(encoding="utf-8"))  # type: ignore
        except (OSError, tomllib.TOMLDecodeError):
            existing = {}

    if replace_profile:
        existing[profile] = dict(updates)
    else:
        current = existing.get(profile, {})
        current.update(updates)
        existing[profile] = current

    if "default" not in existing:
        existing.setdefault("default", {})

    path.write_text(_toml_dump(existing), encoding="utf-8")


def coerce_value(key: str, raw: str) -> Any:
    """Turn a command-line string into the TOML type the key expects."""
    if key == "word_count":
        return int(raw)
    if key == "timeout":
        return float(raw)
    return raw


def resolve_api_key(value: str | None, cfg: dict) -> str:
    """
    Explicit value (flag or $GEMINI_API_KEY) wins, then the profile's api_key.
    May return "" - a missing key only surfaces when the call fails.
    """
    if value not in (None, ""):
        return str(value)
    env = os.environ.get(API_KEY_ENV, "")
    if env:
        return env
    llm = cfg.get("llm") if isinstance(cfg.get("llm"), dict) else {}
    return str(llm.get("api_key") or cfg.get("api_key") or "")


def resolve_default(key: str, value: Any, cfg: dict, fallback: Any) -> Any:
    if value is not None and value != "":
        return value
    if key in cfg and cfg[key] not in (None, ""):
        return cfg[key]
    return fallback


def resolve_word_count(value: Any, cfg: dict, fallback: int) -> int:
    raw = resolve_default("word_count", value, cfg, fallback)
    try:
        count = int(raw)
    except (TypeError, ValueError):
        raise click.UsageError(f"word_count must be a whole number of words, got {raw!r}")
    if count < 1:
        raise click.UsageError(f"word_count must be positive, got {count}")
    return count


def debug_dump_config(cfg: dict) -> dict:
    """Copy of cfg with secrets masked, safe to print."""
    def redact(d: dict) -> dict:
        out: dict = {}
        for k, v in d.items():
            if isinstance(v, dict):
                out[k] = redact(v)
            elif k in SECRET_KEYS and v:
                s = str(v)
                out[k] = f"{s[:4]}…({len(s)} chars)" if len(s) > 8 else "****"
            else:
                out[k] = v
        return out
    return redact(cfg)
