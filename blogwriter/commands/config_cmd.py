from __future__ import annotations
import json

import click

from ..llm.factory import PROVIDERS
from ..prompts.blog import TONES
from ..utils.config import (
    KNOWN_KEYS,
    coerce_value,
    debug_dump_config,
    get_default_config_path,
    load_config,
    resolve_api_key,
    resolve_config_path,
    save_config,
)


def _root_opts(ctx, config_path, profile):
    """Subcommand options win; otherwise inherit the root --config/--profile."""
    obj = ctx.obj or {}
    return config_path or obj.get("config_path"), profile or obj.get("profile") or "default"


@click.group(name="config")
def config_group():
    """Inspect, diagnose and edit configuration."""
    pass


@config_group.command(name="show")
@click.option("--config", "config_path", type=click.Path(dir_okay=True), required=False, help="Config path or directory")
@click.option("--profile", default=None)
@click.pass_context
def show_config(ctx, config_path, profile):
    """Print the profile config (redacted) and where it was loaded from."""
    config_path, profile = _root_opts(ctx, config_path, profile)
    cfg = load_config(config_path, profile)
    redacted = debug_dump_config(cfg)
    meta = redacted.pop("_meta", {})
    click.echo(click.style("=== BlogWriter config (redacted) ===", fg="cyan"))
    click.echo(f"Source: {meta.get('source')}")
    click.echo(f"Path  : {meta.get('config_path')}")
    click.echo(json.dumps(redacted, indent=2, ensure_ascii=False))


@config_group.command(name="doctor")
@click.option("--config", "config_path", type=click.Path(dir_okay=True), required=False)
@click.option("--profile", default=None)
@click.pass_context
def config_doctor(ctx, config_path, profile):
    """Validate provider settings and defaults."""
    config_path, profile = _root_opts(ctx, config_path, profile)
    cfg = load_config(config_path, profile)
    errs = []
    warnings = []

    llm = cfg.get("llm") if isinstance(cfg.get("llm"), dict) else {}
    provider = (llm.get("provider") or cfg.get("provider") or "gemini").strip().lower()
    model = llm.get("model") or cfg.get("model")
    if provider not in PROVIDERS:
        errs.append(f"provider invalid: {provider!r}")
    elif provider == "gemini":
        if not resolve_api_key(None, cfg):
            warnings.append("No API key: set GEMINI_API_KEY or api_key (calls will fail)")
    elif provider == "openai_compat":
        for k in ("api_base", "model"):
            if not (llm.get(k) or cfg.get(k)):
                errs.append(f"{k} is required for provider=openai_compat")
    elif provider == "ollama" and not model:
        warnings.append("model not set for provider=ollama (defaults to mistral:latest)")

    tone = cfg.get("tone")
    if tone and tone not in TONES:
        errs.append(f"tone {tone!r} is not one of: {', '.join(TONES)}")
    word_count = cfg.get("word_count")
    if word_count is not None and (not isinstance(word_count, int) or word_count < 1):
        errs.append(f"word_count must be a positive integer, got {word_count!r}")

    for w in warnings:
        click.echo(click.style(f"warning: {w}", fg="yellow"))
    if errs:
        click.echo(click.style("Config issues found:", fg="red"))
        for e in errs:
            click.echo(f" - {e}")
        click.echo("\nRun: blogwriter config show")
        raise SystemExit(2)

    click.echo(click.style("Config OK ✅", fg="green"))
    click.echo(f"Loaded from: {cfg.get('_meta', {}).get('config_path')}")


@config_group.command(name="set")
@click.argument("key", type=click.Choice(KNOWN_KEYS))
@click.argument("value")
@click.option("--config", "config_path", type=click.Path(dir_okay=False), required=False)
@click.option("--profile", default=None)
@click.pass_context
def set_config(ctx, key, value, config_path, profile):
    """Set KEY to VALUE in the profile."""
    config_path, profile = _root_opts(ctx, config_path, profile)
    try:
        coerced = coerce_value(key, value)
    except ValueError:
        raise click.BadParameter(f"{value!r} is not valid for {key}", param_hint="VALUE")
    path = resolve_config_path(config_path or get_default_config_path())
    save_config(path, profile, {key: coerced})
    click.echo(f"Set {key} in [{profile}] of {path}")
