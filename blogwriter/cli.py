# blogwriter/cli.py
from __future__ import annotations

import click

from .utils.config import load_config
from .commands.generate import generate
from .commands.convert import render, export
from .commands.studio import studio
from .commands.config_cmd import config_group


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=True, path_type=str),
    help="Path to config TOML (default: ~/.config/blogwriter/config.toml)",
)
@click.option(
    "--profile",
    default="default",
    show_default=True,
    help="Config profile name in the TOML file",
)
@click.option(
    "--verbose/--no-verbose",
    default=False,
    show_default=True,
    help="Verbose logging",
)
@click.option(
    "--quiet/--no-quiet",
    default=False,
    show_default=True,
    help="Suppress non-error output",
)
@click.option(
    "--json/--no-json",
    "json_mode",
    default=False,
    show_default=True,
    help="Output in JSON where supported",
)
@click.version_option(package_name="blogwriter", prog_name="blogwriter")
@click.pass_context
def cli(ctx: click.Context, config_path: str | None, profile: str,
        verbose: bool, quiet: bool, json_mode: bool):
    """
    BlogWriter: generate SEO-optimized blog posts, render them and export them.
    """
    cfg = load_config(config_path, profile)

    # shared context for subcommands
    ctx.ensure_object(dict)
    ctx.obj.update(
        {
            "config": cfg,
            "verbose": verbose,
            "quiet": quiet,
            "json": json_mode,
            "profile": profile,
            "config_path": config_path,
        }
    )


# ---- Subcommands ----
cli.add_command(generate)       # blogwriter generate ...
cli.add_command(render)         # blogwriter render ...
cli.add_command(export)         # blogwriter export ...
cli.add_command(studio)         # blogwriter studio
cli.add_command(config_group)   # blogwriter config ...


if __name__ == "__main__":
    cli()
