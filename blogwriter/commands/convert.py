from pathlib import Path
import click

from ..converters.export import export_filename, write_docx
from ..converters.markup import render_html
from ..utils.log import info, success


def _read_text(path: str) -> str:
    return Path(path).read_text(encoding="utf-8")


@click.command(name="render")
@click.option('--input-md-file', type=click.Path(exists=True, dir_okay=False), required=True)
@click.option('--html-file', required=True, type=str)
@click.pass_context
def render(ctx, input_md_file, html_file):
    """Render generated Markdown to a display HTML fragment, no API call."""
    out = Path(html_file)
    out.parent.mkdir(parents=True, exist_ok=True)
    info(ctx, f"Rendering: {input_md_file} → {html_file}")
    out.write_text(render_html(_read_text(input_md_file)), encoding="utf-8")
    success(ctx, f"Wrote {html_file}")


@click.command(name="export")
@click.option('--input-md-file', type=click.Path(exists=True, dir_okay=False), required=True)
@click.option('--docx-file', type=str, default=None,
              help='Output path (default: <topic[:30]>-blog.docx, topic taken from --topic or the file name)')
@click.option('--topic', default=None, help='Topic used to name the document')
@click.pass_context
def export(ctx, input_md_file, docx_file, topic):
    """Export generated Markdown to a .docx document, no API call."""
    if not docx_file:
        docx_file = export_filename(topic or Path(input_md_file).stem)
    info(ctx, f"Exporting: {input_md_file} → {docx_file}")
    try:
        out = write_docx(_read_text(input_md_file), docx_file)
    except OSError as e:
        raise click.ClickException(f"Could not write document: {e}")
    success(ctx, f"Wrote {out}")
