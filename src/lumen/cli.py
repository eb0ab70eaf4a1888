"""
LUMEN CLI - Entry point.

Commands:
- compile: compile a .lumen file to CSS + HTML
- tokens: dump the token stream of a .lumen file
- render: compile every LUMEN block embedded in an HTML page
"""

import json
import logging
import platform
from pathlib import Path

import typer

from lumen import DISTRIBUTION_NAME, __version__
from lumen.core.errors import ConfigError, LumenError, ParseError
from lumen.core.ids import IdGenerator
from lumen.core.lexer import tokenize
from lumen.core.manifest import MANIFEST_NAME, load_manifest
from lumen.core.pipeline import compile_source
from lumen.runtime import process_document

app = typer.Typer(
    help="""LUMEN – declarative UI descriptions compiled to CSS + HTML

Commands:
  • compile: .lumen file -> stylesheet and markup
  • tokens:  show how a .lumen file is tokenized
  • render:  process <script type="text/lumen"> blocks in an HTML page
""",
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Display version and environment information."""
    if value:
        typer.echo(f"LUMEN version {__version__} ({DISTRIBUTION_NAME})")
        typer.echo(f"  Python:        {platform.python_implementation()} {platform.python_version()}")
        typer.echo(f"  Platform:      {platform.system()} {platform.release()}")
        raise typer.Exit()


@app.callback()
def main_callback(
    version: bool | None = typer.Option(
        None,
        "--version",
        "-V",
        callback=version_callback,
        is_eager=True,
        help="Show version and environment information",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log compiler progress"),
) -> None:
    """LUMEN CLI main callback for global options."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def read_source(path: Path) -> str:
    """Read a UTF-8 input file, exiting with an error message if it cannot be decoded."""
    try:
        return path.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        typer.echo(f"Error: {path} is not valid UTF-8 ({e.reason} at byte {e.start})", err=True)
        raise typer.Exit(code=1)


@app.command(name="compile")
def compile_command(
    source: Path = typer.Argument(..., exists=True, dir_okay=False, help="LUMEN source file"),
    css_out: Path | None = typer.Option(None, "--css", help="Write the stylesheet here"),
    html_out: Path | None = typer.Option(None, "--html", help="Write the markup here"),
    format: str = typer.Option("text", "--format", "-f", help="Output format: 'text' or 'json'"),
    manifest: str = typer.Option(MANIFEST_NAME, "--manifest", "-m", help="Path to lumen.toml"),
) -> None:
    """
    Compile a LUMEN file.

    Without --css/--html both outputs are printed to stdout.
    """
    text = read_source(source)
    try:
        config = load_manifest(Path(manifest))
        ids = IdGenerator(prefix=config.compile.id_prefix)
        result = compile_source(text, ids=ids, file=source)
    except ParseError as e:
        typer.echo(f"Parse error: {e}", err=True)
        raise typer.Exit(code=1)
    except LumenError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    if css_out:
        css_out.write_text(result.css + "\n", encoding="utf-8")
    if html_out:
        html_out.write_text(result.html + "\n", encoding="utf-8")
    if css_out or html_out:
        return

    if format == "json":
        typer.echo(json.dumps({"css": result.css, "html": result.html}, indent=2))
    else:
        typer.echo(result.css)
        typer.echo("")
        typer.echo(result.html)


@app.command(name="tokens")
def tokens_command(
    source: Path = typer.Argument(..., exists=True, dir_okay=False, help="LUMEN source file"),
) -> None:
    """Print one token per line as TYPE value @line:column."""
    for token in tokenize(read_source(source)):
        value = f" {token.value!r}" if token.value else ""
        typer.echo(f"{token.type.value}{value} @{token.line}:{token.column}")


@app.command(name="render")
def render_command(
    page: Path = typer.Argument(..., exists=True, dir_okay=False, help="HTML page"),
    output: Path | None = typer.Option(None, "--output", "-o", help="Write the page here"),
    manifest: str = typer.Option(MANIFEST_NAME, "--manifest", "-m", help="Path to lumen.toml"),
) -> None:
    """
    Compile every LUMEN block in an HTML page and mount the output.

    Failing blocks are reported and skipped; the rest still render.
    Exits with 1 if any block failed.
    """
    html_text = read_source(page)
    try:
        config = load_manifest(Path(manifest))
    except ConfigError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    report = process_document(html_text, config)

    if output:
        output.write_text(report.html, encoding="utf-8")
    else:
        typer.echo(report.html)

    for failure in report.failures:
        typer.echo(f"Block {failure.index}: {failure.message}", err=True)

    typer.echo(f"Mounted {report.mounted} block(s), {len(report.failures)} failed", err=True)
    if not report.ok:
        raise typer.Exit(code=1)


def main() -> None:
    app(standalone_mode=True)


if __name__ == "__main__":
    main()
