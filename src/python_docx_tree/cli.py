"""Command-line interface for python-docx-tree.

Provides commands for inspecting how a Word document is read from the terminal.
"""

import json
from collections import Counter
from pathlib import Path
from typing import Annotated

import typer

from . import __version__
from .docx_reader import read_document
from .errors import DocxTreeError
from .models.document import iter_nodes, to_dict

app = typer.Typer(
    name="docx-tree",
    help="Read Word documents into a document tree from the command line.",
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"docx-tree version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-v",
            help="Show version and exit.",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """Read Word documents into a document tree from the command line."""
    pass


@app.command()
def inspect(
    file: Annotated[Path, typer.Argument(help="Path to the .docx file")],
    no_images: Annotated[
        bool, typer.Option("--no-images", help="Don't read image data")
    ] = False,
) -> None:
    """Show warnings and a summary of the document tree."""
    try:
        result = read_document(file, load_images=not no_images)
    except DocxTreeError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    document = result.value
    counts = Counter(node.type for node in iter_nodes(document.children))

    typer.echo(f"File: {file}")
    typer.echo(f"Notes: {len(document.notes)}")
    typer.echo(f"Comments: {len(document.comments)}")
    typer.echo(f"Headers: {len(document.headers)}")
    typer.echo(f"Footers: {len(document.footers)}")
    for node_type, count in sorted(counts.items()):
        typer.echo(f"{node_type}: {count}")

    typer.echo(f"Warnings: {len(result.messages)}")
    for message in result.messages:
        typer.echo(f"  {message}")


@app.command()
def dump(
    file: Annotated[Path, typer.Argument(help="Path to the .docx file")],
    indent: Annotated[int, typer.Option("--indent", "-i", help="JSON indentation")] = 2,
) -> None:
    """Print the document tree as JSON."""
    try:
        result = read_document(file)
    except DocxTreeError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    data = {
        "document": to_dict(result.value),
        "messages": [to_dict(message) for message in result.messages],
    }
    typer.echo(json.dumps(data, indent=indent, ensure_ascii=False))


if __name__ == "__main__":
    app()
