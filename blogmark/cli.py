"""Render blog markdown from the command line.

Render an entry to HTML:
    blogmark render entry.md --entry-id 12

Inspect the presentation tree:
    blogmark tree entry.md
"""

import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Annotated

import tyro
from loguru import logger
from rich.console import Console
from rich.markup import escape

from blogmark.config import get_settings
from blogmark.exceptions import BlogmarkError, SourceNotFoundError
from blogmark.logging_config import configure_logging
from blogmark.markdown import markdown_to_html, parse_markdown, transform_to_presentation

err_console = Console(stderr=True)


@dataclass
class Render:
    """Convert a markdown file to HTML."""

    input: Annotated[Path, tyro.conf.Positional]
    """Markdown source file."""

    output: Path | None = None
    """Write HTML here instead of stdout."""

    entry_id: int | None = None
    """Blog entry id, scopes footnote ids (footnote-12-1)."""


@dataclass
class Tree:
    """Print the presentation tree as JSON."""

    input: Annotated[Path, tyro.conf.Positional]
    """Markdown source file."""

    entry_id: int | None = None
    """Blog entry id, scopes footnote ids (footnote-12-1)."""


Cmd = (
    Annotated[Render, tyro.conf.subcommand(name="render", prefix_name=False)]
    | Annotated[Tree, tyro.conf.subcommand(name="tree", prefix_name=False)]
)


def read_source(path: Path) -> str:
    if not path.is_file():
        raise SourceNotFoundError(path)
    return path.read_text(encoding="utf-8")


def run(cmd: Render | Tree) -> None:
    settings = get_settings()
    text = read_source(cmd.input)

    if isinstance(cmd, Render):
        html = markdown_to_html(text, settings=settings, entry_id=cmd.entry_id)
        if cmd.output is None:
            sys.stdout.write(html + "\n")
        else:
            cmd.output.parent.mkdir(parents=True, exist_ok=True)
            cmd.output.write_text(html + "\n", encoding="utf-8")
            logger.info(f"Wrote {cmd.output}")
        return

    root = transform_to_presentation(parse_markdown(text), settings=settings, entry_id=cmd.entry_id)
    sys.stdout.write(root.model_dump_json(indent=2) + "\n")


def main() -> None:
    settings = get_settings()
    configure_logging(settings.log_level, settings.log_file)

    cmd = tyro.cli(Cmd, description=__doc__)
    try:
        run(cmd)
    except BlogmarkError as e:
        err_console.print(f"[red]Error:[/red] {escape(str(e))}")
        sys.exit(e.exit_code)


if __name__ == "__main__":
    main()
