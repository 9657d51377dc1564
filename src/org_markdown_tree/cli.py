"""CLI for org-markdown-tree (show, set-state, refile, diff)."""

from pathlib import Path
from typing import Annotated

import typer
from loguru import logger

from org_markdown_tree.core.diff.engine import Edit, diff
from org_markdown_tree.files import read_lines, write_lines
from org_markdown_tree.hooks import completion_stamp_hook
from org_markdown_tree.logging_config import configure_logging
from org_markdown_tree.models.node import Node
from org_markdown_tree.session import EditSession

app = typer.Typer(help="Inspect and edit org-style markdown outlines.")


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    configure_logging(verbose=verbose)


def _open_session(path: Path) -> EditSession:
    """Parse ``path`` into a session, exiting if the file does not exist."""
    if not path.is_file():
        logger.error("File not found: {}", path)
        raise typer.Exit(1)
    return EditSession(read_lines(path))


def _require_heading(session: EditSession, text: str) -> Node:
    node = session.find(text)
    if node is None:
        logger.error("Heading not found: {!r}", text)
        raise typer.Exit(1)
    return node


def _echo_edits(edits: list[Edit]) -> None:
    if not edits:
        typer.echo("No changes.")
        return
    for edit in edits:
        if edit.op == "delete":
            typer.echo(f"  delete {edit.count} line(s) at {edit.at_line}")
        else:
            typer.echo(f"  {edit.op} at {edit.at_line}:")
            for line in edit.lines:
                typer.echo(f"    + {line}")


def _finish(session: EditSession, path: Path, *, dry_run: bool) -> None:
    _echo_edits(session.edits())
    if dry_run:
        typer.echo("Dry run, file not written.")
    elif write_lines(path, session.lines()):
        typer.echo(f"Wrote {path}")


@app.command()
def show(
    path: Path = typer.Argument(..., help="Markdown outline file"),
) -> None:
    """Print the heading outline of a file."""
    session = _open_session(path)
    for node in session.root.walk():
        if not node.is_heading() or node.parsed is None:
            continue
        p = node.parsed
        fields = [p.state or "", f"[#{p.priority}]" if p.priority else "", p.text]
        if p.tracked_date:
            fields.append(f"<{p.tracked_date}>")
        if p.tags:
            fields.append(":" + ":".join(p.tags) + ":")
        indent = "  " * ((node.depth or 1) - 1)
        typer.echo(f"{indent}- " + " ".join(f for f in fields if f))


@app.command(name="set-state")
def set_state(
    path: Path = typer.Argument(..., help="Markdown outline file"),
    heading: str = typer.Argument(..., help="Exact heading text"),
    state: str = typer.Argument(..., help="New state keyword"),
    dry_run: bool = typer.Option(False, "--dry-run", "-n", help="Do not write anything"),
    no_stamp: Annotated[
        bool,
        typer.Option("--no-stamp", help="Do not add or remove COMPLETED_AT"),
    ] = False,
) -> None:
    """Change the state of a heading."""
    session = _open_session(path)
    if not no_stamp:
        session.register_hook(completion_stamp_hook())
    node = _require_heading(session, heading)
    session.set_state(node, state)
    _finish(session, path, dry_run=dry_run)


@app.command()
def refile(
    path: Path = typer.Argument(..., help="Markdown outline file"),
    heading: str = typer.Argument(..., help="Exact text of the heading to move"),
    target: str = typer.Argument(..., help="Exact text of the new parent heading"),
    dry_run: bool = typer.Option(False, "--dry-run", "-n", help="Do not write anything"),
) -> None:
    """Move a heading and its subtree under another heading."""
    session = _open_session(path)
    node = _require_heading(session, heading)
    new_parent = _require_heading(session, target)
    if node.contains(new_parent):
        logger.error("Cannot refile {!r} under its own subtree", heading)
        raise typer.Exit(1)
    session.refile(node, new_parent)
    _finish(session, path, dry_run=dry_run)


@app.command(name="diff")
def diff_cmd(
    old: Path = typer.Argument(..., help="Original file"),
    new: Path = typer.Argument(..., help="Modified file"),
) -> None:
    """Print the line edit script that turns OLD into NEW."""
    for p in (old, new):
        if not p.is_file():
            logger.error("File not found: {}", p)
            raise typer.Exit(1)
    _echo_edits(diff(read_lines(old), read_lines(new)))
