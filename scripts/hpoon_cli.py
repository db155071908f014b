#!/usr/bin/env python3
"""hpoon CLI: mark a path in one shell and pick it up in another."""

from __future__ import annotations

import logging
import os
from typing import List, Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from hpoon.exceptions import HpoonError, PathNotFound
from hpoon.marks import clean_marks, get_mark, list_marks, set_mark
from hpoon.settings import Settings, get_settings
from hpoon.store import MarkStore, build_store

HELP_TEXT = """
hpoon: Harpoon for the shell

Usage:
    hpoon <path> [name]         | store a mark, optionally with a name
    hpoon                       | retrieve the last marked path
    hpoon !<name>               | retrieve marked path with name (mark is recognized by prefix "!")
    hpoon list                  | list all named marked paths
    hpoon clean                 | delete all hpoon history

    can only mark files and directories that exist, but can retrieve
    marks that no longer exist on the filesystem

Examples:

    cd /path/to/dir     # cd to a dir
    hpoon .             # harpoon it

    # in a different shell (ie: tmux)
    cd /new/abs/dir     # totally different dir
    cp * `hpoon`        # copy files over to the last harpooned dir

    # works on deleted files
    hpoon filename myfile   # harpoon a file with "myfile"
    rm filename
    cd /somewhere/else/entirely
    mv some_file `hpoon !myfile`   # result: mv some_file /original/path/filename
"""

SHORT_HELP = "Unsure arg, try -h to get usage information"
NAME_REF = "!"
HELP_FLAGS = ("-h", "--help")

err_console = Console(stderr=True)
app = typer.Typer(name="hpoon", help="Harpoon for the shell", add_completion=False)


def _resolve_settings() -> Settings:
    return get_settings()


def _configure_logging(level: int) -> None:
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_time=False, show_path=False)],
    )


def _fail(message: str) -> None:
    err_console.print(f"[red]{escape(message)}[/]", soft_wrap=True)
    raise typer.Exit(code=1)


def _path_exists(path: str) -> bool:
    return os.path.exists(path)


def _print_last_mark(store: MarkStore) -> None:
    typer.echo(get_mark(store=store), nl=False)


def _print_named_mark(arg: str, store: MarkStore) -> None:
    name = arg[len(NAME_REF):]
    typer.echo(get_mark(name, store=store), nl=False)


def _print_mark_list(store: MarkStore) -> None:
    for name, path in list_marks(store=store):
        typer.echo(f"{name}: {path}")


def _mark_single(arg: str, store: MarkStore) -> None:
    path = os.path.abspath(arg)
    if not _path_exists(path):
        raise PathNotFound(path)
    set_mark(path, store=store)


def _mark_named(arg: str, name: str, store: MarkStore) -> None:
    if not _path_exists(arg):
        raise PathNotFound(arg)
    path = os.getcwd() if arg == "." else os.path.abspath(arg)
    set_mark(path, name, store=store)


def _dispatch_single(arg: str, store: MarkStore) -> None:
    if arg in HELP_FLAGS:
        typer.echo(HELP_TEXT, nl=False)
    elif arg == "clean":
        clean_marks(store=store)
    elif arg == "list":
        _print_mark_list(store)
    elif arg.startswith(NAME_REF):
        _print_named_mark(arg, store)
    else:
        _mark_single(arg, store)


@app.command(
    add_help_option=False,
    context_settings={"ignore_unknown_options": True, "allow_interspersed_args": False},
)
def hpoon(
    args: Optional[List[str]] = typer.Argument(None, help="<path> [name] | !<name> | list | clean | -h"),
) -> None:
    """Mark a path, or print a previously marked one."""

    argv = args or []
    try:
        settings = _resolve_settings()
        _configure_logging(settings.log_level)
        store = build_store(settings)
        if not argv:
            _print_last_mark(store)
        elif len(argv) == 1:
            _dispatch_single(argv[0], store)
        elif len(argv) == 2:
            _mark_named(argv[0], argv[1], store)
        else:
            _fail(SHORT_HELP)
    except HpoonError as exc:
        _fail(str(exc))


def main() -> None:
    app()


if __name__ == "__main__":
    main()
