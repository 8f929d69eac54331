from __future__ import annotations

from rich.console import Console
from rich.markup import escape

console = Console(soft_wrap=True, highlight=False, emoji=False)
err_console = Console(stderr=True, soft_wrap=True, highlight=False, emoji=False)


def info(msg: str) -> None:
    console.print(f"[cyan]INFO:[/] {escape(msg)}")


def warn(msg: str) -> None:
    err_console.print(f"[yellow]WARN:[/] {escape(msg)}")


def error(msg: str) -> None:
    err_console.print(f"[bold red]ERROR:[/] {escape(msg)}")


def trace() -> None:
    # only meaningful inside an except block
    err_console.print_exception()
