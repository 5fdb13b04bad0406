"""Colored user-facing output.

Results, warnings and review feedback are printed through a shared rich
console; diagnostics go through loguru instead.
"""

from typing import Any

from rich.console import Console
from rich.markup import escape

__all__ = ["console", "log"]

console = Console(highlight=False)


class ConsoleLog:
    """Thin wrapper printing each message in a fixed color."""

    def __init__(self, target: Console):
        self.console = target

    def _print(self, style: str, *args: Any) -> None:
        text = " ".join(str(arg) for arg in args)
        self.console.print(f"[{style}]{escape(text)}[/{style}]")

    def info(self, *args: Any) -> None:
        self._print("blue", *args)

    def success(self, *args: Any) -> None:
        self._print("green", *args)

    def warning(self, *args: Any) -> None:
        self._print("yellow", *args)

    def error(self, *args: Any) -> None:
        self._print("red", *args)

    def cyan(self, *args: Any) -> None:
        self._print("cyan", *args)


log = ConsoleLog(console)
