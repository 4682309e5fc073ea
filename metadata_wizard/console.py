"""
metadata_wizard.console — Terminal output helpers
=================================================
Coloured status glyphs and section headers shared by every wizard module.

User-supplied text is wrapped in ``rich.text.Text`` so square brackets in
URLs or names are never parsed as console markup.
"""

from rich.console import Console
from rich.text import Text

console = Console(highlight=False, soft_wrap=True)

HEADER_WIDTH = 70


def clear() -> None:
    """Clear the screen (no-op when output is not a terminal)."""
    console.clear()


def header(title: str) -> None:
    rule = Text("━" * HEADER_WIDTH, style="blue")
    console.print()
    console.print(rule)
    console.print(Text(f"  {title}", style="bold cyan"))
    console.print(rule)
    console.print()


def success(message: str) -> None:
    console.print(Text.assemble(("✔", "green"), f"  {message}"))


def error(message: str) -> None:
    console.print(Text.assemble(("✖", "red"), f"  {message}"))


def warning(message: str) -> None:
    console.print(Text.assemble(("⚠", "yellow"), f"  {message}"))


def info(message: str) -> None:
    console.print(Text.assemble(("ℹ", "cyan"), f"  {message}"))


def line(message: str = "", style: str | None = None) -> None:
    """Print a plain line, optionally styled."""
    console.print(Text(message, style=style or ""))


def label(name: str, value: str, width: int = 0) -> None:
    """Print an indented ``name: value`` pair with a bold name."""
    console.print(Text.assemble("  ", (f"{name}:".ljust(width), "bold"), " ", value))


def ask(prompt: str, style: str = "green", marker: str = "▸") -> str:
    """Show a prompt and return one raw line from standard input."""
    if marker:
        text = Text.assemble((marker, style), f" {prompt}")
    else:
        text = Text(prompt, style=style)
    return console.input(text)
