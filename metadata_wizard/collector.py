"""
metadata_wizard.collector — Interactive Q&A helpers
===================================================
Asks the user for every catalog variable, one line at a time, re-prompting
until the value passes the variable's validator.

Public functions
----------------
  collect_value(variable, default)   One variable → validated raw string
  collect_answers(prefill)           Every variable in catalog order → dict
  confirm(question)                  Strict yes/no gate (only "y" / "Y" is yes)
  wait_for_enter(message)            Generic "press Enter" acknowledgement
"""

import logging

from metadata_wizard import console
from metadata_wizard.catalog import VARIABLES, Variable

logger = logging.getLogger(__name__)

# Typed at an optional prompt to leave a pre-filled value empty
CLEAR_MARKER = "-"


class SetupCancelledError(Exception):
    """Raised when the user declines a confirmation or interrupts input."""


# ---------------------------------------------------------------------------
# Terminal helpers
# ---------------------------------------------------------------------------

def _read_line(prompt: str, style: str = "green", marker: str = "▸") -> str:
    """Return one raw line of input; EOF / Ctrl+C cancel the whole run."""
    try:
        return console.ask(prompt, style=style, marker=marker)
    except (EOFError, KeyboardInterrupt):
        console.line()
        raise SetupCancelledError("Input interrupted by user (Ctrl+C / EOF).")


def wait_for_enter(message: str = "Press Enter to continue or Ctrl+C to cancel...") -> None:
    console.line()
    _read_line(message, style="yellow", marker="")


def confirm(question: str) -> bool:
    """Ask *question* and return True only for an exact (case-insensitive) ``y``."""
    answer = _read_line(f"{question} (y/n): ", style="yellow", marker="")
    return answer.lower() == "y"


# ---------------------------------------------------------------------------
# Variable collection
# ---------------------------------------------------------------------------

def collect_value(variable: Variable, default: str = "") -> str:
    """
    Prompt for *variable* until its validator accepts the input.

    The raw line is returned unchanged: no stripping or case folding.  When
    *default* is given (pre-filled from an answers file) an empty line
    selects it; an optional variable can then still be left empty by
    entering CLEAR_MARKER.
    """
    console.line()
    console.line(variable.key, style="bold")
    console.line(variable.description, style="cyan")

    if default and variable.optional:
        hint = f" [{default}] (enter {CLEAR_MARKER} to skip)"
    elif default:
        hint = f" [{default}]"
    elif variable.optional:
        hint = " (press Enter to skip)"
    else:
        hint = ""

    while True:
        raw = _read_line(f"{variable.prompt}{hint}: ")
        if raw == "" and default:
            value = default
        elif raw == CLEAR_MARKER and variable.optional:
            value = ""
        else:
            value = raw
        if variable.validate(value):
            logger.debug("Accepted %s=%r", variable.key, value)
            return value
        logger.debug("Rejected %s=%r", variable.key, value)
        console.error(variable.error)


def collect_answers(prefill: dict | None = None) -> dict[str, str]:
    """
    Run the Q&A for every catalog variable and return ``{key: value}``.

    Values in *prefill* are offered as defaults.
    """
    pf = prefill or {}
    values: dict[str, str] = {}
    for variable in VARIABLES:
        values[variable.key] = collect_value(variable, pf.get(variable.key, ""))
    return values
