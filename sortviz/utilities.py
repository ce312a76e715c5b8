"""Terminal helpers: ANSI colours and screen clearing."""

from __future__ import annotations

import os
import subprocess
from enum import Enum


class Color(str, Enum):
    """ANSI escape sequences for terminal colours."""

    RESET = "\033[0m"
    RED = "\033[31m"
    GREEN = "\033[32m"
    YELLOW = "\033[33m"
    BLUE = "\033[34m"
    MAGENTA = "\033[35m"
    CYAN = "\033[36m"
    WHITE = "\033[37m"


def colored(text: str, color: Color) -> str:
    """Wrap text in the escape sequence for a colour, followed by a reset."""
    return f"{color.value}{text}{Color.RESET.value}"


def clear_screen() -> bool:
    """Clear the terminal with the platform's clear command.

    Returns True when the command ran and succeeded.
    """
    try:
        if os.name == "nt":
            result = subprocess.run("cls", shell=True, check=False)
        else:
            result = subprocess.run(["clear"], check=False)
    except OSError:
        return False
    return result.returncode == 0