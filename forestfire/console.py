"""Terminal helpers: clearing the screen and reading answers."""

from __future__ import annotations

import subprocess
import sys
from typing import Callable, TextIO


def clear_screen(out: TextIO | None = None) -> None:
    """Clear the terminal."""
    if sys.platform == "win32":
        subprocess.run(["cmd", "/c", "cls"], check=True)
        return
    out = out if out is not None else sys.stdout
    out.write("\x1b[2J\x1b[1;1H")


def get_user_input(
    prompt: str,
    read_line: Callable[[], str] | None = None,
    out: TextIO | None = None,
) -> str:
    """Show a prompt and return the next line of input, stripped.

    Raises EOFError when the input is exhausted.
    """
    out = out if out is not None else sys.stdout
    print(prompt, file=out)
    out.flush()
    line = read_line() if read_line is not None else sys.stdin.readline()
    if not line:
        raise EOFError("Failed to read input")
    return line.strip()