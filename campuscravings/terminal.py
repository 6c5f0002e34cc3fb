"""Console input and output for the interactive screens."""

from __future__ import annotations

import os
import subprocess
import sys
from typing import Callable, Optional, TextIO


def clear_terminal() -> None:
    """Clear the terminal window."""
    if os.name == "nt":
        subprocess.run("cls", shell=True, check=False)
    else:
        sys.stdout.write("\033[2J\033[H")
        sys.stdout.flush()


class Console:
    """Reads answers and writes screens through the given streams."""

    def __init__(
        self,
        reader: Optional[TextIO] = None,
        writer: Optional[TextIO] = None,
        clear_screen: Optional[Callable[[], None]] = None,
    ) -> None:
        self.reader = reader if reader is not None else sys.stdin
        self.writer = writer if writer is not None else sys.stdout
        self.clear_screen = clear_screen if clear_screen is not None else clear_terminal

    def show(self, text: str) -> None:
        """Write ``text`` as is."""
        self.writer.write(text)
        self.writer.flush()

    def read_line(self, prompt: str = "") -> str:
        """Show ``prompt`` and return the next line without its newline."""
        if prompt:
            self.show(prompt)
        line = self.reader.readline()
        if line == "":
            raise EOFError("no more input")
        return line.rstrip("\r\n")

    def read_int(self, prompt: str = "") -> int:
        """Ask until a whole number is entered."""
        while True:
            text = self.read_line(prompt).strip()
            try:
                return int(text)
            except ValueError:
                self.show("Invalid input. Try again.\n")

    def read_yes_no(self, prompt: str = "") -> bool:
        """Return True when the answer starts with y or Y."""
        return self.read_line(prompt).strip()[:1] in ("y", "Y")

    def clear(self) -> None:
        """Clear the screen."""
        self.clear_screen()