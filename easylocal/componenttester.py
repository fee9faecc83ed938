"""Base interface of interactive component testers and choice reading."""

from __future__ import annotations

import re
from abc import ABC, abstractmethod
from typing import Any, TextIO

_LEADING_INT = re.compile(r"[+-]?\d+")


class EmptyNeighborhood(Exception):
    """Raised when a neighbourhood or kick set has no element to select."""


def read_token(stream: TextIO) -> str:
    """Read the next whitespace-separated word; raise EOFError at end of input."""
    chars = []
    while True:
        ch = stream.read(1)
        if not ch:
            break
        if ch.isspace():
            if chars:
                break
            continue
        chars.append(ch)
    if not chars:
        raise EOFError("no more input")
    return "".join(chars)


def read_choice(stream: TextIO) -> int:
    """Read a menu choice; return -1 when the word does not start with an integer."""
    match = _LEADING_INT.match(read_token(stream))
    return int(match.group()) if match else -1


class ComponentTester(ABC):
    """An interactive menu that exercises one component on a state."""

    def __init__(self, name: str) -> None:
        self.name = name

    @abstractmethod
    def run_main_menu(self, state: Any) -> None:
        """Interact with the menu on ``state`` until the user leaves."""

    @abstractmethod
    def show_menu(self) -> None:
        """Print the menu and read the next choice."""

    @abstractmethod
    def execute_choice(self, state: Any) -> bool:
        """Carry out the current choice; return whether ``state`` changed."""

    @abstractmethod
    def modality(self) -> int:
        """Return the modality of the tested component."""