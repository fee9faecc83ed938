"""Translation between search states and problem outputs."""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Generic, TextIO, TypeVar, Union

InputT = TypeVar("InputT")
OutputT = TypeVar("OutputT")
StateT = TypeVar("StateT")


class OutputManager(ABC, Generic[InputT, OutputT, StateT]):
    """Converts states to outputs and back, and stores states as text.

    This is the only helper that deals with the output class; every other
    helper works on states.
    """

    def __init__(self, input: InputT, name: str) -> None:
        self.input = input
        self.name = name

    @abstractmethod
    def output_state(self, state: StateT) -> OutputT:
        """Return the output object corresponding to ``state``."""

    @abstractmethod
    def input_state(self, output: OutputT) -> StateT:
        """Return the state corresponding to ``output``."""

    @abstractmethod
    def parse_output(self, text: str) -> OutputT:
        """Build an output object from its textual form."""

    def read_state(self, stream: TextIO) -> StateT:
        """Read an output from ``stream`` and return the matching state."""
        return self.input_state(self.parse_output(stream.read()))

    def write_state(self, state: StateT, stream: TextIO) -> None:
        """Write the output form of ``state`` to ``stream``."""
        stream.write(str(self.output_state(state)))

    def pretty_print_output(self, state: StateT, file_name: Union[str, Path]) -> Any:
        """Write a readable form of ``state`` to ``file_name``."""
        path = Path(file_name)
        with path.open("w", encoding="utf-8") as handle:
            self.write_state(state, handle)
            handle.write("\n")
        return path