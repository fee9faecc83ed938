"""Interactive tester for kickers."""

from __future__ import annotations

import sys
import time
from typing import Any, Optional, TextIO

from .componenttester import ComponentTester, EmptyNeighborhood, read_choice


class KickerTester(ComponentTester):
    """Menu that performs random, best or first improving kicks on a state.

    The kicker is expected to offer ``select_random``, ``select_best`` and
    ``select_first`` (each taking a length and a state and returning a kick
    and its cost), ``make_kick(state, kick)`` applying a kick in place,
    ``kicks(length, state)`` iterating over all kicks, and ``modality()``.
    """

    def __init__(
        self,
        input: Any,
        state_manager: Any,
        output_manager: Any,
        kicker: Any,
        name: str,
        tester: Any = None,
        stream_in: Optional[TextIO] = None,
        stream_out: Optional[TextIO] = None,
    ) -> None:
        super().__init__(name)
        self.input = input
        self.state_manager = state_manager
        self.output_manager = output_manager
        self.kicker = kicker
        self.stream_in = stream_in if stream_in is not None else sys.stdin
        self.stream_out = stream_out if stream_out is not None else sys.stdout
        self.length = 3
        self.choice = 0
        if tester is not None:
            tester.add_kicker_tester(self)

    def _write(self, text: str = "", end: str = "\n") -> None:
        self.stream_out.write(text + end)

    def run_main_menu(self, state: Any) -> None:
        """Show the menu and carry out choices on ``state`` until 0 is chosen."""
        while True:
            self.show_menu()
            if self.choice == 0:
                break
            start = time.perf_counter()
            show_state = self.execute_choice(state)
            elapsed_ms = int((time.perf_counter() - start) * 1000)
            if show_state:
                output = self.output_manager.output_state(state)
                self._write("CURRENT SOLUTION ")
                self._write(str(output))
                self._write(
                    f"CURRENT COST : {self.state_manager.cost_function_components(state)}"
                )
            self._write(f"ELAPSED TIME : {elapsed_ms / 1000.0:g} s")
        self._write(f"Leaving {self.name} menu")

    def show_menu(self) -> None:
        """Print the kicker menu and read the next choice."""
        self._write(f'Kicker "{self.name}" Menu:')
        self._write("    (1) Perform Random Kick")
        self._write("    (2) Perform Best Kick")
        self._write("    (3) Perform First Improving Kick")
        self._write("    (4) Show All Kicks")
        self._write("    (0) Return to Main Menu")
        self._write("Your choice : ", end="")
        self.stream_out.flush()
        self.choice = read_choice(self.stream_in)

    def execute_choice(self, state: Any) -> bool:
        """Carry out the current choice; return whether a kick was applied."""
        selectors = {
            1: self.kicker.select_random,
            2: self.kicker.select_best,
            3: self.kicker.select_first,
        }
        try:
            selector = selectors.get(self.choice)
            if selector is not None:
                kick, cost = selector(self.length, state)
                self._write(f"{kick} {cost}")
                self.kicker.make_kick(state, kick)
                return True
            if self.choice == 4:
                self.print_kicks(self.length, state)
            else:
                self._write("Invalid choice")
            return False
        except EmptyNeighborhood:
            self._write("Empty neighborhood.")
            return False

    def print_kicks(self, length: int, state: Any) -> None:
        """Print every kick of the given length from ``state``."""
        for kick in self.kicker.kicks(length, state):
            self._write(str(kick))

    def modality(self) -> int:
        """Return the modality of the kicker."""
        return self.kicker.modality()