"""Interactive top-level tester that gathers component testers and runners."""

from __future__ import annotations

import sys
import time
from typing import Any, Iterable, List, Optional, TextIO

from .componenttester import ComponentTester, read_choice, read_token


class Tester:
    """Text menu for building a state and exercising testers and runners on it.

    The state manager is expected to return new states from ``random_state()``
    and ``greedy_state()``, and ``(state, cost)`` from ``sample_state(samples)``.
    A runner offers ``name``, ``sync_run(timeout, state)`` returning
    ``(state, cost)`` with the timeout in seconds, and ``iteration()``; a
    ``read_parameters()`` method is called before the run when present.
    Cost components used by the cost menus offer ``name``, ``is_hard`` and
    ``print_violations(state, stream)``.
    """

    def __init__(
        self,
        input: Any,
        state_manager: Any,
        output_manager: Any,
        runners: Optional[Iterable[Any]] = None,
        stream_in: Optional[TextIO] = None,
        stream_out: Optional[TextIO] = None,
    ) -> None:
        self.input = input
        self.state_manager = state_manager
        self.output_manager = output_manager
        self.stream_in = stream_in if stream_in is not None else sys.stdin
        self.stream_out = stream_out if stream_out is not None else sys.stdout
        self.move_testers: List[ComponentTester] = []
        self.kicker_testers: List[ComponentTester] = []
        self.runners: List[Any] = []
        for runner in runners or ():
            self.add_runner(runner)
        self.test_state: Any = None
        self.choice = 0
        self.sub_choice = 0

    def _write(self, text: str = "", end: str = "\n") -> None:
        self.stream_out.write(text + end)

    def _prompt(self, text: str) -> None:
        self._write(text, end="")
        self.stream_out.flush()

    def _read_choice(self) -> int:
        return read_choice(self.stream_in)

    def _show_state(self, label: str) -> None:
        output = self.output_manager.output_state(self.test_state)
        self._write(f"{label} SOLUTION ")
        self._write(str(output))
        cost = self.state_manager.cost_function_components(self.test_state)
        self._write(f"{label} COST : {cost}")

    def add_move_tester(self, tester: ComponentTester) -> None:
        """Attach a move tester."""
        self.move_testers.append(tester)

    def add_kicker_tester(self, tester: ComponentTester) -> None:
        """Attach a kicker tester."""
        self.kicker_testers.append(tester)

    def add_runner(self, runner: Any) -> None:
        """Attach a runner."""
        self.runners.append(runner)

    def set_state(self, state: Any) -> None:
        """Replace the state under test."""
        self.test_state = state

    def run_main_menu(self, file_name: str = "") -> None:
        """Build the initial state, then serve the main menu until 0 is chosen.

        An empty ``file_name`` asks for the initial state interactively,
        ``"random"`` draws a random one, anything else is read from that file.
        """
        if file_name == "":
            self.run_input_menu()
        elif file_name == "random":
            self.test_state = self.state_manager.random_state()
        else:
            try:
                handle = open(file_name, encoding="utf-8")
            except OSError:
                raise RuntimeError("Cannot open file!") from None
            start = time.perf_counter()
            with handle:
                self.test_state = self.output_manager.read_state(handle)
            output = self.output_manager.output_state(self.test_state)
            self._write("SOLUTION IMPORTED ")
            self._write(str(output))
            cost = self.state_manager.cost_function_components(self.test_state)
            self._write(f"IMPORTED SOLUTION COST : {cost}")
            elapsed_ms = int((time.perf_counter() - start) * 1000)
            self._write(f"ELAPSED TIME : {elapsed_ms / 1000.0:g} s")

        while True:
            self._show_main_menu()
            if self.choice == 0:
                break
            self._execute_main_choice()
        self._write("Bye bye...")

    def _show_main_menu(self) -> None:
        self._write("MAIN MENU:")
        self._write("   (1) Move menu")
        self._write("   (2) Kicker menu")
        self._write("   (3) Run menu")
        self._write("   (4) State menu")
        self._write("   (0) Exit")
        self._prompt(" Your choice: ")
        self.choice = self._read_choice()

    def _execute_main_choice(self) -> None:
        if self.choice == 1:
            self._show_moves_menu()
            self._execute_moves_choice()
        elif self.choice == 2:
            self._show_kickers_menu()
            self._execute_kickers_choice()
        elif self.choice == 3:
            self._show_run_menu()
            self._execute_run_choice()
        elif self.choice == 4:
            self.run_state_test_menu()
        elif self.choice != 0:
            self._write("Invalid choice")

    def _show_moves_menu(self) -> None:
        self._write("MOVE MENU: ")
        for number, tester in enumerate(self.move_testers, start=1):
            self._write(f"   ({number}) {tester.name} [{tester.modality()}-modal]")
        self._write("   (0) Return to Main Menu")
        self._prompt(" Your choice: ")
        self.sub_choice = self._read_choice()

    def _show_kickers_menu(self) -> None:
        self._write("KICK MENU: ")
        for number, tester in enumerate(self.kicker_testers, start=1):
            self._write(f"   ({number}) {tester.name}")
        self._write("   (0) Return to Main Menu")
        self._prompt(" Your choice: ")
        self.sub_choice = self._read_choice()

    def _show_run_menu(self) -> None:
        while True:
            self._write("RUN MENU: ")
            for number, runner in enumerate(self.runners, start=1):
                self._write(f"   ({number}) {runner.name}")
            self._write("   (0) Return to Main Menu")
            self._prompt(" Your choice: ")
            self.sub_choice = self._read_choice()
            if self.sub_choice == -1 or self.sub_choice > len(self.runners):
                self._write("Invalid choice")
                continue
            break

    def _execute_moves_choice(self) -> None:
        if 0 < self.sub_choice <= len(self.move_testers):
            self.move_testers[self.sub_choice - 1].run_main_menu(self.test_state)

    def _execute_kickers_choice(self) -> None:
        if 0 < self.sub_choice <= len(self.kicker_testers):
            self.kicker_testers[self.sub_choice - 1].run_main_menu(self.test_state)

    def _execute_run_choice(self) -> None:
        if not 0 < self.sub_choice <= len(self.runners):
            return
        runner = self.runners[self.sub_choice - 1]
        read_parameters = getattr(runner, "read_parameters", None)
        if read_parameters is not None:
            read_parameters()
        self._prompt("  Timeout: ")
        timeout = float(read_token(self.stream_in))
        self._write()
        start = time.perf_counter()
        self.test_state, _ = runner.sync_run(timeout, self.test_state)
        elapsed_ms = int((time.perf_counter() - start) * 1000)
        self._show_state("CURRENT")
        self._write(f"ELAPSED TIME : {elapsed_ms / 1000.0:g} s")
        self._write(f"NUMBER OF ITERATIONS : {runner.iteration()}")

    def run_input_menu(self) -> None:
        """Ask how to build the initial state and build it."""
        self._show_reduced_state_menu()
        start = time.perf_counter()
        show_state = self._execute_state_choice()
        elapsed_ms = int((time.perf_counter() - start) * 1000)
        if show_state:
            self._show_state("INITIAL")
        self._write(f"ELAPSED TIME : {elapsed_ms / 1000.0:g}s")

    def _show_state_menu(self) -> None:
        self._write("STATE MENU: ")
        self._write("    (1) Random state ")
        self._write("    (2) Read from file")
        self._write("    (3) Greedy state ")
        self._write("    (4) Sample state")
        self._write("    (5) Write to file")
        self._write("    (6) Show state")
        self._write("    (7) Show input")
        self._write("    (8) Show cost function components")
        self._write("    (9) Show cost elements")
        self._write("    (10) Check state consistency")
        self._write("    (11) Pretty print output")
        self._write("    (0) Return to Main Menu")
        self._prompt("Your choice : ")
        self.sub_choice = self._read_choice()

    def _show_reduced_state_menu(self) -> None:
        self._write("INITIAL STATE MENU: ")
        self._write("    (1) Random state ")
        self._write("    (2) Read from file")
        self._write("    (3) Greedy state ")
        self._prompt("Your choice : ")
        self.sub_choice = self._read_choice()
        if self.sub_choice >= 4:
            self.sub_choice = -1

    def _write_cost_summary(self, cost: Any) -> None:
        for i in range(self.state_manager.cost_component_count()):
            component = self.state_manager.cost_component(i)
            mark = "*" if component.is_hard else " "
            self._write(f"{i}. {component.name} : {cost.all_components[i]}{mark}")
        self._write(f"Total Violations: {cost.violations}")
        self._write(f"Total Objective:  {cost.objective}")
        self._write(f"Total Cost:       {cost.total}")

    def _read_state_from_file(self) -> None:
        while True:
            self._prompt("File name : ")
            file_name = read_token(self.stream_in)
            try:
                handle = open(file_name, encoding="utf-8")
            except OSError:
                self._write(f"File {file_name} does not exist!")
                continue
            with handle:
                self.test_state = self.output_manager.read_state(handle)
            return

    def _execute_state_choice(self) -> bool:
        choice = self.sub_choice
        sm = self.state_manager
        if choice == 1:
            self.test_state = sm.random_state()
        elif choice == 2:
            self._read_state_from_file()
        elif choice == 3:
            self.test_state = sm.greedy_state()
        elif choice == 4:
            self._prompt("How many samples : ")
            samples = int(read_token(self.stream_in))
            self.test_state, _ = sm.sample_state(samples)
        elif choice == 5:
            self._prompt("File name : ")
            file_name = read_token(self.stream_in)
            with open(file_name, "w", encoding="utf-8") as handle:
                self.output_manager.write_state(self.test_state, handle)
        elif choice == 6:
            self._write(str(self.test_state))
            self._write(f"Total cost: {sm.cost_function_components(self.test_state)}")
        elif choice == 7:
            self._write(str(self.input), end="")
        elif choice == 8:
            self._write("Cost Components: ")
            self._write_cost_summary(sm.cost_function_components(self.test_state))
        elif choice == 9:
            self._write("Detailed Violations: ")
            cost = sm.cost_function_components(self.test_state)
            for i in range(sm.cost_component_count()):
                sm.cost_component(i).print_violations(self.test_state, self.stream_out)
            self._write()
            self._write("Summary of Cost Components: ")
            self._write_cost_summary(cost)
        elif choice == 10:
            self._write("Checking state consistency: ")
            if sm.check_consistency(self.test_state):
                self._write("The state is consistent")
            else:
                self._write("The state is not consistent")
        elif choice == 11:
            self._prompt("File name : ")
            file_name = read_token(self.stream_in)
            self.output_manager.pretty_print_output(self.test_state, file_name)
            self._write(f"Output pretty-printed in file {file_name}")
        else:
            self._write("Invalid choice")
        return 1 <= choice <= 4

    def run_state_test_menu(self) -> None:
        """Serve the state menu until 0 is chosen."""
        while True:
            self._show_state_menu()
            if self.sub_choice == 0:
                break
            start = time.perf_counter()
            show_state = self._execute_state_choice()
            elapsed_ms = int((time.perf_counter() - start) * 1000)
            if show_state:
                self._show_state("CURRENT")
            self._write(f"ELAPSED TIME : {elapsed_ms / 1000.0:g}s")
        self._write("Leaving state menu")