"""Exhaustive enumeration of solutions, keeping the cheapest feasible one."""

from __future__ import annotations

import copy
import logging
from abc import ABC, abstractmethod
from typing import Any, Generic, Optional, TypeVar

logger = logging.getLogger(__name__)

InputT = TypeVar("InputT")
OutputT = TypeVar("OutputT")


class EnumerationOpt(ABC, Generic[InputT, OutputT]):
    """Visit every candidate in ``out`` and remember the best feasible one.

    Subclasses set ``out`` to the first candidate in :meth:`first`, move it
    to the next candidate in :meth:`advance` (returning ``False`` when none
    is left), and judge it with :meth:`feasible` and :meth:`cost`.
    """

    def __init__(self, input: InputT, output: OutputT) -> None:
        self.input = input
        self.out = output
        self.best: Optional[OutputT] = None
        self.count = 0

    def search(self) -> bool:
        """Run the enumeration; return whether a feasible solution exists."""
        best_cost: Any = 0
        found = False
        self.first()
        self.count = 1
        while True:
            if self.feasible():
                cost = self.cost()
                if not found or cost < best_cost:
                    found = True
                    self.best = copy.deepcopy(self.out)
                    best_cost = cost
                    logger.info(
                        "New best solution %s (cost %s) found after %d iterations",
                        self.best,
                        best_cost,
                        self.count,
                    )
            self.count += 1
            if not self.advance():
                break
        return found

    def best_solution(self) -> Optional[OutputT]:
        """Return the best solution found, or ``None`` before any was found."""
        return self.best

    def num_sol(self) -> int:
        """Return the iteration counter of the last search."""
        return self.count

    @abstractmethod
    def first(self) -> None:
        """Set ``out`` to the first candidate."""

    @abstractmethod
    def advance(self) -> bool:
        """Move ``out`` to the next candidate; return ``False`` when done."""

    @abstractmethod
    def feasible(self) -> bool:
        """Return whether the current candidate is feasible."""

    @abstractmethod
    def cost(self) -> Any:
        """Return the cost of the current candidate."""