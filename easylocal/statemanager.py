"""State-level operations that do not depend on the neighbourhood."""

from __future__ import annotations

import copy
from abc import ABC, abstractmethod
from numbers import Real
from typing import Any, Dict, Generic, List, Optional, Protocol, Sequence, Tuple, Type, TypeVar

from .coststructure import DefaultCostStructure

HARD_WEIGHT = 1000
"""Multiplier of the violations in the aggregated cost: HARD_WEIGHT * violations + objective."""

InputT = TypeVar("InputT")
StateT = TypeVar("StateT")


class CostComponent(Protocol):
    """What the state manager needs from a cost component."""

    name: str
    is_hard: bool

    def cost(self, state: Any) -> Real:
        ...


class StateManager(ABC, Generic[InputT, StateT]):
    """Generates states, evaluates them and keeps the list of cost components.

    ``cost_structure`` is the class used to build cost values, for example
    :class:`DefaultCostStructure` or ``HierarchicalCostStructure``.
    """

    def __init__(
        self,
        input: InputT,
        name: str,
        cost_structure: Type[DefaultCostStructure] = DefaultCostStructure,
    ) -> None:
        self.input = input
        self.name = name
        self.cost_structure = cost_structure
        self._components: List[CostComponent] = []
        self._index: Dict[int, int] = {}

    @abstractmethod
    def random_state(self) -> StateT:
        """Return a new random state."""

    def sample_state(self, samples: int) -> Tuple[StateT, DefaultCostStructure]:
        """Draw ``samples`` random states and return the cheapest with its cost."""
        best_state = self.random_state()
        best_cost = self.cost_function_components(best_state)
        for _ in range(1, samples):
            state = self.random_state()
            cost = self.cost_function_components(state)
            if cost < best_cost:
                best_state, best_cost = state, cost
        return best_state, best_cost

    def greedy_state(self, alpha: Optional[float] = None, k: Optional[int] = None) -> StateT:
        """Return a greedy state; concrete managers that support it override this.

        The form with ``alpha`` and ``k`` falls back to the plain greedy
        construction, which by default is not available.
        """
        if alpha is not None or k is not None:
            return self.greedy_state()
        raise RuntimeError(
            "For using this feature greedy_state must be implemented in the concrete class!"
        )

    def cost_function_components(
        self, state: StateT, weights: Optional[Sequence[float]] = None
    ) -> DefaultCostStructure:
        """Evaluate every cost component on ``state`` and aggregate the results."""
        if weights and len(weights) < len(self._components):
            raise ValueError("one weight is needed for each cost component")
        hard_cost: Real = 0
        soft_cost: Real = 0
        weighted_cost = 0.0
        values: List[Real] = []
        for i, component in enumerate(self._components):
            value = component.cost(state)
            values.append(value)
            if component.is_hard:
                hard_cost += value
                if weights:
                    weighted_cost += HARD_WEIGHT * weights[i] * value
            else:
                soft_cost += value
                if weights:
                    weighted_cost += weights[i] * value
        total = HARD_WEIGHT * hard_cost + soft_cost
        if weights:
            return self.cost_structure(total, hard_cost, soft_cost, values, weighted=weighted_cost)
        return self.cost_structure(total, hard_cost, soft_cost, values)

    def lower_bound_reached(self, costs: DefaultCostStructure) -> bool:
        """Return whether ``costs`` has reached the lower bound (zero by default)."""
        return costs == 0

    def optimal_state_reached(self, state: StateT) -> bool:
        """Return whether the cost of ``state`` has reached the lower bound."""
        return self.lower_bound_reached(self.cost_function_components(state))

    def add_cost_component(self, component: CostComponent) -> None:
        """Append a cost component."""
        self._index[id(component)] = len(self._components)
        self._components.append(component)

    def cost_component_count(self) -> int:
        """Return the number of cost components."""
        return len(self._components)

    def cost_component(self, i: int) -> CostComponent:
        """Return the ``i``-th cost component."""
        return self._components[i]

    def cost_component_index(self, component: CostComponent) -> int:
        """Return the position of ``component``; raise KeyError if it was never added."""
        try:
            return self._index[id(component)]
        except KeyError:
            raise KeyError(f"unknown cost component {component!r}") from None

    def clear_cost_structure(self) -> None:
        """Remove every cost component."""
        self._components.clear()
        self._index.clear()

    def state_distance(self, st1: StateT, st2: StateT) -> int:
        """Return a distance between two states; concrete managers override this.

        A state is at distance zero from itself; any other comparison needs a
        concrete definition.
        """
        if st1 is st2:
            return 0
        raise RuntimeError(
            "In order to use this feature state_distance must be implemented in the concrete class!"
        )

    @abstractmethod
    def check_consistency(self, state: StateT) -> bool:
        """Return whether the redundant data of ``state`` agree with the main data."""

    def copy_state(self, state: StateT) -> StateT:
        """Return an independent copy of ``state``."""
        return copy.deepcopy(state)