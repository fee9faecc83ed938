"""Cost structures that aggregate the components of a cost function."""

from __future__ import annotations

import math
from numbers import Real
from typing import Iterable, Iterator, List, Optional

_TOLERANCE = 1e-9


def _is_exact(*values: Real) -> bool:
    return all(isinstance(v, int) for v in values)


def _equal(a: Real, b: Real) -> bool:
    if _is_exact(a, b):
        return a == b
    return math.isclose(a, b, rel_tol=_TOLERANCE, abs_tol=_TOLERANCE)


def _less(a: Real, b: Real) -> bool:
    return a < b and not _equal(a, b)


def _greater(a: Real, b: Real) -> bool:
    return a > b and not _equal(a, b)


def _less_or_equal(a: Real, b: Real) -> bool:
    return a < b or _equal(a, b)


class DefaultCostStructure:
    """Total cost split into violations, objective and per-component values.

    Comparison uses the weighted value when both operands are weighted,
    otherwise the total. Plain numbers compare against the weighted value
    of a weighted structure and against the total of an unweighted one.
    """

    def __init__(
        self,
        total: Real = 0,
        violations: Real = 0,
        objective: Real = 0,
        all_components: Optional[Iterable[Real]] = None,
        weighted: Optional[float] = None,
    ) -> None:
        self.total = total
        self.violations = violations
        self.objective = objective
        self.all_components: List[Real] = list(all_components or [])
        self.is_weighted = weighted is not None
        self.weighted = float(weighted) if weighted is not None else float(total)

    def copy(self) -> "DefaultCostStructure":
        """Return an independent copy of this structure."""
        clone = type(self).__new__(type(self))
        clone.total = self.total
        clone.violations = self.violations
        clone.objective = self.objective
        clone.all_components = list(self.all_components)
        clone.is_weighted = self.is_weighted
        clone.weighted = self.weighted
        return clone

    def _combine(self, other: "DefaultCostStructure", sign: int) -> None:
        if not isinstance(other, DefaultCostStructure):
            raise TypeError(f"cannot combine cost structure with {type(other).__name__}")
        self.total += sign * other.total
        self.violations += sign * other.violations
        self.objective += sign * other.objective
        missing = len(other.all_components) - len(self.all_components)
        if missing > 0:
            self.all_components.extend([0] * missing)
        for i, value in enumerate(other.all_components):
            self.all_components[i] += sign * value

    def __iadd__(self, other: "DefaultCostStructure") -> "DefaultCostStructure":
        self._combine(other, 1)
        return self

    def __isub__(self, other: "DefaultCostStructure") -> "DefaultCostStructure":
        self._combine(other, -1)
        return self

    def __add__(self, other: "DefaultCostStructure") -> "DefaultCostStructure":
        if not isinstance(other, DefaultCostStructure):
            return NotImplemented
        result = self.copy()
        result += other
        return result

    def __sub__(self, other: "DefaultCostStructure") -> "DefaultCostStructure":
        if not isinstance(other, DefaultCostStructure):
            return NotImplemented
        result = self.copy()
        result -= other
        return result

    def _operands(self, other):
        if isinstance(other, DefaultCostStructure):
            if self.is_weighted and other.is_weighted:
                return self.weighted, other.weighted
            return self.total, other.total
        if isinstance(other, Real):
            if self.is_weighted:
                return self.weighted, float(other)
            return self.total, other
        return None

    def __lt__(self, other) -> bool:
        pair = self._operands(other)
        if pair is None:
            return NotImplemented
        return _less(*pair)

    def __le__(self, other) -> bool:
        pair = self._operands(other)
        if pair is None:
            return NotImplemented
        return _less_or_equal(*pair)

    def __eq__(self, other) -> bool:
        pair = self._operands(other)
        if pair is None:
            return NotImplemented
        return _equal(*pair)

    def __gt__(self, other) -> bool:
        result = self.__le__(other)
        return result if result is NotImplemented else not result

    def __ge__(self, other) -> bool:
        result = self.__lt__(other)
        return result if result is NotImplemented else not result

    __hash__ = None  # type: ignore[assignment]

    def __getitem__(self, i: int) -> Real:
        return self.all_components[i]

    def __len__(self) -> int:
        return len(self.all_components)

    def __iter__(self) -> Iterator[Real]:
        return iter(self.all_components)

    def __str__(self) -> str:
        components = ", ".join(str(c) for c in self.all_components)
        return (
            f"{self.total} (viol: {self.violations}, obj: {self.objective}, "
            f"comps: {{{components}}})"
        )

    def __repr__(self) -> str:
        weighted = self.weighted if self.is_weighted else None
        return (
            f"{type(self).__name__}(total={self.total!r}, violations={self.violations!r}, "
            f"objective={self.objective!r}, all_components={self.all_components!r}, "
            f"weighted={weighted!r})"
        )


class HierarchicalCostStructure(DefaultCostStructure):
    """Cost structure compared lexicographically component by component.

    A plain number is compared against every component in turn.
    """

    def _pairs(self, other):
        if isinstance(other, DefaultCostStructure):
            if len(other.all_components) < len(self.all_components):
                raise ValueError("cost structures have a different number of components")
            return zip(self.all_components, other.all_components)
        if isinstance(other, Real):
            return ((c, other) for c in self.all_components)
        return None

    def _lexicographic(self, other, when_equal: bool):
        pairs = self._pairs(other)
        if pairs is None:
            return NotImplemented
        for mine, theirs in pairs:
            if _less(mine, theirs):
                return True
            if _greater(mine, theirs):
                return False
        return when_equal

    def __lt__(self, other) -> bool:
        return self._lexicographic(other, False)

    def __le__(self, other) -> bool:
        return self._lexicographic(other, True)

    def __eq__(self, other) -> bool:
        pairs = self._pairs(other)
        if pairs is None:
            return NotImplemented
        return all(_equal(mine, theirs) for mine, theirs in pairs)

    def __gt__(self, other) -> bool:
        result = self.__le__(other)
        return result if result is NotImplemented else not result

    def __ge__(self, other) -> bool:
        result = self.__lt__(other)
        return result if result is NotImplemented else not result

    __hash__ = None  # type: ignore[assignment]