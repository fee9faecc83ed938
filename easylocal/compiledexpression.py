"""Compiled expression nodes evaluated over an expression store.

Each node lives at ``index`` in a store and reads its operands (the nodes
listed in ``children``) from it. The store is expected to offer
``get(index, level=0)``, ``set(index, level, value)``,
``changed_children(index, level)`` returning a mutable set of child
indices that changed at ``level``, and ``store[index]`` returning a node.
Level 0 holds the current values; higher levels hold tentative ones.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, List, MutableSet, Protocol, Set


class ExpressionStoreLike(Protocol):
    """What a compiled expression needs from the store it is compiled onto."""

    def get(self, index: int, level: int = 0) -> Any:
        ...

    def set(self, index: int, level: int, value: Any) -> None:
        ...

    def changed_children(self, index: int, level: int) -> MutableSet[int]:
        ...

    def __getitem__(self, index: int) -> "CExp":
        ...


def _is_integral(*values: Any) -> bool:
    return all(isinstance(v, int) for v in values)


def _divide(a: Any, b: Any) -> Any:
    """Divide, truncating towards zero when both operands are integers."""
    if _is_integral(a, b):
        if b == 0:
            raise ZeroDivisionError("integer division by zero")
        quotient = abs(a) // abs(b)
        return quotient if (a >= 0) == (b >= 0) else -quotient
    return a / b


def _modulo(a: Any, b: Any) -> Any:
    """Remainder whose sign follows the dividend, matching truncated division."""
    if _is_integral(a, b):
        return a - b * _divide(a, b)
    raise TypeError("modulo is defined only on integer operands")


class CExp(ABC):
    """A node of a compiled expression tree."""

    def __init__(self, store: ExpressionStoreLike, sym: str) -> None:
        self.store = store
        self.sym = sym
        self.index = 0
        self.parents: Set[int] = set()
        self.children: List[int] = []
        self.depth = 0
        self.exp: Any = None

    @abstractmethod
    def compute(self, level: int = 0) -> None:
        """Compute the value of this node at ``level`` from scratch."""

    @abstractmethod
    def compute_diff(self, level: int = 0) -> None:
        """Update the value at ``level`` from the children that changed."""

    def _clear_changes(self, level: int) -> None:
        self.store.changed_children(self.index, level).clear()

    def __str__(self) -> str:
        parents = ", ".join(str(p) for p in sorted(self.parents))
        children = ", ".join(str(c) for c in self.children)
        return (
            f"{self.sym} id: {self.index}  par: {{{parents}}}, chi: {{{children}}} "
            f"orig: {self.exp} [depth: {self.depth}]"
        )


class CTerm(CExp):
    """A terminal node."""

    def compute(self, level: int = 0) -> None:
        """Terminals hold their value in the store; nothing to compute."""

    def compute_diff(self, level: int = 0) -> None:
        """Terminals hold their value in the store; nothing to update."""


class CVar(CTerm):
    """A scalar decision variable."""

    def __init__(self, store: ExpressionStoreLike) -> None:
        super().__init__(store, "CVar")

    def compute(self, level: int = 0) -> None:
        """A variable's value is assigned from outside."""

    def compute_diff(self, level: int = 0) -> None:
        """A variable's value is assigned from outside."""


class CArray(CExp):
    """An array of expressions; its elements are its children."""

    def __init__(self, store: ExpressionStoreLike) -> None:
        super().__init__(store, "CArray")
        self.size = 0

    def compute(self, level: int = 0) -> None:
        """An array has no value of its own."""

    def compute_diff(self, level: int = 0) -> None:
        """An array has no value of its own."""


class CConst(CTerm):
    """A numeric constant."""

    def __init__(self, store: ExpressionStoreLike, value: Any = 0) -> None:
        super().__init__(store, "CConst")
        self.value = value

    def compute(self, level: int = 0) -> None:
        """Write the constant into the store."""
        self.store.set(self.index, level, self.value)

    def compute_diff(self, level: int = 0) -> None:
        """A constant never changes."""


class CSum(CExp):
    """Sum of the children."""

    def __init__(self, store: ExpressionStoreLike) -> None:
        super().__init__(store, "CSum")

    def compute(self, level: int = 0) -> None:
        total = 0
        for child in self.children:
            total += self.store.get(child, level)
        self.store.set(self.index, level, total)

    def compute_diff(self, level: int = 0) -> None:
        value = self.store.get(self.index)
        changed = self.store.changed_children(self.index, level)
        for child in changed:
            value += self.store.get(child, level) - self.store.get(child)
        changed.clear()
        self.store.set(self.index, level, value)


class CMul(CExp):
    """Product of the children."""

    def __init__(self, store: ExpressionStoreLike) -> None:
        super().__init__(store, "CMul")

    def compute(self, level: int = 0) -> None:
        product = 1
        for child in self.children:
            value = self.store.get(child, level)
            if value == 0:
                product = 0
                break
            product *= value
        self.store.set(self.index, level, product)

    def compute_diff(self, level: int = 0) -> None:
        value = self.store.get(self.index)
        changed = self.store.changed_children(self.index, level)
        if any(self.store.get(child, level) == 0 for child in changed):
            self.store.set(self.index, level, 0)
            changed.clear()
            return
        if value == 0:
            changed.clear()
            self.compute(level)
            return
        for child in changed:
            value = _divide(value, self.store.get(child))
            value *= self.store.get(child, level)
        changed.clear()
        self.store.set(self.index, level, value)


class CDiv(CExp):
    """Quotient of the first child by the second."""

    def __init__(self, store: ExpressionStoreLike) -> None:
        super().__init__(store, "CDiv")

    def compute(self, level: int = 0) -> None:
        left = self.store.get(self.children[0], level)
        right = self.store.get(self.children[1], level)
        self.store.set(self.index, level, _divide(left, right))

    def compute_diff(self, level: int = 0) -> None:
        self.compute(level)
        self._clear_changes(level)


class CMod(CExp):
    """Remainder of the first child by the second."""

    def __init__(self, store: ExpressionStoreLike) -> None:
        super().__init__(store, "CMod")

    def compute(self, level: int = 0) -> None:
        left = self.store.get(self.children[0], level)
        right = self.store.get(self.children[1], level)
        self.store.set(self.index, level, _modulo(left, right))

    def compute_diff(self, level: int = 0) -> None:
        self.compute(level)
        self._clear_changes(level)


class CMin(CExp):
    """Minimum of the children."""

    def __init__(self, store: ExpressionStoreLike) -> None:
        super().__init__(store, "CMin")

    def compute(self, level: int = 0) -> None:
        value = min(self.store.get(child, level) for child in self.children)
        self.store.set(self.index, level, value)

    def compute_diff(self, level: int = 0) -> None:
        current = self.store.get(self.index)
        changed = self.store.changed_children(self.index, level)
        values = [self.store.get(child, level) for child in changed]
        changed.clear()
        new_min = min(values) if values else current
        if new_min > current:
            for child in self.children:
                new_min = min(new_min, self.store.get(child, level))
        self.store.set(self.index, level, new_min)


class CMax(CExp):
    """Maximum of the children."""

    def __init__(self, store: ExpressionStoreLike) -> None:
        super().__init__(store, "CMax")

    def compute(self, level: int = 0) -> None:
        value = max(self.store.get(child, level) for child in self.children)
        self.store.set(self.index, level, value)

    def compute_diff(self, level: int = 0) -> None:
        current = self.store.get(self.index)
        changed = self.store.changed_children(self.index, level)
        values = [self.store.get(child, level) for child in changed]
        changed.clear()
        new_max = max(values) if values else current
        if new_max < current:
            for child in self.children:
                new_max = max(new_max, self.store.get(child, level))
        self.store.set(self.index, level, new_max)


class CElement(CExp):
    """Element of an array selected by an index expression.

    The first child is the index, the second is the array.
    """

    def __init__(self, store: ExpressionStoreLike) -> None:
        super().__init__(store, "CElement")

    def compute(self, level: int = 0) -> None:
        position = self.store.get(self.children[0], level)
        array = self.store[self.children[1]]
        if not 0 <= position < len(array.children):
            raise IndexError(f"Index {position} invalid for expression {array}")
        element = array.children[int(position)]
        self.store.set(self.index, level, self.store.get(element, level))

    def compute_diff(self, level: int = 0) -> None:
        self.compute(level)
        self._clear_changes(level)


class CIfThenElse(CExp):
    """Second child if the first is true, third child otherwise."""

    def __init__(self, store: ExpressionStoreLike) -> None:
        super().__init__(store, "IfThenElse")

    def compute(self, level: int = 0) -> None:
        branch = self.children[1] if self.store.get(self.children[0], level) else self.children[2]
        self.store.set(self.index, level, self.store.get(branch, level))

    def compute_diff(self, level: int = 0) -> None:
        self.compute(level)
        self._clear_changes(level)


class CAbs(CExp):
    """Absolute value of the only child."""

    def __init__(self, store: ExpressionStoreLike) -> None:
        super().__init__(store, "CAbs")

    def compute(self, level: int = 0) -> None:
        value = self.store.get(self.children[0], level)
        self.store.set(self.index, level, value if value >= 0 else -value)

    def compute_diff(self, level: int = 0) -> None:
        self.compute(level)
        self._clear_changes(level)


class CNoDelta(CExp):
    """A node whose update is always a full recomputation."""

    def compute_diff(self, level: int = 0) -> None:
        self.compute(level)
        self._clear_changes(level)


class _CRelation(CNoDelta):
    def _operands(self, level: int):
        return (
            self.store.get(self.children[0], level),
            self.store.get(self.children[1], level),
        )


class CEq(_CRelation):
    """1 when the two children are equal, else 0."""

    def __init__(self, store: ExpressionStoreLike) -> None:
        super().__init__(store, "CEq")

    def compute(self, level: int = 0) -> None:
        a, b = self._operands(level)
        self.store.set(self.index, level, int(a == b))


class CNe(_CRelation):
    """1 when the two children differ, else 0."""

    def __init__(self, store: ExpressionStoreLike) -> None:
        super().__init__(store, "CNe")

    def compute(self, level: int = 0) -> None:
        a, b = self._operands(level)
        self.store.set(self.index, level, int(a != b))


class CLt(_CRelation):
    """1 when the first child is less than the second, else 0."""

    def __init__(self, store: ExpressionStoreLike) -> None:
        super().__init__(store, "CLt")

    def compute(self, level: int = 0) -> None:
        a, b = self._operands(level)
        self.store.set(self.index, level, int(a < b))


class CLe(_CRelation):
    """1 when the first child is at most the second, else 0."""

    def __init__(self, store: ExpressionStoreLike) -> None:
        super().__init__(store, "CLe")

    def compute(self, level: int = 0) -> None:
        a, b = self._operands(level)
        self.store.set(self.index, level, int(a <= b))


class CGe(_CRelation):
    """1 when the first child is at least the second, else 0."""

    def __init__(self, store: ExpressionStoreLike) -> None:
        super().__init__(store, "CGe")

    def compute(self, level: int = 0) -> None:
        a, b = self._operands(level)
        self.store.set(self.index, level, int(a >= b))


class CGt(_CRelation):
    """1 when the first child is greater than the second, else 0."""

    def __init__(self, store: ExpressionStoreLike) -> None:
        super().__init__(store, "CGt")

    def compute(self, level: int = 0) -> None:
        a, b = self._operands(level)
        self.store.set(self.index, level, int(a > b))


class CNValues(CNoDelta):
    """Number of distinct values among the children."""

    def __init__(self, store: ExpressionStoreLike) -> None:
        super().__init__(store, "CNValues")

    def compute(self, level: int = 0) -> None:
        values = {self.store.get(child, level) for child in self.children}
        self.store.set(self.index, level, len(values))