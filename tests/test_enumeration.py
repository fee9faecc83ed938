import itertools

import pytest

from easylocal.enumeration import EnumerationOpt


class SubsetEnumeration(EnumerationOpt):
    """Enumerates 0/1 vectors; feasible when at least ``minimum`` ones."""

    def __init__(self, weights, minimum):
        super().__init__(weights, [0] * len(weights))
        self.minimum = minimum
        self.visited = []

    def first(self):
        self.out[:] = [0] * len(self.input)
        self.visited.append(list(self.out))

    def advance(self):
        for i, bit in enumerate(self.out):
            if bit == 0:
                self.out[i] = 1
                self.visited.append(list(self.out))
                return True
            self.out[i] = 0
        return False

    def feasible(self):
        return sum(self.out) >= self.minimum

    def cost(self):
        return sum(w for w, bit in zip(self.input, self.out) if bit)


def _brute_force_best(weights, minimum):
    candidates = [
        v for v in itertools.product((0, 1), repeat=len(weights)) if sum(v) >= minimum
    ]
    return min(sum(w for w, b in zip(weights, v) if b) for v in candidates)


def test_finds_minimum_cost():
    weights = [5, 2, 8, 3]
    solver = SubsetEnumeration(weights, 2)
    assert EnumerationOpt.search(solver) is True
    best = EnumerationOpt.best_solution(solver)
    assert sum(best) >= 2
    assert sum(w for w, b in zip(weights, best) if b) == _brute_force_best(weights, 2)


def test_visits_every_candidate():
    solver = SubsetEnumeration([1, 1, 1], 0)
    EnumerationOpt.search(solver)
    assert len({tuple(v) for v in solver.visited}) == 2 ** 3
    assert EnumerationOpt.num_sol(solver) == len(solver.visited) + 1


def test_best_is_independent_copy():
    solver = SubsetEnumeration([4, 1, 6], 1)
    EnumerationOpt.search(solver)
    best = EnumerationOpt.best_solution(solver)
    assert best is not solver.out
    assert best == [0, 1, 0]


def test_tie_keeps_first_found():
    solver = SubsetEnumeration([2, 2], 1)
    EnumerationOpt.search(solver)
    assert EnumerationOpt.best_solution(solver) == [1, 0]


def test_no_feasible_solution():
    solver = SubsetEnumeration([1, 2], 3)
    assert EnumerationOpt.search(solver) is False
    assert EnumerationOpt.best_solution(solver) is None
    assert EnumerationOpt.num_sol(solver) == len(solver.visited) + 1


def test_abstract_cannot_be_instantiated():
    with pytest.raises(TypeError):
        EnumerationOpt(None, None)