import pytest

from easylocal.coststructure import DefaultCostStructure, HierarchicalCostStructure
from easylocal.statemanager import StateManager


class Component:
    def __init__(self, name, is_hard, fn):
        self.name = name
        self.is_hard = is_hard
        self._fn = fn

    def cost(self, state):
        return self._fn(state)


class ListManager(StateManager):
    def __init__(self, states, cost_structure=DefaultCostStructure):
        super().__init__(None, "lists", cost_structure)
        self._states = iter(states)

    def random_state(self):
        return list(next(self._states))

    def check_consistency(self, state):
        return all(v >= 0 for v in state)


def make_manager(states=(), cost_structure=DefaultCostStructure):
    sm = ListManager(states, cost_structure)
    StateManager.add_cost_component(sm, Component("hard", True, lambda s: s[0]))
    StateManager.add_cost_component(sm, Component("soft", False, lambda s: s[1]))
    return sm


def test_cost_function_components_aggregates():
    sm = make_manager()
    cost = StateManager.cost_function_components(sm, [2, 5])
    assert cost.violations == 2
    assert cost.objective == 5
    assert cost.all_components == [2, 5]
    assert cost.total == 2005
    assert not cost.is_weighted


def test_cost_function_components_weighted():
    sm = make_manager()
    cost = StateManager.cost_function_components(sm, [2, 5], [0.5, 2.0])
    assert cost.is_weighted
    assert cost.weighted == pytest.approx(1000 * 0.5 * 2 + 2.0 * 5)
    assert cost.total == 2005


def test_short_weights_rejected():
    sm = make_manager()
    with pytest.raises(ValueError):
        StateManager.cost_function_components(sm, [1, 1], [1.0])


def test_cost_structure_class_is_used():
    sm = make_manager(cost_structure=HierarchicalCostStructure)
    cost = StateManager.cost_function_components(sm, [0, 1])
    assert isinstance(cost, HierarchicalCostStructure)
    assert cost.all_components == [0, 1]
    assert cost.total == 1


def test_sample_state_keeps_cheapest():
    sm = make_manager(states=[[3, 1], [0, 9], [1, 0], [0, 4]])
    state, cost = StateManager.sample_state(sm, 4)
    assert state == [0, 4]
    assert cost == StateManager.cost_function_components(sm, [0, 4])


def test_sample_state_single_sample():
    sm = make_manager(states=[[1, 1], [0, 0]])
    state, _ = StateManager.sample_state(sm, 1)
    assert state == [1, 1]


def test_lower_bound_and_optimality():
    sm = make_manager()
    results = [
        StateManager.optimal_state_reached(sm, [0, 0]),
        StateManager.optimal_state_reached(sm, [0, 1]),
        StateManager.lower_bound_reached(sm, DefaultCostStructure(0, 0, 0, [])),
        StateManager.lower_bound_reached(sm, DefaultCostStructure(3, 0, 3, [3])),
    ]
    assert results == [True, False, True, False]


def test_component_registry():
    sm = make_manager()
    extra = Component("extra", False, lambda s: 0)
    StateManager.add_cost_component(sm, extra)
    assert StateManager.cost_component_count(sm) == 3
    assert StateManager.cost_component(sm, 2) is extra
    assert StateManager.cost_component_index(sm, extra) == 2
    StateManager.clear_cost_structure(sm)
    assert StateManager.cost_component_count(sm) == 0
    with pytest.raises(KeyError):
        StateManager.cost_component_index(sm, extra)


def test_unsupported_operations_raise():
    sm = make_manager()
    with pytest.raises(RuntimeError):
        sm.greedy_state()
    with pytest.raises(RuntimeError):
        sm.greedy_state(0.5, 3)
    with pytest.raises(RuntimeError):
        sm.state_distance([0], [1])


def test_check_consistency_and_abstract():
    sm = make_manager()
    assert sm.check_consistency([1, 2])
    assert not sm.check_consistency([-1, 2])
    with pytest.raises(TypeError):
        StateManager(None, "abstract")