import pytest

from easylocal.coststructure import DefaultCostStructure, HierarchicalCostStructure


def test_default_is_zero():
    cs = DefaultCostStructure()
    assert cs == 0
    assert len(cs) == 0
    assert cs.is_weighted is False


def test_str_format():
    cs = DefaultCostStructure(1002, 1, 2, [1, 2])
    assert str(cs) == "1002 (viol: 1, obj: 2, comps: {1, 2})"


def test_str_without_components():
    assert str(DefaultCostStructure()) == "0 (viol: 0, obj: 0, comps: {})"


def test_addition_resizes_components():
    a = DefaultCostStructure(3, 1, 2, [1])
    b = DefaultCostStructure(4, 2, 2, [2, 2])
    c = a + b
    assert c.total == a.total + b.total
    assert c.violations == a.violations + b.violations
    assert c.objective == a.objective + b.objective
    assert c.all_components == [a[0] + b[0], b[1]]
    assert a.all_components == [1]


def test_subtraction_round_trip():
    a = DefaultCostStructure(10, 3, 7, [3, 7])
    b = DefaultCostStructure(4, 1, 3, [1, 3])
    back = (a - b) + b
    assert back.total == a.total
    assert back.violations == a.violations
    assert back.all_components == a.all_components


def test_inplace_add_returns_same_object():
    a = DefaultCostStructure(1, 0, 1, [1])
    original = a
    a += DefaultCostStructure(2, 0, 2, [2])
    assert a is original
    assert a.all_components == [3]


def test_add_rejects_non_structure():
    with pytest.raises(TypeError):
        DefaultCostStructure(1) + 1


def test_indexing_and_length():
    cs = DefaultCostStructure(5, 1, 4, [1, 4])
    assert cs[1] == 4
    assert len(cs) == 2
    assert list(cs) == [1, 4]


def test_compare_by_total_when_unweighted():
    a = DefaultCostStructure(3, 0, 3, [3])
    b = DefaultCostStructure(5, 0, 5, [5])
    assert a < b
    assert a <= b
    assert b > a
    assert b >= a
    assert a != b
    assert a == DefaultCostStructure(3, 1, 2, [])


def test_compare_by_weighted_when_both_weighted():
    a = DefaultCostStructure(10, 0, 10, [10], weighted=1.0)
    b = DefaultCostStructure(5, 0, 5, [5], weighted=2.0)
    assert a < b
    assert not b < a


def test_mixed_weighting_uses_total():
    a = DefaultCostStructure(10, 0, 10, [10], weighted=1.0)
    b = DefaultCostStructure(5, 0, 5, [5])
    assert b < a


def test_compare_with_scalar():
    cs = DefaultCostStructure(3, 0, 3, [3])
    assert cs > 0
    assert cs < 4
    assert 2 < cs
    assert cs == 3
    assert 3 == cs
    assert cs >= 3


def test_weighted_compares_with_scalar_by_weighted():
    cs = DefaultCostStructure(100, 0, 100, [100], weighted=0.5)
    assert cs < 1
    assert cs == 0.5


def test_float_tolerance():
    a = DefaultCostStructure(0.1 + 0.2, 0, 0.3, [])
    assert a == 0.3
    assert not a < 0.3


def test_hierarchical_lexicographic():
    a = HierarchicalCostStructure(0, 0, 0, [0, 9])
    b = HierarchicalCostStructure(0, 0, 0, [1, 0])
    assert a < b
    assert a <= b
    assert b > a
    assert not a >= b


def test_hierarchical_equal():
    a = HierarchicalCostStructure(5, 0, 5, [2, 3])
    b = HierarchicalCostStructure(1, 0, 1, [2, 3])
    assert a == b
    assert not a < b
    assert a <= b
    assert a >= b


def test_hierarchical_vs_scalar():
    zero = HierarchicalCostStructure(0, 0, 0, [0, 0])
    assert zero == 0
    mixed = HierarchicalCostStructure(1, 0, 1, [0, 1])
    assert mixed > 0
    assert not mixed == 0
    assert 0 < mixed


def test_hierarchical_add_keeps_type():
    a = HierarchicalCostStructure(1, 0, 1, [1])
    c = a + HierarchicalCostStructure(1, 0, 1, [0, 1])
    assert isinstance(c, HierarchicalCostStructure)
    assert c.all_components == [1, 1]


def test_hierarchical_mismatched_lengths():
    a = HierarchicalCostStructure(0, 0, 0, [1, 2])
    b = HierarchicalCostStructure(0, 0, 0, [1])
    with pytest.raises(ValueError):
        HierarchicalCostStructure.__lt__(a, b)