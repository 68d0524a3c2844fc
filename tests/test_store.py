"""Tests for the ordered input map."""

from qsee.engine.core.store import InputMap


def test_iterates_in_key_order():
    m = InputMap([("L[10]", "c"), ("L[2]", "b"), ("L[0]", "a"), ("L", "x")])
    assert list(m) == ["L", "L[0]", "L[2]", "L[10]"]
    assert list(m.values()) == ["x", "a", "b", "c"]


def test_overwrite_keeps_single_entry():
    m = InputMap()
    m["A"] = "1"
    m["A"] = "2"
    assert len(m) == 1
    assert m["A"] == "2"


def test_mapping_behaviour():
    m = InputMap({"A": "1", "B.C": "2"})
    assert "A" in m
    assert "Z" not in m
    assert m.get("Z") is None
    assert m == {"A": "1", "B.C": "2"}


def test_lower_bound():
    m = InputMap({"A": "1", "A.B": "2", "A[0]": "3", "B": "4"})
    assert m.lower_bound("A") == 0
    assert m.lower_bound("A.A") == 1
    assert m.key_at(m.lower_bound("A.C")) == "A[0]"
    assert m.lower_bound("C") == len(m)


def test_iter_prefix_stops_at_first_mismatch():
    m = InputMap({"SCF": "1", "SCF.A": "2", "SCF[0]": "3", "SCFX": "4", "T": "5"})
    assert [k for k, _ in m.iter_prefix("SCF")] == ["SCF", "SCF.A", "SCF[0]", "SCFX"]
    assert [k for k, _ in m.iter_prefix("SCF.")] == ["SCF.A"]
    assert list(m.iter_prefix("Z")) == []


def test_repr_lists_entries_in_order():
    m = InputMap({"B": "2", "A": "1"})
    assert repr(m) == "InputMap({'A': '1', 'B': '2'})"
