"""Tests for input key ordering."""

import random

import pytest

from qsee.engine.core.keys import (
    INVALID_INDEX,
    compare_keys,
    extract_index,
    key_less,
    sort_keys,
)


def _sign(x: int) -> int:
    return (x > 0) - (x < 0)


def _random_key(rng: random.Random) -> str:
    segments = []
    for _ in range(rng.randint(1, 3)):
        name = "".join(rng.choice("ABCXYZ019_") for _ in range(rng.randint(1, 3)))
        if rng.random() < 0.4:
            name += f"[{rng.randint(0, 12)}]"
        segments.append(name)
    return ".".join(segments)


class TestExtractIndex:
    def test_reads_digits_up_to_bracket(self):
        assert extract_index("L[42]", 2) == 42

    def test_non_digit_sorts_last(self):
        assert extract_index("L[x]", 2) == INVALID_INDEX
        assert extract_index("L[-1]", 2) == INVALID_INDEX

    def test_empty_brackets(self):
        assert extract_index("L[]", 2) == 0


class TestCompareKeys:
    def test_equal_keys(self):
        assert compare_keys("SCF.MAXITER", "SCF.MAXITER") == 0

    def test_list_indices_sort_numerically(self):
        keys = [f"L[{i}]" for i in range(12)]
        shuffled = keys[:]
        random.Random(7).shuffle(shuffled)
        assert sort_keys(shuffled) == keys

    def test_ten_after_nine(self):
        assert key_less("L[9]", "L[10]")
        assert key_less("L[2]", "L[10]")

    def test_dot_before_bracket(self):
        assert key_less("A.B", "A[0]")
        assert not key_less("A[0]", "A.B")

    def test_bracket_before_other_characters(self):
        assert key_less("A[0]", "AB")
        assert key_less("A[5]", "A0")

    def test_dot_before_any_character(self):
        assert key_less("A.Z", "A0")
        assert key_less("A.Z", "A_")
        assert key_less("SCF.X", "SCFA")

    def test_prefix_sorts_first(self):
        assert key_less("SCF", "SCF.MAXITER")
        assert not key_less("SCF.MAXITER", "SCF")

    def test_invalid_index_sorts_after_numbers(self):
        assert key_less("L[99]", "L[X]")

    def test_equal_indices_continue_scanning(self):
        assert key_less("L[1].A", "L[1].B")
        assert key_less("L[1]", "L[1].A")

    def test_section_keys_are_contiguous(self):
        keys = ["SCFX", "SCF.B", "SCF[0]", "SCF", "SCF.A.Z", "SC", "SCF.A"]
        assert sort_keys(keys) == ["SC", "SCF", "SCF.A", "SCF.A.Z", "SCF.B", "SCF[0]", "SCFX"]


class TestStrictWeakOrdering:
    @pytest.fixture
    def keys(self) -> list[str]:
        rng = random.Random(1234)
        return [_random_key(rng) for _ in range(60)]

    def test_irreflexive(self, keys):
        for a in keys:
            assert not key_less(a, a)

    def test_asymmetric(self, keys):
        for a in keys:
            for b in keys:
                assert _sign(compare_keys(a, b)) == -_sign(compare_keys(b, a))

    def test_transitive(self, keys):
        for a in keys:
            for b in keys:
                if not key_less(a, b):
                    continue
                for c in keys:
                    if key_less(b, c):
                        assert key_less(a, c), (a, b, c)

    def test_zero_only_for_equal_strings(self, keys):
        for a in keys:
            for b in keys:
                assert (compare_keys(a, b) == 0) == (a == b)
