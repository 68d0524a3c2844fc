"""Key ordering for the input dictionary.

Keys are dot-separated paths whose segments may carry a bracketed list
index (``MOLECULE.ATOMS[3]``). They are ordered like plain strings with
three exceptions:

- A ``.`` sorts before any other character, so a section's sub-keys stay
  contiguous right after the section name.
- A ``[`` sorts before any character except ``.``.
- Two bracketed indices are compared numerically, so ``L[2]`` comes
  before ``L[10]``.
"""

import sys
from functools import cmp_to_key

# Index value for bracket content that is not a plain non-negative integer
INVALID_INDEX = sys.maxsize


def extract_index(key: str, pos: int) -> int:
    """Read the integer starting at ``pos`` up to the closing bracket.

    Args:
        key: Key string
        pos: Position of the first character after ``[``

    Returns:
        The index value, or INVALID_INDEX if a non-digit is found
        before ``]``
    """
    num = 0
    while pos < len(key) and key[pos] != "]":
        ch = key[pos]
        if not ("0" <= ch <= "9"):
            return INVALID_INDEX
        num = num * 10 + (ord(ch) - ord("0"))
        pos += 1
    return num


def compare_keys(a: str, b: str) -> int:
    """Three-way comparison of two keys.

    Returns:
        Negative if ``a`` sorts first, positive if ``b`` sorts first,
        zero if the keys are equal
    """
    i = 0
    j = 0
    while i < len(a) and j < len(b):
        ca = a[i]
        cb = b[j]
        if ca == "[" and cb == "[":
            num_a = extract_index(a, i + 1)
            num_b = extract_index(b, j + 1)
            if num_a != num_b:
                return -1 if num_a < num_b else 1
        elif ca == "[":
            return 1 if cb == "." else -1
        elif cb == "[":
            return -1 if ca == "." else 1
        elif ca != cb:
            if ca == ".":
                return -1
            if cb == ".":
                return 1
            return -1 if ca < cb else 1
        i += 1
        j += 1

    if len(a) == len(b):
        return 0
    return -1 if len(a) < len(b) else 1


def key_less(a: str, b: str) -> bool:
    """Return True if ``a`` sorts strictly before ``b``."""
    return compare_keys(a, b) < 0


# Sort key usable with sorted(), list.sort() and bisect
input_sort_key = cmp_to_key(compare_keys)


def sort_keys(keys) -> list[str]:
    """Return ``keys`` sorted in input-dictionary order."""
    return sorted(keys, key=input_sort_key)
