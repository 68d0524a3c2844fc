"""Parsed input file and its query API.

Input owns the ordered dictionary built by InputParser and answers
read-only queries on it: whether a key, section or list exists, list
sizes, section contents, and typed scalar retrieval.

    inp = Input.from_file("h2.inp")
    if inp.contains_data("MOLECULE.CHARGE"):
        charge = inp.get_int("MOLECULE.CHARGE")
"""

import logging
from collections.abc import Iterable, Mapping
from pathlib import Path
from types import MappingProxyType

from ...models.enums import DataType
from .convert import to_bool, to_float, to_int, to_unsigned
from .errors import DataNotFoundError, InputFileError
from .keys import INVALID_INDEX, extract_index
from .parser import DEFAULT_CASE_SENSITIVE_KEYS, InputParser
from .store import InputMap

logger = logging.getLogger(__name__)

ScalarValue = str | int | bool | float

_CONVERTERS = {
    DataType.INT: to_int,
    DataType.UNSIGNED: to_unsigned,
    DataType.BOOL: to_bool,
    DataType.FLOAT: to_float,
}


def split_lines(text: str) -> list[str]:
    """Split on newlines only; a trailing \\r is left for the classifier to strip."""
    lines = text.split("\n")
    if lines and not lines[-1]:
        lines.pop()
    return lines


def read_lines(path: str | Path) -> list[str]:
    """Read every line of a text file.

    Bytes that are not valid UTF-8 become U+FFFD replacement characters
    instead of failing the read.

    Raises:
        InputFileError: If the file does not exist or cannot be read
    """
    try:
        with open(path, encoding="utf-8", errors="replace", newline="") as f:
            return split_lines(f.read())
    except OSError as e:
        raise InputFileError(str(path), str(e)) from e


class Input:
    """A parsed input file.

    The dictionary is built once by ``parse`` and is read-only for
    callers afterwards. An Input built directly from lines stays empty
    until ``parse`` or ``parse_fragment`` is called.
    """

    def __init__(
        self,
        lines: Iterable[str] = (),
        case_sensitive_keys: Iterable[str] = DEFAULT_CASE_SENSITIVE_KEYS,
        source: str | None = None,
    ):
        self.source = source
        self._lines = list(lines)
        self._parser = InputParser(case_sensitive_keys)
        self._dict = InputMap()

    @classmethod
    def from_file(
        cls,
        path: str | Path,
        case_sensitive_keys: Iterable[str] = DEFAULT_CASE_SENSITIVE_KEYS,
    ) -> "Input":
        """Read and parse an input file.

        Raises:
            InputFileError: If the file cannot be read
        """
        inp = cls(read_lines(path), case_sensitive_keys, source=str(path))
        inp.parse()
        return inp

    @classmethod
    def from_text(
        cls,
        text: str,
        case_sensitive_keys: Iterable[str] = DEFAULT_CASE_SENSITIVE_KEYS,
    ) -> "Input":
        """Parse input given as a single string."""
        inp = cls(split_lines(text), case_sensitive_keys)
        inp.parse()
        return inp

    @property
    def lines(self) -> list[str]:
        """Raw lines this input was built from."""
        return list(self._lines)

    @property
    def entries(self) -> Mapping[str, str]:
        """Read-only view of the parsed dictionary, in key order."""
        return MappingProxyType(self._dict)

    def parse(self) -> None:
        """Parse all source lines into a fresh dictionary.

        Entries merged in earlier are discarded, so calling this again
        rebuilds the same dictionary.
        """
        self._dict = InputMap()
        self._parser.parse(self._lines, target=self._dict)
        logger.debug(f"Parsed {len(self._dict)} entries from {self.source or '<lines>'}")

    def parse_fragment(self, start: int, end: int, prefix: str = "") -> None:
        """Parse ``lines[start:end]`` and merge the result under ``prefix``.

        Used to compose one dictionary from several sources: a fragment's
        keys land at ``PREFIX.KEY``.
        """
        self._parser.parse(self._lines[start:end], target=self._dict, prefix=prefix)

    def merge(self, lines: Iterable[str], prefix: str = "") -> None:
        """Parse extra lines from another source and merge them under ``prefix``."""
        self._parser.parse(lines, target=self._dict, prefix=prefix)

    # ============ EXISTENCE QUERIES ============

    def contains_data(self, key: str) -> bool:
        """Check whether ``key`` is stored exactly."""
        return key in self._dict

    def contains_section(self, key: str) -> bool:
        """Check whether some stored key is nested under ``key.``."""
        pos = self._dict.lower_bound(key)
        if pos < len(self._dict) and self._dict.key_at(pos) == key:
            pos += 1
        if pos >= len(self._dict):
            return False
        return self._dict.key_at(pos).startswith(key + ".")

    def contains_list(self, key: str) -> bool:
        """Check whether some stored key is an element ``key[i]``."""
        for found, _ in self._dict.iter_prefix(key):
            if len(found) > len(key) and found[len(key)] == "[":
                return True
        return False

    def get_list_size(self, key: str) -> int:
        """Return one plus the highest index stored under ``key[...]``.

        Indices need not be contiguous: a list with only ``L[0]`` and
        ``L[2]`` has size 3. Elements with a non-numeric index such as
        ``L[X]`` do not count. Returns 0 when ``key`` is not a list.
        """
        max_index = -1
        for found, _ in self._dict.iter_prefix(key):
            if len(found) > len(key) and found[len(key)] == "[":
                index = extract_index(found, len(key) + 1)
                if index != INVALID_INDEX:
                    max_index = max(max_index, index)
        return max_index + 1

    # ============ SECTION QUERIES ============

    def get_data_in_section(self, section: str) -> list[str]:
        """Names of the immediate children of ``section``.

        For ``SCF.MAXITER`` and ``SCF.DIIS.NKEEP`` the children of ``SCF``
        are ``DIIS`` and ``MAXITER``.
        """
        prefix = section + "."
        names: set[str] = set()
        for found, _ in self._dict.iter_prefix(section):
            if not found.startswith(prefix):
                continue
            rest = found[len(prefix) :]
            names.add(rest.split(".", 1)[0])
        return sorted(names)

    def get_section(self, section: str) -> InputMap:
        """Copy of every entry nested under ``section.``, with the prefix removed."""
        prefix = section + "."
        result = InputMap()
        for found, value in self._dict.iter_prefix(section):
            if found.startswith(prefix) and len(found) > len(prefix):
                result[found[len(prefix) :]] = value
        return result

    # ============ TYPED RETRIEVAL ============

    def get_string(self, key: str) -> str:
        """Stored value of ``key``.

        Raises:
            DataNotFoundError: If ``key`` is not stored
        """
        try:
            return self._dict[key]
        except KeyError:
            raise DataNotFoundError(key) from None

    def get_int(self, key: str) -> int:
        return to_int(key, self.get_string(key))

    def get_unsigned(self, key: str) -> int:
        return to_unsigned(key, self.get_string(key))

    def get_bool(self, key: str) -> bool:
        """TRUE/ON is True, FALSE/OFF is False, anything else raises InvalidBooleanError."""
        return to_bool(key, self.get_string(key))

    def get_float(self, key: str) -> float:
        return to_float(key, self.get_string(key))

    def get_data(self, key: str, kind: DataType | str = DataType.STRING) -> ScalarValue:
        """Retrieve ``key`` converted to ``kind``.

        Raises:
            DataNotFoundError: If ``key`` is not stored
            DataConversionError: If the value cannot be converted
            ValueError: If ``kind`` is not a known DataType
        """
        kind = DataType(kind)
        value = self.get_string(key)
        if kind == DataType.STRING:
            return value
        return _CONVERTERS[kind](key, value)

    def __len__(self) -> int:
        return len(self._dict)

    def __contains__(self, key: object) -> bool:
        return key in self._dict
