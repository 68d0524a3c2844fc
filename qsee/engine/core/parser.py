"""Section-oriented input-file parser.

Turns a sequence of raw text lines into an InputMap:

    [MOLECULE]
    charge = 0
    geom:
      H 0.0 0.0 0.0
      H 0.0 0.0 0.74

becomes ``MOLECULE.CHARGE -> "0"`` and
``MOLECULE.GEOM -> "\\nH 0.0 0.0 0.0\\nH 0.0 0.0 0.74"``.

Malformed lines never abort a parse: bracket problems, duplicate keys and
empty values are logged as warnings and the parse runs to completion.
"""

import logging
from bisect import bisect_left
from collections.abc import Iterable, Mapping

from ...models.enums import LineType
from .lines import classify_line, find_unenclosed_separator
from .store import InputMap

logger = logging.getLogger(__name__)

# Keys whose values are stored as written
DEFAULT_CASE_SENSITIVE_KEYS = ("BASIS.BASIS",)


def reverse_by_dot(key: str) -> str:
    """Reverse the dot-separated segments of ``key``.

    Empty segments are dropped: ``"A..B."`` becomes ``"B.A"``.
    """
    tokens = [token for token in key.split(".") if token]
    return ".".join(reversed(tokens))


def add_entry(target: InputMap, key: str, value: str) -> None:
    """Store one entry, warning when an existing key is overwritten."""
    if key in target:
        logger.warning(f"Key {key} already exists in the parsed input. Overwriting.")
    target[key] = value


def merge_section(target: InputMap, subsection: Mapping[str, str], prefix: str = "") -> None:
    """Copy every entry of ``subsection`` into ``target`` under ``prefix``.

    Args:
        target: Dictionary receiving the entries
        subsection: Entries to merge
        prefix: Namespace prepended as ``PREFIX.`` to each key (none if empty)
    """
    for key, value in subsection.items():
        add_entry(target, f"{prefix}.{key}" if prefix else key, value)


class InputParser:
    """Parses input-file lines into an InputMap.

    The parser itself holds only configuration. Section context is local
    to each parse call, so one parser can be reused for many inputs.
    """

    def __init__(self, case_sensitive_keys: Iterable[str] = DEFAULT_CASE_SENSITIVE_KEYS):
        self.case_sensitive_keys = tuple(key.strip().upper() for key in case_sensitive_keys)
        # Reversed so that matching on key suffixes becomes a prefix seek
        self._case_sensitive_reversed = sorted(
            {reverse_by_dot(key) for key in self.case_sensitive_keys}
        )

    def is_case_sensitive(self, key: str) -> bool:
        """Check whether values stored under ``key`` keep their case.

        A key is case sensitive when its dot-reversed form is a prefix of
        one of the reversed case-sensitive keys.
        """
        reversed_key = reverse_by_dot(key)
        pos = bisect_left(self._case_sensitive_reversed, reversed_key)
        return pos < len(self._case_sensitive_reversed) and self._case_sensitive_reversed[
            pos
        ].startswith(reversed_key)

    def parse(
        self,
        lines: Iterable[str],
        target: InputMap | None = None,
        prefix: str = "",
    ) -> InputMap:
        """Parse ``lines`` and return the dictionary they describe.

        Args:
            lines: Raw text lines (a whole file or any slice of one)
            target: Existing dictionary to merge the result into
            prefix: Namespace prepended as ``PREFIX.`` to every parsed key

        Returns:
            ``target`` with the new entries merged in, or a fresh InputMap
            if no target was given
        """
        parsed = self._parse_lines(lines, prefix.strip().upper())
        if target is None:
            return parsed
        merge_section(target, parsed)
        return target

    def _parse_lines(self, lines: Iterable[str], prefix: str = "") -> InputMap:
        result = InputMap()
        classified = [classify_line(line) for line in lines]
        section = ""

        i = 0
        while i < len(classified):
            line_type, content = classified[i]
            i += 1

            if line_type == LineType.EMPTY:
                continue

            if line_type == LineType.SECTION_HEADER:
                section = content[1:-1].strip().upper()
                continue

            if line_type == LineType.CONTINUATION:
                logger.warning(f"Continuation line without a preceding data entry: {content}")
                continue

            key, value = self._split_entry(content)
            if section:
                key = f"{section}.{key}"
            # Case sensitivity is decided on the key as stored
            if prefix:
                key = f"{prefix}.{key}"

            # Absorb continuation lines; blank lines inside the run are skipped
            while i < len(classified) and classified[i][0] in (
                LineType.CONTINUATION,
                LineType.EMPTY,
            ):
                next_type, next_content = classified[i]
                if next_type == LineType.CONTINUATION:
                    value += "\n" + next_content
                i += 1

            if not key or key.endswith("."):
                logger.warning(f"Data entry without a key name: {content}")
                continue

            if not value:
                logger.warning(f"No data entry for {key} in input file.")
                continue

            if not self.is_case_sensitive(key):
                value = value.upper()

            add_entry(result, key, value)

        return result

    @staticmethod
    def _split_entry(content: str) -> tuple[str, str]:
        sep = find_unenclosed_separator(content, warn=False)
        return content[:sep].strip().upper(), content[sep + 1 :].strip()
