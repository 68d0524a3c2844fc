"""Line classification for the input-file parser.

Each raw line is reduced to its trimmed content and assigned one of the
LineType categories. Comments are stripped here so the parser never sees
them.
"""

import logging

from ...models.enums import LineType

logger = logging.getLogger(__name__)

WHITESPACE = " \t\r\n"
COMMENT_CHAR = "#"
SEPARATORS = "=:"

# Closing bracket -> matching opening bracket
BRACKET_PAIRS = {")": "(", "]": "[", "}": "{"}
OPENING_BRACKETS = frozenset(BRACKET_PAIRS.values())


def find_unenclosed_separator(line: str, warn: bool = True) -> int:
    """Locate the first ``=`` or ``:`` not nested inside brackets.

    Brackets ``()``, ``[]`` and ``{}`` are tracked with a stack. A closing
    bracket with nothing open makes tracking impossible for the rest of
    the line, so the line is reported and treated as having no separator.
    A closing bracket that does not match the innermost open one is
    reported and scanning continues.

    Args:
        line: Trimmed line content
        warn: Log bracket problems (off when re-scanning a classified line)

    Returns:
        Index of the separator, or -1 if there is none
    """
    stack: list[str] = []
    for pos, ch in enumerate(line):
        if ch in OPENING_BRACKETS:
            stack.append(ch)
        elif ch in BRACKET_PAIRS:
            if not stack:
                if warn:
                    logger.warning(f"Unmatched closing bracket in input file line:\n{line}")
                return -1
            top = stack.pop()
            if top != BRACKET_PAIRS[ch] and warn:
                logger.warning(f"Unmatched bracket in input file line:\n{line}")
        elif ch in SEPARATORS and not stack:
            return pos
    return -1


def has_unenclosed_separator(line: str) -> bool:
    """Check whether ``line`` contains an ``=`` or ``:`` outside brackets."""
    return find_unenclosed_separator(line) >= 0


def strip_comment(line: str) -> str | None:
    """Remove a trailing comment and surrounding whitespace.

    Returns:
        The trimmed content, or None for a full-line comment
    """
    stripped = line.lstrip(WHITESPACE)
    if stripped.startswith(COMMENT_CHAR):
        return None
    comment_pos = line.find(COMMENT_CHAR)
    if comment_pos >= 0:
        line = line[:comment_pos]
    return line.strip(WHITESPACE)


def is_section_header(line: str) -> bool:
    """A header starts with ``[`` and its first ``]`` is the last character."""
    return line.startswith("[") and line.find("]") == len(line) - 1


def classify_line(line: str) -> tuple[LineType, str]:
    """Determine the category of a raw line.

    Args:
        line: Raw line as read from the source

    Returns:
        Tuple of (line_type, trimmed_content). The content is empty for
        EMPTY lines.
    """
    content = strip_comment(line)
    if not content:
        return LineType.EMPTY, ""

    if is_section_header(content):
        return LineType.SECTION_HEADER, content

    if has_unenclosed_separator(content):
        return LineType.DATA_ENTRY, content

    return LineType.CONTINUATION, content
