"""Line parsing — turn one ``.env`` line into a name and a value.

The file format is deliberately flat::

    NAME=value
    NAME2="quoted value"
    NAME3='quoted value'

Only the **first** ``=`` separates the name from the value, so values
may contain ``=`` themselves (``URL=http://a=b``).  Nothing is trimmed:
the name is every character before the separator, verbatim.
"""

from dataclasses import dataclass

_QUOTES = frozenset({'"', "'"})
_MIN_QUOTED_LENGTH = 2


@dataclass(frozen=True)
class Assignment:
    """A ``NAME=value`` pair split from one line.

    Attributes:
        name: Everything before the first ``=``.
        raw_value: Everything after it (may be empty, may contain ``=``).

    """

    name: str
    raw_value: str


def split_assignment(line: str) -> Assignment | None:
    """Split *line* at its first ``=``.

    Returns:
        The assignment, or None if the line has no ``=`` at all.

    """
    name, sep, value = line.partition("=")
    if not sep:
        return None
    return Assignment(name=name, raw_value=value)


def strip_quotes(value: str) -> str:
    """Remove one layer of matching single or double quotes.

    The quotes are only removed when the value is at least two
    characters long and starts and ends with the same quote character.
    ``"ab`` and ``"ab'`` are returned unchanged.
    """
    if len(value) >= _MIN_QUOTED_LENGTH and value[0] == value[-1] and value[0] in _QUOTES:
        return value[1:-1]
    return value
