"""Reference expansion — substitute ``${NAME}`` with live values.

A value may refer to variables that are already in the environment::

    BASE=/opt/app
    BIN=${BASE}/bin

Expansion is a single left-to-right scan over the value:

1. Copy text up to the next ``${`` verbatim.
2. Read the name up to the next ``}`` and look it up in the store.
3. Append the value if found; otherwise report the reference and
   contribute nothing.
4. Append whatever follows the last reference.

Substituted values are **not** scanned again, so expansion is exactly
one level deep and cycles cannot occur.  Lookups hit the store at
expansion time, which means a line can use anything an earlier line of
the same file has already set.
"""

from dataclasses import dataclass

from py_envload.env import EnvironmentStore
from py_envload.logging import Logger, LogLevel

_OPEN = "${"
_CLOSE = "}"


@dataclass(frozen=True)
class Expansion:
    """The outcome of expanding one value.

    Attributes:
        value: The expanded text.  Only meaningful when *ok* is True.
        ok: True if every reference (possibly none) was resolved.

    """

    value: str
    ok: bool


def expand(text: str, line_number: int, env: EnvironmentStore, logger: Logger) -> Expansion:
    """Expand every ``${NAME}`` reference in *text* against *env*.

    Args:
        text: The (already unquoted) value to expand.
        line_number: 1-based source line, used in diagnostics.
        env: The store references are looked up in.
        logger: Receives one warning per unresolved reference.

    Returns:
        The expanded value and whether all references resolved.

    """
    parts: list[str] = []
    unresolved = 0
    pos = 0
    while (start := text.find(_OPEN, pos)) != -1:
        parts.append(text[pos:start])
        end = text.find(_CLOSE, start + len(_OPEN))
        if end == -1:
            # unterminated reference swallows the rest of the value
            unresolved += 1
            logger.log(
                LogLevel.WARNING,
                f"Unterminated variable reference {text[start:]} on line {line_number}",
                line_number=line_number,
            )
            pos = len(text)
            break
        name = text[start + len(_OPEN) : end]
        value = env.get(name)
        if value is None:
            unresolved += 1
            logger.log(
                LogLevel.WARNING,
                f"Variable {text[start : end + 1]} is not defined on line {line_number}",
                line_number=line_number,
            )
        else:
            parts.append(value)
        pos = end + 1
    parts.append(text[pos:])
    return Expansion(value="".join(parts), ok=unresolved == 0)
