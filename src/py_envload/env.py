"""Environment stores — where loaded variables end up.

Every process has an environment: a set of ``KEY=VALUE`` string pairs
inherited from its parent.  Loading a ``.env`` file is nothing more than
writing extra pairs into that block before the rest of the program
starts reading it.

The loader never touches ``os.environ`` directly.  It talks to an
``EnvironmentStore`` — anything with ``get``, ``set`` and ``in`` —
so the parsing and expansion logic can be exercised against a plain
dictionary:

    - ``Environment`` — an independent, in-memory store.
    - ``OsEnvironment`` — the real process environment.

Key design properties:
    - **Strings only** — both keys and values are strings (no types).
    - **Empty is not missing** — a variable set to ``""`` still exists.
    - **No locking** — a load is expected to run once at startup, before
      other threads read the environment.  Callers must not race two
      loads, or a load and other environment writes, against each other.
"""

import os
from typing import Protocol


class EnvironmentStore(Protocol):
    """The capability the loader needs from an environment."""

    def get(self, key: str, default: str | None = None) -> str | None:
        """Return the value for *key*, or *default* if not set."""
        ...

    def set(self, key: str, value: str) -> None:
        """Set *key* to *value* (creates or overwrites)."""
        ...

    def __contains__(self, key: object) -> bool:
        """Return True if *key* is set, even to an empty string."""
        ...


class Environment:
    """A key-value store for environment variables.

    Each instance is an independent copy — modifying one does not
    affect any other or the real process environment.
    """

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        """Create an environment, optionally pre-populated.

        Args:
            initial: Starting variables (copied, not referenced).

        """
        self._vars: dict[str, str] = dict(initial) if initial else {}

    def get(self, key: str, default: str | None = None) -> str | None:
        """Return the value for *key*, or *default* if not set."""
        return self._vars.get(key, default)

    def set(self, key: str, value: str) -> None:
        """Set *key* to *value* (creates or overwrites)."""
        self._vars[key] = value

    def delete(self, key: str) -> None:
        """Remove *key* from the environment.

        Raises:
            KeyError: If *key* does not exist.

        """
        del self._vars[key]

    def items(self) -> list[tuple[str, str]]:
        """Return all (key, value) pairs."""
        return list(self._vars.items())

    def copy(self) -> "Environment":
        """Return an independent copy of this environment."""
        return Environment(initial=self._vars)

    def __contains__(self, key: object) -> bool:
        """Return True if *key* is set."""
        return key in self._vars

    def __len__(self) -> int:
        """Return the number of variables."""
        return len(self._vars)


class OsEnvironment:
    """The live process environment, seen through ``os.environ``.

    Writes are visible to child processes started afterwards.  Invalid
    names (empty, or containing ``=`` or NUL) are rejected by the
    operating system layer with ``ValueError``.
    """

    def get(self, key: str, default: str | None = None) -> str | None:
        """Return the value for *key*, or *default* if not set."""
        return os.environ.get(key, default)

    def set(self, key: str, value: str) -> None:
        """Set *key* to *value* in the process environment.

        Raises:
            ValueError: If the platform refuses the name or value.

        """
        if not key or "=" in key:
            msg = f"illegal environment variable name {key!r}"
            raise ValueError(msg)
        os.environ[key] = value

    def __contains__(self, key: object) -> bool:
        """Return True if *key* is set in the process environment."""
        return key in os.environ
