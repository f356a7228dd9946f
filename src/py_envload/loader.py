"""The ``.env`` loader — read a file, fill the environment.

Configuration often lives outside the program: database hosts, API
keys, feature switches.  A ``.env`` file keeps those values next to the
project without a full configuration framework::

    DATABASE_HOST=localhost
    DATABASE_USERNAME=user
    DATABASE_PASSWORD="antipasto"

``load()`` reads such a file line by line and sets each variable in
the process environment; ``get()`` reads one back with a default.

Each line goes through the same pipeline:

1. **Split** at the first ``=`` (see ``parser.py``).  No ``=`` means the
   line is ill-formed.
2. **Unquote** one layer of matching ``"`` or ``'``.
3. **Expand** ``${NAME}`` references against the live environment (see
   ``expand.py``).  Any unresolved reference makes the line ill-formed.
4. **Bind** the result, unless the policy is ``PRESERVE`` and the name
   already exists.

Loading never raises.  A missing file is a silent no-op, because the
file is optional; a bad line is reported and skipped, and the rest of
the file still loads.  A load is not safe to run concurrently with
another load or with other environment writes; callers run it once,
early, at startup.
"""

from dataclasses import dataclass, field
from enum import StrEnum
from pathlib import Path

from py_envload.env import EnvironmentStore, OsEnvironment
from py_envload.expand import expand
from py_envload.logging import Logger, LogLevel
from py_envload.parser import split_assignment, strip_quotes

DEFAULT_PATH = ".env"
DEFAULT_ENCODING = "utf-8"


class OverwritePolicy(StrEnum):
    """What to do when a variable already exists in the environment.

    OVERWRITE replaces it with the file's value; PRESERVE keeps the
    existing value, so the shell can override the file.
    """

    OVERWRITE = "overwrite"
    PRESERVE = "preserve"


@dataclass
class LoadResult:
    """Summary of one load pass.

    Attributes:
        found: Whether the file could be opened at all.
        applied: Names written to the environment, in file order.
        preserved: Names left untouched because of ``PRESERVE``.
        skipped: 1-based line numbers reported as ill-formed.

    """

    found: bool = False
    applied: list[str] = field(default_factory=list)  # pyright: ignore[reportUnknownVariableType]
    preserved: list[str] = field(default_factory=list)  # pyright: ignore[reportUnknownVariableType]
    skipped: list[int] = field(default_factory=list)  # pyright: ignore[reportUnknownVariableType]


class Loader:
    """Apply ``.env`` files to an environment store.

    The loader holds no state between calls except its collaborators:
    the store it writes into and the logger it reports to.
    """

    def __init__(
        self,
        env: EnvironmentStore | None = None,
        logger: Logger | None = None,
        *,
        encoding: str = DEFAULT_ENCODING,
    ) -> None:
        """Create a loader.

        Args:
            env: Target store (defaults to the process environment).
            logger: Diagnostics sink (defaults to one echoing to stdout).
            encoding: Text encoding of the files to read.

        """
        self._env: EnvironmentStore = env if env is not None else OsEnvironment()
        self._logger = logger if logger is not None else Logger()
        self._encoding = encoding

    @property
    def env(self) -> EnvironmentStore:
        """Return the store this loader writes into."""
        return self._env

    @property
    def logger(self) -> Logger:
        """Return the logger receiving this loader's diagnostics."""
        return self._logger

    def load(
        self,
        path: str | Path = DEFAULT_PATH,
        policy: OverwritePolicy = OverwritePolicy.OVERWRITE,
    ) -> LoadResult:
        """Read *path* and bind every well-formed assignment.

        Args:
            path: The file to read.
            policy: Whether existing variables may be replaced.

        Returns:
            A summary of what was applied, preserved and skipped.

        """
        result = LoadResult()
        try:
            fh = Path(path).open(encoding=self._encoding, errors="replace")
        except OSError:
            return result

        result.found = True
        with fh:
            for line_number, line in enumerate(fh, start=1):
                self._load_line(line_number, line.removesuffix("\n"), policy, result)
        return result

    def get(self, name: str, default: str = "") -> str:
        """Return the value of *name*, or *default* if it is not set."""
        value = self._env.get(name)
        return default if value is None else value

    def _load_line(
        self,
        line_number: int,
        line: str,
        policy: OverwritePolicy,
        result: LoadResult,
    ) -> None:
        assignment = split_assignment(line)
        if assignment is None:
            self._reject(line_number, line, result)
            return

        expansion = expand(strip_quotes(assignment.raw_value), line_number, self._env, self._logger)
        if not expansion.ok:
            self._reject(line_number, line, result)
            return

        name = assignment.name
        if policy is OverwritePolicy.PRESERVE and name in self._env:
            self._logger.log(
                LogLevel.DEBUG,
                f"Preserving existing variable {name} on line {line_number}",
                line_number=line_number,
            )
            result.preserved.append(name)
            return

        try:
            self._env.set(name, expansion.value)
        except ValueError:
            # refused by the platform (empty name, NUL byte)
            self._reject(line_number, line, result)
            return
        self._logger.log(LogLevel.INFO, f"Set {name} on line {line_number}", line_number=line_number)
        result.applied.append(name)

    def _reject(self, line_number: int, line: str, result: LoadResult) -> None:
        self._logger.log(
            LogLevel.WARNING,
            f"Ignoring ill-formed assignment on line {line_number}: '{line}'",
            line_number=line_number,
        )
        result.skipped.append(line_number)


def load(
    path: str | Path = DEFAULT_PATH,
    policy: OverwritePolicy = OverwritePolicy.OVERWRITE,
) -> LoadResult:
    """Load *path* into the process environment.

    Diagnostics for ill-formed lines are printed to standard output.

    Args:
        path: The ``.env`` file to read; a missing file is ignored.
        policy: ``PRESERVE`` keeps variables that are already set.

    Returns:
        A summary of the load.

    """
    return Loader().load(path, policy)


def get(name: str, default: str = "") -> str:
    """Return process environment variable *name*, or *default*."""
    return Loader().get(name, default)
