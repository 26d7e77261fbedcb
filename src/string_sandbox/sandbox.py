"""Map sandbox — practice operations over a reversed-string mapping.

The sandbox is a playground for the everyday things you do with a
dictionary: put things in, take things out, look things up, list them
in order, and transform the whole collection at once.

Think of it like a coat check where the ticket number is the coat's
name spelled backwards.  Hand over "hola" and the attendant files it
under "aloh".  You can ask for every coat in alphabetical order, ask
which coat comes first or last, or return a ticket to take a coat out.

Every operation works on a single ``ReversedStringMapping``.  Queries
read copies of it; mutations go through its methods and are written to
the sandbox's audit log.

Two operations depend on iteration order, which is not part of the
contract:

- ``remove_by_value`` removes the *first* matching entry it meets.
- ``uppercase_all_keys`` lets the *later* entry win when two keys
  upper case to the same string.

Both are left order-dependent rather than made deterministic.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from string_sandbox.config import SandboxConfig
from string_sandbox.logging import Logger, LogLevel
from string_sandbox.mapping import ReversedStringMapping, require_str

if TYPE_CHECKING:
    from collections.abc import Iterable

_SOURCE = "sandbox"


class MapSandbox:
    """A sandbox holding one reversed-string mapping.

    Usage::

        sandbox = MapSandbox()
        sandbox.insert("hola")
        sandbox.insert("ser")
        sandbox.values_sorted()           # ["hola", "ser"]
        sandbox.keys_sorted_descending()  # ["res", "aloh"]

    """

    def __init__(self, config: SandboxConfig | None = None) -> None:
        """Create an empty sandbox.

        Args:
            config: Sandbox options.  None means the defaults.

        """
        self._config = config if config is not None else SandboxConfig()
        self._mapping = ReversedStringMapping()
        self._logger = Logger(min_level=self._config.min_log_level)

    @property
    def config(self) -> SandboxConfig:
        """Return the options this sandbox was created with."""
        return self._config

    @property
    def logger(self) -> Logger:
        """Return the audit log."""
        return self._logger

    # -- Queries --------------------------------------------------------------

    def values_sorted(self) -> list[str]:
        """Return every value in ascending lexicographic order."""
        return sorted(self._mapping.values())

    def keys_sorted_descending(self) -> list[str]:
        """Return every key in descending lexicographic order."""
        return sorted(self._mapping.keys(), reverse=True)

    def first_value(self) -> str | None:
        """Return the smallest value, or None if the sandbox is empty.

        This compares *values*, not keys.
        """
        values = self._mapping.values()
        return min(values) if values else None

    def last_value(self) -> str | None:
        """Return the largest value, or None if the sandbox is empty."""
        values = self._mapping.values()
        return max(values) if values else None

    def keys_uppercased(self) -> list[str]:
        """Return the keys upper cased, in no particular order.

        The mapping itself is left unchanged.
        """
        return [key.upper() for key in self._mapping.keys()]

    def count_distinct_values(self) -> int:
        """Return how many different values are stored."""
        return len(set(self._mapping.values()))

    def contains_all_values(self, candidates: Iterable[str]) -> bool:
        """Return True if every candidate is one of the stored values.

        An empty *candidates* is trivially contained.

        Raises:
            TypeError: If any candidate is not a string.

        """
        candidates = list(candidates)
        for candidate in candidates:
            require_str(candidate, name="candidate")
        values = set(self._mapping.values())
        return all(candidate in values for candidate in candidates)

    def items(self) -> list[tuple[str, str]]:
        """Return all (key, value) pairs."""
        return self._mapping.items()

    def __len__(self) -> int:
        """Return the number of entries."""
        return len(self._mapping)

    # -- Mutations ------------------------------------------------------------

    def insert(self, value: str) -> None:
        """Store *value* under its reversed form, overwriting any old entry.

        Raises:
            TypeError: If *value* is not a string.

        """
        require_str(value, name="value")
        key, previous = self._mapping.put(value)
        if previous is None:
            self._log(LogLevel.INFO, f"insert {key!r} → {value!r}")
        else:
            self._log(LogLevel.INFO, f"insert {key!r} → {value!r} (replaced {previous!r})")

    def remove_by_key(self, key: str) -> None:
        """Remove the entry stored under *key*; do nothing if it is absent."""
        removed = self._mapping.pop(key)
        if removed is None:
            self._log(LogLevel.DEBUG, f"remove key {key!r}: not present")
        else:
            self._log(LogLevel.INFO, f"remove key {key!r} → {removed!r}")

    def remove_by_value(self, value: str) -> None:
        """Remove one entry whose value is *value*; do nothing if none is.

        If several entries share the value, only the first one met in
        iteration order is removed.
        """
        key = self._mapping.pop_value(value)
        if key is None:
            self._log(LogLevel.DEBUG, f"remove value {value!r}: not present")
        else:
            self._log(LogLevel.INFO, f"remove value {value!r} (key {key!r})")

    def reset(self, objects: Iterable[object]) -> None:
        """Replace the contents with ``str(obj)`` for each object, in order.

        Args:
            objects: Anything; each item is converted with ``str``.

        """
        self._mapping.clear()
        self._log(LogLevel.INFO, "reset: cleared")
        for obj in objects:
            self.insert(str(obj))

    def uppercase_all_keys(self) -> None:
        """Rewrite every key in upper case, keeping the values."""
        collisions = self._mapping.uppercase_keys()
        self._log(LogLevel.INFO, f"uppercase keys ({len(self._mapping)} entries)")
        for key in collisions:
            self._log(LogLevel.WARNING, f"uppercase keys: collision on {key!r}")

    # -- Internals ------------------------------------------------------------

    def _log(self, level: LogLevel, message: str) -> None:
        if self._config.audit:
            self._logger.log(level, message, source=_SOURCE)
