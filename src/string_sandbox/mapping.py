"""The reversed-string mapping — a dict whose keys are derived from values.

In this mapping you never choose a key yourself.  You hand over a
string, and its key is computed by reading that string backwards::

    "hola"  →  key "aloh"
    "ser"   →  key "res"

Key design properties:
    - **One way in** — ``put`` is the only method that adds an entry, so
      the ``key == reverse(value)`` rule holds for every entry it makes.
    - **Opaque storage** — the backing ``dict`` is never handed out.
      Callers get copies (``keys()``, ``values()``, ``items()``) and can
      only change the mapping through its methods.
    - **Unordered on purpose** — nothing here promises an order.  Any
      operation that needs one (sorted listings) sorts explicitly, and
      "first match" lookups follow whatever order iteration happens to
      give.

The one sanctioned exception to the reversal rule is
``uppercase_keys``: afterwards each key is ``reverse(value).upper()``.
"""


def reverse(text: str) -> str:
    """Return *text* with its characters in opposite order.

    Raises:
        TypeError: If *text* is not a string.

    """
    require_str(text, name="text")
    return text[::-1]


def require_str(value: object, *, name: str) -> None:
    """Raise TypeError unless *value* is a ``str``."""
    if not isinstance(value, str):
        msg = f"{name} must be a str, not {type(value).__name__}"
        raise TypeError(msg)


class ReversedStringMapping:
    """A string-to-string mapping keyed by the reversed form of each value."""

    def __init__(self) -> None:
        """Create an empty mapping."""
        self._entries: dict[str, str] = {}

    def put(self, value: str) -> tuple[str, str | None]:
        """Store *value* under its reversed form.

        An existing entry with the same key is overwritten, so the
        mapping may or may not grow.

        Args:
            value: The string to store.

        Returns:
            A ``(key, previous)`` pair: the key used and the value it
            held before, or None if the key was new.

        """
        key = reverse(value)
        previous = self._entries.get(key)
        self._entries[key] = value
        return key, previous

    def pop(self, key: str) -> str | None:
        """Remove the entry for *key* and return its value, or None if absent."""
        require_str(key, name="key")
        return self._entries.pop(key, None)

    def pop_value(self, value: str) -> str | None:
        """Remove the first entry whose value equals *value*.

        "First" is whatever iteration order the backing dict yields.
        At most one entry is removed even if several share the value.

        Returns:
            The key of the removed entry, or None if nothing matched.

        """
        require_str(value, name="value")
        for key, current in self._entries.items():
            if current == value:
                del self._entries[key]
                return key
        return None

    def clear(self) -> None:
        """Remove every entry."""
        self._entries.clear()

    def uppercase_keys(self) -> list[str]:
        """Rebuild the mapping with every key upper cased.

        When two keys upper case to the same string, the entry reached
        later in iteration order overwrites the earlier one.

        Returns:
            The upper-cased keys that collided, in the order they did.

        """
        rebuilt: dict[str, str] = {}
        collisions: list[str] = []
        for key, value in self._entries.items():
            upper = key.upper()
            if upper in rebuilt:
                collisions.append(upper)
            rebuilt[upper] = value
        self._entries = rebuilt
        return collisions

    def keys(self) -> list[str]:
        """Return a copy of the keys."""
        return list(self._entries)

    def values(self) -> list[str]:
        """Return a copy of the values (one per entry)."""
        return list(self._entries.values())

    def items(self) -> list[tuple[str, str]]:
        """Return a copy of the (key, value) pairs."""
        return list(self._entries.items())

    def __len__(self) -> int:
        """Return the number of entries."""
        return len(self._entries)
