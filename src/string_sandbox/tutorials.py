"""Guided lessons for learning mapping operations.

Each lesson drives a **real sandbox** step by step and narrates what
happened, so the operations feel concrete: you see the reversed keys
appear, the sorted listings change, and entries disappear.

Lessons are aimed at someone who knows basic Python but is new to
thinking about dictionaries as a data structure.  Each one:

1. Opens with a **real-world analogy**.
2. Walks through **numbered steps** against the sandbox.
3. Ends with a **summary** and a pointer to the next lesson.
"""

from __future__ import annotations

from string_sandbox.mapping import reverse
from string_sandbox.sandbox import MapSandbox

_LESSON_ORDER: list[str] = [
    "maps",
    "transforms",
]


class TutorialRunner:
    """Run lessons that teach mapping operations on a live sandbox."""

    def __init__(self, sandbox: MapSandbox | None = None) -> None:
        """Create a tutorial runner.

        Args:
            sandbox: The sandbox the lessons operate on.  A fresh one
                is created when None.  Every lesson starts with
                ``reset``, so any entries already in it are wiped.

        """
        self._sandbox = sandbox if sandbox is not None else MapSandbox()
        self._lessons: dict[str, str] = {
            "maps": "Maps — storing, listing, and removing strings",
            "transforms": "Transforms — rebuilding a whole map at once",
        }

    @property
    def sandbox(self) -> MapSandbox:
        """Return the sandbox the lessons run against."""
        return self._sandbox

    def list_lessons(self) -> list[str]:
        """Return sorted list of available lesson names."""
        return sorted(self._lessons)

    def describe(self, name: str) -> str:
        """Return the one-line title of a lesson.

        Raises:
            KeyError: If the lesson name is not recognised.

        """
        if name not in self._lessons:
            msg = f"Unknown lesson: {name}"
            raise KeyError(msg)
        return self._lessons[name]

    def run(self, name: str) -> str:
        """Run a lesson by name and return its formatted output.

        Args:
            name: The lesson name (e.g. ``"maps"``).

        Returns:
            Multi-line string with the lesson content.

        Raises:
            KeyError: If the lesson name is not recognised.

        """
        runners = {
            "maps": self._lesson_maps,
            "transforms": self._lesson_transforms,
        }
        runner = runners.get(name)
        if runner is None:
            msg = f"Unknown lesson: {name}"
            raise KeyError(msg)
        return runner()

    def run_all(self) -> str:
        """Run all lessons in order and return combined output."""
        parts: list[str] = []
        for name in _LESSON_ORDER:
            parts.append(self.run(name))
            parts.append("")
        return "\n".join(parts)

    # -- Individual lessons ---------------------------------------------------

    def _lesson_maps(self) -> str:
        """Teach insertion, ordered listings, extrema, and removal."""
        sandbox = self._sandbox
        lines: list[str] = [
            "=== Lesson: Maps ===",
            "",
            "Think of a map like a coat check. You hand over a coat and get a",
            "ticket; later the ticket is all you need to find the coat again.",
            "In this sandbox the ticket is the coat's name spelled backwards.",
            "",
        ]

        lines.append("Step 1: Start from an empty map")
        sandbox.reset([])
        lines.append(f"  Entries: {len(sandbox)}")
        lines.append(f"  First value: {sandbox.first_value()} (nothing to compare)")
        lines.append("")

        lines.append("Step 2: Insert some strings")
        for word in ("hola", "ser", "mapa"):
            sandbox.insert(word)
            lines.append(f"  insert({word!r}) → stored under key {reverse(word)!r}")
        lines.append("")

        lines.append("Step 3: List them in order")
        lines.append(f"  Values, ascending: {sandbox.values_sorted()}")
        lines.append(f"  Keys, descending:  {sandbox.keys_sorted_descending()}")
        lines.append(f"  First value: {sandbox.first_value()!r}")
        lines.append(f"  Last value:  {sandbox.last_value()!r}")
        lines.append("")

        lines.append("Step 4: Remove entries")
        sandbox.remove_by_key("res")
        lines.append("  remove_by_key('res') → 'ser' is gone")
        sandbox.remove_by_value("hola")
        lines.append("  remove_by_value('hola') → had to search every entry")
        sandbox.remove_by_value("nope")
        lines.append("  remove_by_value('nope') → nothing matched, nothing happened")
        lines.append(f"  Values now: {sandbox.values_sorted()}")
        lines.append("")

        lines.append("Summary:")
        lines.append("  Lookup by key is direct; lookup by value means scanning.")
        lines.append("  Next: run the 'transforms' lesson to change the whole map at once.")
        return "\n".join(lines)

    def _lesson_transforms(self) -> str:
        """Teach reset, key rewriting, and membership checks."""
        sandbox = self._sandbox
        lines: list[str] = [
            "=== Lesson: Transforms ===",
            "",
            "Sometimes you relabel every drawer in a cabinet at once. The",
            "contents stay put; only the labels change. If two labels end up",
            "the same, one drawer's contents get lost.",
            "",
        ]

        lines.append("Step 1: Reset from a list of mixed objects")
        sandbox.reset([42, "ab", "Lista"])
        lines.append("  reset([42, 'ab', 'Lista']) → each object becomes a string first")
        lines.append(f"  Values: {sandbox.values_sorted()}")
        lines.append(f"  Distinct values: {sandbox.count_distinct_values()}")
        lines.append("")

        lines.append("Step 2: Upper case the keys")
        lines.append(f"  Preview without changing anything: {sorted(sandbox.keys_uppercased())}")
        sandbox.uppercase_all_keys()
        lines.append(f"  After uppercase_all_keys(): {sandbox.keys_sorted_descending()}")
        lines.append("")

        lines.append("Step 3: Check membership")
        present = sandbox.contains_all_values(["42", "ab"])
        missing = sandbox.contains_all_values(["42", "zz"])
        lines.append(f"  contains_all_values(['42', 'ab']) → {present}")
        lines.append(f"  contains_all_values(['42', 'zz']) → {missing}")
        lines.append(f"  contains_all_values([]) → {sandbox.contains_all_values([])}")
        lines.append("")

        lines.append("Summary:")
        lines.append("  Rebuilding a map keeps values but can merge colliding keys.")
        lines.append("  Check the audit log to see every change you just made.")
        return "\n".join(lines)
