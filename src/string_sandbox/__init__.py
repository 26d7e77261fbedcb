"""String Sandbox — practice dictionary operations on reversed strings.

Re-exports public symbols so callers can write::

    from string_sandbox import MapSandbox
"""

from string_sandbox.config import SandboxConfig
from string_sandbox.logging import LogEntry, Logger, LogLevel
from string_sandbox.mapping import ReversedStringMapping, reverse
from string_sandbox.sandbox import MapSandbox
from string_sandbox.tutorials import TutorialRunner

__all__ = [
    "LogEntry",
    "LogLevel",
    "Logger",
    "MapSandbox",
    "ReversedStringMapping",
    "SandboxConfig",
    "TutorialRunner",
    "reverse",
]
