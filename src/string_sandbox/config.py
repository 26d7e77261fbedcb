"""Sandbox configuration.

A sandbox takes a small, immutable bundle of options when it is
created, the same way a kernel image carries its boot arguments.
Nothing here changes *what* the mapping operations do; the options only
control how much of their history is written to the audit log.
"""

from dataclasses import dataclass

from string_sandbox.logging import LogLevel


@dataclass(frozen=True)
class SandboxConfig:
    """Options for a ``MapSandbox``.

    Attributes:
        audit: Record mutations in the sandbox's audit log.
        min_log_level: Lowest severity written to the audit log.

    """

    audit: bool = True
    min_log_level: LogLevel = LogLevel.DEBUG
