"""Define utilities for logging and recording diagnostics while solving motion sequences."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from rich.console import Console

logger = logging.getLogger(__name__)
console = Console()


@dataclass(frozen=True)
class DiagnosticEntry:
    """A single recorded diagnostic message."""

    level: int
    """Logging level of the message (e.g., `logging.WARNING`)."""

    message: str


@dataclass
class SequenceDiagnostics:
    """A diagnostics channel passed explicitly into each sequencing component.

    Messages are forwarded to the bound logger; warnings are also recorded so that callers can
    inspect degraded behavior (e.g., disabled blends) after a solve completes.
    """

    logger: logging.Logger = field(default=logger)
    entries: list[DiagnosticEntry] = field(default_factory=list)

    @classmethod
    def for_module(cls, module_name: str) -> SequenceDiagnostics:
        """Construct a diagnostics channel bound to the named module's logger."""
        return cls(logger=logging.getLogger(module_name))

    def debug(self, message: str) -> None:
        """Log a debug-level message (not recorded)."""
        self.logger.debug(message)

    def info(self, message: str) -> None:
        """Log an info-level message (not recorded)."""
        self.logger.info(message)

    def warning(self, message: str) -> None:
        """Log and record a warning message."""
        self.logger.warning(message)
        self.entries.append(DiagnosticEntry(logging.WARNING, message))

    def error(self, message: str) -> None:
        """Log and record an error message."""
        self.logger.error(message)
        self.entries.append(DiagnosticEntry(logging.ERROR, message))

    @property
    def warnings(self) -> list[str]:
        """Retrieve the messages of all recorded warnings, in the order they were emitted."""
        return [e.message for e in self.entries if e.level == logging.WARNING]

    def clear(self) -> None:
        """Discard all recorded entries."""
        self.entries.clear()
