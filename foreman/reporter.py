"""Progress reporting for scaffolding steps.

Scaffolding components report what they are doing through a ``Reporter``:
a category (``"Composer"``, ``"Foreman"``, ...) and a message. The build
orchestrator decides where those lines end up.
"""

import logging
import sys
from typing import Protocol, TextIO

logger = logging.getLogger(__name__)


class Reporter(Protocol):
    def comment(self, category: str, message: str) -> None: ...


class ConsoleReporter:
    """Writes ``[category] message`` lines to a text stream."""

    def __init__(self, stream: TextIO | None = None):
        self.stream = stream if stream is not None else sys.stdout

    def comment(self, category: str, message: str) -> None:
        try:
            print(f"[{category}] {message}", file=self.stream, flush=True)
        except (OSError, ValueError) as e:
            # Reporting must not fail the step it annotates
            logger.warning(f"Could not report {category!r} message: {e}")
