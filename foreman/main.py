"""Main CLI entry point for foreman.

This module provides a Fire CLI that exposes the scaffolding tasks as commands.
"""

import logging
from typing import Any, Dict, Callable

import fire

from foreman import tasks

logger = logging.getLogger(__name__)


def setup_logging() -> None:
    """Set up logging configuration."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def main() -> Any:
    """Main entry point for the CLI."""
    setup_logging()
    commands: Dict[str, Callable] = {
        "update_composer": tasks.update_composer,
    }
    return fire.Fire(commands)


if __name__ == "__main__":
    main()
