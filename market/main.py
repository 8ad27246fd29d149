"""
==============================================================================
Online Market - Console Entry Point
==============================================================================

Reads catalog commands line by line and writes one result line per
command, stopping at a line whose first token is "end" or at end of input.

Usage:
------
    online-market < commands.txt
    python -m market --input commands.txt --log-level INFO

Example session:
---------------
    add A 10 food
    add B 5 food
    filter by type food
    end

    Ok: Product A added successfully
    Ok: Product B added successfully
    Ok: B(5), A(10)

==============================================================================
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional, TextIO

from market.catalog import ProductStore
from market.commands import CommandDispatcher
from market.config import Settings, get_settings


LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

logger = logging.getLogger(__name__)


# ============================================================================
# APPLICATION
# ============================================================================

class Application:
    """
    Console application wiring one store to one dispatcher.

    Handles:
    - Reading command lines from an input stream
    - Writing exactly one output line per command
    - Stopping on "end" or end of input
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        stdin: Optional[TextIO] = None,
        stdout: Optional[TextIO] = None
    ) -> None:
        self._settings = settings or get_settings()
        self._stdin = stdin or sys.stdin
        self._stdout = stdout or sys.stdout
        self._store = ProductStore()
        self._dispatcher = CommandDispatcher(self._store)

    @property
    def store(self) -> ProductStore:
        return self._store

    def run(self) -> int:
        """Process commands until "end"; returns the exit code."""
        logger.info(f"Starting {self._settings.app_name}")
        handled = 0

        for raw_line in self._stdin:
            line = raw_line.strip()
            if not line:
                continue

            output = self._dispatcher.handle_line(line)
            if output is None:
                break

            self._stdout.write(output + "\n")
            handled += 1

        self._stdout.flush()
        logger.info(f"Processed {handled} commands, {len(self._store)} products stored")
        return 0


# ============================================================================
# ENTRY POINT
# ============================================================================

def _build_arg_parser(settings: Settings) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="online-market",
        description="In-memory product catalog driven by line commands"
    )
    parser.add_argument(
        "--input",
        type=Path,
        default=None,
        help="Read commands from FILE instead of standard input"
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        default=settings.effective_log_level,
        help="Diagnostics level on stderr (default: %(default)s)"
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    settings = get_settings()
    args = _build_arg_parser(settings).parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format=LOG_FORMAT,
        stream=sys.stderr
    )

    if args.input is None:
        return Application(settings).run()

    with args.input.open("r", encoding="utf-8") as stream:
        return Application(settings, stdin=stream).run()


if __name__ == "__main__":
    sys.exit(main())
