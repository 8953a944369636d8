"""
Client code for the state pattern.

Run with ``python -m statepattern`` or the ``statepattern-demo`` script.
Pass ``-v`` to also see the DEBUG log of each dispatched request.
"""

import argparse
import logging
from typing import List, Optional

from .context import Context, Observer
from .observers import console_observer
from .states import ConcreteStateA

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def setup_logging(level: int = logging.WARNING) -> None:
    """Set up logging configuration."""
    logging.basicConfig(level=level, format=LOG_FORMAT)


def run_demo(observer: Optional[Observer] = console_observer) -> Context:
    """Start in ConcreteStateA, then send request one and request two."""
    context = Context(ConcreteStateA(), observer=observer)
    context.request_one()
    context.request_two()
    return context


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        prog="statepattern-demo",
        description="Trace a Context switching between two states.",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true",
        help="show DEBUG logging alongside the trace",
    )
    args = parser.parse_args(argv)

    setup_logging(logging.DEBUG if args.verbose else logging.WARNING)
    run_demo()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
