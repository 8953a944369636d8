#!/usr/bin/env python3
"""
Example demonstrating logging in statepattern.

The Context emits its trace at two levels:
- INFO: every trace line (transitions and handler narration)
- DEBUG: which state each request was dispatched to
No observer is attached here, so the log is the only output.
"""

import logging

from statepattern import Context, ConcreteStateA, ConcreteStateB
from statepattern.demo import setup_logging


if __name__ == "__main__":
    setup_logging(logging.DEBUG)

    print("=== Logging Example for statepattern ===\n")

    print("1. Trigger requests - A moves to B and back:")
    context = Context(ConcreteStateA())
    context.request_one()
    context.request_two()
    print(f"   History: {context.history}\n")

    print("2. Non-trigger requests - B ignores request one:")
    context = Context(ConcreteStateB())
    for _ in range(3):
        context.request_one()
    print(f"   State: {context.state.name}\n")
