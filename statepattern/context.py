"""
The Context whose behavior depends on its current State.
"""

import logging
from typing import Callable, List, Optional

from .base import State
from .exceptions import StateNotSetError

# Set up logger for this module
logger = logging.getLogger(__name__)

Observer = Callable[[str], None]


class Context:
    """Holds the current State and delegates requests to it.

    Args:
        state: Initial state. Adopted through ``transition_to`` so the
            initial assignment is traced like any other transition.
        observer: Optional callable receiving every trace line. Trace lines
            are always logged at INFO regardless.

    Each State instance belongs to one Context; passing the same instance to
    a second Context re-attaches it there.
    """

    def __init__(self, state: State, observer: Optional[Observer] = None):
        self._state: Optional[State] = None
        self.observer = observer
        self.history: List[str] = []
        self.transition_to(state)

    @property
    def state(self) -> State:
        """The current state."""
        if self._state is None:
            raise StateNotSetError()
        return self._state

    def transition_to(self, state: State) -> None:
        """Replace the current state. The previous state is dropped."""
        self.trace(f"Context: Transition to {state.name}.")
        self._state = state
        state.set_context(self)
        self.history.append(state.name)

    def request_one(self) -> None:
        state = self.state
        logger.debug(f"request_one → {state.name}")
        state.handle_one()

    def request_two(self) -> None:
        state = self.state
        logger.debug(f"request_two → {state.name}")
        state.handle_two()

    def trace(self, message: str) -> None:
        """Emit one trace line to the log and the observer."""
        logger.info(message)
        if self.observer is not None:
            self.observer(message)

    def __repr__(self) -> str:
        current = self._state.name if self._state is not None else None
        return f"<Context state={current}>"
