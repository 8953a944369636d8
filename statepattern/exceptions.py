"""
Exceptions raised by the state pattern components.
"""


class StatePatternError(Exception):
    """Base exception for state pattern errors."""

    pass


class StateNotSetError(StatePatternError):
    """Raised when a Context is used before any state has been assigned."""

    def __init__(self, message="Context has no state assigned"):
        self.message = message
        super().__init__(self.message)


class DetachedStateError(StatePatternError):
    """Raised when a State reaches for its context before a Context adopted it."""

    def __init__(self, state_name: str):
        self.state_name = state_name
        self.message = f"State {state_name} is not attached to a context"
        super().__init__(self.message)
