"""
Base class for the states a Context can be in.
"""

from abc import ABC, abstractmethod
from typing import Optional, TYPE_CHECKING

from .exceptions import DetachedStateError

if TYPE_CHECKING:
    from .context import Context


class State(ABC):
    """Base class for all states.

    Declares the handlers every concrete state implements and keeps a
    back-reference to the Context that owns it. States use the
    back-reference to move the Context into another state.
    """

    _context: Optional['Context'] = None

    @property
    def context(self) -> 'Context':
        """The Context currently owning this state."""
        if self._context is None:
            raise DetachedStateError(self.name)
        return self._context

    def set_context(self, context: 'Context') -> None:
        self._context = context

    @abstractmethod
    def handle_one(self) -> None:
        """Handle the first request forwarded by the Context."""
        pass

    @abstractmethod
    def handle_two(self) -> None:
        """Handle the second request forwarded by the Context."""
        pass

    @property
    def name(self) -> str:
        """State name for tracing and history."""
        return self.__class__.__name__

    def __repr__(self) -> str:
        attached = self._context is not None
        return f"<{self.name} attached={attached}>"
