"""
Concrete states.

A moves to B when it handles request one, B moves back to A when it handles
request two. The other request leaves each state where it is.
"""

from .base import State


class ConcreteStateA(State):

    def handle_one(self) -> None:
        self.context.trace(f"{self.name} handles request1.")
        self.context.trace(f"{self.name} wants to change the state of the context.")
        self.context.transition_to(ConcreteStateB())

    def handle_two(self) -> None:
        self.context.trace(f"{self.name} handles request2.")


class ConcreteStateB(State):

    def handle_one(self) -> None:
        self.context.trace(f"{self.name} handles request1.")

    def handle_two(self) -> None:
        self.context.trace(f"{self.name} handles request2.")
        self.context.trace(f"{self.name} wants to change the state of the context.")
        self.context.transition_to(ConcreteStateA())
