"""
Generic Decider - a pure state machine as three values

A decider pairs a decision function (command + state -> new events) with a
fold function (state + event -> state) and the state the fold starts from.
Nothing here knows about payments; the Payment aggregate instantiates it.
"""

from dataclasses import dataclass
from functools import reduce
from typing import Callable, Generic, Iterable, TypeVar

C = TypeVar("C")
E = TypeVar("E")
S = TypeVar("S")


@dataclass(frozen=True)
class Decider(Generic[C, E, S]):
    """
    Bundle of initial state, evolve and decide

    Attributes:
        initial_state: State before any event has been applied
        evolve: Pure reduction of one event onto a state
        decide: Pure decision from a command and a state; raises on rejection
    """

    initial_state: S
    evolve: Callable[[S, E], S]
    decide: Callable[[C, S], list[E]]

    def fold(self, events: Iterable[E]) -> S:
        """Left-fold evolve over events, starting from the initial state"""
        return reduce(self.evolve, events, self.initial_state)

    def process(self, command: C, events: Iterable[E]) -> list[E]:
        """Fold history, then decide against the resulting state"""
        return self.decide(command, self.fold(events))
