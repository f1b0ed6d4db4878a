"""
Payment Decider - The aggregate contract exposed to callers

Bundles initial state, evolve and decide into one Decider value and adds
the glue callers use day to day:

    hydrate(events)                 fold history into a PaymentState
    process_command(command, events) hydrate, then decide
    evaluate(command, state)         decide without raising
    evaluate_replay(command, events) replay-decide without raising

For any valid history, process_command(c, h) == decide_replay(c, h).
"""

from typing import Iterable, Literal, Union

from pydantic import BaseModel

from payment_decider.kernel.decider import Decider
from payment_decider.kernel.errors import DomainRuleViolation, ViolationReason
from payment_decider.payment.commands import PaymentCommand
from payment_decider.payment.decide import decide
from payment_decider.payment.events import PaymentEvent
from payment_decider.payment.evolve import INITIAL_STATE, evolve
from payment_decider.payment.models import PaymentState
from payment_decider.payment.replay import decide_replay

payment_decider: Decider[PaymentCommand, PaymentEvent, PaymentState] = Decider(
    initial_state=INITIAL_STATE,
    evolve=evolve,
    decide=decide,
)


def hydrate(events: Iterable[PaymentEvent]) -> PaymentState:
    """
    Fold a single payment's history into its current state

    Deterministic and order-sensitive: events must be in append order and
    belong to one payment (filter shared history with events_for() first).
    """
    return payment_decider.fold(events)


def process_command(
    command: PaymentCommand, events: Iterable[PaymentEvent]
) -> list[PaymentEvent]:
    """
    Hydrate the history, then decide the command against the snapshot

    Raises:
        DomainRuleViolation: If the command breaks a business rule
    """
    return payment_decider.process(command, events)


class Accepted(BaseModel):
    """The command was accepted; `events` are to be appended in order"""

    outcome: Literal["accepted"] = "accepted"
    events: list[PaymentEvent]

    model_config = {"frozen": True}


class Rejected(BaseModel):
    """The command was rejected; nothing is to be appended"""

    outcome: Literal["rejected"] = "rejected"
    reason: ViolationReason
    message: str

    model_config = {"frozen": True}


Decision = Union[Accepted, Rejected]


def _rejected(violation: DomainRuleViolation) -> Rejected:
    return Rejected(reason=violation.reason, message=violation.message)


def evaluate(command: PaymentCommand, state: PaymentState) -> Decision:
    """Folding decision as a typed result instead of an exception"""
    try:
        return Accepted(events=decide(command, state))
    except DomainRuleViolation as e:
        return _rejected(e)


def evaluate_replay(
    command: PaymentCommand, history: Iterable[PaymentEvent]
) -> Decision:
    """Replay decision as a typed result instead of an exception"""
    try:
        return Accepted(events=decide_replay(command, history))
    except DomainRuleViolation as e:
        return _rejected(e)
