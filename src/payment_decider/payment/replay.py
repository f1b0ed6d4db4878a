"""
Payment Replay - Stateless decider over the raw history

No snapshot is built. Every question the rule table asks is answered by
scanning the payment's events, so each decision costs O(history length).
Kept alongside the folding decider as the reference it must agree with.
"""

from typing import Iterable

from payment_decider.payment.commands import PaymentCommand
from payment_decider.payment.decide import decide_with
from payment_decider.payment.events import (
    PaymentAuthorised,
    PaymentCancelled,
    PaymentCaptured,
    PaymentCreated,
    PaymentEvent,
    PaymentRefunded,
    events_for,
)


class HistoryFacts:
    """
    PaymentFacts answered directly from one payment's events

    The history is filtered to `payment_id` on construction, so a history
    shared between payments is safe to pass in.
    """

    def __init__(self, payment_id: str, events: Iterable[PaymentEvent]) -> None:
        self.payment_id = payment_id
        self.events = events_for(payment_id, events)

    def _has(self, event_type: type) -> bool:
        return any(isinstance(event, event_type) for event in self.events)

    @property
    def is_created(self) -> bool:
        return self._has(PaymentCreated)

    @property
    def created_amount(self) -> int:
        # First creation wins; valid history has only one
        for event in self.events:
            if isinstance(event, PaymentCreated):
                return event.amount
        return 0

    @property
    def is_authorised(self) -> bool:
        return self._has(PaymentAuthorised)

    @property
    def is_captured(self) -> bool:
        return self._has(PaymentCaptured)

    @property
    def is_cancelled(self) -> bool:
        return self._has(PaymentCancelled)

    @property
    def refunded_amount(self) -> int:
        return sum(
            event.amount for event in self.events if isinstance(event, PaymentRefunded)
        )


def decide_replay(
    command: PaymentCommand, history: Iterable[PaymentEvent]
) -> list[PaymentEvent]:
    """
    Replay decider: decide a command by scanning the full history

    Args:
        command: Command to decide
        history: Previously accepted events in append order; events for
            other payments are ignored

    Returns:
        The new events to append

    Raises:
        DomainRuleViolation: If the command breaks a business rule
    """
    return decide_with(command, HistoryFacts(command.id, history))
