"""
Payment Projections - Read models for query operations

Projections are built from events and never decide: they never reject and
never touch the history they are given.

build_payment_status: summary of one payment from its history
PaymentStatusRegistry: summaries of every payment seen in a shared history
"""

from typing import Iterable

from payment_decider.payment.decider import hydrate
from payment_decider.payment.events import PaymentEvent, events_for
from payment_decider.payment.evolve import INITIAL_STATE, evolve
from payment_decider.payment.models import PaymentState, PaymentStatus, PaymentStatusKind


def status_of(state: PaymentState) -> PaymentStatusKind:
    """Status by precedence: cancelled > refunded > captured > authorised > created"""
    if state.is_cancelled:
        return PaymentStatusKind.CANCELLED
    if state.is_fully_refunded:
        return PaymentStatusKind.REFUNDED
    if state.is_captured:
        return PaymentStatusKind.CAPTURED
    if state.is_authorised:
        return PaymentStatusKind.AUTHORISED
    return PaymentStatusKind.CREATED


def summarize(payment_id: str, state: PaymentState) -> PaymentStatus | None:
    """Summary of a folded state, or None if the payment was never created"""
    if not state.is_created:
        return None

    return PaymentStatus(
        id=payment_id,
        amount=state.created_amount,
        status=status_of(state),
        refunded_amount=state.refunded_amount,
        remaining_refundable_amount=state.remaining_refundable_amount(),
    )


def build_payment_status(
    payment_id: str, events: Iterable[PaymentEvent]
) -> PaymentStatus | None:
    """
    Build the read-only summary of one payment

    Args:
        payment_id: Payment to summarize
        events: History in append order (other payments' events are ignored)

    Returns:
        PaymentStatus, or None if the payment was never created
    """
    return summarize(payment_id, hydrate(events_for(payment_id, events)))


class PaymentStatusRegistry:
    """
    Status projection over a history shared by many payments

    Keeps one folded PaymentState per payment id and derives summaries on
    query. Built from all five payment events.

    Query methods: get, list_by_status, list_all
    """

    def __init__(self) -> None:
        self.states: dict[str, PaymentState] = {}

    def apply_event(self, event: PaymentEvent) -> None:
        """
        Apply an event to update the projection

        Args:
            event: Event to apply
        """
        current = self.states.get(event.id, INITIAL_STATE)
        self.states[event.id] = evolve(current, event)

    def apply_events(self, events: Iterable[PaymentEvent]) -> None:
        for event in events:
            self.apply_event(event)

    # ========== Query Methods ==========

    def get(self, payment_id: str) -> PaymentStatus | None:
        """
        Get payment summary by ID

        Returns:
            PaymentStatus or None if the payment was never created
        """
        state = self.states.get(payment_id)
        if state is None:
            return None
        return summarize(payment_id, state)

    def list_by_status(self, status: PaymentStatusKind) -> list[PaymentStatus]:
        """List summaries of all payments currently in `status`"""
        return [summary for summary in self.list_all() if summary.status == status]

    def list_all(self) -> list[PaymentStatus]:
        """List summaries of all created payments, in first-seen order"""
        summaries = []
        for payment_id, state in self.states.items():
            summary = summarize(payment_id, state)
            if summary is not None:
                summaries.append(summary)
        return summaries
