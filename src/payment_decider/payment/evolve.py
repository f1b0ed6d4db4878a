"""
Payment Evolve - Folding events into state

evolve records facts; it never enforces rules and never rejects. Each event
kind replaces exactly one facet of the snapshot. The input snapshot is
frozen and left untouched, so callers may fold from a shared base state.
"""

from typing_extensions import assert_never

from payment_decider.payment.events import (
    PaymentAuthorised,
    PaymentCancelled,
    PaymentCaptured,
    PaymentCreated,
    PaymentEvent,
    PaymentRefunded,
)
from payment_decider.payment.models import (
    AuthorisedFacet,
    CancelledFacet,
    CapturedFacet,
    CreatedFacet,
    PaymentState,
    RefundedFacet,
)

INITIAL_STATE = PaymentState()


def initial_state() -> PaymentState:
    """State of a payment with no history: every facet zero/false"""
    return INITIAL_STATE


def evolve(state: PaymentState, event: PaymentEvent) -> PaymentState:
    """
    Apply one event to a state snapshot

    Args:
        state: Snapshot before the event
        event: Event to record

    Returns:
        New snapshot with only the event's facet replaced
    """
    if isinstance(event, PaymentCreated):
        return state.model_copy(
            update={"created": CreatedFacet(amount=event.amount, created=True)}
        )
    elif isinstance(event, PaymentAuthorised):
        return state.model_copy(update={"authorised": AuthorisedFacet(authorised=True)})
    elif isinstance(event, PaymentCaptured):
        return state.model_copy(update={"captured": CapturedFacet(captured=True)})
    elif isinstance(event, PaymentRefunded):
        refunded_amount = state.refunded.amount + event.amount
        created_amount = state.created.amount
        return state.model_copy(
            update={
                "refunded": RefundedFacet(
                    amount=refunded_amount,
                    refunded=refunded_amount == created_amount and created_amount > 0,
                )
            }
        )
    elif isinstance(event, PaymentCancelled):
        return state.model_copy(update={"cancelled": CancelledFacet(cancelled=True)})
    else:
        assert_never(event)
