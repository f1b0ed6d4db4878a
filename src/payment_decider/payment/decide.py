"""
Payment Decide - The rule table

decide_with() is the single place the business rules live. Both decider
designs call it: the folding design passes a PaymentState, the replay design
passes a HistoryFacts view over the raw events.

Preconditions are checked from existence to arithmetic, and the first one
that fails determines the rejection reason:

    CreatePayment     not already created
    AuthorisePayment  created, not cancelled, not already authorised
    CapturePayment    authorised, not cancelled, not already captured
    RefundPayment     created, captured, not cancelled, amount <= remaining
    CancelPayment     created, not already cancelled, not captured,
                      no refund recorded
"""

from typing_extensions import assert_never

from payment_decider.payment.commands import (
    AuthorisePayment,
    CancelPayment,
    CapturePayment,
    CreatePayment,
    PaymentCommand,
    RefundPayment,
)
from payment_decider.payment.events import (
    PaymentAuthorised,
    PaymentCancelled,
    PaymentCaptured,
    PaymentCreated,
    PaymentEvent,
    PaymentRefunded,
)
from payment_decider.payment.invariants import (
    PaymentFacts,
    validate_authorised,
    validate_captured,
    validate_created,
    validate_no_refund_recorded,
    validate_not_already_cancelled,
    validate_not_authorised,
    validate_not_cancelled,
    validate_not_captured,
    validate_not_created,
    validate_refund_within_remaining,
)
from payment_decider.payment.models import PaymentState


def decide_with(command: PaymentCommand, facts: PaymentFacts) -> list[PaymentEvent]:
    """
    Decide a command against any view of a payment's history

    Args:
        command: Command to decide
        facts: What has happened to the command's payment

    Returns:
        The new events to append (currently always exactly one)

    Raises:
        DomainRuleViolation: If a precondition does not hold; no event is
            produced in that case
    """
    if isinstance(command, CreatePayment):
        validate_not_created(facts, command)
        return [PaymentCreated(id=command.id, amount=command.amount)]

    elif isinstance(command, AuthorisePayment):
        validate_created(facts, command)
        validate_not_cancelled(facts, command)
        validate_not_authorised(facts, command)
        return [PaymentAuthorised(id=command.id)]

    elif isinstance(command, CapturePayment):
        validate_authorised(facts, command)
        validate_not_cancelled(facts, command)
        validate_not_captured(facts, command)
        return [PaymentCaptured(id=command.id)]

    elif isinstance(command, RefundPayment):
        validate_created(facts, command)
        validate_captured(facts, command)
        validate_not_cancelled(facts, command)
        validate_refund_within_remaining(facts, command)
        return [PaymentRefunded(id=command.id, amount=command.amount)]

    elif isinstance(command, CancelPayment):
        validate_created(facts, command)
        validate_not_already_cancelled(facts, command)
        validate_not_captured(facts, command)
        validate_no_refund_recorded(facts, command)
        return [PaymentCancelled(id=command.id)]

    else:
        assert_never(command)


def decide(command: PaymentCommand, state: PaymentState) -> list[PaymentEvent]:
    """Folding decider: decide against a hydrated snapshot in constant time"""
    return decide_with(command, state)
