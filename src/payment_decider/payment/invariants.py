"""
Payment Invariants - The preconditions of the rule table

These pure functions each guard one precondition and raise
DomainRuleViolation with the matching reason when it does not hold.
They read the payment through the PaymentFacts protocol, so the same checks
run against a folded PaymentState or against a raw history scan.
"""

from typing import Protocol

from payment_decider.kernel.errors import DomainRuleViolation, ViolationReason
from payment_decider.payment.commands import PaymentCommand, RefundPayment


class PaymentFacts(Protocol):
    """Read access to what has happened to one payment"""

    @property
    def is_created(self) -> bool: ...

    @property
    def created_amount(self) -> int: ...

    @property
    def is_authorised(self) -> bool: ...

    @property
    def is_captured(self) -> bool: ...

    @property
    def is_cancelled(self) -> bool: ...

    @property
    def refunded_amount(self) -> int: ...


def _violation(reason: ViolationReason, command: PaymentCommand) -> DomainRuleViolation:
    return DomainRuleViolation(
        reason=reason,
        payment_id=command.id,
        command_type=command.type,
    )


def validate_not_created(facts: PaymentFacts, command: PaymentCommand) -> None:
    """A payment can only be created once"""
    if facts.is_created:
        raise _violation(ViolationReason.ALREADY_EXISTS, command)


def validate_created(facts: PaymentFacts, command: PaymentCommand) -> None:
    if not facts.is_created:
        raise _violation(ViolationReason.NOT_CREATED, command)


def validate_not_cancelled(facts: PaymentFacts, command: PaymentCommand) -> None:
    """
    Nothing moves a cancelled payment forward

    Reported as `cancelled` for commands other than CancelPayment, which
    uses validate_not_already_cancelled instead.
    """
    if facts.is_cancelled:
        raise _violation(ViolationReason.CANCELLED, command)


def validate_not_already_cancelled(facts: PaymentFacts, command: PaymentCommand) -> None:
    if facts.is_cancelled:
        raise _violation(ViolationReason.ALREADY_CANCELLED, command)


def validate_authorised(facts: PaymentFacts, command: PaymentCommand) -> None:
    if not facts.is_authorised:
        raise _violation(ViolationReason.NOT_AUTHORISED, command)


def validate_not_authorised(facts: PaymentFacts, command: PaymentCommand) -> None:
    if facts.is_authorised:
        raise _violation(ViolationReason.ALREADY_AUTHORISED, command)


def validate_captured(facts: PaymentFacts, command: PaymentCommand) -> None:
    if not facts.is_captured:
        raise _violation(ViolationReason.NOT_CAPTURED, command)


def validate_not_captured(facts: PaymentFacts, command: PaymentCommand) -> None:
    if facts.is_captured:
        raise _violation(ViolationReason.ALREADY_CAPTURED, command)


def validate_no_refund_recorded(facts: PaymentFacts, command: PaymentCommand) -> None:
    """Cancellation is closed once any amount has been refunded"""
    if facts.refunded_amount != 0:
        raise _violation(ViolationReason.ALREADY_REFUNDED, command)


def validate_refund_within_remaining(facts: PaymentFacts, command: RefundPayment) -> None:
    """
    Total refunds can never exceed the created amount

    Exact integer comparison: refunding precisely the remainder is allowed,
    one minor unit more is not.

    Raises:
        DomainRuleViolation: refund-exceeds-captured, with the remaining
            refundable amount in the message
    """
    remaining = facts.created_amount - facts.refunded_amount
    if command.amount > remaining:
        raise DomainRuleViolation(
            reason=ViolationReason.REFUND_EXCEEDS_CAPTURED,
            payment_id=command.id,
            command_type=command.type,
            message=(
                "Payment cannot be refunded for more than captured "
                f"(requested {command.amount}, remaining {remaining})"
            ),
        )
