"""
Tests for the error hierarchy
"""

import pytest

from payment_decider.kernel.errors import (
    DomainRuleViolation,
    InvalidCommandInput,
    PaymentDeciderError,
    ViolationReason,
)


def test_every_reason_has_a_default_message() -> None:
    for reason in ViolationReason:
        error = DomainRuleViolation(reason, payment_id="p-1", command_type="X")
        assert str(error)
        assert error.message == str(error)


def test_reason_values_are_stable() -> None:
    assert {reason.value for reason in ViolationReason} == {
        "already-exists",
        "not-created",
        "already-cancelled",
        "cancelled",
        "not-authorised",
        "already-authorised",
        "not-captured",
        "already-captured",
        "refund-exceeds-captured",
        "already-refunded",
    }


def test_violation_carries_context() -> None:
    error = DomainRuleViolation(
        ViolationReason.NOT_CAPTURED,
        payment_id="p-9",
        command_type="RefundPayment",
    )

    assert error.reason == ViolationReason.NOT_CAPTURED
    assert error.payment_id == "p-9"
    assert error.command_type == "RefundPayment"
    assert str(error) == "Payment not captured"


def test_custom_message_overrides_default() -> None:
    error = DomainRuleViolation(
        ViolationReason.REFUND_EXCEEDS_CAPTURED,
        payment_id="p-1",
        command_type="RefundPayment",
        message="too much",
    )

    assert str(error) == "too much"


def test_errors_share_a_base_class() -> None:
    with pytest.raises(PaymentDeciderError):
        raise DomainRuleViolation(ViolationReason.CANCELLED, "p-1", "CapturePayment")
    with pytest.raises(PaymentDeciderError):
        raise InvalidCommandInput("command", "bad")

    assert not issubclass(InvalidCommandInput, DomainRuleViolation)
