"""
Custom exceptions for the payment decider

One domain error kind (DomainRuleViolation) parameterized by a closed set of
reasons, plus a separate error for malformed input. Callers branch on
`reason`, never on the message text.
"""

from enum import Enum


class PaymentDeciderError(Exception):
    """Base exception for all payment decider errors"""

    pass


class ViolationReason(str, Enum):
    """
    Closed set of reasons a command can be rejected for

    One value per precondition of the rule table.
    """

    ALREADY_EXISTS = "already-exists"
    NOT_CREATED = "not-created"
    ALREADY_CANCELLED = "already-cancelled"
    CANCELLED = "cancelled"
    NOT_AUTHORISED = "not-authorised"
    ALREADY_AUTHORISED = "already-authorised"
    NOT_CAPTURED = "not-captured"
    ALREADY_CAPTURED = "already-captured"
    REFUND_EXCEEDS_CAPTURED = "refund-exceeds-captured"
    ALREADY_REFUNDED = "already-refunded"


_DEFAULT_MESSAGES: dict[ViolationReason, str] = {
    ViolationReason.ALREADY_EXISTS: "Payment already exists",
    ViolationReason.NOT_CREATED: "Payment not created",
    ViolationReason.ALREADY_CANCELLED: "Payment already cancelled",
    ViolationReason.CANCELLED: "Payment cancelled",
    ViolationReason.NOT_AUTHORISED: "Payment not authorised",
    ViolationReason.ALREADY_AUTHORISED: "Payment already authorised",
    ViolationReason.NOT_CAPTURED: "Payment not captured",
    ViolationReason.ALREADY_CAPTURED: "Payment already captured",
    ViolationReason.REFUND_EXCEEDS_CAPTURED: (
        "Payment cannot be refunded for more than captured"
    ),
    ViolationReason.ALREADY_REFUNDED: "Payment already refunded",
}


class DomainRuleViolation(PaymentDeciderError):
    """
    Raised when a command violates a business rule of the Payment aggregate

    No event is produced when this is raised. The decision engine never
    retries or recovers from it; the immediate caller decides what to do
    (translate to an API error, refresh history and retry, etc).
    """

    def __init__(
        self,
        reason: ViolationReason,
        payment_id: str,
        command_type: str,
        message: str = "",
    ) -> None:
        self.reason = reason
        self.payment_id = payment_id
        self.command_type = command_type
        super().__init__(message or _DEFAULT_MESSAGES[reason])

    @property
    def message(self) -> str:
        return str(self)


class InvalidCommandInput(PaymentDeciderError):
    """
    Raised when a command or event payload has the wrong shape

    This is a programming-contract error, not a domain rule violation.
    The underlying pydantic ValidationError is chained as __cause__.
    """

    def __init__(self, kind: str, detail: str) -> None:
        self.kind = kind
        self.detail = detail
        super().__init__(f"Invalid {kind}: {detail}")


class InvalidSettings(PaymentDeciderError):
    """Raised when an environment setting holds a value it cannot take"""

    def __init__(self, name: str, value: str, allowed: list[str]) -> None:
        self.name = name
        self.value = value
        self.allowed = allowed
        super().__init__(
            f"Invalid {name}: {value!r} (expected one of: {', '.join(allowed)})"
        )
