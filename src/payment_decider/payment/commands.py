"""
Payment Commands - Intentions to change a payment

Commands form a closed tagged union discriminated by `type`. They are
validated on construction (shape and amount policy) and turned into events,
or rejected, by the decision engine.

Amount policy: create and refund amounts are strictly positive integers in
minor currency units. Zero or negative amounts are malformed input, never a
domain rule violation.
"""

from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, Field, TypeAdapter, ValidationError

from payment_decider.kernel.errors import InvalidCommandInput


class _PaymentCommand(BaseModel):
    """Fields shared by every payment command"""

    id: str = Field(..., min_length=1, description="Payment aggregate identifier")

    model_config = {"frozen": True}


class CreatePayment(_PaymentCommand):
    """
    Create a new payment for a fixed amount

    The amount is fixed for the payment's lifetime.
    """

    type: Literal["CreatePayment"] = "CreatePayment"
    amount: int = Field(..., gt=0, description="Amount in minor currency units")


class AuthorisePayment(_PaymentCommand):
    """Authorise a created payment"""

    type: Literal["AuthorisePayment"] = "AuthorisePayment"


class CapturePayment(_PaymentCommand):
    """Capture an authorised payment"""

    type: Literal["CapturePayment"] = "CapturePayment"


class RefundPayment(_PaymentCommand):
    """
    Refund part or all of a captured payment

    Partial refunds accumulate; their sum can never exceed the created amount.
    """

    type: Literal["RefundPayment"] = "RefundPayment"
    amount: int = Field(..., gt=0, description="Amount in minor currency units")


class CancelPayment(_PaymentCommand):
    """Cancel a payment that has not been captured or refunded"""

    type: Literal["CancelPayment"] = "CancelPayment"


PaymentCommand = Annotated[
    Union[
        CreatePayment,
        AuthorisePayment,
        CapturePayment,
        RefundPayment,
        CancelPayment,
    ],
    Field(discriminator="type"),
]

_command_adapter: TypeAdapter[PaymentCommand] = TypeAdapter(PaymentCommand)


def parse_command(data: dict[str, Any] | str | bytes) -> PaymentCommand:
    """
    Validate a mapping or JSON document into the matching command variant

    Args:
        data: e.g. {"type": "RefundPayment", "id": "p-1", "amount": 50}

    Returns:
        The command model selected by the `type` discriminator

    Raises:
        InvalidCommandInput: If the type is unknown or fields are invalid
    """
    try:
        if isinstance(data, (str, bytes)):
            return _command_adapter.validate_json(data)
        return _command_adapter.validate_python(data)
    except ValidationError as e:
        raise InvalidCommandInput("command", str(e)) from e
