"""
Payment Events - Immutable facts about what happened to a payment

Events form the append-only history that is the source of truth for every
payment. Like commands, they are a closed tagged union discriminated by
`type`, so a stored history can be validated back into typed events.
"""

from typing import Annotated, Any, Iterable, Literal, Union

from pydantic import BaseModel, Field, TypeAdapter, ValidationError

from payment_decider.kernel.errors import InvalidCommandInput


class _PaymentEvent(BaseModel):
    """Fields shared by every payment event"""

    id: str = Field(..., min_length=1, description="Payment aggregate identifier")

    model_config = {"frozen": True}


class PaymentCreated(_PaymentEvent):
    """A payment was created; its amount never changes afterwards"""

    type: Literal["PaymentCreated"] = "PaymentCreated"
    amount: int = Field(..., ge=0)


class PaymentAuthorised(_PaymentEvent):
    """The payment was authorised"""

    type: Literal["PaymentAuthorised"] = "PaymentAuthorised"


class PaymentCaptured(_PaymentEvent):
    """The authorised payment was captured"""

    type: Literal["PaymentCaptured"] = "PaymentCaptured"


class PaymentRefunded(_PaymentEvent):
    """Part or all of the captured amount was refunded"""

    type: Literal["PaymentRefunded"] = "PaymentRefunded"
    amount: int = Field(..., ge=0)


class PaymentCancelled(_PaymentEvent):
    """The payment was cancelled before capture"""

    type: Literal["PaymentCancelled"] = "PaymentCancelled"


PaymentEvent = Annotated[
    Union[
        PaymentCreated,
        PaymentAuthorised,
        PaymentCaptured,
        PaymentRefunded,
        PaymentCancelled,
    ],
    Field(discriminator="type"),
]

PAYMENT_EVENT_TYPES = {
    "PaymentCreated": PaymentCreated,
    "PaymentAuthorised": PaymentAuthorised,
    "PaymentCaptured": PaymentCaptured,
    "PaymentRefunded": PaymentRefunded,
    "PaymentCancelled": PaymentCancelled,
}

_event_adapter: TypeAdapter[PaymentEvent] = TypeAdapter(PaymentEvent)
_history_adapter: TypeAdapter[list[PaymentEvent]] = TypeAdapter(list[PaymentEvent])


def parse_event(data: dict[str, Any]) -> PaymentEvent:
    """
    Validate a mapping into the matching event variant

    Raises:
        InvalidCommandInput: If the type is unknown or fields are invalid
    """
    try:
        return _event_adapter.validate_python(data)
    except ValidationError as e:
        raise InvalidCommandInput("event", str(e)) from e


def parse_events(data: list[dict[str, Any]] | str | bytes) -> list[PaymentEvent]:
    """
    Validate a whole history (list of mappings or a JSON array)

    Order is preserved; it is the append order the fold relies on.
    """
    try:
        if isinstance(data, (str, bytes)):
            return _history_adapter.validate_json(data)
        return _history_adapter.validate_python(data)
    except ValidationError as e:
        raise InvalidCommandInput("event history", str(e)) from e


def dump_events(events: Iterable[PaymentEvent]) -> list[dict[str, Any]]:
    """Serialize events to JSON-compatible mappings"""
    return [event.model_dump(mode="json") for event in events]


def events_for(payment_id: str, events: Iterable[PaymentEvent]) -> list[PaymentEvent]:
    """Filter a (possibly shared) history down to one payment, keeping order"""
    return [event for event in events if event.id == payment_id]
