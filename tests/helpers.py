"""
Test Helper Functions - History builders

Builders for the payment histories the tests keep needing, plus an
enumerator of every history reachable through accepted commands.
"""

from itertools import product
from typing import Iterator

from payment_decider.kernel.errors import DomainRuleViolation
from payment_decider.payment.commands import (
    AuthorisePayment,
    CancelPayment,
    CapturePayment,
    CreatePayment,
    PaymentCommand,
    RefundPayment,
)
from payment_decider.payment.decider import process_command
from payment_decider.payment.events import (
    PaymentAuthorised,
    PaymentCaptured,
    PaymentCreated,
    PaymentEvent,
)


def created_history(payment_id: str, amount: int = 100) -> list[PaymentEvent]:
    return [PaymentCreated(id=payment_id, amount=amount)]


def authorised_history(payment_id: str, amount: int = 100) -> list[PaymentEvent]:
    return created_history(payment_id, amount) + [PaymentAuthorised(id=payment_id)]


def captured_history(payment_id: str, amount: int = 100) -> list[PaymentEvent]:
    """Created, authorised and captured - ready for refunds"""
    return authorised_history(payment_id, amount) + [PaymentCaptured(id=payment_id)]


def all_commands(payment_id: str, amount: int = 100) -> list[PaymentCommand]:
    """One of each command, with refunds at a few interesting amounts"""
    return [
        CreatePayment(id=payment_id, amount=amount),
        AuthorisePayment(id=payment_id),
        CapturePayment(id=payment_id),
        RefundPayment(id=payment_id, amount=1),
        RefundPayment(id=payment_id, amount=amount // 2),
        RefundPayment(id=payment_id, amount=amount),
        RefundPayment(id=payment_id, amount=amount + 1),
        CancelPayment(id=payment_id),
    ]


def reachable_histories(
    payment_id: str, amount: int = 100, max_length: int = 4
) -> Iterator[list[PaymentEvent]]:
    """
    Yield every distinct history reachable by feeding commands through the
    folding decider, up to `max_length` events

    Only accepted commands extend a history, so every yielded history is
    valid by construction.
    """
    commands = all_commands(payment_id, amount)
    seen: set[tuple] = set()

    for length in range(max_length + 1):
        for sequence in product(commands, repeat=length):
            history: list[PaymentEvent] = []
            for command in sequence:
                try:
                    history = history + process_command(command, history)
                except DomainRuleViolation:
                    pass
            key = tuple(event.model_dump_json() for event in history)
            if key not in seen:
                seen.add(key)
                yield history
