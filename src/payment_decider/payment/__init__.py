"""
Payment aggregate - commands, events, evolve, decide, projections

Two decider designs share one rule table:
- decide_replay(command, history): scans the raw history
- decide(command, hydrate(history)): decides against a folded snapshot
"""

from payment_decider.payment.commands import (
    AuthorisePayment,
    CancelPayment,
    CapturePayment,
    CreatePayment,
    PaymentCommand,
    RefundPayment,
    parse_command,
)
from payment_decider.payment.decide import decide, decide_with
from payment_decider.payment.decider import (
    Accepted,
    Decision,
    Rejected,
    evaluate,
    evaluate_replay,
    hydrate,
    payment_decider,
    process_command,
)
from payment_decider.payment.events import (
    PaymentAuthorised,
    PaymentCancelled,
    PaymentCaptured,
    PaymentCreated,
    PaymentEvent,
    PaymentRefunded,
    dump_events,
    events_for,
    parse_event,
    parse_events,
)
from payment_decider.payment.evolve import INITIAL_STATE, evolve, initial_state
from payment_decider.payment.handlers import PaymentCommandHandlers
from payment_decider.payment.models import PaymentState, PaymentStatus, PaymentStatusKind
from payment_decider.payment.projections import (
    PaymentStatusRegistry,
    build_payment_status,
)
from payment_decider.payment.replay import HistoryFacts, decide_replay

__all__ = [
    # Commands
    "PaymentCommand",
    "CreatePayment",
    "AuthorisePayment",
    "CapturePayment",
    "RefundPayment",
    "CancelPayment",
    "parse_command",
    # Events
    "PaymentEvent",
    "PaymentCreated",
    "PaymentAuthorised",
    "PaymentCaptured",
    "PaymentRefunded",
    "PaymentCancelled",
    "parse_event",
    "parse_events",
    "dump_events",
    "events_for",
    # State
    "PaymentState",
    "INITIAL_STATE",
    "initial_state",
    "evolve",
    "hydrate",
    # Deciding
    "decide",
    "decide_with",
    "decide_replay",
    "HistoryFacts",
    "payment_decider",
    "process_command",
    "Decision",
    "Accepted",
    "Rejected",
    "evaluate",
    "evaluate_replay",
    "PaymentCommandHandlers",
    # Read model
    "PaymentStatus",
    "PaymentStatusKind",
    "PaymentStatusRegistry",
    "build_payment_status",
]
