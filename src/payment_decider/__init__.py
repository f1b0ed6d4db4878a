"""
Payment Decider - Event-sourced decision engine for payments

Given a command and a payment's accepted event history, produce the events
to append or reject the command with a typed reason. Two designs, one rule
table: replay the raw history, or fold it into a snapshot first.
"""

from payment_decider.kernel.errors import DomainRuleViolation, ViolationReason
from payment_decider.payment import (
    decide,
    decide_replay,
    hydrate,
    payment_decider,
    process_command,
)

__version__ = "0.1.0"
__all__ = [
    "DomainRuleViolation",
    "ViolationReason",
    "decide",
    "decide_replay",
    "hydrate",
    "payment_decider",
    "process_command",
    "__version__",
]
