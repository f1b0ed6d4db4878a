"""
Kernel - Aggregate-agnostic building blocks

The generic Decider contract, the error hierarchy, and structured logging.
Nothing in the kernel knows about payments.
"""

from payment_decider.kernel.decider import Decider
from payment_decider.kernel.errors import (
    DomainRuleViolation,
    InvalidCommandInput,
    InvalidSettings,
    PaymentDeciderError,
    ViolationReason,
)

__all__ = [
    "Decider",
    # Errors
    "PaymentDeciderError",
    "DomainRuleViolation",
    "InvalidCommandInput",
    "InvalidSettings",
    "ViolationReason",
]
