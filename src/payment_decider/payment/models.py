"""
Payment Domain Models - Folded state and read-model types

PaymentState is the snapshot the folding decider decides against. It is
split into five independent facets, each written only by its own event kind.
All models are frozen: evolve builds new snapshots and shares unchanged
facets with the previous one.

Key concepts:
- Facet: one independently-evolving slice of the state
- Fully refunded: refunded amount equals a positive created amount
"""

from enum import Enum

from pydantic import BaseModel, Field


class CreatedFacet(BaseModel):
    """Set once by PaymentCreated; amount is fixed from then on"""

    amount: int = 0
    created: bool = False

    model_config = {"frozen": True}


class AuthorisedFacet(BaseModel):
    authorised: bool = False

    model_config = {"frozen": True}


class CapturedFacet(BaseModel):
    captured: bool = False

    model_config = {"frozen": True}


class RefundedFacet(BaseModel):
    """Accumulated refunds and the fully-refunded flag"""

    amount: int = 0
    refunded: bool = False

    model_config = {"frozen": True}


class CancelledFacet(BaseModel):
    cancelled: bool = False

    model_config = {"frozen": True}


class PaymentState(BaseModel):
    """
    Folded state of one payment

    Derived entirely from the payment's event history and never stored as a
    source of truth. The read-only accessors below are what the rule table
    queries, so a history scan can stand in for this snapshot.

    Attributes:
        created: Creation flag and fixed amount
        authorised: Authorisation flag
        captured: Capture flag
        refunded: Accumulated refund amount and fully-refunded flag
        cancelled: Cancellation flag
    """

    created: CreatedFacet = Field(default_factory=CreatedFacet)
    authorised: AuthorisedFacet = Field(default_factory=AuthorisedFacet)
    captured: CapturedFacet = Field(default_factory=CapturedFacet)
    refunded: RefundedFacet = Field(default_factory=RefundedFacet)
    cancelled: CancelledFacet = Field(default_factory=CancelledFacet)

    model_config = {"frozen": True}

    @property
    def is_created(self) -> bool:
        return self.created.created

    @property
    def created_amount(self) -> int:
        return self.created.amount

    @property
    def is_authorised(self) -> bool:
        return self.authorised.authorised

    @property
    def is_captured(self) -> bool:
        return self.captured.captured

    @property
    def is_cancelled(self) -> bool:
        return self.cancelled.cancelled

    @property
    def refunded_amount(self) -> int:
        return self.refunded.amount

    @property
    def is_fully_refunded(self) -> bool:
        return self.refunded.refunded

    def remaining_refundable_amount(self) -> int:
        """Created amount not yet refunded"""
        return self.created.amount - self.refunded.amount


class PaymentStatusKind(str, Enum):
    """
    Summary status of a payment, highest precedence first

    cancelled > refunded > captured > authorised > created
    """

    CANCELLED = "cancelled"
    REFUNDED = "refunded"
    CAPTURED = "captured"
    AUTHORISED = "authorised"
    CREATED = "created"


class PaymentStatus(BaseModel):
    """
    Read-only summary of one payment for queries and dashboards

    Built from events by the projection; never used for decisions.
    """

    id: str
    amount: int
    status: PaymentStatusKind
    refunded_amount: int
    remaining_refundable_amount: int

    model_config = {
        "frozen": True,
        "json_schema_extra": {
            "examples": [
                {
                    "id": "pay-001",
                    "amount": 100,
                    "status": "captured",
                    "refunded_amount": 40,
                    "remaining_refundable_amount": 60,
                }
            ]
        },
    }
