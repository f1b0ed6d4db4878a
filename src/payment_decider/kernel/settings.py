"""
Handler Settings - Runtime configuration for the command handler façade

Selects which decider design answers commands and whether decisions are
logged. The rules themselves are not configurable.
"""

import os
from enum import Enum

from pydantic import BaseModel, Field

from payment_decider.kernel.errors import InvalidSettings


class DecisionMode(str, Enum):
    """
    Which decider design answers commands

    FOLD: hydrate history into a snapshot, then decide in constant time
    REPLAY: scan the full history for every decision
    """

    FOLD = "fold"
    REPLAY = "replay"


_TRUTHY = {"1", "true", "yes", "on"}


class HandlerSettings(BaseModel):
    """
    Command handler configuration

    Both modes produce identical outcomes; the choice only affects cost.
    """

    mode: DecisionMode = Field(
        default=DecisionMode.FOLD,
        description="Decider design used to answer commands",
    )

    log_decisions: bool = Field(
        default=True,
        description="Log each accepted or rejected command",
    )

    model_config = {"frozen": True}

    @classmethod
    def from_env(cls) -> "HandlerSettings":
        """
        Read settings from the environment

        PAYMENTS_DECISION_MODE: "fold" or "replay" (default: fold)
        PAYMENTS_LOG_DECISIONS: "true"/"false" (default: true)

        Raises:
            InvalidSettings: If PAYMENTS_DECISION_MODE names no known mode
        """
        raw_mode = os.getenv("PAYMENTS_DECISION_MODE", "fold")
        try:
            mode = DecisionMode(raw_mode.lower())
        except ValueError as e:
            raise InvalidSettings(
                "PAYMENTS_DECISION_MODE", raw_mode, [m.value for m in DecisionMode]
            ) from e

        return cls(
            mode=mode,
            log_decisions=os.getenv("PAYMENTS_LOG_DECISIONS", "true").lower() in _TRUTHY,
        )
