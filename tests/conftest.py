"""
Pytest configuration and shared fixtures
"""

from itertools import count

import pytest

from payment_decider.kernel.settings import DecisionMode, HandlerSettings
from payment_decider.payment.handlers import PaymentCommandHandlers

_payment_ids = count(1)


@pytest.fixture
def payment_id() -> str:
    """A payment ID no other test in the session uses"""
    return f"pay-{next(_payment_ids):04d}"


@pytest.fixture
def fold_handlers() -> PaymentCommandHandlers:
    return PaymentCommandHandlers(HandlerSettings(mode=DecisionMode.FOLD))


@pytest.fixture
def replay_handlers() -> PaymentCommandHandlers:
    return PaymentCommandHandlers(HandlerSettings(mode=DecisionMode.REPLAY))


@pytest.fixture(params=[DecisionMode.FOLD, DecisionMode.REPLAY], ids=lambda m: m.value)
def handlers(request: pytest.FixtureRequest) -> PaymentCommandHandlers:
    """Command handlers in each decider mode - both must behave the same"""
    return PaymentCommandHandlers(HandlerSettings(mode=request.param))
