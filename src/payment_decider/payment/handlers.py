"""
Payment Command Handlers - Logged entry point for integrators

The decision core is pure and silent. This façade is where an integrator's
code meets it: it scopes the history to the command's payment, routes to
the configured decider design, and logs the outcome.

It does not persist anything. The caller appends the returned events to its
own store, atomically and only if no other writer appended to the same
payment in between; on conflict, it reloads history and calls again.
"""

from typing import Iterable

from payment_decider.kernel.errors import DomainRuleViolation
from payment_decider.kernel.logging import LogOperation, get_logger
from payment_decider.kernel.settings import DecisionMode, HandlerSettings
from payment_decider.payment.commands import PaymentCommand
from payment_decider.payment.decide import decide
from payment_decider.payment.decider import (
    Decision,
    evaluate,
    evaluate_replay,
    hydrate,
)
from payment_decider.payment.events import PaymentEvent, events_for
from payment_decider.payment.models import PaymentStatus
from payment_decider.payment.projections import build_payment_status
from payment_decider.payment.replay import decide_replay

logger = get_logger(__name__)


class PaymentCommandHandlers:
    """
    Command handlers for the Payment aggregate

    Stateless apart from settings: every call receives its own history and
    returns fresh events, so one instance can serve concurrent callers.
    """

    def __init__(self, settings: HandlerSettings | None = None) -> None:
        """
        Args:
            settings: Decider mode and logging switch (defaults if None)
        """
        self.settings = settings or HandlerSettings()

    def _decide(
        self, command: PaymentCommand, history: list[PaymentEvent]
    ) -> list[PaymentEvent]:
        if self.settings.mode == DecisionMode.REPLAY:
            return decide_replay(command, history)
        return decide(command, hydrate(history))

    def handle(
        self, command: PaymentCommand, history: Iterable[PaymentEvent]
    ) -> list[PaymentEvent]:
        """
        Decide a command against a payment's history

        Args:
            command: Command to decide
            history: Previously accepted events in append order; may be shared
                with other payments

        Returns:
            Events to append, in order

        Raises:
            DomainRuleViolation: If the command breaks a business rule
        """
        scoped = events_for(command.id, history)

        if not self.settings.log_decisions:
            return self._decide(command, scoped)

        with LogOperation(
            logger,
            "handle_command",
            expected=(DomainRuleViolation,),
            command_type=command.type,
            payment_id=command.id,
            mode=self.settings.mode.value,
            history_length=len(scoped),
        ) as operation:
            try:
                events = self._decide(command, scoped)
            except DomainRuleViolation as e:
                operation.add_context(reason=e.reason.value)
                raise

        logger.debug(
            "Command accepted",
            command_type=command.type,
            payment_id=command.id,
            event_types=[event.type for event in events],
        )
        return events

    def evaluate(
        self, command: PaymentCommand, history: Iterable[PaymentEvent]
    ) -> Decision:
        """Decide without raising; rejections come back as Rejected"""
        scoped = events_for(command.id, history)
        if self.settings.mode == DecisionMode.REPLAY:
            return evaluate_replay(command, scoped)
        return evaluate(command, hydrate(scoped))

    def status(
        self, payment_id: str, history: Iterable[PaymentEvent]
    ) -> PaymentStatus | None:
        """Read-only summary of one payment, or None if never created"""
        return build_payment_status(payment_id, history)
