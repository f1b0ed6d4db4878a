#!/usr/bin/env python3
"""
Replay Demonstration - Two deciders, one answer

Walks one payment through its lifecycle, deciding every command twice:
once by replaying the raw history and once against the folded snapshot.

Key Concepts:
1. Events are the source of truth (not current state)
2. State is a fold of the events and can be rebuilt at any time
3. Replay and fold decide identically; fold is cheaper per decision
4. Rejections carry a typed reason and append nothing

Run:
    python examples/replay_demo.py
"""

from payment_decider.payment.commands import (
    AuthorisePayment,
    CancelPayment,
    CapturePayment,
    CreatePayment,
    PaymentCommand,
    RefundPayment,
)
from payment_decider.payment.decider import Rejected, evaluate, evaluate_replay, hydrate
from payment_decider.payment.events import PaymentEvent
from payment_decider.payment.projections import build_payment_status


def print_section(title: str) -> None:
    """Print section header"""
    print(f"\n{'='*70}")
    print(f"  {title}")
    print(f"{'='*70}\n")


def run(command: PaymentCommand, history: list[PaymentEvent]) -> list[PaymentEvent]:
    """Decide with both designs, show the outcome, return the new events"""
    replayed = evaluate_replay(command, history)
    folded = evaluate(command, hydrate(history))
    assert replayed == folded

    label = command.type
    if isinstance(command, (CreatePayment, RefundPayment)):
        label += f"({command.amount})"

    if isinstance(folded, Rejected):
        print(f"✗ {label:<22} rejected: {folded.reason.value}")
        return []

    print(f"✓ {label:<22} -> {', '.join(event.type for event in folded.events)}")
    return folded.events


def main() -> None:
    """Run replay demonstration"""
    print_section("Payment Lifecycle - Replay vs Fold")

    history: list[PaymentEvent] = []
    for command in [
        CreatePayment(id="pay-001", amount=100),
        CapturePayment(id="pay-001"),
        AuthorisePayment(id="pay-001"),
        CapturePayment(id="pay-001"),
        CancelPayment(id="pay-001"),
        RefundPayment(id="pay-001", amount=60),
        RefundPayment(id="pay-001", amount=50),
        RefundPayment(id="pay-001", amount=40),
    ]:
        history += run(command, history)

    print_section("Rebuilt From Events")

    state = hydrate(history)
    print(f"Events in history: {len(history)}")
    print(f"Refunded: {state.refunded_amount} of {state.created_amount}")
    print(f"Rebuild is deterministic: {hydrate(history) == state}")

    summary = build_payment_status("pay-001", history)
    if summary is not None:
        print(f"Status: {summary.status.value}")


if __name__ == "__main__":
    main()
