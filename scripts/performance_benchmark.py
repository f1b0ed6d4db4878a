#!/usr/bin/env python3
"""
Performance Benchmark for the Payment Decider

Compares the cost of the two decider designs as history grows:

- Replay: every decision scans the whole history
- Fold: history is hydrated once, then each decision inspects the snapshot

Also checks that both designs agree on every decision they make.

Run:
    python scripts/performance_benchmark.py
"""

import time

from payment_decider.payment.commands import (
    AuthorisePayment,
    CapturePayment,
    CreatePayment,
    RefundPayment,
)
from payment_decider.payment.decide import decide
from payment_decider.payment.decider import hydrate, process_command
from payment_decider.payment.events import PaymentEvent
from payment_decider.payment.replay import decide_replay


def build_history(payment_id: str, refunds: int) -> list[PaymentEvent]:
    """A captured payment followed by `refunds` one-unit refunds"""
    history: list[PaymentEvent] = []
    for command in (
        CreatePayment(id=payment_id, amount=refunds * 2),
        AuthorisePayment(id=payment_id),
        CapturePayment(id=payment_id),
    ):
        history += process_command(command, history)
    for _ in range(refunds):
        history += process_command(RefundPayment(id=payment_id, amount=1), history)
    return history


def benchmark_decisions(history_length: int, decisions: int = 200) -> dict:
    """Time `decisions` refund decisions against one history, both designs"""
    print(f"\n=== Benchmark: {history_length} events, {decisions} decisions ===")

    history = build_history("bench", history_length)
    command = RefundPayment(id="bench", amount=1)

    start_time = time.perf_counter()
    for _ in range(decisions):
        replayed = decide_replay(command, history)
    replay_elapsed = time.perf_counter() - start_time

    start_time = time.perf_counter()
    state = hydrate(history)
    hydrate_elapsed = time.perf_counter() - start_time
    for _ in range(decisions):
        folded = decide(command, state)
    fold_elapsed = time.perf_counter() - start_time

    speedup = replay_elapsed / fold_elapsed if fold_elapsed > 0 else 0

    print(f"  Replay: {replay_elapsed * 1000:.1f}ms")
    print(f"  Fold:   {fold_elapsed * 1000:.1f}ms (hydrate {hydrate_elapsed * 1000:.1f}ms)")
    print(f"  Speedup: {speedup:.1f}x")
    print(f"  Agreement: {'✓ PASS' if replayed == folded else '✗ FAIL'}")

    return {
        "test": "decisions",
        "history_length": len(history),
        "decisions": decisions,
        "replay_ms": replay_elapsed * 1000,
        "fold_ms": fold_elapsed * 1000,
        "speedup": speedup,
        "pass": replayed == folded,
    }


def main() -> None:
    """Run all benchmarks"""
    print("=" * 60)
    print("Payment Decider - Replay vs Fold")
    print("=" * 60)

    results = [benchmark_decisions(n) for n in (10, 100, 1000)]

    print("\n" + "=" * 60)
    print("Summary")
    print("=" * 60)
    for result in results:
        status = "✓" if result["pass"] else "✗"
        print(
            f"  {status} {result['history_length']:>5} events: "
            f"replay {result['replay_ms']:.1f}ms, fold {result['fold_ms']:.1f}ms"
        )


if __name__ == "__main__":
    main()
