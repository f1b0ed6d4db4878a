"""
Payment Decider CLI

Runs the decision engine against an event history kept in a JSON file
(a list of event objects in append order). Useful for exploring the rules
and for scripting; it is not an event store and takes no locks.

Usage:
    payments decide --history events.json --command '{"type": "CreatePayment", "id": "p-1", "amount": 100}' --append
    payments decide --history events.json --command '{"type": "RefundPayment", "id": "p-1", "amount": 50}' --mode replay
    payments status --history events.json --id p-1
    payments list --history events.json --status captured
"""

import json
import os
from pathlib import Path
from typing import Optional

import typer
from typing_extensions import Annotated

from payment_decider.kernel.errors import (
    DomainRuleViolation,
    InvalidCommandInput,
    InvalidSettings,
)
from payment_decider.kernel.logging import configure_logging, is_production
from payment_decider.kernel.settings import DecisionMode, HandlerSettings
from payment_decider.payment.commands import parse_command
from payment_decider.payment.events import PaymentEvent, dump_events, parse_events
from payment_decider.payment.handlers import PaymentCommandHandlers
from payment_decider.payment.models import PaymentStatusKind
from payment_decider.payment.projections import PaymentStatusRegistry

# Logs go to stderr so stdout stays parseable JSON
configure_logging(
    json_output=is_production(),
    log_level=os.getenv("PAYMENTS_LOG_LEVEL", "WARNING"),
)

app = typer.Typer(
    name="payments",
    help="Payment Decider - event-sourced payment rules",
    add_completion=False,
)


def load_history(path: Path) -> list[PaymentEvent]:
    """Read a history file; a missing file is an empty history"""
    if not path.exists():
        return []
    try:
        return parse_events(path.read_text())
    except OSError as e:
        typer.echo(f"Error: cannot read history {path}: {e.strerror or e}", err=True)
        raise typer.Exit(2)
    except InvalidCommandInput as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(2)


def save_history(path: Path, events: list[PaymentEvent]) -> None:
    try:
        path.write_text(json.dumps(dump_events(events), indent=2))
    except OSError as e:
        typer.echo(f"Error: cannot write history {path}: {e.strerror or e}", err=True)
        raise typer.Exit(2)


@app.command()
def decide(
    history: Annotated[Path, typer.Option("--history", help="Event history file (JSON)")],
    command: Annotated[str, typer.Option("--command", help="Command as JSON")],
    mode: Annotated[
        Optional[DecisionMode],
        typer.Option("--mode", help="Decider design (default: $PAYMENTS_DECISION_MODE or fold)"),
    ] = None,
    append: Annotated[
        bool,
        typer.Option("--append", help="Write accepted events back to the history file"),
    ] = False,
) -> None:
    """Decide a command and print the resulting events"""
    try:
        settings = HandlerSettings.from_env()
    except InvalidSettings as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(2)
    if mode is not None:
        settings = settings.model_copy(update={"mode": mode})

    try:
        parsed = parse_command(command)
    except InvalidCommandInput as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(2)

    events = load_history(history)
    handlers = PaymentCommandHandlers(settings)

    try:
        new_events = handlers.handle(parsed, events)
    except DomainRuleViolation as e:
        typer.echo(f"Rejected ({e.reason.value}): {e}", err=True)
        raise typer.Exit(1)

    if append:
        save_history(history, events + new_events)

    typer.echo(json.dumps(dump_events(new_events)))


@app.command()
def status(
    history: Annotated[Path, typer.Option("--history", help="Event history file (JSON)")],
    payment_id: Annotated[str, typer.Option("--id", help="Payment ID")],
) -> None:
    """Show the status summary of one payment"""
    events = load_history(history)
    summary = PaymentCommandHandlers().status(payment_id, events)

    if summary is None:
        typer.echo(f"Payment {payment_id} not found", err=True)
        raise typer.Exit(1)

    typer.echo(summary.model_dump_json())


@app.command("list")
def list_payments(
    history: Annotated[Path, typer.Option("--history", help="Event history file (JSON)")],
    status_filter: Annotated[
        Optional[PaymentStatusKind],
        typer.Option("--status", help="Only payments in this status"),
    ] = None,
) -> None:
    """List every payment in the history with its status"""
    registry = PaymentStatusRegistry()
    registry.apply_events(load_history(history))

    summaries = (
        registry.list_by_status(status_filter)
        if status_filter is not None
        else registry.list_all()
    )

    if not summaries:
        typer.echo("No payments")
        return

    for summary in summaries:
        typer.echo(
            f"{summary.id}: {summary.status.value} "
            f"amount={summary.amount} refunded={summary.refunded_amount}"
        )


def main() -> None:
    app()


if __name__ == "__main__":
    main()
