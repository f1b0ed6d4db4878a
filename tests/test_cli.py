"""
CLI Integration Tests

Drives the payments CLI end-to-end against a history file.
"""

import json
import tempfile
from pathlib import Path

from typer.testing import CliRunner

from payment_decider.cli.main import app

runner = CliRunner()


def decide(history: Path, command: dict, *extra: str):
    return runner.invoke(
        app,
        ["decide", "--history", str(history), "--command", json.dumps(command), *extra],
    )


def test_payment_lifecycle_via_cli() -> None:
    with tempfile.TemporaryDirectory() as tmpdir:
        history = Path(tmpdir) / "events.json"

        result = decide(
            history, {"type": "CreatePayment", "id": "p-1", "amount": 100}, "--append"
        )
        assert result.exit_code == 0
        assert json.loads(result.stdout) == [
            {"id": "p-1", "type": "PaymentCreated", "amount": 100}
        ]

        for command in (
            {"type": "AuthorisePayment", "id": "p-1"},
            {"type": "CapturePayment", "id": "p-1"},
            {"type": "RefundPayment", "id": "p-1", "amount": 30},
        ):
            result = decide(history, command, "--append", "--mode", "replay")
            assert result.exit_code == 0

        stored = json.loads(history.read_text())
        assert [event["type"] for event in stored] == [
            "PaymentCreated",
            "PaymentAuthorised",
            "PaymentCaptured",
            "PaymentRefunded",
        ]

        result = runner.invoke(app, ["status", "--history", str(history), "--id", "p-1"])
        assert result.exit_code == 0
        assert json.loads(result.stdout) == {
            "id": "p-1",
            "amount": 100,
            "status": "captured",
            "refunded_amount": 30,
            "remaining_refundable_amount": 70,
        }


def test_rejected_command_exits_1_and_appends_nothing() -> None:
    with tempfile.TemporaryDirectory() as tmpdir:
        history = Path(tmpdir) / "events.json"
        decide(history, {"type": "CreatePayment", "id": "p-1", "amount": 100}, "--append")
        before = history.read_text()

        result = decide(
            history, {"type": "CapturePayment", "id": "p-1"}, "--append"
        )

        assert result.exit_code == 1
        assert "not-authorised" in result.output
        assert history.read_text() == before


def test_decide_without_append_leaves_file_alone() -> None:
    with tempfile.TemporaryDirectory() as tmpdir:
        history = Path(tmpdir) / "events.json"

        result = decide(history, {"type": "CreatePayment", "id": "p-1", "amount": 5})

        assert result.exit_code == 0
        assert not history.exists()


def test_malformed_command_exits_2() -> None:
    with tempfile.TemporaryDirectory() as tmpdir:
        history = Path(tmpdir) / "events.json"

        result = decide(history, {"type": "CreatePayment", "id": "p-1", "amount": 0})

        assert result.exit_code == 2
        assert "Invalid command" in result.output


def test_malformed_history_exits_2() -> None:
    with tempfile.TemporaryDirectory() as tmpdir:
        history = Path(tmpdir) / "events.json"
        history.write_text(json.dumps([{"type": "PaymentExploded", "id": "p-1"}]))

        result = runner.invoke(app, ["status", "--history", str(history), "--id", "p-1"])

        assert result.exit_code == 2


def test_status_of_unknown_payment() -> None:
    with tempfile.TemporaryDirectory() as tmpdir:
        history = Path(tmpdir) / "events.json"

        result = runner.invoke(app, ["status", "--history", str(history), "--id", "nope"])

        assert result.exit_code == 1
        assert "Payment nope not found" in result.output


def test_list_payments_with_status_filter() -> None:
    with tempfile.TemporaryDirectory() as tmpdir:
        history = Path(tmpdir) / "events.json"
        history.write_text(
            json.dumps(
                [
                    {"type": "PaymentCreated", "id": "a", "amount": 10},
                    {"type": "PaymentCreated", "id": "b", "amount": 20},
                    {"type": "PaymentCancelled", "id": "b"},
                ]
            )
        )

        result = runner.invoke(app, ["list", "--history", str(history)])
        assert result.exit_code == 0
        assert "a: created amount=10 refunded=0" in result.stdout
        assert "b: cancelled amount=20 refunded=0" in result.stdout

        result = runner.invoke(
            app, ["list", "--history", str(history), "--status", "cancelled"]
        )
        assert result.exit_code == 0
        assert "a:" not in result.stdout
        assert "b: cancelled" in result.stdout


def test_list_empty_history() -> None:
    with tempfile.TemporaryDirectory() as tmpdir:
        result = runner.invoke(
            app, ["list", "--history", str(Path(tmpdir) / "events.json")]
        )

        assert result.exit_code == 0
        assert "No payments" in result.stdout


def test_unknown_decision_mode_in_env_exits_2() -> None:
    with tempfile.TemporaryDirectory() as tmpdir:
        history = Path(tmpdir) / "events.json"

        result = runner.invoke(
            app,
            [
                "decide",
                "--history",
                str(history),
                "--command",
                json.dumps({"type": "CreatePayment", "id": "p-1", "amount": 100}),
                "--append",
            ],
            env={"PAYMENTS_DECISION_MODE": "bogus"},
        )

        assert result.exit_code == 2
        assert "Invalid PAYMENTS_DECISION_MODE" in result.output
        assert not history.exists()


def test_unreadable_history_path_exits_2() -> None:
    with tempfile.TemporaryDirectory() as tmpdir:
        result = runner.invoke(app, ["status", "--history", tmpdir, "--id", "p-1"])

        assert result.exit_code == 2
        assert "cannot read history" in result.output
