from __future__ import annotations

from decimal import Decimal

from trip_ledger.config import settings
from trip_ledger.models import Member
from trip_ledger.services.ledger import compute_settlement
from trip_ledger.services.render import format_amount, render_settlement
from trip_ledger.services.summary import build_summary, member_label


def test_member_label_fallbacks():
    assert member_label(Member(id="1", display_name="Ann", email="ann@x")) == "Ann"
    assert member_label(Member(id="2", display_name="", email="bo@x")) == "bo@x"
    assert member_label(Member(id="3")) == "3"


def test_build_summary(trio, make_expense):
    result = compute_settlement(trio, [make_expense("90.00", "A", {"A": 30, "B": 30, "C": 30})])

    summary = build_summary(result, trio)

    assert summary == {
        "settlements": [
            {"from": "B", "to": "A", "amount": "30.00", "currency": "USD"},
            {"from": "C", "to": "A", "amount": "30.00", "currency": "USD"},
        ],
        "balances": [
            {"userId": "A", "userName": "Alice", "balance": "60.00", "currency": "USD"},
            {"userId": "B", "userName": "Bob", "balance": "-30.00", "currency": "USD"},
            {"userId": "C", "userName": "carol@example.com", "balance": "-30.00", "currency": "USD"},
        ],
        "totalExpenses": "90.00",
        "currency": "USD",
    }


def test_build_summary_unknown_member_uses_id(trio):
    result = compute_settlement(trio, [])

    summary = build_summary(result, trio[:1])

    assert [b["userName"] for b in summary["balances"]] == ["Alice", "B", "C"]
    assert summary["totalExpenses"] == "0.00"


def test_format_amount():
    assert format_amount(Decimal("60.00"), "USD") == "+60.00 USD"
    assert format_amount(Decimal("-5.5"), "EUR") == "-5.50 EUR"
    assert format_amount(Decimal("0.00"), "USD") == "0.00 USD"


def test_render_settlement(trio, make_expense):
    result = compute_settlement(trio, [make_expense("90.00", "A", {"A": 30, "B": 30, "C": 30})])

    text = render_settlement(result, trio, title="Lisbon")

    assert text.startswith("Expenses: Lisbon\n")
    assert "Total: 90.00 USD" in text
    assert "+60.00 USD (gets back)" in text
    assert "-30.00 USD (owes)" in text
    assert "Bob → Alice: 30.00 USD" in text
    assert "carol@example.com → Alice: 30.00 USD" in text


def test_render_nothing_to_settle(trio):
    text = render_settlement(compute_settlement(trio, []), trio)

    assert text.startswith("Expenses\n")
    assert text.count("settled") == 3
    assert text.endswith("Nothing to settle.")


def test_render_respects_limits(trio, make_expense, monkeypatch):
    monkeypatch.setattr(settings, "render_max_balances", 2)
    monkeypatch.setattr(settings, "render_max_transfers", 1)
    result = compute_settlement(trio, [make_expense("90.00", "A", {"A": 30, "B": 30, "C": 30})])

    text = render_settlement(result, trio)

    assert "carol@example.com  " not in text
    assert "Bob → Alice" in text
    assert "carol@example.com → Alice" not in text
    assert "… and 1 more" in text


def test_render_empty_roster():
    text = render_settlement(compute_settlement([], []), [])

    assert "No members yet." in text
