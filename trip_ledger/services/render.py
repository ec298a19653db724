from __future__ import annotations

from collections.abc import Sequence
from decimal import Decimal
from typing import Optional

from trip_ledger.config import settings
from trip_ledger.models import Member
from trip_ledger.services.ledger import SettlementResult
from trip_ledger.services.summary import member_label


def format_amount(amount: Decimal, currency: str) -> str:
    sign = "+" if amount > 0 else ""
    return f"{sign}{amount:.2f} {currency}"


def render_settlement(
    result: SettlementResult,
    members: Sequence[Member],
    *,
    title: Optional[str] = None,
) -> str:
    by_id = {m.id: m for m in members}

    def label(member_id: str) -> str:
        m = by_id.get(member_id)
        return member_label(m) if m else member_id

    lines_bal: list[str] = []
    for b in result.balances[: settings.render_max_balances]:
        name = label(b.member_id)
        if b.amount > 0:
            lines_bal.append(f"{name:<16}  {format_amount(b.amount, result.currency)} (gets back)")
        elif b.amount < 0:
            lines_bal.append(f"{name:<16}  {format_amount(b.amount, result.currency)} (owes)")
        else:
            lines_bal.append(f"{name:<16}  settled")
    if not lines_bal:
        lines_bal = ["No members yet."]

    lines_settle: list[str] = []
    for t in result.transfers[: settings.render_max_transfers]:
        lines_settle.append(
            f"{label(t.from_member_id)} → {label(t.to_member_id)}: {t.amount:.2f} {t.currency}"
        )
    if len(result.transfers) > settings.render_max_transfers:
        lines_settle.append(f"… and {len(result.transfers) - settings.render_max_transfers} more")
    if not lines_settle:
        lines_settle = ["Nothing to settle."]

    header = f"Expenses: {title}" if title else "Expenses"
    return (
        f"{header}\n\n"
        f"Total: {result.total_expenses:.2f} {result.currency}\n\n"
        f"Balances:\n"
        + "\n".join(lines_bal)
        + "\n\nSuggested transfers:\n"
        + "\n".join(lines_settle)
    )
