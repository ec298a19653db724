from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from trip_ledger.models import Member
from trip_ledger.services.ledger import SettlementResult


def member_label(m: Member) -> str:
    if m.display_name:
        return m.display_name
    if m.email:
        return m.email
    return m.id


def build_summary(result: SettlementResult, members: Sequence[Member]) -> dict[str, Any]:
    """
    JSON-ready payload for API clients.

    Amounts are 2dp strings so no float ever reaches the wire. Members absent
    from *members* are labelled by their id.
    """
    by_id = {m.id: m for m in members}

    def label(member_id: str) -> str:
        m = by_id.get(member_id)
        return member_label(m) if m else member_id

    return {
        "settlements": [
            {
                "from": t.from_member_id,
                "to": t.to_member_id,
                "amount": str(t.amount),
                "currency": t.currency,
            }
            for t in result.transfers
        ],
        "balances": [
            {
                "userId": b.member_id,
                "userName": label(b.member_id),
                "balance": str(b.amount),
                "currency": result.currency,
            }
            for b in result.balances
        ],
        "totalExpenses": str(result.total_expenses),
        "currency": result.currency,
    }
