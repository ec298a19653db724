from __future__ import annotations

from decimal import Decimal

import pytest

from trip_ledger.models import Expense, Member, Split


@pytest.fixture
def trio() -> list[Member]:
    return [
        Member(id="A", display_name="Alice", email="alice@example.com"),
        Member(id="B", display_name="Bob", email="bob@example.com"),
        Member(id="C", display_name=None, email="carol@example.com"),
    ]


@pytest.fixture
def make_expense():
    def _make(amount, paid_by, shares, *, settled=(), currency="USD", **kwargs) -> Expense:
        return Expense(
            amount=Decimal(str(amount)),
            currency=currency,
            paid_by_member_id=paid_by,
            splits=[
                Split(member_id=mid, amount=Decimal(str(share)), settled=mid in settled)
                for mid, share in shares.items()
            ],
            **kwargs,
        )

    return _make
