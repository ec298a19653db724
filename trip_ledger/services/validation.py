from __future__ import annotations

from collections.abc import Sequence
from decimal import Decimal

from trip_ledger.errors import (
    DuplicateMemberError,
    InvalidSplitSumError,
    NonPositiveAmountError,
    UnknownMemberError,
)
from trip_ledger.models import Expense, Member

TOLERANCE = Decimal("0.01")


def expense_ref(expense: Expense, index: int) -> str:
    if expense.id:
        return expense.id
    if expense.title:
        return repr(expense.title)
    return f"#{index}"


def validate_inputs(members: Sequence[Member], expenses: Sequence[Expense]) -> None:
    """
    Reject the whole input on the first bad record.

    Checks, per expense and in this order: positive expense amount, positive
    split amounts, payer and split members present in the roster, splits
    reconciling to the expense amount within ``TOLERANCE``.
    """
    known: set[str] = set()
    for m in members:
        if m.id in known:
            raise DuplicateMemberError(m.id)
        known.add(m.id)

    for index, expense in enumerate(expenses):
        ref = expense_ref(expense, index)
        if expense.amount <= 0:
            raise NonPositiveAmountError(expense.amount, ref)
        for split in expense.splits:
            if split.amount <= 0:
                raise NonPositiveAmountError(split.amount, ref)

        if expense.paid_by_member_id not in known:
            raise UnknownMemberError(expense.paid_by_member_id, ref)
        for split in expense.splits:
            if split.member_id not in known:
                raise UnknownMemberError(split.member_id, ref)

        # settled splits still count: the sum describes the expense, not the debt
        split_total = sum((s.amount for s in expense.splits), Decimal("0"))
        if abs(split_total - expense.amount) > TOLERANCE:
            raise InvalidSplitSumError(ref, expense.amount, split_total)
