from __future__ import annotations

from collections.abc import Sequence
from decimal import ROUND_DOWN, Decimal, InvalidOperation, localcontext
from typing import Union

from trip_ledger.errors import NonPositiveAmountError, UnknownMemberError
from trip_ledger.models import Expense, Split

CENT = Decimal("0.01")


def _to_decimal(amount: Union[Decimal, str, int, float]) -> Decimal:
    try:
        d = Decimal(str(amount))
    except InvalidOperation:
        raise ValueError(f"Not a valid amount: {amount!r}") from None
    if not d.is_finite():
        raise ValueError(f"Not a valid amount: {amount!r}")
    return d


def equal_split(amount: Union[Decimal, str, int, float], member_ids: Sequence[str]) -> list[Split]:
    """
    Split *amount* equally among *member_ids*, in cents.

    *amount* must be given in whole cents. share = floor(amount / n) in
    cents; the leftover cents go one each to the first members in the given
    order, so shares always add up to amount.
    """
    if not member_ids:
        raise ValueError("member_ids must not be empty.")
    if len(set(member_ids)) != len(member_ids):
        raise ValueError("member_ids must not contain duplicates.")

    exact = _to_decimal(amount)
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, exact.adjusted() + 3)
        total = exact.quantize(CENT, rounding=ROUND_DOWN)
        total_c = int(total.scaleb(2))
    if total != exact:
        raise ValueError(f"{exact} has fractions of a cent and cannot be split exactly.")
    if total <= 0:
        raise NonPositiveAmountError(total)

    n = len(member_ids)
    share_c = total_c // n
    rem = total_c % n
    if share_c == 0:
        raise ValueError(f"{total} cannot be split among {n} members without zero shares.")

    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, len(str(share_c)) + 1)
        return [
            Split(member_id=mid, amount=(share_c + (1 if i < rem else 0)) * CENT)
            for i, mid in enumerate(member_ids)
        ]


def unsettled_splits_for(member_id: str, expenses: Sequence[Expense]) -> list[tuple[Expense, Split]]:
    out: list[tuple[Expense, Split]] = []
    for e in expenses:
        for s in e.splits:
            if s.member_id == member_id and not s.settled:
                out.append((e, s))
    return out


def mark_split_settled(expense: Expense, member_id: str, settled: bool = True) -> Expense:
    if not any(s.member_id == member_id for s in expense.splits):
        raise UnknownMemberError(member_id, expense.id or expense.title)
    splits = [
        s.model_copy(update={"settled": settled}) if s.member_id == member_id else s
        for s in expense.splits
    ]
    return expense.model_copy(update={"splits": splits})
