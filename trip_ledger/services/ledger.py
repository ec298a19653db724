from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal, localcontext
from typing import Optional

from trip_ledger.config import settings
from trip_ledger.models import Expense, Member
from trip_ledger.services.validation import TOLERANCE, validate_inputs

logger = logging.getLogger(__name__)

CENT = Decimal("0.01")


@dataclass(frozen=True)
class Balance:
    member_id: str
    amount: Decimal  # positive is owed by the group, negative owes the group


@dataclass(frozen=True)
class Transfer:
    from_member_id: str  # debtor
    to_member_id: str  # creditor
    amount: Decimal
    currency: str


@dataclass(frozen=True)
class SettlementResult:
    transfers: list[Transfer]
    balances: list[Balance]
    total_expenses: Decimal
    currency: str


def round2(value: Decimal) -> Decimal:
    with localcontext() as ctx:
        # quantize needs every integer digit plus two decimals
        ctx.prec = max(ctx.prec, value.adjusted() + 3)
        out = value.quantize(CENT, rounding=ROUND_HALF_UP)
    # quantize keeps the sign of tiny negatives; report those as plain zero
    return out if out != 0 else Decimal("0.00")


def settlement_currency(expenses: Sequence[Expense], default_currency: Optional[str] = None) -> str:
    if not expenses:
        return (default_currency or settings.default_currency).upper()
    currency = expenses[0].currency
    others = sorted({e.currency for e in expenses} - {currency})
    if others:
        logger.warning("Mixed currencies %s in one settlement; using %s without conversion", others, currency)
    return currency


def compute_balances(members: Sequence[Member], expenses: Sequence[Expense]) -> dict[str, Decimal]:
    """Unrounded net balance per member, in roster order. Inputs must already be validated."""
    balances: dict[str, Decimal] = {m.id: Decimal("0") for m in members}
    for e in expenses:
        balances[e.paid_by_member_id] += e.amount
        for s in e.splits:
            if s.settled:
                continue
            balances[s.member_id] -= s.amount
    return balances


def match_transfers(balances: dict[str, Decimal], currency: str) -> list[Transfer]:
    creditors: list[list] = []  # [member_id, to_receive]
    debtors: list[list] = []  # [member_id, to_pay]

    for member_id, bal in balances.items():
        if bal > TOLERANCE:
            creditors.append([member_id, bal])
        elif bal < -TOLERANCE:
            debtors.append([member_id, -bal])

    out: list[Transfer] = []
    i = 0
    j = 0
    while i < len(creditors) and j < len(debtors):
        c_id, recv = creditors[i]
        d_id, owe = debtors[j]
        amt = min(recv, owe)
        out.append(Transfer(from_member_id=d_id, to_member_id=c_id, amount=round2(amt), currency=currency))
        creditors[i][1] = recv - amt
        debtors[j][1] = owe - amt
        if creditors[i][1] < TOLERANCE:
            i += 1
        if debtors[j][1] < TOLERANCE:
            j += 1
    return out


def compute_settlement(
    members: Sequence[Member],
    expenses: Sequence[Expense],
    *,
    default_currency: Optional[str] = None,
) -> SettlementResult:
    """
    Net balances and a minimal list of transfers settling them.

    Every expense credits its payer with the full amount and debits each
    member of an unsettled split with that split's amount. Members whose
    balance is within a cent of zero are left out of the matching; the rest
    are paired greedily, creditors and debtors both in roster order, so at
    most ``creditors + debtors - 1`` transfers come out. Amounts are rounded
    to cents only in the returned values.

    Raises a ``SettlementInputError`` subclass for any invalid record, before
    anything is computed.
    """
    validate_inputs(members, expenses)
    currency = settlement_currency(expenses, default_currency)

    balances = compute_balances(members, expenses)
    transfers = match_transfers(balances, currency)
    total = sum((e.amount for e in expenses), Decimal("0"))

    logger.debug(
        "Settlement computed: %d members, %d expenses, %d transfers",
        len(balances),
        len(expenses),
        len(transfers),
    )
    return SettlementResult(
        transfers=transfers,
        balances=[Balance(member_id=mid, amount=round2(bal)) for mid, bal in balances.items()],
        total_expenses=round2(total),
        currency=currency,
    )
