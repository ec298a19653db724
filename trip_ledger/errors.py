"""
Caller-input errors raised by the settlement engine.

All of them abort the whole computation: a partial settlement could
misrepresent who owes what, so nothing is clamped or dropped.
"""
from __future__ import annotations

from decimal import Decimal
from typing import Optional


class SettlementInputError(ValueError):
    """Base class for every invalid-input condition."""


class InvalidSplitSumError(SettlementInputError):
    def __init__(self, expense_ref: str, amount: Decimal, split_total: Decimal) -> None:
        self.expense_ref = expense_ref
        self.amount = amount
        self.split_total = split_total
        super().__init__(
            f"Splits of expense {expense_ref} sum to {split_total}, expected {amount}."
        )


class UnknownMemberError(SettlementInputError):
    def __init__(self, member_id: str, expense_ref: Optional[str] = None) -> None:
        self.member_id = member_id
        self.expense_ref = expense_ref
        where = f" (expense {expense_ref})" if expense_ref else ""
        super().__init__(f"Member {member_id!r} is not part of the event{where}.")


class NonPositiveAmountError(SettlementInputError):
    def __init__(self, amount: Decimal, expense_ref: Optional[str] = None) -> None:
        self.amount = amount
        self.expense_ref = expense_ref
        where = f" in expense {expense_ref}" if expense_ref else ""
        super().__init__(f"Amounts must be positive, got {amount}{where}.")


class DuplicateMemberError(SettlementInputError):
    def __init__(self, member_id: str) -> None:
        self.member_id = member_id
        super().__init__(f"Member {member_id!r} appears more than once in the roster.")
