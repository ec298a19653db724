from trip_ledger.errors import (
    DuplicateMemberError,
    InvalidSplitSumError,
    NonPositiveAmountError,
    SettlementInputError,
    UnknownMemberError,
)
from trip_ledger.models import Expense, Member, Split
from trip_ledger.services.ledger import Balance, SettlementResult, Transfer, compute_settlement

__all__ = [
    "Balance",
    "DuplicateMemberError",
    "Expense",
    "InvalidSplitSumError",
    "Member",
    "NonPositiveAmountError",
    "SettlementInputError",
    "SettlementResult",
    "Split",
    "Transfer",
    "UnknownMemberError",
    "compute_settlement",
]
