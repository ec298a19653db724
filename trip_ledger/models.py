from __future__ import annotations

import datetime as dt
from decimal import Decimal
from typing import Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator


class Member(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    display_name: Optional[str] = Field(
        None, validation_alias=AliasChoices("display_name", "displayName", "name")
    )
    email: str = ""


class Split(BaseModel):
    model_config = ConfigDict(frozen=True)

    member_id: str = Field(validation_alias=AliasChoices("member_id", "memberId", "userId"))
    amount: Decimal
    settled: bool = False


class Expense(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: Optional[str] = None
    title: Optional[str] = None
    amount: Decimal
    currency: str = Field(pattern=r"^[A-Za-z]{3}$")
    paid_by_member_id: str = Field(
        validation_alias=AliasChoices("paid_by_member_id", "paidByMemberId", "paidByUserId")
    )
    # informational only, never used by the settlement math
    date: Optional[dt.date] = None
    splits: list[Split] = Field(default_factory=list)

    @field_validator("currency")
    @classmethod
    def _upper_currency(cls, v: str) -> str:
        return v.upper()
