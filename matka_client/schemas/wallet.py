"""Pydantic schemas for wallet data."""

from decimal import Decimal

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class WalletBalance(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")

    deposit_balance: Decimal = Decimal(0)
    winning_balance: Decimal = Decimal(0)
    bonus_balance: Decimal = Decimal(0)
    balance: Decimal = Decimal(0)
