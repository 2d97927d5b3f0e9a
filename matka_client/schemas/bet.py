"""Pydantic schemas for the place-bet wire exchange."""

from decimal import Decimal
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from matka_client.schemas.game import BetType

HarufPosition = Literal["first", "last"]


class PlaceBetRequest(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    game_id: str
    bet_type: BetType
    bet_number: str
    bet_amount: float
    haruf_position: HarufPosition | None = None
    bet_data: dict[str, Any] | None = None

    def to_payload(self) -> dict:
        """JSON body as the Betting API expects it (camelCase, no nulls)."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class PlacedBetData(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")

    bet_id: str | None = None
    bet_amount: Decimal | None = None
    potential_winning: Decimal | None = None
    current_balance: Decimal | None = None
    status: str | None = None


class PlaceBetResponse(BaseModel):
    model_config = ConfigDict(extra="ignore")

    success: bool = False
    error: bool | None = None
    message: str | None = None
    data: PlacedBetData | None = None
