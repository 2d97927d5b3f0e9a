"""Pydantic schemas for server-declared game state."""

from decimal import Decimal
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

BetType = Literal["jodi", "haruf", "crossing"]
GameStatus = Literal["waiting", "open", "closed", "result_declared"]

# HH:MM, 24h clock, leading zero optional on the hour
TIME_OF_DAY_PATTERN = r"^([0-1]?[0-9]|2[0-3]):[0-5][0-9]$"


class GameSnapshot(BaseModel):
    """Read-only view of a game as last reported by the Betting API."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
        frozen=True,
    )

    id: str = Field(alias="_id")
    name: str = ""
    type: BetType | None = None
    min_bet: Decimal
    max_bet: Decimal
    start_time: str = Field(pattern=TIME_OF_DAY_PATTERN)
    end_time: str = Field(pattern=TIME_OF_DAY_PATTERN)
    result_time: str = Field(pattern=TIME_OF_DAY_PATTERN)
    current_status: GameStatus
    accepting_bets: bool | None = None
    jodi_payout: Decimal = Decimal(0)
    haruf_payout: Decimal = Decimal(0)
    crossing_payout: Decimal = Decimal(0)

    @property
    def is_open(self) -> bool:
        """True while the game accepts wagers."""
        return self.current_status == "open" and self.accepting_bets is not False

    def payout_for(self, bet_type: BetType) -> Decimal:
        """Payout multiplier (N:1) for a bet type."""
        return {
            "jodi": self.jodi_payout,
            "haruf": self.haruf_payout,
            "crossing": self.crossing_payout,
        }[bet_type]
