"""Wire schemas for the Betting and Wallet APIs."""

from matka_client.schemas.bet import (
    HarufPosition,
    PlaceBetRequest,
    PlaceBetResponse,
    PlacedBetData,
)
from matka_client.schemas.game import BetType, GameSnapshot, GameStatus
from matka_client.schemas.wallet import WalletBalance

__all__ = [
    "BetType",
    "GameSnapshot",
    "GameStatus",
    "HarufPosition",
    "PlaceBetRequest",
    "PlaceBetResponse",
    "PlacedBetData",
    "WalletBalance",
]
