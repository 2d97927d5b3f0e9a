"""Abstract collaborator interface for the Betting and Wallet APIs."""

from abc import ABC, abstractmethod

from matka_client.schemas.bet import PlaceBetRequest, PlaceBetResponse
from matka_client.schemas.game import GameSnapshot
from matka_client.schemas.wallet import WalletBalance


class BettingTransport(ABC):
    """Network side of the betting core.

    Implementations raise ``NetworkFailure`` for timeouts and connectivity
    problems and ``ServerRejected`` for any response the server did not
    accept, so callers can tell "outcome unknown" from "refused".
    """

    @abstractmethod
    async def place_bet(
        self, request: PlaceBetRequest, token: str | None = None
    ) -> PlaceBetResponse:
        """Place one bet. Returns the accepted response."""
        ...

    @abstractmethod
    async def fetch_game(self, game_id: str, token: str | None = None) -> GameSnapshot:
        """Fetch the current snapshot of a game."""
        ...

    @abstractmethod
    async def fetch_wallet(self, token: str | None = None) -> WalletBalance:
        """Fetch the current wallet balances."""
        ...
