"""Shared fixtures: game snapshots and an in-memory transport."""

from decimal import Decimal

import pytest

from matka_client.api.base import BettingTransport
from matka_client.betting.errors import NetworkFailure, ServerRejected
from matka_client.schemas.bet import PlaceBetRequest, PlaceBetResponse, PlacedBetData
from matka_client.schemas.game import GameSnapshot
from matka_client.schemas.wallet import WalletBalance


def make_game(**overrides) -> GameSnapshot:
    data = {
        "_id": "g1",
        "name": "Delhi Bazar",
        "type": "jodi",
        "minBet": 10,
        "maxBet": 5000,
        "startTime": "09:00",
        "endTime": "23:10",
        "resultTime": "23:30",
        "currentStatus": "open",
        "jodiPayout": 95,
        "harufPayout": 9,
        "crossingPayout": 95,
    }
    data.update(overrides)
    return GameSnapshot.model_validate(data)


class FakeTransport(BettingTransport):
    """Records every request; fails the bet numbers listed in ``reject``/``drop``."""

    def __init__(self, balance: Decimal = Decimal(1000)):
        self.requests: list[PlaceBetRequest] = []
        self.reject: dict[str, str] = {}
        self.drop: set[str] = set()
        self.balance = balance
        self.game: GameSnapshot | None = make_game()
        self.game_calls = 0
        self.wallet_calls = 0

    async def place_bet(self, request, token=None):
        self.requests.append(request)
        if request.bet_number in self.drop:
            raise NetworkFailure("Request timed out after 15.0s")
        if request.bet_number in self.reject:
            raise ServerRejected(400, self.reject[request.bet_number])
        self.balance -= Decimal(str(request.bet_amount))
        return PlaceBetResponse(
            success=True,
            message="Bet placed successfully on Delhi Bazar",
            data=PlacedBetData(current_balance=self.balance),
        )

    async def fetch_game(self, game_id, token=None):
        self.game_calls += 1
        if self.game is None:
            raise NetworkFailure("Connection error")
        return self.game

    async def fetch_wallet(self, token=None):
        self.wallet_calls += 1
        return WalletBalance(deposit_balance=self.balance, balance=self.balance)


@pytest.fixture
def game() -> GameSnapshot:
    return make_game()


@pytest.fixture
def transport() -> FakeTransport:
    return FakeTransport()
