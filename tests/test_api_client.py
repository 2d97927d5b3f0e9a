"""Tests for the aiohttp Betting/Wallet API client."""

import asyncio
from decimal import Decimal

import aiohttp
import pytest
from aioresponses import aioresponses
from yarl import URL

from matka_client.api.client import MatkaApiClient
from matka_client.betting.errors import NetworkFailure, ServerRejected, SessionExpired
from matka_client.schemas.bet import PlaceBetRequest

BASE = "http://api.test"
PLACE_BET_URL = f"{BASE}/api/games/place-bet"

GAME = {
    "_id": "g1",
    "name": "Delhi Bazar",
    "type": "jodi",
    "minBet": 10,
    "maxBet": 5000,
    "startTime": "09:00",
    "endTime": "23:10",
    "resultTime": "23:30",
    "currentStatus": "open",
    "isActive": True,
    "jodiPayout": 95,
    "harufPayout": 9,
    "crossingPayout": 95,
}


@pytest.fixture
def mock_api():
    with aioresponses() as m:
        yield m


@pytest.fixture
async def client():
    async with MatkaApiClient(base_url=BASE, token="tok") as c:
        yield c


def jodi_request() -> PlaceBetRequest:
    return PlaceBetRequest(game_id="g1", bet_type="jodi", bet_number="45", bet_amount=100)


async def test_place_bet_success(mock_api, client):
    mock_api.post(
        PLACE_BET_URL,
        status=201,
        payload={
            "success": True,
            "message": "Bet placed successfully on Delhi Bazar",
            "data": {"betId": "b1", "betAmount": 100, "currentBalance": 900},
        },
    )

    response = await client.place_bet(jodi_request())

    assert response.success
    assert response.data.current_balance == Decimal(900)
    call = mock_api.requests[("POST", URL(PLACE_BET_URL))][0]
    assert call.kwargs["json"] == {
        "gameId": "g1", "betType": "jodi", "betNumber": "45", "betAmount": 100.0,
    }
    assert call.kwargs["headers"]["Authorization"] == "Bearer tok"


async def test_place_bet_rejected(mock_api, client):
    mock_api.post(
        PLACE_BET_URL,
        status=400,
        payload={"success": False, "message": "Bet amount must be between ₹10 and ₹5000"},
    )

    with pytest.raises(ServerRejected) as exc_info:
        await client.place_bet(jodi_request())
    assert exc_info.value.status == 400
    assert exc_info.value.message == "Bet amount must be between ₹10 and ₹5000"


async def test_error_flag_on_ok_status(mock_api, client):
    mock_api.post(PLACE_BET_URL, status=200, payload={"error": True, "message": "Duplicate"})

    with pytest.raises(ServerRejected, match="Duplicate"):
        await client.place_bet(jodi_request())


async def test_unauthorized_is_session_expired(mock_api, client):
    mock_api.post(PLACE_BET_URL, status=401, payload={"message": "Token expired"})

    with pytest.raises(SessionExpired):
        await client.place_bet(jodi_request())


@pytest.mark.parametrize(
    "exception", [asyncio.TimeoutError(), aiohttp.ClientConnectionError("refused")]
)
async def test_network_failure(mock_api, client, exception):
    mock_api.post(PLACE_BET_URL, exception=exception)

    with pytest.raises(NetworkFailure):
        await client.place_bet(jodi_request())


async def test_non_json_error_body(mock_api, client):
    mock_api.post(PLACE_BET_URL, status=502, body="<html>Bad Gateway</html>")

    with pytest.raises(ServerRejected) as exc_info:
        await client.place_bet(jodi_request())
    assert exc_info.value.status == 502


async def test_fetch_game(mock_api, client):
    mock_api.get(f"{BASE}/api/games/g1", payload={"success": True, "data": GAME})

    game = await client.fetch_game("g1")

    assert game.id == "g1"
    assert game.min_bet == Decimal(10)
    assert game.end_time == "23:10"
    assert game.is_open
    assert game.payout_for("haruf") == Decimal(9)


async def test_fetch_game_malformed(mock_api, client):
    mock_api.get(f"{BASE}/api/games/g1", payload={"data": {"_id": "g1"}})

    with pytest.raises(ServerRejected):
        await client.fetch_game("g1")


async def test_fetch_wallet(mock_api, client):
    mock_api.get(
        f"{BASE}/api/wallet/balance",
        payload={"data": {"depositBalance": 750.5, "winningBalance": 20, "balance": 770.5}},
    )

    wallet = await client.fetch_wallet()

    assert wallet.deposit_balance == Decimal("750.5")
    assert wallet.winning_balance == Decimal(20)
