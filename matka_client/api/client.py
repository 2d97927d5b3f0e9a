"""aiohttp client for the Matka Betting and Wallet APIs."""

import asyncio

import aiohttp
from loguru import logger
from pydantic import ValidationError

from matka_client.api.base import BettingTransport
from matka_client.betting.errors import NetworkFailure, ServerRejected, SessionExpired
from matka_client.config import settings
from matka_client.schemas.bet import PlaceBetRequest, PlaceBetResponse
from matka_client.schemas.game import GameSnapshot
from matka_client.schemas.wallet import WalletBalance

PLACE_BET_PATH = "/api/games/place-bet"
GAME_PATH = "/api/games/{game_id}"
WALLET_PATH = "/api/wallet/balance"


class MatkaApiClient(BettingTransport):
    """HTTP transport with per-request abandonment timeouts.

    Use as an async context manager, or call ``close()`` when done.
    """

    def __init__(
        self,
        base_url: str | None = None,
        token: str | None = None,
        session: aiohttp.ClientSession | None = None,
    ):
        self.base_url = (base_url or settings.API_BASE_URL).rstrip("/")
        self.token = token if token is not None else settings.API_TOKEN
        self._session = session
        self._owns_session = session is None

    async def __aenter__(self) -> "MatkaApiClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.close()

    def _get_session(self) -> aiohttp.ClientSession:
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession()
            self._owns_session = True
        return self._session

    async def close(self) -> None:
        if self._session is not None and self._owns_session and not self._session.closed:
            await self._session.close()

    def _headers(self, token: str | None) -> dict:
        headers = {
            "Accept": "application/json",
            "Content-Type": "application/json",
        }
        token = token or self.token
        if token:
            headers["Authorization"] = f"Bearer {token}"
        return headers

    async def _request(
        self,
        method: str,
        path: str,
        *,
        timeout: float,
        token: str | None = None,
        payload: dict | None = None,
    ) -> tuple[int, dict]:
        """Send one request and return (status, JSON body) for accepted responses."""
        url = f"{self.base_url}{path}"
        try:
            async with self._get_session().request(
                method,
                url,
                json=payload,
                headers=self._headers(token),
                timeout=aiohttp.ClientTimeout(total=timeout),
            ) as resp:
                status = resp.status
                try:
                    body = await resp.json(content_type=None)
                except ValueError:
                    body = None
        except asyncio.TimeoutError as e:
            logger.warning("{} {} timed out after {}s", method, path, timeout)
            raise NetworkFailure(f"Request timed out after {timeout}s") from e
        except aiohttp.ClientError as e:
            logger.warning("{} {} failed: {}", method, path, e)
            raise NetworkFailure(f"Connection error: {e}") from e

        if not isinstance(body, dict):
            body = {}
        message = body.get("message")

        if status == 401:
            raise SessionExpired(message)
        if status >= 400 or body.get("error") or body.get("success") is False:
            logger.warning("{} {} rejected [{}]: {}", method, path, status, message)
            raise ServerRejected(status, message)
        return status, body

    async def place_bet(
        self, request: PlaceBetRequest, token: str | None = None
    ) -> PlaceBetResponse:
        payload = request.to_payload()
        logger.debug("Placing bet: {}", payload)
        status, body = await self._request(
            "POST", PLACE_BET_PATH,
            timeout=settings.BET_TIMEOUT_S, token=token, payload=payload,
        )
        try:
            return PlaceBetResponse.model_validate(body)
        except ValidationError as e:
            raise ServerRejected(status, "Malformed bet response") from e

    async def fetch_game(self, game_id: str, token: str | None = None) -> GameSnapshot:
        status, body = await self._request(
            "GET", GAME_PATH.format(game_id=game_id),
            timeout=settings.GAME_TIMEOUT_S, token=token,
        )
        try:
            return GameSnapshot.model_validate(body.get("data") or body)
        except ValidationError as e:
            raise ServerRejected(status, "Malformed game data") from e

    async def fetch_wallet(self, token: str | None = None) -> WalletBalance:
        status, body = await self._request(
            "GET", WALLET_PATH, timeout=settings.WALLET_TIMEOUT_S, token=token,
        )
        try:
            return WalletBalance.model_validate(body.get("data") or {})
        except ValidationError as e:
            raise ServerRejected(status, "Malformed wallet data") from e
