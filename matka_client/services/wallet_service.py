"""Wallet balance tracker: optimistic deltas, authoritative refresh."""

from decimal import Decimal

from loguru import logger

from matka_client.api.base import BettingTransport
from matka_client.betting.errors import TransportError
from matka_client.betting.orchestrator import SubmissionReport
from matka_client.schemas.wallet import WalletBalance


class WalletTracker:
    def __init__(self, transport: BettingTransport, token: str | None = None):
        self._transport = transport
        self.token = token
        self.balance: WalletBalance | None = None

    @property
    def deposit_balance(self) -> Decimal | None:
        return self.balance.deposit_balance if self.balance else None

    async def refresh(self) -> WalletBalance | None:
        """Fetch the authoritative balance; keeps the last known one on failure."""
        try:
            self.balance = await self._transport.fetch_wallet(self.token)
        except TransportError as e:
            logger.warning("Wallet fetch failed, keeping last known: {}", e)
        return self.balance

    def apply(self, report: SubmissionReport) -> None:
        """Apply successful outcomes optimistically.

        A balance reported by the server wins over the computed delta.
        """
        if self.balance is None:
            return
        deposit = self.balance.deposit_balance
        for outcome in report.outcomes:
            if not outcome.success:
                continue
            if outcome.current_balance is not None:
                deposit = outcome.current_balance
            elif outcome.balance_delta:
                deposit += outcome.balance_delta
        self.balance = self.balance.model_copy(update={"deposit_balance": deposit})
