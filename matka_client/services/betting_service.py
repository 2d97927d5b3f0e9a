"""Betting session — wires drafts, submission, game state and wallet for one game."""

from apscheduler.schedulers.asyncio import AsyncIOScheduler
from loguru import logger

from matka_client.api.base import BettingTransport
from matka_client.betting.clock import Clock, Countdown, remaining, system_clock
from matka_client.betting.draft import WagerDraft
from matka_client.betting.errors import GameNotOpen
from matka_client.betting.orchestrator import SubmissionOrchestrator, SubmissionReport
from matka_client.schemas.game import BetType
from matka_client.services.game_service import GameWatcher
from matka_client.services.wallet_service import WalletTracker


class BettingSession:
    def __init__(
        self,
        transport: BettingTransport,
        game_id: str,
        token: str | None = None,
        clock: Clock = system_clock,
    ):
        self.game_id = game_id
        self.token = token
        self._clock = clock
        self.game = GameWatcher(transport, game_id, token)
        self.wallet = WalletTracker(transport, token)
        self.orchestrator = SubmissionOrchestrator(transport)
        self._drafts: dict[str, WagerDraft] = {}

    @property
    def busy(self) -> bool:
        return self.orchestrator.busy

    async def open(self, scheduler: AsyncIOScheduler | None = None, poll: bool = True) -> None:
        """Load the game and wallet, then start polling the game."""
        await self.game.refresh()
        await self.wallet.refresh()
        if poll:
            self.game.start(scheduler)

    def close(self) -> None:
        self.game.stop()
        self._drafts.clear()

    def draft(self, bet_type: BetType) -> WagerDraft:
        """The open draft for a bet type, created on first use."""
        if bet_type not in self._drafts:
            self._drafts[bet_type] = WagerDraft(self.game_id, bet_type)
        return self._drafts[bet_type]

    def cancel(self, bet_type: BetType) -> None:
        self.draft(bet_type).clear()

    def countdown(self) -> Countdown:
        return remaining(self._clock(), self.game.snapshot)

    async def submit(self, bet_type: BetType) -> SubmissionReport:
        """Submit a draft and reconcile the wallet."""
        snapshot = self.game.snapshot
        if snapshot is None:
            raise GameNotOpen(self.game_id, "unknown")

        report = await self.orchestrator.submit(
            self.draft(bet_type), snapshot, self.token,
            balance=self.wallet.deposit_balance,
        )
        self.wallet.apply(report)
        if report.succeeded:
            await self.wallet.refresh()
        if report.status == "partial":
            logger.warning(
                "Game {}: {} {} bets still pending retry",
                self.game_id, len(report.failed_legs), bet_type,
            )
        return report
