"""Game snapshot watcher with last-known fallback and scheduled polling."""

from datetime import datetime

from apscheduler.schedulers.asyncio import AsyncIOScheduler
from loguru import logger

from matka_client.api.base import BettingTransport
from matka_client.betting.errors import TransportError
from matka_client.config import settings
from matka_client.schemas.game import GameSnapshot


class GameWatcher:
    """Keeps the latest snapshot of one game.

    A failed fetch (network or non-2xx) leaves the last-known snapshot in
    place and records the error.
    """

    def __init__(
        self,
        transport: BettingTransport,
        game_id: str,
        token: str | None = None,
        interval_s: int | None = None,
    ):
        self._transport = transport
        self.game_id = game_id
        self.token = token
        self.interval_s = interval_s or settings.GAME_POLL_INTERVAL_S
        self.snapshot: GameSnapshot | None = None
        self.last_error: TransportError | None = None
        self._scheduler: AsyncIOScheduler | None = None
        self._owns_scheduler = False

    @property
    def job_id(self) -> str:
        return f"game_poll_{self.game_id}"

    async def refresh(self) -> GameSnapshot | None:
        """Fetch a fresh snapshot, falling back to the last known one."""
        try:
            snapshot = await self._transport.fetch_game(self.game_id, self.token)
        except TransportError as e:
            self.last_error = e
            logger.warning(
                "Game {} snapshot unavailable, keeping last known: {}", self.game_id, e
            )
            return self.snapshot

        if self.snapshot and self.snapshot.current_status != snapshot.current_status:
            logger.info(
                "Game {} status {} -> {}",
                self.game_id, self.snapshot.current_status, snapshot.current_status,
            )
        self.snapshot = snapshot
        self.last_error = None
        return snapshot

    def start(self, scheduler: AsyncIOScheduler | None = None) -> None:
        """Poll on an interval job. Must be called from a running event loop."""
        if self._scheduler is not None:
            return

        if scheduler is None:
            scheduler = AsyncIOScheduler()
            self._owns_scheduler = True
        self._scheduler = scheduler

        scheduler.add_job(
            self.refresh, "interval",
            seconds=self.interval_s,
            id=self.job_id,
            replace_existing=True,
            next_run_time=datetime.now(),
        )
        if not scheduler.running:
            scheduler.start()
        logger.info("Polling game {} every {}s", self.game_id, self.interval_s)

    def stop(self) -> None:
        if self._scheduler is None:
            return
        if self._owns_scheduler:
            self._scheduler.shutdown(wait=False)
        elif self._scheduler.get_job(self.job_id):
            self._scheduler.remove_job(self.job_id)
        self._scheduler = None
        self._owns_scheduler = False
        logger.info("Stopped polling game {}", self.game_id)
