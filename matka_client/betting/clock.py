"""Bet-window countdown derived from the game's declared state."""

from collections.abc import Callable
from datetime import datetime, time

from pydantic import BaseModel, ConfigDict

from matka_client.schemas.game import GameSnapshot

MINUTES_PER_DAY = 24 * 60

# Which declared time the countdown runs towards, per status
BOUNDARY_BY_STATUS = {
    "open": "end_time",
    "closed": "result_time",
    "waiting": "start_time",
}

Clock = Callable[[], datetime]


def system_clock() -> datetime:
    return datetime.now()


class Countdown(BaseModel):
    model_config = ConfigDict(frozen=True)

    hours: int = 0
    minutes: int = 0
    seconds: int = 0

    def __str__(self) -> str:
        return f"{self.hours:02d}:{self.minutes:02d}:{self.seconds:02d}"


def minutes_of_day(hhmm: str) -> int:
    hours, minutes = (int(part) for part in hhmm.split(":"))
    return hours * 60 + minutes


def boundary_time(game: GameSnapshot) -> str | None:
    field = BOUNDARY_BY_STATUS.get(game.current_status)
    return getattr(game, field) if field else None


def remaining(now: datetime | time, game: GameSnapshot | None) -> Countdown:
    """Time left until the next boundary of the bet window.

    The boundary is read from the game's current status on every call, and
    is taken as today or tomorrow, whichever is sooner. Seconds are shown as
    ``59 - now.second``, a display approximation that restarts at 59 each
    minute. Statuses without a boundary give a zero countdown.
    """
    target = boundary_time(game) if game is not None else None
    if target is None:
        return Countdown()

    diff = minutes_of_day(target) - (now.hour * 60 + now.minute)
    if diff < 0:
        diff += MINUTES_PER_DAY

    return Countdown(hours=diff // 60, minutes=diff % 60, seconds=59 - now.second)
