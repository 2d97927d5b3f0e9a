"""Wager draft: the in-memory bet slip for one game and bet type."""

import re
from decimal import Decimal, InvalidOperation

from pydantic import BaseModel, ConfigDict

from matka_client.betting.crossing import CombinationSet, generate
from matka_client.betting.errors import InvalidInput
from matka_client.schemas.bet import HarufPosition
from matka_client.schemas.game import BetType, GameSnapshot

JODI_KEY = re.compile(r"^[0-9]{2}$")
# A = Andar (first digit), B = Bahar (last digit)
HARUF_KEY = re.compile(r"^[AB][0-9]$")


class WagerLeg(BaseModel):
    """One (number, amount) pair awaiting submission."""

    model_config = ConfigDict(frozen=True)

    key: str
    amount: Decimal
    bet_type: BetType
    haruf_position: HarufPosition | None = None

    @property
    def digit(self) -> str:
        """The digit a Haruf leg bets on."""
        return self.key[-1]


def parse_amount(amount) -> Decimal:
    """Parse a user-entered amount; empty input counts as zero."""
    if amount is None or amount == "":
        return Decimal(0)
    if isinstance(amount, bool):
        raise InvalidInput(f"Invalid amount: {amount!r}")
    try:
        value = Decimal(str(amount).strip())
    except (InvalidOperation, ValueError):
        raise InvalidInput(f"Invalid amount: {amount!r}") from None
    if not value.is_finite():
        raise InvalidInput(f"Invalid amount: {amount!r}")
    return value


def haruf_position(key: str) -> HarufPosition:
    return "first" if key.startswith("A") else "last"


class WagerDraft:
    """Mutable aggregate of legs for one game and bet type.

    Jodi drafts hold a single selected number; Haruf drafts hold any of the
    twenty A0-A9/B0-B9 slots; Crossing drafts hold a digit sequence and a
    per-combination stake, and their legs are the active combination class.
    Amounts <= 0 mean "no bet" for that number and are dropped.
    """

    def __init__(self, game_id: str, bet_type: BetType):
        if bet_type not in ("jodi", "haruf", "crossing"):
            raise ValueError(f"Unknown bet type: {bet_type}")
        self.game_id = game_id
        self.bet_type: BetType = bet_type
        self._legs: dict[str, Decimal] = {}
        self._combinations = CombinationSet()
        self._joda_cut = False

    def __repr__(self) -> str:
        return (
            f"WagerDraft(game_id={self.game_id!r}, bet_type={self.bet_type!r}, "
            f"legs={len(self.legs())}, total={self.total()})"
        )

    # --- mutations ---

    def _normalize_key(self, key: str) -> str:
        key = str(key).strip().upper()
        pattern = JODI_KEY if self.bet_type == "jodi" else HARUF_KEY
        if not pattern.match(key):
            raise InvalidInput(f"Invalid {self.bet_type} number: {key!r}")
        return key

    def set_leg(self, key: str, amount) -> None:
        """Set or clear the amount on one number."""
        if self.bet_type == "crossing":
            raise TypeError("Crossing drafts are built with set_crossing()")
        key = self._normalize_key(key)
        value = parse_amount(amount)
        if value <= 0:
            self._legs.pop(key, None)
            return
        if self.bet_type == "jodi":
            self._legs.clear()
        self._legs[key] = value

    def set_crossing(self, sequence: str, stake) -> CombinationSet:
        """Regenerate the combination classes from the current input."""
        if self.bet_type != "crossing":
            raise TypeError("set_crossing() only applies to crossing drafts")
        self._combinations = generate(sequence, stake)
        return self._combinations

    def toggle_joda_cut(self, enabled: bool) -> None:
        """Select which combination class is submitted. Stakes are unchanged."""
        if self.bet_type != "crossing":
            raise TypeError("Joda cut only applies to crossing drafts")
        self._joda_cut = bool(enabled)

    def clear(self) -> None:
        self._legs.clear()
        self._combinations = CombinationSet()
        self._joda_cut = False

    def clear_legs(self, legs: list[WagerLeg]) -> None:
        """Drop the given legs unless their amount was edited since."""
        for leg in legs:
            if self._legs.get(leg.key) == leg.amount:
                del self._legs[leg.key]

    # --- derived state ---

    @property
    def joda_cut(self) -> bool:
        return self._joda_cut

    @property
    def combinations(self) -> CombinationSet:
        return self._combinations

    def amount_for(self, key: str) -> Decimal:
        return self._legs.get(str(key).strip().upper(), Decimal(0))

    def legs(self) -> list[WagerLeg]:
        """Positive legs in entry order (crossing: the active combinations)."""
        if self.bet_type == "crossing":
            return [
                WagerLeg(key=c.digits, amount=c.stake, bet_type="crossing")
                for c in self._combinations.active(self._joda_cut)
            ]
        return [
            WagerLeg(
                key=key,
                amount=amount,
                bet_type=self.bet_type,
                haruf_position=haruf_position(key) if self.bet_type == "haruf" else None,
            )
            for key, amount in self._legs.items()
            if amount > 0
        ]

    def total(self) -> Decimal:
        return sum((leg.amount for leg in self.legs()), Decimal(0))

    def is_empty(self) -> bool:
        return not self.legs()

    def potential_winning(self, game: GameSnapshot) -> Decimal:
        """Payout if every leg won, at the game's multiplier for this bet type."""
        return self.total() * game.payout_for(self.bet_type)
