"""Crossing / Joda-Cut combination generator.

Expands a 2-4 digit sequence into every ordered two-digit pair of its
positions (a digit may pair with itself). The Crossing class keeps every
unique pair; the Joda-Cut class drops same-digit ("joda") pairs such as 22.
"""

from decimal import Decimal, InvalidOperation
from typing import Literal

from loguru import logger
from pydantic import BaseModel, ConfigDict

from matka_client.config import settings

MIN_SEQUENCE_LEN = 2
MAX_SEQUENCE_LEN = 4

CombinationClass = Literal["crossing", "joda_cut"]


class Combination(BaseModel):
    model_config = ConfigDict(frozen=True)

    digits: str
    stake: Decimal
    kind: CombinationClass = "crossing"

    @property
    def is_joda(self) -> bool:
        return self.digits[0] == self.digits[1]


class CombinationSet(BaseModel):
    """Both combination classes generated from one sequence and stake."""

    model_config = ConfigDict(frozen=True)

    sequence: str = ""
    stake: Decimal = Decimal(0)
    crossing: tuple[Combination, ...] = ()
    joda_cut: tuple[Combination, ...] = ()

    @property
    def crossing_total(self) -> Decimal:
        return self.stake * len(self.crossing)

    @property
    def joda_cut_total(self) -> Decimal:
        return self.stake * len(self.joda_cut)

    def is_empty(self) -> bool:
        return not self.crossing

    def active(self, joda_cut: bool) -> tuple[Combination, ...]:
        """The class selected for submission."""
        return self.joda_cut if joda_cut else self.crossing

    def active_total(self, joda_cut: bool) -> Decimal:
        return self.joda_cut_total if joda_cut else self.crossing_total

    def describe(self) -> str:
        """One-line summary of both classes, e.g. 'Crossing: 4 × ₹10 = ₹40'."""
        if self.is_empty():
            return "Enter 2-4 digit number and amount"
        cur = settings.CURRENCY
        return (
            f"Crossing: {len(self.crossing)} × {cur}{self.stake} = {cur}{self.crossing_total} | "
            f"Joda Cut: {len(self.joda_cut)} × {cur}{self.stake} = {cur}{self.joda_cut_total}"
        )


def _valid_sequence(sequence) -> bool:
    return (
        isinstance(sequence, str)
        and MIN_SEQUENCE_LEN <= len(sequence) <= MAX_SEQUENCE_LEN
        and all(ch in "0123456789" for ch in sequence)
    )


def _to_stake(stake) -> Decimal | None:
    try:
        value = Decimal(str(stake))
    except (InvalidOperation, ValueError):
        return None
    if not value.is_finite() or value <= 0:
        return None
    return value


def generate(sequence: str, stake) -> CombinationSet:
    """Generate the Crossing and Joda-Cut combination classes.

    Invalid input (sequence length outside 2-4, non-digit characters, or a
    non-positive stake) yields an empty set rather than an error, so callers
    can regenerate on every keystroke.

    Combinations are unique by their two-digit string and sorted ascending,
    so identical inputs always give an identical ordered result.
    """
    amount = _to_stake(stake)
    if amount is None or not _valid_sequence(sequence):
        return CombinationSet()

    pairs = sorted({a + b for a in sequence for b in sequence})
    crossing = tuple(Combination(digits=p, stake=amount) for p in pairs)
    joda_cut = tuple(
        Combination(digits=c.digits, stake=amount, kind="joda_cut")
        for c in crossing
        if not c.is_joda
    )
    result = CombinationSet(
        sequence=sequence, stake=amount, crossing=crossing, joda_cut=joda_cut,
    )

    logger.debug(
        "Generated from {!r} ({} digits): {} crossings = {}, {} joda cut = {}",
        sequence, len(sequence),
        len(crossing), result.crossing_total,
        len(joda_cut), result.joda_cut_total,
    )
    return result
