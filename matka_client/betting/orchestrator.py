"""Submission orchestrator: validates a wager draft and places its bets.

Jodi and Crossing drafts go out as one request; Haruf drafts go out as one
request per leg, sequentially, and every leg is attempted even when an
earlier one fails. Local precondition failures raise before any request is
sent. Network and server failures never raise: they become failed outcomes
in the returned ``SubmissionReport``.
"""

from decimal import Decimal
from typing import Literal

from loguru import logger
from pydantic import BaseModel, ConfigDict, Field

from matka_client.api.base import BettingTransport
from matka_client.betting.draft import WagerDraft, WagerLeg
from matka_client.betting.errors import (
    EmptyWager,
    GameNotOpen,
    InsufficientBalance,
    OutOfBounds,
    PartialFailure,
    SubmissionInProgress,
    TransportError,
)
from matka_client.schemas.bet import PlaceBetRequest
from matka_client.schemas.game import GameSnapshot

ReportStatus = Literal["success", "partial", "failed"]


class SubmissionOutcome(BaseModel):
    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    leg: WagerLeg
    success: bool
    server_message: str | None = None
    balance_delta: Decimal | None = None
    current_balance: Decimal | None = None
    error: TransportError | None = Field(default=None, exclude=True)


class SubmissionReport(BaseModel):
    model_config = ConfigDict(frozen=True)

    attempted: int
    succeeded: int
    failed_legs: tuple[tuple[WagerLeg, str], ...] = ()
    outcomes: tuple[SubmissionOutcome, ...] = ()

    @classmethod
    def from_outcomes(cls, outcomes: list[SubmissionOutcome]) -> "SubmissionReport":
        return cls(
            attempted=len(outcomes),
            succeeded=sum(1 for o in outcomes if o.success),
            failed_legs=tuple(
                (o.leg, o.server_message or "Failed to place bet")
                for o in outcomes
                if not o.success
            ),
            outcomes=tuple(outcomes),
        )

    @property
    def status(self) -> ReportStatus:
        if self.succeeded == self.attempted:
            return "success"
        return "partial" if self.succeeded else "failed"

    @property
    def balance_delta(self) -> Decimal:
        """Sum of the optimistic balance changes of the successful outcomes."""
        return sum(
            (o.balance_delta for o in self.outcomes if o.success and o.balance_delta),
            Decimal(0),
        )

    def raise_for_status(self) -> None:
        """Raise ``PartialFailure``, or the failing leg's own error, unless all succeeded."""
        if self.status == "partial":
            raise PartialFailure(self)
        if self.status == "failed":
            first = next(o for o in self.outcomes if not o.success)
            if first.error is not None:
                raise first.error
            raise TransportError(first.server_message or "Failed to place bet")


def _check_bounds(amount: Decimal, game: GameSnapshot, number: str | None = None) -> None:
    if amount < game.min_bet or amount > game.max_bet:
        raise OutOfBounds(amount, game.min_bet, game.max_bet, number=number)


def validate(
    draft: WagerDraft, game: GameSnapshot, balance: Decimal | None = None
) -> list[WagerLeg]:
    """Check local preconditions and return the legs to submit.

    Haruf legs are bounded individually; Jodi and Crossing are one logical
    bet, so the draft total is bounded (for Crossing, not the unit stake).
    """
    if draft.game_id != game.id:
        raise ValueError(f"Draft is for game {draft.game_id}, snapshot is {game.id}")
    if not game.is_open:
        raise GameNotOpen(game.id, game.current_status)

    legs = draft.legs()
    if not legs:
        raise EmptyWager()

    total = draft.total()
    if draft.bet_type == "haruf":
        for leg in legs:
            _check_bounds(leg.amount, game, number=leg.key)
    else:
        _check_bounds(total, game)

    if balance is not None and total > balance:
        raise InsufficientBalance(total, balance)
    return legs


def build_request(draft: WagerDraft, game: GameSnapshot, leg: WagerLeg | None = None) -> PlaceBetRequest:
    """Wire request for one Haruf/Jodi leg, or for the whole Crossing draft."""
    if draft.bet_type == "crossing":
        combos = draft.combinations
        total = draft.total()
        return PlaceBetRequest(
            game_id=game.id,
            bet_type="crossing",
            bet_number=combos.sequence,
            bet_amount=float(total),
            bet_data={
                "jodaCut": draft.joda_cut,
                "crossingAmount": float(combos.stake),
                "combinations": [c.digits for c in combos.active(draft.joda_cut)],
                "totalAmount": float(total),
            },
        )
    if leg.bet_type == "haruf":
        return PlaceBetRequest(
            game_id=game.id,
            bet_type="haruf",
            bet_number=leg.key,
            bet_amount=float(leg.amount),
            haruf_position=leg.haruf_position,
            bet_data={"harufPosition": leg.haruf_position, "harufDigit": leg.digit},
        )
    return PlaceBetRequest(
        game_id=game.id,
        bet_type=leg.bet_type,
        bet_number=leg.key,
        bet_amount=float(leg.amount),
    )


class SubmissionOrchestrator:
    """Places the bets of a draft, one submission at a time."""

    def __init__(self, transport: BettingTransport):
        self._transport = transport
        self._busy = False

    @property
    def busy(self) -> bool:
        return self._busy

    async def _place(
        self, request: PlaceBetRequest, leg: WagerLeg, amount: Decimal, token: str | None
    ) -> SubmissionOutcome:
        try:
            response = await self._transport.place_bet(request, token)
        except TransportError as e:
            logger.warning("[{}] {} failed: {}", leg.bet_type, request.bet_number, e)
            return SubmissionOutcome(
                leg=leg,
                success=False,
                server_message=getattr(e, "message", None) or str(e),
                error=e,
            )

        data = response.data
        logger.info("[{}] {} placed: {}", leg.bet_type, request.bet_number, amount)
        return SubmissionOutcome(
            leg=leg,
            success=True,
            server_message=response.message,
            balance_delta=-amount,
            current_balance=data.current_balance if data else None,
        )

    async def submit(
        self,
        draft: WagerDraft,
        game: GameSnapshot,
        token: str | None = None,
        balance: Decimal | None = None,
    ) -> SubmissionReport:
        """Validate and submit a draft.

        Raises ``SubmissionInProgress`` when another submission is in flight,
        and the local precondition errors before any request is sent.
        Succeeded legs are cleared from the draft once the report is final;
        failed legs stay so the user can resubmit them.
        """
        if self._busy:
            raise SubmissionInProgress()
        legs = validate(draft, game, balance)

        self._busy = True
        try:
            if draft.bet_type == "haruf":
                outcomes = []
                for leg in legs:
                    request = build_request(draft, game, leg)
                    outcomes.append(await self._place(request, leg, leg.amount, token))
            else:
                # Jodi and Crossing are a single logical bet reported as one leg
                leg = _summary_leg(draft, legs)
                request = build_request(draft, game, leg)
                outcomes = [await self._place(request, leg, draft.total(), token)]

            report = SubmissionReport.from_outcomes(outcomes)
            logger.info(
                "[{}] game {}: {}/{} placed ({})",
                draft.bet_type, game.id, report.succeeded, report.attempted, report.status,
            )

            if draft.bet_type == "haruf":
                draft.clear_legs([o.leg for o in report.outcomes if o.success])
            elif report.status == "success":
                draft.clear()
            return report
        finally:
            self._busy = False


def _summary_leg(draft: WagerDraft, legs: list[WagerLeg]) -> WagerLeg:
    if draft.bet_type == "crossing":
        return WagerLeg(key=draft.combinations.sequence, amount=draft.total(), bet_type="crossing")
    return legs[0]
