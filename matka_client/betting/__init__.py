"""Betting core: combination generator, wager draft, countdown and submission."""

from matka_client.betting.clock import Countdown, remaining, system_clock
from matka_client.betting.crossing import Combination, CombinationSet, generate
from matka_client.betting.draft import WagerDraft, WagerLeg
from matka_client.betting.orchestrator import (
    SubmissionOrchestrator,
    SubmissionOutcome,
    SubmissionReport,
)

__all__ = [
    "Combination",
    "CombinationSet",
    "Countdown",
    "SubmissionOrchestrator",
    "SubmissionOutcome",
    "SubmissionReport",
    "WagerDraft",
    "WagerLeg",
    "generate",
    "remaining",
    "system_clock",
]
