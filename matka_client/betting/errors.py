"""Error taxonomy for wager validation and submission."""


class BettingError(Exception):
    """Base for every error raised by the betting core."""


class InvalidInput(BettingError, ValueError):
    """Malformed number key, amount or digit sequence."""


class GameNotOpen(BettingError):
    def __init__(self, game_id: str, status: str):
        self.game_id = game_id
        self.status = status
        super().__init__(f"Game {game_id} is not accepting bets (status: {status})")


class EmptyWager(BettingError):
    def __init__(self):
        super().__init__("Place an amount on at least one number")


class OutOfBounds(BettingError):
    def __init__(self, amount, min_bet, max_bet, number: str | None = None, message: str | None = None):
        self.amount = amount
        self.min_bet = min_bet
        self.max_bet = max_bet
        self.number = number
        where = f" on {number}" if number else ""
        super().__init__(
            message or f"Bet amount {amount}{where} must be between {min_bet} and {max_bet}"
        )


class InsufficientBalance(OutOfBounds):
    def __init__(self, amount, balance):
        self.balance = balance
        super().__init__(
            amount, None, balance,
            message=f"Insufficient balance: {amount} required, {balance} available",
        )


class SubmissionInProgress(BettingError):
    def __init__(self):
        super().__init__("A submission is already in progress")


class TransportError(BettingError):
    """A single API request did not produce a successful response."""


class NetworkFailure(TransportError):
    """Timeout or connectivity failure; the server outcome is unknown."""


class ServerRejected(TransportError):
    def __init__(self, status: int, message: str | None = None):
        self.status = status
        self.message = message or "Failed to place bet"
        super().__init__(f"[{status}] {self.message}")


class SessionExpired(ServerRejected):
    def __init__(self, message: str | None = None):
        super().__init__(401, message or "Session expired, please login again")


class PartialFailure(BettingError):
    """Some legs of a multi-request submission succeeded and some failed."""

    def __init__(self, report):
        self.report = report
        super().__init__(
            f"{report.succeeded} of {report.attempted} bets placed, "
            f"{len(report.failed_legs)} failed"
        )
