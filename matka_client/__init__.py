"""Client core for the Matka number-guessing wagering platform."""

from matka_client.api.client import MatkaApiClient
from matka_client.log import configure_logging
from matka_client.services.betting_service import BettingSession

__version__ = "1.0.0"

__all__ = ["BettingSession", "MatkaApiClient", "configure_logging", "__version__"]
