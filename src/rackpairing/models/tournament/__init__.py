"""Tournament data models."""

from rackpairing.models.tournament.match import Match
from rackpairing.models.tournament.pairing_history import PairingHistory
from rackpairing.models.tournament.tournament import Tournament
from rackpairing.models.tournament.tournament_config import TournamentConfig

__all__ = ["Match", "PairingHistory", "Tournament", "TournamentConfig"]
