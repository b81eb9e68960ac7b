"""Controllers driving a tournament from round to round."""

from rackpairing.controllers.tournament.result_recorder import ResultRecorder
from rackpairing.controllers.tournament.round_manager import RoundManager

__all__ = ["RoundManager", "ResultRecorder"]
