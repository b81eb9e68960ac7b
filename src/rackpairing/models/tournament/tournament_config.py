"""TournamentConfig data class."""

# Rack Pairing
# Copyright (C) 2025  Rack Pairing developers
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.

from dataclasses import dataclass
from typing import Any, Dict, Optional

from rackpairing.constants import (
    DEFAULT_FONTES_PODS,
    DEFAULT_PAIRING_SYSTEM,
    PAIRING_SYSTEMS,
)
from rackpairing.exceptions import (
    InvalidConfigurationException,
    MissingConfigurationException,
)
from rackpairing.type_hints import PairingSystemName


@dataclass
class TournamentConfig:
    """Tournament configuration settings.

    Attributes
    ----------
    name : str
        Tournament name.
    num_rounds : int
        Number of rounds in the tournament.
    pairing_system : str
        Pairing system used for generating pairings. Supported values are
        "swiss", "round_robin", "koth" and "initial_fontes".
    avoid_repeat_byes : bool
        Swiss only. Skip players who already had a bye when choosing the
        bye recipient.
    swiss_time_budget : float or None
        Wall-clock seconds the Swiss search may take before falling back to
        standings order. None means unbounded.
    fontes_pods : int
        Number of pods for Initial Fontes pairing.
    require_check_in : bool
        Only pair participants who have checked in.
    """

    name: str
    num_rounds: int
    pairing_system: PairingSystemName = DEFAULT_PAIRING_SYSTEM
    avoid_repeat_byes: bool = False
    swiss_time_budget: Optional[float] = None
    fontes_pods: int = DEFAULT_FONTES_PODS
    require_check_in: bool = True

    def __post_init__(self):
        if self.num_rounds < 1:
            raise InvalidConfigurationException(
                f"num_rounds must be at least 1, got {self.num_rounds}"
            )
        if self.pairing_system not in PAIRING_SYSTEMS:
            raise InvalidConfigurationException(
                f"Unknown pairing system '{self.pairing_system}', "
                f"expected one of {', '.join(PAIRING_SYSTEMS)}"
            )
        if self.swiss_time_budget is not None and self.swiss_time_budget <= 0:
            raise InvalidConfigurationException(
                f"swiss_time_budget must be positive, got {self.swiss_time_budget}"
            )
        if self.fontes_pods < 1:
            raise InvalidConfigurationException(
                f"fontes_pods must be at least 1, got {self.fontes_pods}"
            )

    def to_dict(self) -> Dict[str, Any]:
        """Serialize configuration to dictionary."""
        return {
            "name": self.name,
            "num_rounds": self.num_rounds,
            "pairing_system": self.pairing_system,
            "avoid_repeat_byes": self.avoid_repeat_byes,
            "swiss_time_budget": self.swiss_time_budget,
            "fontes_pods": self.fontes_pods,
            "require_check_in": self.require_check_in,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "TournamentConfig":
        """Deserialize configuration from dictionary."""
        if "num_rounds" not in data:
            raise MissingConfigurationException("num_rounds is required")
        return cls(
            name=data.get("name", "Untitled Tournament"),
            num_rounds=data["num_rounds"],
            pairing_system=data.get("pairing_system", DEFAULT_PAIRING_SYSTEM),
            avoid_repeat_byes=data.get("avoid_repeat_byes", False),
            swiss_time_budget=data.get("swiss_time_budget"),
            fontes_pods=data.get("fontes_pods", DEFAULT_FONTES_PODS),
            require_check_in=data.get("require_check_in", True),
        )
