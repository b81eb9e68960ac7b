"""Match data class."""

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

import uuid
from dataclasses import dataclass
from typing import Any, Dict, Optional

from rackpairing.constants import MATCH_FINISHED, MATCH_PENDING
from rackpairing.models.pairing import Pairing
from rackpairing.type_hints import MatchStatus, MaybeUserId


@dataclass
class Match:
    """A stored pairing for one round.

    Attributes
    ----------
    id : str
        Match identifier.
    tournament_id : str
        Tournament the match belongs to.
    round_number : int
        Round number (1-indexed).
    player1_id : str
        ``user_id`` of the first player (the bye recipient for byes).
    player2_id : str or None
        ``user_id`` of the second player, None for a bye.
    is_bye : bool
        True when player1 has no opponent this round.
    status : str
        ``pending`` -> ``live`` -> ``finished``.
    score1, score2 : int or None
        Game scores, set once the result is recorded.
    """

    id: str
    tournament_id: str
    round_number: int
    player1_id: str
    player2_id: MaybeUserId = None
    is_bye: bool = False
    status: MatchStatus = MATCH_PENDING
    score1: Optional[int] = None
    score2: Optional[int] = None

    @classmethod
    def from_pairing(
        cls, pairing: Pairing, tournament_id: str, round_number: int
    ) -> "Match":
        """Stamp an engine pairing with ids and a pending status."""
        return cls(
            id=uuid.uuid4().hex,
            tournament_id=tournament_id,
            round_number=round_number,
            player1_id=pairing.player1_id,
            player2_id=pairing.player2_id,
            is_bye=pairing.is_bye,
        )

    @property
    def is_finished(self) -> bool:
        return self.status == MATCH_FINISHED

    @property
    def has_result(self) -> bool:
        return self.score1 is not None or self.score2 is not None

    def to_pairing(self) -> Pairing:
        return Pairing(self.player1_id, self.player2_id, self.is_bye)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize match to dictionary."""
        return {
            "id": self.id,
            "tournament_id": self.tournament_id,
            "round_number": self.round_number,
            "player1_id": self.player1_id,
            "player2_id": self.player2_id,
            "is_bye": self.is_bye,
            "status": self.status,
            "score1": self.score1,
            "score2": self.score2,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Match":
        """Deserialize match from dictionary."""
        return cls(
            id=data["id"],
            tournament_id=data["tournament_id"],
            round_number=data["round_number"],
            player1_id=data["player1_id"],
            player2_id=data.get("player2_id"),
            is_bye=data.get("is_bye", False),
            status=data.get("status", MATCH_PENDING),
            score1=data.get("score1"),
            score2=data.get("score2"),
        )
