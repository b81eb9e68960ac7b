"""Tournament state container."""

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
from typing import Any, Dict, Iterable, List, Optional

from rackpairing.constants import (
    TOURNAMENT_ACTIVE,
    TOURNAMENT_COMPLETED,
    TOURNAMENT_SETUP,
)
from rackpairing.exceptions import (
    DuplicateParticipantException,
    MatchNotFoundException,
    ParticipantNotFoundException,
    TournamentStateException,
)
from rackpairing.models.participant import Participant
from rackpairing.models.tournament.match import Match
from rackpairing.models.tournament.tournament_config import TournamentConfig
from rackpairing.pairing.ranking import rank_participants
from rackpairing.type_hints import TournamentStatus
from rackpairing.utils import setup_logger

logger = setup_logger(__name__)


class Tournament:
    """Roster, configuration and stored matches of one tournament.

    The tournament moves ``setup -> active -> completed``. The transitions and
    round creation are driven by :class:`RoundManager`; results are applied by
    :class:`ResultRecorder`. This class only holds state.
    """

    def __init__(
        self,
        config: TournamentConfig,
        participants: Optional[Iterable[Participant]] = None,
        tournament_id: Optional[str] = None,
    ) -> None:
        self.id = tournament_id or uuid.uuid4().hex
        self.config = config
        self.status: TournamentStatus = TOURNAMENT_SETUP
        self.current_round = 0
        self.participants: Dict[str, Participant] = {}
        self.matches: List[Match] = []
        for participant in participants or ():
            self.add_participant(participant)

    # ========== Properties ==========

    @property
    def name(self) -> str:
        return self.config.name

    @property
    def num_rounds(self) -> int:
        return self.config.num_rounds

    @property
    def pairing_system(self) -> str:
        return self.config.pairing_system

    @property
    def is_setup(self) -> bool:
        return self.status == TOURNAMENT_SETUP

    @property
    def is_active(self) -> bool:
        return self.status == TOURNAMENT_ACTIVE

    @property
    def is_completed(self) -> bool:
        return self.status == TOURNAMENT_COMPLETED

    # ========== Participants ==========

    def get_participant_list(self, active_only: bool = False) -> List[Participant]:
        """Participants in registration order."""
        if active_only:
            return [p for p in self.participants.values() if p.is_active]
        return list(self.participants.values())

    def add_participant(self, participant: Participant) -> None:
        """Register a participant.

        Raises
        ------
        DuplicateParticipantException
            If the participant id or the player's user id is already entered.
        TournamentStateException
            If the tournament is already completed.
        """
        if self.is_completed:
            raise TournamentStateException(
                "Cannot register participants for a completed tournament"
            )
        if participant.id in self.participants:
            raise DuplicateParticipantException(
                f"Participant {participant.id} is already registered"
            )
        if self.find_by_user_id(participant.user_id) is not None:
            raise DuplicateParticipantException(
                f"Player {participant.user_id} is already entered"
            )
        self.participants[participant.id] = participant
        logger.info(f"Registered {participant.user_id} in {self.name}")

    def get_participant(self, participant_id: str) -> Participant:
        try:
            return self.participants[participant_id]
        except KeyError:
            raise ParticipantNotFoundException(
                f"No participant with id {participant_id}"
            ) from None

    def find_by_user_id(self, user_id: str) -> Optional[Participant]:
        for participant in self.participants.values():
            if participant.user_id == user_id:
                return participant
        return None

    def withdraw_participant(self, participant_id: str) -> None:
        participant = self.get_participant(participant_id)
        participant.withdraw()
        logger.info(f"{participant.user_id} withdrew from {self.name}")

    def set_checked_in(self, participant_id: str, checked_in: bool = True) -> None:
        self.get_participant(participant_id).checked_in = checked_in

    def get_standings(self) -> List[Participant]:
        """Active participants ranked by wins, then spread."""
        return rank_participants(self.get_participant_list(active_only=True))

    # ========== Matches ==========

    def matches_for_round(self, round_number: int) -> List[Match]:
        return [m for m in self.matches if m.round_number == round_number]

    def get_match(self, match_id: str) -> Match:
        for match in self.matches:
            if match.id == match_id:
                return match
        raise MatchNotFoundException(f"No match with id {match_id}")

    def is_round_finished(self, round_number: int) -> bool:
        return all(m.is_finished for m in self.matches_for_round(round_number))

    # ========== Serialization ==========

    def to_dict(self) -> Dict[str, Any]:
        """Serialize tournament to dictionary."""
        return {
            "id": self.id,
            "config": self.config.to_dict(),
            "status": self.status,
            "current_round": self.current_round,
            "participants": [p.to_dict() for p in self.participants.values()],
            "matches": [m.to_dict() for m in self.matches],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Tournament":
        """Deserialize tournament from dictionary."""
        tournament = cls(
            config=TournamentConfig.from_dict(data["config"]),
            participants=[Participant.from_dict(p) for p in data.get("participants", [])],
            tournament_id=data.get("id"),
        )
        tournament.status = data.get("status", TOURNAMENT_SETUP)
        tournament.current_round = data.get("current_round", 0)
        tournament.matches = [Match.from_dict(m) for m in data.get("matches", [])]
        return tournament
