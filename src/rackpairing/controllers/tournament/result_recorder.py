"""Result recording for tournaments."""

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

from typing import List

from rackpairing.constants import (
    BYE_SPREAD,
    BYE_WINS,
    LOSS_CREDIT,
    MATCH_FINISHED,
    MATCH_LIVE,
    MATCH_PENDING,
    TIE_CREDIT,
    WIN_CREDIT,
)
from rackpairing.exceptions import (
    DuplicateResultException,
    InvalidResultException,
    ParticipantNotFoundException,
    TournamentStateException,
)
from rackpairing.models.participant import Participant
from rackpairing.models.tournament import Match, Tournament
from rackpairing.utils import setup_logger

logger = setup_logger(__name__)


class ResultRecorder:
    """Handles recording and validating match results.

    This class is responsible for:
    - Moving matches through pending -> live -> finished
    - Updating participant wins and spread
    - Crediting byes
    - Preventing duplicate result recording
    """

    def __init__(self, tournament: Tournament):
        self.tournament = tournament

    def start_match(self, match_id: str) -> Match:
        """Mark a pending match as live."""
        match = self.tournament.get_match(match_id)
        if match.is_bye:
            raise TournamentStateException("A bye has no game to start")
        if match.status != MATCH_PENDING:
            raise TournamentStateException(
                f"Match {match_id} is already {match.status}"
            )
        match.status = MATCH_LIVE
        logger.debug(f"Match {match}: live")
        return match

    def record_result(self, match_id: str, score1: int, score2: int) -> Match:
        """Record final scores and update both players' standings.

        The winner gets a win, a tie gives half a win each, and each side's
        spread moves by its score difference.

        Raises:
            MatchNotFoundException: If no match has this id
            InvalidResultException: If the match is a bye or a score is negative
            DuplicateResultException: If the match is already finished
        """
        match = self.tournament.get_match(match_id)
        if match.is_bye:
            raise InvalidResultException(
                f"Match {match_id} is a bye, use award_byes instead"
            )
        if match.is_finished:
            raise DuplicateResultException(
                f"Result for {match.player1_id} vs {match.player2_id} "
                f"in round {match.round_number} already recorded"
            )
        if score1 < 0 or score2 < 0:
            logger.error(f"Invalid scores {score1}-{score2} for match {match_id}")
            raise InvalidResultException(
                f"Scores cannot be negative, got {score1}-{score2}"
            )

        player1 = self._participant(match.player1_id)
        player2 = self._participant(match.player2_id)

        if score1 > score2:
            credit1, credit2 = WIN_CREDIT, LOSS_CREDIT
        elif score2 > score1:
            credit1, credit2 = LOSS_CREDIT, WIN_CREDIT
        else:
            credit1 = credit2 = TIE_CREDIT

        player1.wins += credit1
        player2.wins += credit2
        player1.spread += score1 - score2
        player2.spread += score2 - score1

        match.score1 = score1
        match.score2 = score2
        match.status = MATCH_FINISHED
        logger.debug(
            f"Round {match.round_number}: {match.player1_id} {score1} - "
            f"{score2} {match.player2_id}"
        )
        return match

    def award_byes(self, round_number: int) -> List[Match]:
        """Finish every unfinished bye of a round and credit the recipients."""
        awarded = []
        for match in self.tournament.matches_for_round(round_number):
            if not match.is_bye or match.is_finished:
                continue
            participant = self._participant(match.player1_id)
            participant.wins += BYE_WINS
            participant.spread += BYE_SPREAD
            match.status = MATCH_FINISHED
            awarded.append(match)
            logger.debug(f"Round {round_number}: bye credited to {match.player1_id}")
        return awarded

    def _participant(self, user_id: str) -> Participant:
        participant = self.tournament.find_by_user_id(user_id)
        if participant is None:
            logger.error(f"Cannot find participant for player {user_id}")
            raise ParticipantNotFoundException(f"No participant for player {user_id}")
        return participant
