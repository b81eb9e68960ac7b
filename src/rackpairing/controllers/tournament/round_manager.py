"""Round management for tournaments.

This module handles the round transitions of a tournament: starting it,
generating pairings for the next round, undoing a round that has not been
played and closing the tournament.
"""

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

import threading
from typing import List

from rackpairing.constants import (
    MATCH_PENDING,
    PAIRING_SWISS,
    SCHEDULED_SYSTEMS,
    TOURNAMENT_ACTIVE,
    TOURNAMENT_COMPLETED,
)
from rackpairing.exceptions import (
    RoundNotFoundException,
    TournamentStateException,
)
from rackpairing.models.participant import Participant
from rackpairing.models.tournament import Match, PairingHistory, Tournament
from rackpairing.pairing import fill_absent_slots, generate_pairings
from rackpairing.utils import setup_logger

logger = setup_logger(__name__)


class RoundManager:
    """Manages round progression and pairing generation for a tournament.

    This class is responsible for:
    - Moving the tournament through setup -> active -> completed
    - Rebuilding the match history from stored matches every round
    - Calling the pairing engine and stamping its output as matches
    - Making sure only one round is generated at a time
    """

    def __init__(self, tournament: Tournament):
        self.tournament = tournament
        self._lock = threading.Lock()

    @property
    def current_round_number(self) -> int:
        """Get the current round number (1-indexed), 0 before round 1."""
        return self.tournament.current_round

    def get_round(self, round_number: int) -> List[Match]:
        """Matches for a created round.

        Raises:
            RoundNotFoundException: If the round has not been created
        """
        if not 1 <= round_number <= self.tournament.current_round:
            raise RoundNotFoundException(f"Round {round_number} does not exist")
        return self.tournament.matches_for_round(round_number)

    def eligible_participants(self) -> List[Participant]:
        """Active participants, restricted to checked-in ones when required."""
        eligible = self.tournament.get_participant_list(active_only=True)
        if self.tournament.config.require_check_in:
            eligible = [p for p in eligible if p.checked_in]
        return eligible

    def pairing_pool(self) -> List[Participant]:
        """Participants handed to the engine.

        Scheduled systems get every registered participant in registration
        order, so that an absence does not reshuffle the schedule.
        """
        if self.tournament.pairing_system in SCHEDULED_SYSTEMS:
            return self.tournament.get_participant_list()
        return self.eligible_participants()

    def build_history(self) -> PairingHistory:
        """Rebuild the history graph from every stored match."""
        return PairingHistory.from_matches(
            self.tournament.matches, self.eligible_participants()
        )

    def start(self) -> None:
        """Move the tournament from setup to active.

        Raises:
            TournamentStateException: If not in setup or fewer than two players
        """
        if not self.tournament.is_setup:
            raise TournamentStateException(
                f"Cannot start a tournament in status '{self.tournament.status}'"
            )
        eligible = self.eligible_participants()
        if len(eligible) < 2:
            raise TournamentStateException(
                f"Need at least 2 eligible participants to start, got {len(eligible)}"
            )
        self.tournament.status = TOURNAMENT_ACTIVE
        logger.info(
            f"Started {self.tournament.name} with {len(eligible)} participants"
        )

    def create_next_round(self) -> List[Match]:
        """Generate and store pairings for the next round.

        Returns:
            The new round's matches, all pending

        Raises:
            TournamentStateException: If the tournament is not active, the
                previous round is unfinished or every round has been created
        """
        with self._lock:
            tournament = self.tournament
            if not tournament.is_active:
                raise TournamentStateException(
                    f"Cannot pair a tournament in status '{tournament.status}'"
                )
            if tournament.current_round >= tournament.num_rounds:
                raise TournamentStateException(
                    f"Cannot create more rounds: already at {tournament.num_rounds} rounds"
                )
            if tournament.current_round and not tournament.is_round_finished(
                tournament.current_round
            ):
                raise TournamentStateException(
                    f"Round {tournament.current_round} still has unfinished matches"
                )

            round_number = tournament.current_round + 1
            participants = self.eligible_participants()
            history = self.build_history()
            config = tournament.config

            logger.info(
                f"Creating round {round_number} with {len(participants)} "
                f"participants ({config.pairing_system})"
            )

            bye_history = None
            if config.pairing_system == PAIRING_SWISS and config.avoid_repeat_byes:
                bye_history = history.bye_recipients

            pairings = generate_pairings(
                self.pairing_pool(),
                history,
                round_number,
                config.pairing_system,
                bye_history=bye_history,
                swiss_time_budget=config.swiss_time_budget,
                fontes_pods=config.fontes_pods,
            )
            if config.pairing_system in SCHEDULED_SYSTEMS:
                pairings = fill_absent_slots(
                    pairings, {p.user_id for p in participants}
                )

            matches = [
                Match.from_pairing(pairing, tournament.id, round_number)
                for pairing in pairings
            ]
            tournament.matches.extend(matches)
            tournament.current_round = round_number
            return matches

    def undo_last_round(self) -> bool:
        """Remove the last round if all of its matches are still pending.

        Returns:
            True if successful, False if no rounds or play has started
        """
        with self._lock:
            tournament = self.tournament
            if tournament.current_round == 0:
                logger.warning("Cannot undo: no rounds exist")
                return False

            last_round = tournament.current_round
            last_matches = tournament.matches_for_round(last_round)
            if any(m.status != MATCH_PENDING for m in last_matches):
                logger.warning(f"Cannot undo round {last_round}: play has started")
                return False

            tournament.matches = [
                m for m in tournament.matches if m.round_number != last_round
            ]
            tournament.current_round -= 1
            logger.info(f"Undid round {last_round}")
            return True

    def complete(self) -> None:
        """Close the tournament once the final round is finished.

        Raises:
            TournamentStateException: If not active or rounds remain
        """
        tournament = self.tournament
        if not tournament.is_active:
            raise TournamentStateException(
                f"Cannot complete a tournament in status '{tournament.status}'"
            )
        if tournament.current_round < tournament.num_rounds:
            raise TournamentStateException(
                f"Only {tournament.current_round} of {tournament.num_rounds} rounds created"
            )
        if not tournament.is_round_finished(tournament.current_round):
            raise TournamentStateException(
                f"Round {tournament.current_round} still has unfinished matches"
            )
        tournament.status = TOURNAMENT_COMPLETED
        logger.info(f"{tournament.name} completed after {tournament.current_round} rounds")
