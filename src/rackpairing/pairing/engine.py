"""Pairing engine entry point.

Dispatches one round of pairings to the configured pairing system. Every
system is a pure function of its inputs: no I/O, no state kept between calls.
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

from typing import AbstractSet, Optional

from rackpairing.constants import (
    DEFAULT_FONTES_PODS,
    PAIRING_INITIAL_FONTES,
    PAIRING_KOTH,
    PAIRING_ROUND_ROBIN,
    PAIRING_SWISS,
    PAIRING_SYSTEMS,
)
from rackpairing.exceptions import UnsupportedPairingSystemException
from rackpairing.pairing.initial_fontes import pair_initial_fontes
from rackpairing.pairing.king_of_the_hill import pair_king_of_the_hill
from rackpairing.pairing.round_robin import pair_round_robin
from rackpairing.pairing.swiss import pair_swiss
from rackpairing.type_hints import MaybeHistory, Pairings, Participants


def generate_pairings(
    participants: Participants,
    history: MaybeHistory,
    round_number: int,
    system: str,
    *,
    bye_history: Optional[AbstractSet[str]] = None,
    swiss_time_budget: Optional[float] = None,
    fontes_pods: int = DEFAULT_FONTES_PODS,
) -> Pairings:
    """Pair one round.

    Args:
        participants: Active participants. Status is not re-checked here.
        history: user_id -> user_ids already played, or None for no games.
            Only Swiss reads it.
        round_number: 1-based round number
        system: 'swiss', 'round_robin', 'koth' or 'initial_fontes'
        bye_history: Swiss only, user_ids that already had a bye
        swiss_time_budget: Swiss only, search budget in seconds
        fontes_pods: Initial Fontes only, number of pods

    Returns:
        Pairings covering every participant exactly once

    Raises:
        UnsupportedPairingSystemException: If ``system`` is not recognised
    """
    if system == PAIRING_SWISS:
        return pair_swiss(
            participants,
            history,
            round_number,
            bye_history=bye_history,
            time_budget=swiss_time_budget,
        )
    if system == PAIRING_ROUND_ROBIN:
        return pair_round_robin(participants, round_number)
    if system == PAIRING_KOTH:
        return pair_king_of_the_hill(participants)
    if system == PAIRING_INITIAL_FONTES:
        return pair_initial_fontes(participants, round_number, fontes_pods)
    raise UnsupportedPairingSystemException(
        f"Pairing system '{system}' is not implemented, "
        f"expected one of {', '.join(PAIRING_SYSTEMS)}"
    )
