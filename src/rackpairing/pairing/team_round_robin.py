"""Team round robin pairing.

Two teams meet over several rounds and every member of one team plays every
member of the other exactly once. Each round seats as many tables as the
smaller team has members, so a full cycle takes as many rounds as the larger
team has members. Members of the larger team who are not drawn sit the round
out; no bye is recorded for a team match.
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

from typing import List, Sequence

from rackpairing.exceptions import InvalidPairingException
from rackpairing.models.pairing import Pairing
from rackpairing.models.participant import Participant


def team_round_robin_rounds(team1_size: int, team2_size: int) -> int:
    """Rounds needed for every cross-team pair to meet once."""
    if not team1_size or not team2_size:
        return 0
    return max(team1_size, team2_size)


def pair_team_round_robin(
    team1: Sequence[Participant],
    team2: Sequence[Participant],
    round_number: int,
) -> List[Pairing]:
    """Pair one round of a match between two teams.

    Member ``i`` of the smaller team meets member ``(i + round_number - 1)``
    of the larger team, counted modulo its size, so nobody plays twice in a
    round. Team 1 always takes the first seat. Rounds past the end of the
    cycle wrap around.

    Raises:
        InvalidPairingException: If ``round_number`` is below 1 or a player
            is listed on both teams
    """
    if round_number < 1:
        raise InvalidPairingException(
            f"Round numbers start at 1, got {round_number}"
        )
    shared = {p.user_id for p in team1} & {p.user_id for p in team2}
    if shared:
        raise InvalidPairingException(f"Players on both teams: {sorted(shared)}")
    if not team1 or not team2:
        return []

    swapped = len(team1) > len(team2)
    smaller, larger = (team2, team1) if swapped else (team1, team2)

    pairings: List[Pairing] = []
    for i, member in enumerate(smaller):
        opponent = larger[(i + round_number - 1) % len(larger)]
        if swapped:
            pairings.append(Pairing(opponent.user_id, member.user_id))
        else:
            pairings.append(Pairing(member.user_id, opponent.user_id))
    return pairings
