"""King of the Hill pairing: first plays second, third plays fourth."""

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

from rackpairing.models.pairing import Pairing
from rackpairing.models.participant import Participant
from rackpairing.pairing.ranking import rank_participants


def pair_adjacent(ranked: Sequence[Participant]) -> List[Pairing]:
    """Pair an already ordered list two at a time; a trailing single gets a bye."""
    pairings: List[Pairing] = []
    for i in range(0, len(ranked), 2):
        if i + 1 < len(ranked):
            pairings.append(Pairing(ranked[i].user_id, ranked[i + 1].user_id))
        else:
            pairings.append(Pairing.bye(ranked[i].user_id))
    return pairings


def pair_king_of_the_hill(participants: Sequence[Participant]) -> List[Pairing]:
    """Pair strictly by current standing, ignoring history.

    Repeat pairings across rounds are allowed.
    """
    return pair_adjacent(rank_participants(participants))
