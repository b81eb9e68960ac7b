"""Initial Fontes pairing.

Opening rounds of large Scrabble events are often paired by splitting the
field into pods of similar strength and playing a round robin inside each
pod, so that nobody meets a near-seed straight away. Seeding is by spread,
dealt into pods snake style.
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

from rackpairing.constants import DEFAULT_FONTES_PODS
from rackpairing.exceptions import InvalidPairingException
from rackpairing.models.pairing import Pairing
from rackpairing.models.participant import Participant
from rackpairing.pairing.round_robin import pair_round_robin


def deal_pods(
    participants: Sequence[Participant], pods: int = DEFAULT_FONTES_PODS
) -> List[List[Participant]]:
    """Snake-deal participants, seeded by spread, into ``pods`` pods.

    Seeds 1..k go left to right into pods 0..k-1, the next k right to left,
    and so on.
    """
    if pods < 1:
        raise InvalidPairingException(f"Need at least one pod, got {pods}")

    seeded = sorted(participants, key=lambda p: -p.spread)
    dealt: List[List[Participant]] = [[] for _ in range(pods)]
    for seed, participant in enumerate(seeded):
        row, column = divmod(seed, pods)
        pod = column if row % 2 == 0 else pods - 1 - column
        dealt[pod].append(participant)
    return dealt


def pair_initial_fontes(
    participants: Sequence[Participant],
    round_number: int,
    pods: int = DEFAULT_FONTES_PODS,
) -> List[Pairing]:
    """Round robin inside each pod for ``round_number``.

    A pod holding a single participant gives that participant a bye; empty
    pods are skipped.
    """
    pairings: List[Pairing] = []
    for pod in deal_pods(participants, pods):
        pairings.extend(pair_round_robin(pod, round_number))
    return pairings
