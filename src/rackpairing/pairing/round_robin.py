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

"""
Round Robin Pairing System

Circle (Berger) method: the participant at index 0 stays fixed while the
others rotate one step per round. Over ``n - 1`` rounds (``n`` rounded up to
even) every participant meets every other participant exactly once.

An odd pool is padded with a ``BYE`` slot; whoever is drawn against it sits
the round out.

Example:
    >>> from rackpairing.models import Participant
    >>> pool = [Participant(str(i), uid) for i, uid in enumerate("ABCD")]
    >>> [str(p) for p in pair_round_robin(pool, 1)]
    ['A vs D', 'B vs C']
"""

from typing import AbstractSet, List, Optional, Sequence

from rackpairing.exceptions import InvalidPairingException
from rackpairing.models.pairing import Pairing
from rackpairing.models.participant import Participant


def round_robin_rounds(participant_count: int) -> int:
    """Number of rounds in one full cycle for ``participant_count`` entrants."""
    if participant_count < 2:
        return participant_count
    return participant_count - 1 if participant_count % 2 == 0 else participant_count


def _rotated_indices(n: int, round_number: int) -> List[int]:
    """Slot order for ``round_number``: index 0 fixed, the rest rotated."""
    shift = (round_number - 1) % (n - 1)
    return [0] + [((i - shift) % (n - 1)) + 1 for i in range(n - 1)]


def pair_round_robin(
    participants: Sequence[Participant], round_number: int
) -> List[Pairing]:
    """Pair one round of a round robin.

    Parameters
    ----------
    participants : sequence of Participant
        Active participants in a fixed order. The order defines the schedule,
        so callers must pass the same order every round.
    round_number : int
        1-based round. Rounds past the end of the cycle wrap around.

    Returns
    -------
    list of Pairing
        One pairing per table, a bye record for the participant drawn against
        the padding slot.
    """
    if round_number < 1:
        raise InvalidPairingException(
            f"Round numbers start at 1, got {round_number}"
        )

    slots: List[Optional[str]] = [p.user_id for p in participants]
    if not slots:
        return []
    if len(slots) % 2 != 0:
        slots.append(None)

    n = len(slots)
    order = _rotated_indices(n, round_number)

    pairings: List[Pairing] = []
    for i in range(n // 2):
        player1 = slots[order[i]]
        player2 = slots[order[n - 1 - i]]
        if player1 is None:
            pairings.append(Pairing.bye(player2))
        elif player2 is None:
            pairings.append(Pairing.bye(player1))
        else:
            pairings.append(Pairing(player1, player2))
    return pairings


def fill_absent_slots(
    pairings: Sequence[Pairing], present: AbstractSet[str]
) -> List[Pairing]:
    """Fit a schedule drawn over every registered slot to who is present.

    A table with one absent side becomes a bye for the other side. Tables
    with nobody present are dropped.
    """
    fitted: List[Pairing] = []
    for pairing in pairings:
        seated = [uid for uid in pairing.user_ids if uid in present]
        if len(seated) == len(pairing.user_ids):
            fitted.append(pairing)
        elif seated:
            fitted.append(Pairing.bye(seated[0]))
    return fitted


#  LocalWords:  Berger
