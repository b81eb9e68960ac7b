"""Swiss Pairing System Implementation."""

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

import time
from typing import AbstractSet, List, Optional, Sequence, Tuple

from rackpairing.models.pairing import Pairing
from rackpairing.models.participant import Participant
from rackpairing.pairing.king_of_the_hill import pair_adjacent
from rackpairing.pairing.ranking import rank_participants
from rackpairing.type_hints import MaybeHistory
from rackpairing.utils import setup_logger

logger = setup_logger(__name__)


class SearchTimeout(Exception):
    """Raised inside the search when the wall-clock budget runs out."""


def _have_played(history: MaybeHistory, player1_id: str, player2_id: str) -> bool:
    """Missing history entries count as no games played."""
    if not history:
        return False
    return player2_id in history.get(player1_id, ()) or player1_id in history.get(
        player2_id, ()
    )


def _select_bye_index(
    ranked: Sequence[Participant], bye_history: Optional[AbstractSet[str]]
) -> int:
    """Index of the bye recipient in an odd ranked pool.

    The lowest-ranked participant, or with ``bye_history`` the lowest-ranked
    one who has not had a bye yet.
    """
    if bye_history:
        for index in range(len(ranked) - 1, -1, -1):
            if ranked[index].user_id not in bye_history:
                return index
        logger.info("Every participant has had a bye, giving it to the lowest rank")
    return len(ranked) - 1


def _next_unused(used: List[bool], start: int) -> int:
    index = start
    while index < len(used) and used[index]:
        index += 1
    return index


def _search_pairings(
    pool: Sequence[Participant],
    history: MaybeHistory,
    deadline: Optional[float] = None,
) -> Optional[List[Tuple[int, int]]]:
    """Depth-first search for a rematch-free pairing of ``pool``.

    The first unplaced index is paired with the first later unplaced
    candidate it has not played; on a dead end the most recent pair is undone
    and its next candidate tried. This is the recursive backtracking order,
    driven by an explicit stack so deep pools cannot hit the recursion limit.

    Returns the index pairs in placement order, or None when no complete
    pairing exists.
    """
    n = len(pool)
    used = [False] * n
    stack: List[Tuple[int, int]] = []
    i = _next_unused(used, 0)
    candidate = i + 1

    while i < n:
        if deadline is not None and time.monotonic() > deadline:
            raise SearchTimeout()

        j = candidate
        while j < n and (
            used[j] or _have_played(history, pool[i].user_id, pool[j].user_id)
        ):
            j += 1

        if j < n:
            used[i] = used[j] = True
            stack.append((i, j))
            i = _next_unused(used, i + 1)
            candidate = i + 1
            continue

        # dead end: undo the last pair and resume after its opponent
        if not stack:
            return None
        i, j = stack.pop()
        used[i] = used[j] = False
        candidate = j + 1

    return stack


def pair_swiss(
    participants: Sequence[Participant],
    history: MaybeHistory,
    round_number: int,
    *,
    bye_history: Optional[AbstractSet[str]] = None,
    time_budget: Optional[float] = None,
) -> List[Pairing]:
    """
    Create pairings for a Swiss round.

    Players are ranked by wins then spread. An odd pool first gives one
    player a bye, then the rest are paired top down, each player taking the
    highest-ranked opponent they have not met that still leaves a complete
    rematch-free pairing for everyone below.

    Parameters
    ----------
        participants: active participants to pair
        history: user_id -> user_ids already played. Not modified.
        round_number: 1-based round being paired, used for diagnostics
        bye_history: user_ids that already received a bye. When given, the
            bye goes to the lowest-ranked player not in it.
        time_budget: seconds the search may run before pairing in standings
            order instead

    Returns
    -------
        list of Pairing, the bye record (if any) first
    """
    pool = rank_participants(participants)
    pairings: List[Pairing] = []

    if len(pool) % 2 != 0:
        bye_player = pool.pop(_select_bye_index(pool, bye_history))
        pairings.append(Pairing.bye(bye_player.user_id))

    deadline = time.monotonic() + time_budget if time_budget is not None else None
    try:
        placed = _search_pairings(pool, history, deadline)
    except SearchTimeout:
        logger.warning(
            f"Round {round_number}: Swiss search exceeded {time_budget}s for "
            f"{len(pool)} players, pairing in standings order"
        )
        return pairings + pair_adjacent(pool)

    if placed is None:
        logger.warning(
            f"Round {round_number}: could not find rematch-free pairings for "
            f"{len(pool)} players, falling back to standings order"
        )
        return pairings + pair_adjacent(pool)

    for i, j in placed:
        pairings.append(Pairing(pool[i].user_id, pool[j].user_id))
    return pairings


#  LocalWords:  rematch
