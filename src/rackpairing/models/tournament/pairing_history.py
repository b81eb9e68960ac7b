"""Data model for the match-history graph."""

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

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import AbstractSet, Any, Dict, Iterable, Iterator, Set

from rackpairing.models.participant import Participant
from rackpairing.models.tournament.match import Match

_NO_OPPONENTS: AbstractSet[str] = frozenset()


@dataclass
class PairingHistory(Mapping):
    """
    Symmetric record of who has already played whom.

    Reads like a ``Mapping`` from ``user_id`` to the set of ``user_id`` values
    already faced, so it can be handed straight to the pairing engine.
    Looking up a player with no games returns an empty set.

    Attributes
    ----------
    opponents : dict of str to set of str
        Previously faced opponents per player.
    byes : dict of str to int
        Number of byes each player has received.
    """

    opponents: Dict[str, Set[str]] = field(default_factory=dict)
    byes: Dict[str, int] = field(default_factory=dict)

    def __getitem__(self, user_id: str) -> AbstractSet[str]:
        return self.opponents.get(user_id, _NO_OPPONENTS)

    def __iter__(self) -> Iterator[str]:
        return iter(self.opponents)

    def __len__(self) -> int:
        return len(self.opponents)

    def __contains__(self, user_id: object) -> bool:
        return user_id in self.opponents

    def add_pairing(self, player1_id: str, player2_id: str) -> None:
        """Record that two players have been paired."""
        self.opponents.setdefault(player1_id, set()).add(player2_id)
        self.opponents.setdefault(player2_id, set()).add(player1_id)

    def add_bye(self, user_id: str) -> None:
        self.byes[user_id] = self.byes.get(user_id, 0) + 1

    def have_played(self, player1_id: str, player2_id: str) -> bool:
        """Check if two players have previously played each other."""
        return player2_id in self[player1_id] or player1_id in self[player2_id]

    @property
    def bye_recipients(self) -> Set[str]:
        return {user_id for user_id, count in self.byes.items() if count > 0}

    @classmethod
    def from_matches(
        cls,
        matches: Iterable[Match],
        participants: Iterable[Participant] = (),
    ) -> "PairingHistory":
        """Rebuild the history graph from stored matches.

        Every given participant gets an entry, empty when they have no games.
        """
        history = cls()
        for participant in participants:
            history.opponents.setdefault(participant.user_id, set())
        for match in matches:
            if match.is_bye:
                history.add_bye(match.player1_id)
            elif match.player1_id and match.player2_id:
                history.add_pairing(match.player1_id, match.player2_id)
        return history

    def to_dict(self) -> Dict[str, Any]:
        """Serialize pairing history to dictionary."""
        return {
            "opponents": {k: sorted(v) for k, v in self.opponents.items()},
            "byes": dict(self.byes),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "PairingHistory":
        """Deserialize pairing history from dictionary."""
        return cls(
            opponents={
                str(k): set(map(str, v)) for k, v in data.get("opponents", {}).items()
            },
            byes={str(k): int(v) for k, v in data.get("byes", {}).items()},
        )
