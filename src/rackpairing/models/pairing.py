"""Pairing data class."""

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

from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple

from rackpairing.exceptions import InvalidPairingException


@dataclass(frozen=True)
class Pairing:
    """One scheduled contest produced by the pairing engine.

    Carries no match id, tournament id or status; the caller stamps those
    when it stores the pairing as a match.
    """

    player1_id: str
    player2_id: Optional[str] = None
    is_bye: bool = False

    def __post_init__(self):
        if self.is_bye != (self.player2_id is None):
            raise InvalidPairingException(
                f"player2_id must be None exactly when is_bye is set: {self!r}"
            )
        if self.player1_id == self.player2_id:
            raise InvalidPairingException(
                f"Cannot pair {self.player1_id} against themselves"
            )

    @classmethod
    def bye(cls, user_id: str) -> "Pairing":
        return cls(player1_id=user_id, player2_id=None, is_bye=True)

    @property
    def user_ids(self) -> Tuple[str, ...]:
        if self.is_bye:
            return (self.player1_id,)
        return (self.player1_id, self.player2_id)

    def involves(self, user_id: str) -> bool:
        return user_id in self.user_ids

    def to_dict(self) -> Dict[str, Any]:
        return {
            "player1_id": self.player1_id,
            "player2_id": self.player2_id,
            "is_bye": self.is_bye,
        }

    def __str__(self) -> str:
        if self.is_bye:
            return f"{self.player1_id} - BYE"
        return f"{self.player1_id} vs {self.player2_id}"
