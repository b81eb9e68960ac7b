"""Tournament participant data class."""

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
from typing import Any, Dict

from rackpairing.constants import STATUS_ACTIVE, STATUS_WITHDRAWN
from rackpairing.exceptions import InvalidParticipantDataException
from rackpairing.type_hints import ParticipantStatus


@dataclass
class Participant:
    """One tournament entrant.

    Attributes
    ----------
    id : str
        Participant record identifier. Distinct from ``user_id``.
    user_id : str
        Identity of the underlying player. May be a synthetic id for an
        external player with no account.
    wins : float
        Cumulative wins, 0.5 for a tie.
    spread : int
        Cumulative point differential.
    status : str
        ``"active"`` or ``"withdrawn"``. Only active participants are paired.
    checked_in : bool
        Whether the participant checked in for the current round.
    """

    id: str
    user_id: str
    wins: float = 0.0
    spread: int = 0
    status: ParticipantStatus = STATUS_ACTIVE
    checked_in: bool = True

    def __post_init__(self):
        if self.status not in (STATUS_ACTIVE, STATUS_WITHDRAWN):
            raise InvalidParticipantDataException(
                f"Unknown participant status: {self.status!r}"
            )

    @property
    def is_active(self) -> bool:
        return self.status == STATUS_ACTIVE

    def withdraw(self) -> None:
        """Mark the participant withdrawn. Records are never deleted mid-event."""
        self.status = STATUS_WITHDRAWN

    def to_dict(self) -> Dict[str, Any]:
        """Serialize participant to dictionary."""
        return {
            "id": self.id,
            "user_id": self.user_id,
            "wins": self.wins,
            "spread": self.spread,
            "status": self.status,
            "checked_in": self.checked_in,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Participant":
        """Deserialize participant from dictionary."""
        checked_in = data.get("checked_in", True)
        if not isinstance(checked_in, bool):
            raise InvalidParticipantDataException(
                f"checked_in must be true or false, got {checked_in!r}"
            )
        try:
            return cls(
                id=str(data["id"]),
                user_id=str(data["user_id"]),
                wins=float(data.get("wins", 0.0)),
                spread=int(data.get("spread", 0)),
                status=data.get("status", STATUS_ACTIVE),
                checked_in=checked_in,
            )
        except KeyError as e:
            raise InvalidParticipantDataException(
                f"Participant record missing field {e}"
            ) from e

    def __str__(self) -> str:
        return f"{self.user_id} ({self.wins:g}W {self.spread:+d})"
