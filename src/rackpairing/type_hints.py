"""Type hints used in Rack Pairing."""

from typing import AbstractSet, List, Literal, Mapping, Optional, Sequence

# Pairing system literals (for type hints)
PairingSystemName = Literal["swiss", "round_robin", "koth", "initial_fontes"]

ParticipantStatus = Literal["active", "withdrawn"]
MatchStatus = Literal["pending", "live", "finished"]
TournamentStatus = Literal["setup", "active", "completed"]

# user_id -> user_ids already faced
History = Mapping[str, AbstractSet[str]]
MaybeHistory = Optional[History]

# Ordered participants fed to a pairing strategy
Participants = Sequence["Participant"]
# One round of engine output
Pairings = List["Pairing"]
MaybeUserId = Optional[str]

#  LocalWords:  MaybeHistory
