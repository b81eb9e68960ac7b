"""Pairing systems for Rack Pairing."""

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

from rackpairing.pairing.engine import generate_pairings
from rackpairing.pairing.initial_fontes import deal_pods, pair_initial_fontes
from rackpairing.pairing.king_of_the_hill import pair_adjacent, pair_king_of_the_hill
from rackpairing.pairing.ranking import rank_participants
from rackpairing.pairing.round_robin import (
    fill_absent_slots,
    pair_round_robin,
    round_robin_rounds,
)
from rackpairing.pairing.swiss import pair_swiss
from rackpairing.pairing.team_round_robin import (
    pair_team_round_robin,
    team_round_robin_rounds,
)

__all__ = [
    "generate_pairings",
    "pair_swiss",
    "pair_round_robin",
    "pair_king_of_the_hill",
    "pair_initial_fontes",
    "pair_adjacent",
    "deal_pods",
    "rank_participants",
    "round_robin_rounds",
    "fill_absent_slots",
    "pair_team_round_robin",
    "team_round_robin_rounds",
]
