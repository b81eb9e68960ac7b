"""Example script running a small club night by hand.

Registers players, pairs four Swiss rounds, enters results and prints the
standings, then checks the pairings with the pairing checker.
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

import random
import sys
from pathlib import Path

# Add src to path for development
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from rackpairing.controllers.tournament import ResultRecorder, RoundManager
from rackpairing.models import Participant
from rackpairing.models.tournament import Tournament, TournamentConfig
from rackpairing.validation import create_pairing_checker

PLAYERS = ["ada", "bram", "cleo", "dev", "eun", "femi", "gus"]


def main():
    config = TournamentConfig(name="Tuesday Club", num_rounds=4, avoid_repeat_byes=True)
    tournament = Tournament(
        config,
        [Participant(id=str(i), user_id=name) for i, name in enumerate(PLAYERS)],
    )
    manager = RoundManager(tournament)
    recorder = ResultRecorder(tournament)
    rng = random.Random(7)

    manager.start()
    for round_number in range(1, config.num_rounds + 1):
        print(f"\nRound {round_number}")
        for match in manager.create_next_round():
            if match.is_bye:
                print(f"  {match.player1_id} - BYE")
                continue
            score1, score2 = rng.randint(300, 500), rng.randint(300, 500)
            recorder.record_result(match.id, score1, score2)
            print(f"  {match.player1_id} {score1} - {score2} {match.player2_id}")
        recorder.award_byes(round_number)
    manager.complete()

    print("\nStandings")
    for rank, participant in enumerate(tournament.get_standings(), start=1):
        print(f"  {rank}. {participant}")

    report = create_pairing_checker().validate_tournament(tournament)
    print(f"\n{report.summary}")


if __name__ == "__main__":
    main()
