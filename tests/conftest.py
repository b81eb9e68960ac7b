import pytest

from rackpairing.models import Participant
from rackpairing.models.tournament import Tournament, TournamentConfig

WINS = [3, 3, 2, 2, 1, 1]
SPREADS = [200, 150, 100, 50, 0, -50]


def make_participants(user_ids, wins=None, spreads=None):
    wins = wins or [0] * len(user_ids)
    spreads = spreads or [0] * len(user_ids)
    return [
        Participant(id=f"p-{uid}", user_id=uid, wins=w, spread=s)
        for uid, w, s in zip(user_ids, wins, spreads)
    ]


@pytest.fixture
def six_participants():
    """A-F ranked in alphabetical order by wins then spread."""
    return make_participants("ABCDEF", WINS, SPREADS)


@pytest.fixture
def five_participants():
    return make_participants("ABCDE", WINS[:5], SPREADS[:5])


def make_tournament(user_ids, pairing_system="swiss", num_rounds=3, **config):
    tournament_config = TournamentConfig(
        name="Club Night",
        num_rounds=num_rounds,
        pairing_system=pairing_system,
        **config,
    )
    return Tournament(tournament_config, make_participants(user_ids))
