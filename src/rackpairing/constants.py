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

# --- Constants ---
SAVE_FILE_EXTENSION = ".json"

# Game outcome credits (wins column)
WIN_CREDIT = 1.0
TIE_CREDIT = 0.5
LOSS_CREDIT = 0.0

# Bye credit is owned by the caller, not the pairing engine
BYE_WINS = WIN_CREDIT
BYE_SPREAD = 0

# Pairing systems
PAIRING_SWISS = "swiss"
PAIRING_ROUND_ROBIN = "round_robin"
PAIRING_KOTH = "koth"
PAIRING_INITIAL_FONTES = "initial_fontes"
DEFAULT_PAIRING_SYSTEM = PAIRING_SWISS

PAIRING_SYSTEMS = (
    PAIRING_SWISS,
    PAIRING_ROUND_ROBIN,
    PAIRING_KOTH,
    PAIRING_INITIAL_FONTES,
)

# Systems that follow a fixed schedule over every registered participant
SCHEDULED_SYSTEMS = (PAIRING_ROUND_ROBIN, PAIRING_INITIAL_FONTES)

PAIRING_SYSTEM_NAMES = {
    PAIRING_SWISS: "Swiss",
    PAIRING_ROUND_ROBIN: "Round Robin",
    PAIRING_KOTH: "King of the Hill",
    PAIRING_INITIAL_FONTES: "Initial Fontes",
}

# Participant status
STATUS_ACTIVE = "active"
STATUS_WITHDRAWN = "withdrawn"

# Match status
MATCH_PENDING = "pending"
MATCH_LIVE = "live"
MATCH_FINISHED = "finished"

# Tournament status
TOURNAMENT_SETUP = "setup"
TOURNAMENT_ACTIVE = "active"
TOURNAMENT_COMPLETED = "completed"

DEFAULT_FONTES_PODS = 4

# Environment variable naming the folder for rotating log files
LOG_DIR_ENV_VAR = "RACKPAIRING_LOG_DIR"
