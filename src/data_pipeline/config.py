from pathlib import Path

# Base project directory
PROJECT_ROOT = Path(__file__).parent.parent.parent

# Data directories
DATA_DIR = PROJECT_ROOT / "data"

# Roster CSV file names
FILE_PATTERNS = {
    "players": "level_a_players.csv",
    "messages": "level_b_messages.csv",
    "spends": "level_b_spend.csv",
}

# Participant identifier column, shared by every file
ID_COLUMN = "player_id"

# Required columns per file, in the order they map onto the record types
PLAYER_COLUMNS = [
    "player_id",
    "historical_events_participated",
    "historical_points_earned",
]

MESSAGE_COLUMNS = ["player_id", "text_length"]

SPEND_COLUMNS = ["player_id", "points_spent"]
