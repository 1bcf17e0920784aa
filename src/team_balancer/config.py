from pathlib import Path

# Base project directory
PROJECT_ROOT = Path(__file__).parent.parent.parent

# Default run settings
DEFAULT_NUM_TEAMS = 3
DEFAULT_METRIC = "events_performance"

# Metric identifiers accepted on the command line
METRIC_NAMES = ("events_performance", "messages_length", "points_spent")
