"""Shared fixtures for the team balancer test suite."""

import textwrap

import pytest

from src.team_balancer.models import MessageEvent, Participant, SpendEvent


# ------------------------------------------------------------------
# In-memory roster - cheap to construct, no I/O
# ------------------------------------------------------------------

# (participant_id, events_participated, points_earned)
ROSTER_ROWS = [
    (1, 2, 200),
    (2, 1, 100),
    (3, 3, 300),
    (4, 1, 50),
    (5, 2, 150),
    (6, 1, 75),
]

MESSAGE_ROWS = [(1, 100), (2, 200), (3, 150), (4, 50), (5, 300), (6, 75)]

SPEND_ROWS = [(1, 50), (2, 100), (3, 75), (4, 25), (5, 150), (6, 60)]


@pytest.fixture
def participants():
    return [Participant(pid, events, points) for pid, events, points in ROSTER_ROWS]


@pytest.fixture
def messages():
    return [MessageEvent(pid, length) for pid, length in MESSAGE_ROWS]


@pytest.fixture
def spends():
    return [SpendEvent(pid, spent) for pid, spent in SPEND_ROWS]


# ------------------------------------------------------------------
# On-disk roster - CSV files in a temp directory
# ------------------------------------------------------------------

def write_csv(path, header, rows):
    lines = [header] + [",".join(str(v) for v in row) for row in rows]
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")


@pytest.fixture
def roster_dir(tmp_path):
    """Directory holding all three roster CSVs for the sample roster."""
    write_csv(
        tmp_path / "level_a_players.csv",
        "player_id,historical_events_participated,historical_points_earned",
        ROSTER_ROWS,
    )
    write_csv(tmp_path / "level_b_messages.csv", "player_id,text_length", MESSAGE_ROWS)
    write_csv(tmp_path / "level_b_spend.csv", "player_id,points_spent", SPEND_ROWS)
    return tmp_path


@pytest.fixture
def players_only_dir(tmp_path):
    """Directory with just the players file."""
    (tmp_path / "level_a_players.csv").write_text(
        textwrap.dedent("""\
            player_id,historical_events_participated,historical_points_earned
            1,10,1000
            2,0,500
            3,4,200
        """),
        encoding="utf-8",
    )
    return tmp_path
