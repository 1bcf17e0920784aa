"""Team balancer data models - participants, auxiliary events, and draft results."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from src.team_balancer.config import DEFAULT_METRIC, DEFAULT_NUM_TEAMS


@dataclass(frozen=True)
class Participant:
    """A single rostered participant, as loaded from the players file."""

    participant_id: int
    events_participated: int
    points_earned: int  # Historical total, not per-event


@dataclass(frozen=True)
class MessageEvent:
    """One message sent by a participant."""

    participant_id: int
    text_length: int

    @property
    def quantity(self) -> int:
        return self.text_length


@dataclass(frozen=True)
class SpendEvent:
    """One spend transaction made by a participant."""

    participant_id: int
    points_spent: int

    @property
    def quantity(self) -> int:
        return self.points_spent


@dataclass(frozen=True)
class Assignment:
    """Represents a participant drafted onto a team."""

    participant_id: int
    team_id: int  # 1-indexed
    pick_number: int  # 1-indexed, overall draft position
    round: int  # 1-indexed


@dataclass
class TeamSummary:
    """Per-team statistics recomputed from a set of assignments."""

    team_id: int
    size: int
    avg_score: float
    total_points: int
    players: List[int] = field(default_factory=list)  # Draft order
    performance_range: str = "0-0"


@dataclass
class BalanceConfig:
    """Run configuration for a balancing pass."""

    num_teams: int = DEFAULT_NUM_TEAMS
    metric: str = DEFAULT_METRIC
    data_dir: Optional[Path] = None
