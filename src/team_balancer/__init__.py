from src.team_balancer.aggregator import summarize
from src.team_balancer.balancer import BalanceResult, TeamBalancer
from src.team_balancer.drafter import draft
from src.team_balancer.metrics import (
    METRICS,
    AuxiliaryIndex,
    MetricDefinition,
    build_auxiliary_index,
    get_metric,
    score,
)
from src.team_balancer.models import (
    Assignment,
    BalanceConfig,
    MessageEvent,
    Participant,
    SpendEvent,
    TeamSummary,
)
from src.team_balancer.ranker import rank
from src.team_balancer.team_rules import InvalidTeamCount

__all__ = [
    "METRICS",
    "Assignment",
    "AuxiliaryIndex",
    "BalanceConfig",
    "BalanceResult",
    "InvalidTeamCount",
    "MessageEvent",
    "MetricDefinition",
    "Participant",
    "SpendEvent",
    "TeamBalancer",
    "TeamSummary",
    "build_auxiliary_index",
    "draft",
    "get_metric",
    "rank",
    "score",
    "summarize",
]
