"""Team balancer - orchestrates scoring, ranking, drafting, and summaries."""

import logging
from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Sequence

from src.team_balancer.aggregator import summarize
from src.team_balancer.drafter import draft
from src.team_balancer.metrics import (
    AuxiliaryEvent,
    AuxiliaryIndex,
    MetricDefinition,
    build_auxiliary_index,
    get_metric,
)
from src.team_balancer.models import (
    Assignment,
    BalanceConfig,
    Participant,
    TeamSummary,
)
from src.team_balancer.ranker import rank

logger = logging.getLogger(__name__)


@dataclass
class BalanceResult:
    """Everything produced by one balancing run."""

    metric: MetricDefinition
    num_teams: int
    participants: List[Participant]
    ranked: List[Participant]
    assignments: List[Assignment]
    summaries: List[TeamSummary]
    auxiliary_index: AuxiliaryIndex

    def score_of(self, participant: Participant) -> float:
        return self.metric.scorer(participant, self.auxiliary_index)

    def team_sizes(self) -> Dict[int, int]:
        return {s.team_id: s.size for s in self.summaries}

    def size_difference(self) -> int:
        sizes = [s.size for s in self.summaries]
        return max(sizes) - min(sizes) if sizes else 0


class TeamBalancer:
    """Main entry point for splitting a roster into balanced teams.

    Builds the auxiliary index once, then hands the same index to the
    ranker and the aggregator so scores are never recomputed from raw
    events.
    """

    def __init__(self, config: BalanceConfig):
        self.config = config
        self.metric = get_metric(config.metric)

    def run(
        self,
        participants: Sequence[Participant],
        auxiliary_events: Optional[Iterable[AuxiliaryEvent]] = None,
    ) -> BalanceResult:
        """Rank, draft, and summarize *participants*.

        Args:
            participants: The loaded roster.
            auxiliary_events: Message or spend events for the active
                metric. Ignored for ``events_performance``.

        Returns:
            BalanceResult with assignments in pick order and one summary
            per team.

        Raises:
            InvalidTeamCount: If the configured team count cannot be
                filled from *participants*.
        """
        num_teams = self.config.num_teams
        participants = list(participants)

        logger.info(
            "Balancing %d participants into %d teams by %s",
            len(participants), num_teams, self.metric.name,
        )

        index = build_auxiliary_index(self.metric, auxiliary_events)
        ranked = rank(participants, self.metric, index)
        assignments = draft(ranked, num_teams)
        summaries = summarize(
            participants, assignments, num_teams, self.metric, index
        )

        result = BalanceResult(
            metric=self.metric,
            num_teams=num_teams,
            participants=participants,
            ranked=ranked,
            assignments=assignments,
            summaries=summaries,
            auxiliary_index=index,
        )

        for summary in summaries:
            logger.debug(
                "Team %d: %d players, avg %.2f, range %s",
                summary.team_id,
                summary.size,
                summary.avg_score,
                summary.performance_range,
            )
        logger.info(
            "Balanced %d teams (max size difference %d)",
            num_teams, result.size_difference(),
        )
        return result
