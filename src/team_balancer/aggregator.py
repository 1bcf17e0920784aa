"""Per-team summary statistics for a completed draft."""

import math
from typing import Dict, List, Sequence, Set, Union

from src.team_balancer.metrics import (
    AuxiliaryIndex,
    MetricDefinition,
    get_metric,
)
from src.team_balancer.models import Assignment, Participant, TeamSummary
from src.team_balancer.team_rules import validate_team_count

EMPTY_RANGE = "0-0"


def _round_half_up(value: float) -> int:
    """Round a non-negative score to the nearest integer, .5 rounding up."""
    return int(math.floor(value + 0.5))


def format_range(scores: Sequence[float], unit: str) -> str:
    """Build the ``"{min}-{max} {unit}"`` display string for a team."""
    if not scores:
        return EMPTY_RANGE
    low = _round_half_up(min(scores))
    high = _round_half_up(max(scores))
    return f"{low}-{high} {unit}"


def summarize(
    participants: Sequence[Participant],
    assignments: Sequence[Assignment],
    num_teams: int,
    metric: Union[str, MetricDefinition],
    auxiliary_index: AuxiliaryIndex,
) -> List[TeamSummary]:
    """Recompute statistics for every team from 1 to *num_teams*.

    Teams that received nobody still get a summary (size 0, average 0,
    range ``"0-0"``). ``total_points`` is always the sum of historical
    points earned, whichever metric drove the draft.

    Raises:
        InvalidTeamCount: Under the same conditions as the drafter.
        ValueError: If the assignments do not place every participant on
            exactly one team in ``1..num_teams``: an unknown participant,
            a repeated participant, an out-of-range team, or a participant
            with no assignment.
    """
    validate_team_count(num_teams, len(participants))
    definition = get_metric(metric)

    by_id: Dict[int, Participant] = {p.participant_id: p for p in participants}
    members: Dict[int, List[Participant]] = {
        team_id: [] for team_id in range(1, num_teams + 1)
    }
    seen: Set[int] = set()

    for assignment in assignments:
        participant = by_id.get(assignment.participant_id)
        if participant is None:
            raise ValueError(
                f"Assignment references unknown participant "
                f"{assignment.participant_id}"
            )
        if assignment.participant_id in seen:
            raise ValueError(
                f"Participant {assignment.participant_id} is assigned "
                f"more than once"
            )
        if assignment.team_id not in members:
            raise ValueError(
                f"Assignment for participant {assignment.participant_id} "
                f"names team {assignment.team_id}, outside 1-{num_teams}"
            )
        seen.add(assignment.participant_id)
        members[assignment.team_id].append(participant)

    if len(seen) != len(by_id):
        unassigned = sorted(set(by_id) - seen)
        raise ValueError(f"Participants without an assignment: {unassigned}")

    summaries = []
    for team_id in range(1, num_teams + 1):
        team = members[team_id]
        scores = [definition.scorer(p, auxiliary_index) for p in team]

        summaries.append(
            TeamSummary(
                team_id=team_id,
                size=len(team),
                avg_score=sum(scores) / len(scores) if scores else 0.0,
                total_points=sum(p.points_earned for p in team),
                players=[p.participant_id for p in team],
                performance_range=format_range(scores, definition.unit),
            )
        )

    return summaries
