"""Snake draft allocation of ranked participants into teams."""

import logging
from typing import List, Sequence

from src.team_balancer.models import Assignment, Participant
from src.team_balancer.team_rules import validate_team_count

logger = logging.getLogger(__name__)


def snake_team_index(pick_index: int, num_teams: int) -> int:
    """Return the 0-based team index for the pick at *pick_index* (0-based).

    Even rounds run 0 -> N-1, odd rounds run N-1 -> 0.
    """
    round_index = pick_index // num_teams
    position = pick_index % num_teams

    if round_index % 2 == 0:
        return position
    return num_teams - 1 - position


def draft(
    ordered_participants: Sequence[Participant], num_teams: int
) -> List[Assignment]:
    """Assign ranked participants to teams with a snake draft.

    Args:
        ordered_participants: Participants in draft order (best first),
            usually the output of :func:`src.team_balancer.ranker.rank`.
        num_teams: Number of teams to fill.

    Returns:
        One Assignment per participant, in pick order. Team sizes differ
        by at most one; the teams picking first in a partial final round
        get the extra member.

    Raises:
        InvalidTeamCount: If *num_teams* is below 1 or exceeds the number
            of participants.
    """
    validate_team_count(num_teams, len(ordered_participants))

    assignments = []
    for i, participant in enumerate(ordered_participants):
        team_id = snake_team_index(i, num_teams) + 1
        assignments.append(
            Assignment(
                participant_id=participant.participant_id,
                team_id=team_id,
                pick_number=i + 1,
                round=i // num_teams + 1,
            )
        )

    logger.debug(
        "Drafted %d participants into %d teams over %d rounds",
        len(assignments),
        num_teams,
        -(-len(assignments) // num_teams),
    )
    return assignments
