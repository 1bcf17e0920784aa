"""Deterministic participant ordering for the draft."""

from typing import List, Sequence, Union

from src.team_balancer.metrics import (
    AuxiliaryIndex,
    MetricDefinition,
    get_metric,
)
from src.team_balancer.models import Participant


def rank(
    participants: Sequence[Participant],
    metric: Union[str, MetricDefinition],
    auxiliary_index: AuxiliaryIndex,
) -> List[Participant]:
    """Order participants by score (descending), then id (ascending).

    Ids are unique, so the order is total and identical input always
    produces an identical sequence. Returns a new list; *participants*
    is left untouched.
    """
    definition = get_metric(metric)
    return sorted(
        participants,
        key=lambda p: (-definition.scorer(p, auxiliary_index), p.participant_id),
    )
