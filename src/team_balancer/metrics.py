"""Participant scoring under the selectable ranking metrics.

Each metric pairs a score function with the labels used to report it:

* ``events_performance`` - historical points per event participated.
* ``messages_length`` - total characters across a participant's messages.
* ``points_spent`` - total points a participant has spent.

The two auxiliary metrics read from an :class:`AuxiliaryIndex` that is built
once per run by summing every matching event.
"""

import logging
from dataclasses import dataclass, field
from typing import Callable, Dict, Iterable, Optional, Union

from src.team_balancer.models import MessageEvent, Participant, SpendEvent

logger = logging.getLogger(__name__)

AuxiliaryEvent = Union[MessageEvent, SpendEvent]


@dataclass
class AuxiliaryIndex:
    """Summed auxiliary quantity per participant id."""

    totals: Dict[int, int] = field(default_factory=dict)
    missing: bool = False  # Metric needed events but none were supplied

    def get(self, participant_id: int) -> int:
        return self.totals.get(participant_id, 0)


def _points_per_event(participant: Participant, index: AuxiliaryIndex) -> float:
    if participant.events_participated == 0:
        return 0.0
    return participant.points_earned / participant.events_participated


def _auxiliary_total(participant: Participant, index: AuxiliaryIndex) -> float:
    return index.get(participant.participant_id)


@dataclass(frozen=True)
class MetricDefinition:
    """A ranking metric and everything needed to score and describe it."""

    name: str
    unit: str
    scorer: Callable[[Participant, AuxiliaryIndex], float]
    auxiliary_dataset: Optional[str]  # "messages", "spends", or None
    header_label: str
    average_label: str
    justification: str

    @property
    def needs_auxiliary_data(self) -> bool:
        return self.auxiliary_dataset is not None


METRICS: Dict[str, MetricDefinition] = {
    "events_performance": MetricDefinition(
        name="events_performance",
        unit="points/event",
        scorer=_points_per_event,
        auxiliary_dataset=None,
        header_label="average points/event",
        average_label="Average points per event: {value:.2f}",
        justification="Teams balanced by average points per event",
    ),
    "messages_length": MetricDefinition(
        name="messages_length",
        unit="characters",
        scorer=_auxiliary_total,
        auxiliary_dataset="messages",
        header_label="total message length",
        average_label="Average message length: {value:.2f} characters",
        justification="Teams balanced by total message length",
    ),
    "points_spent": MetricDefinition(
        name="points_spent",
        unit="points",
        scorer=_auxiliary_total,
        auxiliary_dataset="spends",
        header_label="total points spent",
        average_label="Average points spent: {value:.2f} points",
        justification="Teams balanced by total points spent",
    ),
}


def get_metric(metric: Union[str, MetricDefinition]) -> MetricDefinition:
    """Resolve a metric name to its definition.

    Raises:
        ValueError: If *metric* is not one of the known metric names.
    """
    if isinstance(metric, MetricDefinition):
        return metric
    try:
        return METRICS[metric]
    except KeyError:
        raise ValueError(
            f"Invalid metric: {metric!r}. "
            f"Must be one of: {', '.join(METRICS)}"
        ) from None


def build_auxiliary_index(
    metric: Union[str, MetricDefinition],
    events: Optional[Iterable[AuxiliaryEvent]] = None,
) -> AuxiliaryIndex:
    """Sum auxiliary event quantities per participant in a single pass.

    For ``events_performance`` the index is always empty. For the auxiliary
    metrics, ``events=None`` yields an empty index flagged as missing, so
    every participant scores 0 and ranking falls back to id order.
    """
    definition = get_metric(metric)

    if not definition.needs_auxiliary_data:
        return AuxiliaryIndex()

    if events is None:
        logger.warning(
            "Metric %s requires %s data but none was supplied; "
            "all scores will be 0",
            definition.name,
            definition.auxiliary_dataset,
        )
        return AuxiliaryIndex(missing=True)

    totals: Dict[int, int] = {}
    count = 0
    for event in events:
        totals[event.participant_id] = (
            totals.get(event.participant_id, 0) + event.quantity
        )
        count += 1

    logger.debug(
        "Indexed %d %s events across %d participants",
        count, definition.auxiliary_dataset, len(totals),
    )
    return AuxiliaryIndex(totals=totals)


def score(
    metric: Union[str, MetricDefinition],
    participant: Participant,
    auxiliary_index: AuxiliaryIndex,
) -> float:
    """Score *participant* under *metric*."""
    return get_metric(metric).scorer(participant, auxiliary_index)
