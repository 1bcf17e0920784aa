"""Tests for the TeamBalancer pipeline."""

import pytest

from src.team_balancer.balancer import TeamBalancer
from src.team_balancer.models import BalanceConfig
from src.team_balancer.team_rules import InvalidTeamCount


class TestTeamBalancer:
    def test_rejects_unknown_metric(self):
        with pytest.raises(ValueError, match="Invalid metric"):
            TeamBalancer(BalanceConfig(num_teams=2, metric="bogus"))

    def test_events_performance_run(self, participants):
        result = TeamBalancer(BalanceConfig(num_teams=2)).run(participants)

        assert result.metric.name == "events_performance"
        assert [p.participant_id for p in result.ranked] == [1, 2, 3, 5, 6, 4]
        assert [a.team_id for a in result.assignments] == [1, 2, 2, 1, 1, 2]
        assert result.team_sizes() == {1: 3, 2: 3}
        assert result.size_difference() == 0

    def test_uses_auxiliary_events(self, participants, messages):
        config = BalanceConfig(num_teams=3, metric="messages_length")
        result = TeamBalancer(config).run(participants, messages)

        assert result.auxiliary_index.missing is False
        assert result.ranked[0].participant_id == 5
        assert result.score_of(result.ranked[0]) == 300

    def test_events_ignored_for_events_performance(self, participants, spends):
        with_events = TeamBalancer(BalanceConfig(num_teams=2)).run(participants, spends)
        without = TeamBalancer(BalanceConfig(num_teams=2)).run(participants)
        assert with_events.assignments == without.assignments

    def test_missing_auxiliary_data(self, participants):
        config = BalanceConfig(num_teams=2, metric="points_spent")
        result = TeamBalancer(config).run(participants)

        assert result.auxiliary_index.missing is True
        assert [p.participant_id for p in result.ranked] == [1, 2, 3, 4, 5, 6]

    def test_uneven_split(self, participants):
        result = TeamBalancer(BalanceConfig(num_teams=4)).run(participants)
        assert result.size_difference() == 1
        assert len(result.summaries) == 4

    def test_invalid_team_count(self, participants):
        with pytest.raises(InvalidTeamCount):
            TeamBalancer(BalanceConfig(num_teams=7)).run(participants)

    def test_repeatable(self, participants, spends):
        config = BalanceConfig(num_teams=3, metric="points_spent")
        first = TeamBalancer(config).run(participants, spends)
        second = TeamBalancer(config).run(list(reversed(participants)), list(spends))
        assert first.assignments == second.assignments
        assert first.summaries == second.summaries
