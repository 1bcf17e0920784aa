"""Team count validation shared by the drafter and the aggregator."""


class InvalidTeamCount(Exception):
    """Raised when the requested number of teams cannot be filled."""

    def __init__(self, num_teams: int, participant_count: int):
        self.num_teams = num_teams
        self.participant_count = participant_count
        if num_teams < 1:
            message = "Number of teams must be at least 1"
        else:
            message = (
                f"Cannot create {num_teams} teams with only "
                f"{participant_count} players. "
                f"Maximum teams allowed: {participant_count}"
            )
        super().__init__(message)


def validate_team_count(num_teams: int, participant_count: int) -> None:
    """Check that every team can receive at least one first-round pick.

    Raises:
        InvalidTeamCount: If *num_teams* is below 1 or exceeds
            *participant_count*.
    """
    if num_teams < 1 or num_teams > participant_count:
        raise InvalidTeamCount(num_teams, participant_count)
