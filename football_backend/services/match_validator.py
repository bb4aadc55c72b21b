# match_validator.py
# Pure checks for match schedules and submitted goals.
# No session, no state: every check is a function of its arguments.

from football_backend.core.errors import (
    InvalidTeams, TeamNotInMatch, PlayerTeamMismatch, InvalidMinute, goal_message
)
from football_backend.models.match_model import Match, GoalInput
from football_backend.models.player_model import Player


def validate_schedule(home_team_id: int, away_team_id: int) -> None:
    """A match needs two distinct teams. Existence is checked by the caller."""
    if home_team_id == away_team_id:
        raise InvalidTeams()


def validate_goal_team(goal: GoalInput, match: Match, index: int = 1) -> None:
    """The scoring side must be the match's home or away team."""
    if goal.team_id not in (match.home_team_id, match.away_team_id):
        raise TeamNotInMatch(goal_message(index, TeamNotInMatch.default_message))


def validate_goal(goal: GoalInput, match: Match, player: Player, index: int = 1) -> None:
    """
    Validates one submitted goal against its match and the resolved scorer.

    Rules (checked in this order):
    - goal.team_id must be the match's home or away team
    - the scorer must currently belong to goal.team_id
    - minute must be >= 1 (no upper bound)

    `index` is the 1-based position of the goal in the request, used in messages.
    """
    validate_goal_team(goal, match, index)

    if player.team_id != goal.team_id:
        raise PlayerTeamMismatch(goal_message(index, PlayerTeamMismatch.default_message))

    if goal.minute < 1:
        raise InvalidMinute(goal_message(index, InvalidMinute.default_message))
