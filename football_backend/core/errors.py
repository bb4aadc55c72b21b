# errors.py
# Error taxonomy for the football backend.
# Every rejection carries a stable `code` so callers can tell the kinds apart.

from typing import Optional


class FootballError(Exception):
    """Base class for every caller-facing rejection."""
    status_code = 400
    code = "BadRequest"
    default_message = "Bad request"

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.default_message
        super().__init__(self.message)


def goal_message(index: int, message: str) -> str:
    """Prefixes a goal-level error with the 1-based position of the goal in the request."""
    return f"Goal #{index}: {message}"


# ==========================================
# (a) NOT FOUND
# ==========================================
class NotFoundError(FootballError):
    status_code = 404
    code = "NotFound"
    default_message = "Resource not found"


class TeamNotFound(NotFoundError):
    code = "TeamNotFound"
    default_message = "Team not found"


class PlayerNotFound(NotFoundError):
    code = "PlayerNotFound"
    default_message = "Player not found"


class MatchNotFound(NotFoundError):
    code = "MatchNotFound"
    default_message = "Match not found"


# ==========================================
# (b) STATE CONFLICTS
# ==========================================
class StateConflictError(FootballError):
    status_code = 409
    code = "Conflict"
    default_message = "Conflict"


class AlreadyCompleted(StateConflictError):
    code = "AlreadyCompleted"
    default_message = "Match result already submitted. Use PUT to update."


class NotYetCompleted(StateConflictError):
    code = "NotYetCompleted"
    default_message = "Cannot update result of a match that has not been completed. Use POST to submit first."


class MatchAlreadyCompleted(StateConflictError):
    code = "MatchAlreadyCompleted"
    default_message = "Cannot update schedule of a completed match"


class NotCompleted(StateConflictError):
    code = "NotCompleted"
    default_message = "Match has not been completed yet"


class JerseyNumberTaken(StateConflictError):
    code = "JerseyNumberTaken"
    default_message = "Jersey number already used in this team"


# ==========================================
# (c) INPUT VALIDATION
# ==========================================
class InvalidTeams(FootballError):
    code = "InvalidTeams"
    default_message = "Home team and away team cannot be the same"


class TeamNotInMatch(FootballError):
    code = "TeamNotInMatch"
    default_message = "team_id must be either home or away team"


class PlayerTeamMismatch(FootballError):
    code = "PlayerTeamMismatch"
    default_message = "player does not belong to the specified team"


class InvalidMinute(FootballError):
    code = "InvalidMinute"
    default_message = "minute must be at least 1"


# ==========================================
# AUTH
# ==========================================
class AdminExists(FootballError):
    code = "AdminExists"
    default_message = "Admin already exists"


class InvalidCredentials(FootballError):
    status_code = 401
    code = "InvalidCredentials"
    default_message = "Invalid credentials"
