# football_backend/models/__init__.py
# Centralized imports for all database models and schemas

# Admin
from .admin_model import Admin, AdminRegister, AdminLogin, TokenResponse

# Team
from .team_model import Team, TeamCreate, TeamUpdate, TeamRead

# Player
from .player_model import Player, PlayerPosition, PlayerCreate, PlayerUpdate, PlayerRead

# Match and goals
from .match_model import (
    Match, MatchStatus, Goal, MatchCreate, MatchUpdate, GoalInput,
    MatchResultRequest, GoalRead, MatchRead
)

# Reports
from .report_model import MatchOutcome, ReportGoal, TopScorer, MatchReport, MatchReportListItem
