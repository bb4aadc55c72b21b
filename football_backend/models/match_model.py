# match_model.py
# Defines the Match model (fixtures and results) and the Goal model (scoring events).

from enum import Enum
from typing import Optional, List, TYPE_CHECKING
from datetime import datetime
from sqlmodel import SQLModel, Field, Relationship
from pydantic import BaseModel, StrictInt

from .team_model import TeamRead
from .timestamps import utc_now

if TYPE_CHECKING:
    from .player_model import Player
    from .team_model import Team


class MatchStatus(str, Enum):
    SCHEDULED = "scheduled"
    COMPLETED = "completed"


class Match(SQLModel, table=True):
    """
    A fixture between two distinct teams.
    home_score/away_score are always the tally of this match's Goal rows; they are
    rewritten on every result submission and never set on their own.
    """
    id: Optional[int] = Field(default=None, primary_key=True)

    # Foreign keys
    home_team_id: int = Field(foreign_key="team.id", index=True)
    away_team_id: int = Field(foreign_key="team.id", index=True)

    # Schedule (opaque strings, e.g. "2025-06-15" / "19:30")
    match_date: str
    match_time: str

    # Results
    home_score: int = 0
    away_score: int = 0
    status: MatchStatus = Field(default=MatchStatus.SCHEDULED, index=True)

    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)

    # Both sides reference team; each names its own FK column
    home_team: Optional["Team"] = Relationship(sa_relationship_kwargs={"foreign_keys": "[Match.home_team_id]"})
    away_team: Optional["Team"] = Relationship(sa_relationship_kwargs={"foreign_keys": "[Match.away_team_id]"})

    @property
    def is_completed(self) -> bool:
        return self.status == MatchStatus.COMPLETED


class Goal(SQLModel, table=True):
    """A single goal. team_id is always one of the match's two teams."""
    id: Optional[int] = Field(default=None, primary_key=True)
    match_id: int = Field(foreign_key="match.id", index=True)
    player_id: int = Field(foreign_key="player.id", index=True)
    team_id: int = Field(foreign_key="team.id")
    minute: int

    created_at: datetime = Field(default_factory=utc_now)

    player: Optional["Player"] = Relationship()
    team: Optional["Team"] = Relationship()


# -------------------------------
# Pydantic schemas for API requests/responses
# -------------------------------
class MatchCreate(BaseModel):
    home_team_id: int
    away_team_id: int
    match_date: str = Field(min_length=1)
    match_time: str = Field(min_length=1)


class MatchUpdate(MatchCreate):
    pass


class GoalInput(BaseModel):
    """One goal in a result submission. Range checks happen in the match validator."""
    player_id: StrictInt
    team_id: StrictInt
    minute: StrictInt


class MatchResultRequest(BaseModel):
    goals: List[GoalInput]


class GoalRead(BaseModel):
    id: int
    match_id: int
    player_id: int
    team_id: int
    minute: int
    player_name: Optional[str] = None
    team_name: Optional[str] = None


class MatchRead(BaseModel):
    id: int
    home_team_id: int
    away_team_id: int
    match_date: str
    match_time: str
    home_score: int
    away_score: int
    status: MatchStatus
    home_team: Optional[TeamRead] = None
    away_team: Optional[TeamRead] = None
    goals: List[GoalRead] = []
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True
