# player_model.py
# Defines the Player table, the fixed position list, and player API schemas.

from enum import Enum
from typing import Optional, TYPE_CHECKING
from datetime import datetime
from sqlmodel import SQLModel, Field, Relationship
from pydantic import BaseModel

from .timestamps import utc_now

if TYPE_CHECKING:
    from .team_model import Team


class PlayerPosition(str, Enum):
    ATTACKER = "attacker"
    MIDFIELDER = "midfielder"
    DEFENDER = "defender"
    GOALKEEPER = "goalkeeper"


class Player(SQLModel, table=True):
    """
    A player registered to exactly one team.
    Jersey numbers are unique among active players of a team. This is checked in the
    player routes, not by a DB constraint, so a removed player's number is free again.
    """
    id: Optional[int] = Field(default=None, primary_key=True)
    team_id: int = Field(foreign_key="team.id", index=True)
    name: str
    height_cm: int       # informational
    weight_kg: int       # informational
    position: PlayerPosition
    jersey_number: int

    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)
    deleted_at: Optional[datetime] = Field(default=None, index=True)

    team: Optional["Team"] = Relationship(back_populates="players")


# -------------------------------
# Pydantic schemas for API requests/responses
# -------------------------------
class PlayerCreate(BaseModel):
    name: str = Field(min_length=1)
    height_cm: int = Field(gt=0)
    weight_kg: int = Field(gt=0)
    position: PlayerPosition
    jersey_number: int = Field(gt=0)


class PlayerUpdate(PlayerCreate):
    pass


class PlayerRead(BaseModel):
    """Schema for returning player details."""
    id: int
    team_id: int
    name: str
    height_cm: int
    weight_kg: int
    position: PlayerPosition
    jersey_number: int
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True
