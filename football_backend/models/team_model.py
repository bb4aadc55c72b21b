# team_model.py
# Defines the Team table and its API schemas.

from typing import Optional, List, TYPE_CHECKING
from datetime import datetime
from sqlmodel import SQLModel, Field, Relationship
from pydantic import BaseModel, HttpUrl, field_serializer

from .timestamps import utc_now

if TYPE_CHECKING:
    from .player_model import Player


class Team(SQLModel, table=True):
    """A football team. Deleting a team only hides it (deleted_at) so old matches still resolve."""
    id: Optional[int] = Field(default=None, primary_key=True)
    name: str
    logo_url: Optional[str] = None
    founded_year: Optional[int] = None
    address: Optional[str] = None
    city: Optional[str] = None

    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)
    deleted_at: Optional[datetime] = Field(default=None, index=True)  # Soft delete marker

    players: List["Player"] = Relationship(back_populates="team")


# -------------------------------
# Pydantic schemas for API requests/responses
# -------------------------------
class TeamCreate(BaseModel):
    name: str = Field(min_length=1)
    logo_url: Optional[HttpUrl] = None
    founded_year: Optional[int] = Field(default=None, ge=1800, le=2100)
    address: Optional[str] = None
    city: Optional[str] = None

    @field_serializer("logo_url")
    def serialize_logo_url(self, logo_url: Optional[HttpUrl]) -> Optional[str]:
        # Stored as plain text on the Team row
        return str(logo_url) if logo_url else None


class TeamUpdate(TeamCreate):
    pass


class TeamRead(BaseModel):
    id: int
    name: str
    logo_url: Optional[str] = None
    founded_year: Optional[int] = None
    address: Optional[str] = None
    city: Optional[str] = None
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True
