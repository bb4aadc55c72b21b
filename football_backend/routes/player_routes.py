# player_routes.py
# API routes for players: squad listing/registration under a team, and single-player operations.

from fastapi import APIRouter, Depends
from sqlmodel import Session

from football_backend.core.database import get_session
from football_backend.core.errors import TeamNotFound, PlayerNotFound, JerseyNumberTaken
from football_backend.core.pagination import SortOrder, sanitize_pagination, page_offset, page_meta
from football_backend.models.player_model import Player, PlayerCreate, PlayerUpdate, PlayerRead
from football_backend.models.timestamps import utc_now
from football_backend.services import store

router = APIRouter()


def ensure_jersey_available(session: Session, team_id: int, jersey_number: int) -> None:
    """Jersey numbers are unique among a team's active players; removed players free theirs."""
    if store.find_player_by_jersey(session, team_id, jersey_number):
        raise JerseyNumberTaken()


# ==========================================
# TEAM SQUAD
# ==========================================
@router.get("/teams/{team_id}/players")
def list_team_players(
    team_id: int,
    session: Session = Depends(get_session),
    page: int = 1,
    per_page: int = 10,
    sort_by: str = "created_at",
    sort_order: SortOrder = "desc",
):
    # 1️⃣ Validate team
    if not store.find_team_by_id(session, team_id):
        raise TeamNotFound()

    # 2️⃣ Page through active players
    page, per_page = sanitize_pagination(page, per_page)
    players = store.find_players_by_team(session, team_id, page_offset(page, per_page), per_page, sort_by, sort_order)
    total = store.count_players_by_team(session, team_id)

    return {
        "team_id": team_id,
        "players": [PlayerRead.model_validate(p) for p in players],
        **page_meta(page, per_page, total),
    }


@router.post("/teams/{team_id}/players", response_model=PlayerRead, status_code=201)
def create_player(team_id: int, data: PlayerCreate, session: Session = Depends(get_session)):
    if not store.find_team_by_id(session, team_id):
        raise TeamNotFound()

    ensure_jersey_available(session, team_id, data.jersey_number)

    player = Player(team_id=team_id, **data.model_dump())
    session.add(player)
    session.commit()
    session.refresh(player)
    return player


# ==========================================
# SINGLE PLAYER
# ==========================================
@router.get("/players/{player_id}", response_model=PlayerRead)
def get_player(player_id: int, session: Session = Depends(get_session)):
    player = store.find_player_by_id(session, player_id)
    if not player:
        raise PlayerNotFound()
    return player


@router.put("/players/{player_id}", response_model=PlayerRead)
def update_player(player_id: int, data: PlayerUpdate, session: Session = Depends(get_session)):
    player = store.find_player_by_id(session, player_id)
    if not player:
        raise PlayerNotFound()

    # Only re-check uniqueness when the number actually changes
    if data.jersey_number != player.jersey_number:
        ensure_jersey_available(session, player.team_id, data.jersey_number)

    for field, value in data.model_dump().items():
        setattr(player, field, value)
    player.updated_at = utc_now()

    session.add(player)
    session.commit()
    session.refresh(player)
    return player


@router.delete("/players/{player_id}")
def delete_player(player_id: int, session: Session = Depends(get_session)):
    player = store.find_player_by_id(session, player_id)
    if not player:
        raise PlayerNotFound()

    store.soft_delete(session, player)
    session.commit()
    return {"message": "Player deleted"}
