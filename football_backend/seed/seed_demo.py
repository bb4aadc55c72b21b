# seed_demo.py
# Seeds two demo teams with a small squad each, so a fresh install has something to schedule.

from loguru import logger
from sqlmodel import Session, select, func

from football_backend.core.database import get_sync_session
from football_backend.models.team_model import Team
from football_backend.models.player_model import Player, PlayerPosition

DEMO_TEAMS = [
    {
        "name": "Riverside United",
        "founded_year": 1921,
        "address": "1 Harbour Road",
        "city": "Riverside",
        "squad": [
            ("Tom Keller", PlayerPosition.GOALKEEPER, 1, 191, 86),
            ("Jonas Berg", PlayerPosition.DEFENDER, 4, 186, 80),
            ("Mateo Ruiz", PlayerPosition.MIDFIELDER, 8, 178, 72),
            ("Sam Okafor", PlayerPosition.ATTACKER, 9, 183, 78),
        ],
    },
    {
        "name": "Northgate Athletic",
        "founded_year": 1934,
        "address": "22 Mill Lane",
        "city": "Northgate",
        "squad": [
            ("Piotr Nowak", PlayerPosition.GOALKEEPER, 1, 193, 88),
            ("Luca Bianchi", PlayerPosition.DEFENDER, 5, 188, 82),
            ("Aiden Walsh", PlayerPosition.MIDFIELDER, 10, 175, 70),
            ("Kenji Mori", PlayerPosition.ATTACKER, 11, 180, 74),
        ],
    },
]


def seed_demo(session: Session = None) -> int:
    """
    Inserts the demo teams when no team exists yet.
    Returns the number of teams created (0 when the table already had data).
    """
    own_session = session is None
    if own_session:
        session = get_sync_session()

    try:
        team_count = session.exec(select(func.count()).select_from(Team)).one()
        if team_count > 0:
            logger.info("Teams already present. Skipping demo seed.")
            return 0

        for data in DEMO_TEAMS:
            team = Team(
                name=data["name"],
                founded_year=data["founded_year"],
                address=data["address"],
                city=data["city"],
            )
            session.add(team)
            session.flush()  # need team.id for the squad

            for name, position, jersey, height, weight in data["squad"]:
                session.add(Player(
                    team_id=team.id,
                    name=name,
                    position=position,
                    jersey_number=jersey,
                    height_cm=height,
                    weight_kg=weight,
                ))
            logger.info(f"Seeded {team.name} with {len(data['squad'])} players")

        session.commit()
        return len(DEMO_TEAMS)
    finally:
        if own_session:
            session.close()


if __name__ == "__main__":
    from football_backend.core.database import init_db
    import asyncio

    asyncio.run(init_db())
    seed_demo()
