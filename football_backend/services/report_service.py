# report_service.py
# Derives read-only report views (outcome, top scorer, cumulative wins) from completed matches.

from typing import Dict, List, Optional, Tuple

from sqlmodel import Session

from football_backend.core.errors import MatchNotFound, NotCompleted
from football_backend.core.pagination import sanitize_pagination, page_offset, page_meta
from football_backend.models.match_model import Goal
from football_backend.models.team_model import TeamRead
from football_backend.models.report_model import (
    MatchOutcome, ReportGoal, TopScorer, MatchReport, MatchReportListItem
)
from football_backend.services import store


def classify_outcome(home_score: int, away_score: int) -> MatchOutcome:
    if home_score > away_score:
        return MatchOutcome.HOME_WIN
    if away_score > home_score:
        return MatchOutcome.AWAY_WIN
    return MatchOutcome.DRAW


def compute_top_scorer(goals: List[Goal]) -> Optional[TopScorer]:
    """
    Player with the most goals in the given goal set, or None when there are no goals.

    Ties go to the tied player whose first goal came earliest (minute, then goal id).
    Goals are re-sorted here so the result does not depend on the caller's ordering.
    """
    ordered = sorted(goals, key=lambda g: (g.minute, g.id or 0))

    # dicts keep insertion order => first-scored order
    tallies: Dict[int, TopScorer] = {}
    for goal in ordered:
        if goal.player_id not in tallies:
            tallies[goal.player_id] = TopScorer(
                player_id=goal.player_id,
                player_name=goal.player.name if goal.player else "",
                team_name=goal.team.name if goal.team else "",
                goals_in_match=0,
            )
        tallies[goal.player_id].goals_in_match += 1

    if not tallies:
        return None

    # max() keeps the first of equal maxima
    return max(tallies.values(), key=lambda scorer: scorer.goals_in_match)


def compute_cumulative_wins(session: Session, team_id: int) -> int:
    """Completed matches the team has won, recomputed on every call."""
    return store.count_wins_for_team(session, team_id)


def build_match_report(session: Session, match_id: int) -> MatchReport:
    # 1️⃣ Load match with teams and goals
    details = store.find_match_by_id_with_details(session, match_id)
    if not details:
        raise MatchNotFound()

    match = details.match
    if not match.is_completed:
        raise NotCompleted()

    # 2️⃣ Goal list (already minute-ordered)
    report_goals = [
        ReportGoal(
            player_id=goal.player_id,
            player_name=goal.player.name if goal.player else "",
            team_id=goal.team_id,
            team_name=goal.team.name if goal.team else "",
            minute=goal.minute,
        )
        for goal in details.goals
    ]

    # 3️⃣ Assemble report with win totals for both sides
    return MatchReport(
        match_id=match.id,
        match_date=match.match_date,
        match_time=match.match_time,
        home_team=TeamRead.model_validate(details.home_team),
        away_team=TeamRead.model_validate(details.away_team),
        home_score=match.home_score,
        away_score=match.away_score,
        match_result=classify_outcome(match.home_score, match.away_score),
        goals=report_goals,
        top_scorer=compute_top_scorer(details.goals),
        home_team_total_wins=compute_cumulative_wins(session, match.home_team_id),
        away_team_total_wins=compute_cumulative_wins(session, match.away_team_id),
    )


def build_report_list(session: Session, page: int, per_page: int) -> Tuple[List[MatchReportListItem], dict]:
    """Completed matches only, newest scheduled first. No top scorer or win totals per row."""
    page, per_page = sanitize_pagination(page, per_page)
    matches = store.find_completed_matches(session, page_offset(page, per_page), per_page)
    total = store.count_completed_matches(session)

    items = [
        MatchReportListItem(
            match_id=match.id,
            match_date=match.match_date,
            match_time=match.match_time,
            home_team=TeamRead.model_validate(match.home_team),
            away_team=TeamRead.model_validate(match.away_team),
            home_score=match.home_score,
            away_score=match.away_score,
            match_result=classify_outcome(match.home_score, match.away_score),
        )
        for match in matches
    ]
    return items, page_meta(page, per_page, total)
