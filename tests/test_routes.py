"""HTTP surface: status codes, error bodies, and pagination envelopes."""

from sqlalchemy.exc import OperationalError

from football_backend.services import store


def _team(client, name="Alpha FC", **extra):
    res = client.post("/teams", json={"name": name, "city": "Somewhere", **extra})
    assert res.status_code == 201
    return res.json()


def _player(client, team_id, name="Alan Archer", jersey=9, position="attacker"):
    return client.post(f"/teams/{team_id}/players", json={
        "name": name, "height_cm": 180, "weight_kg": 75,
        "position": position, "jersey_number": jersey,
    })


def test_health(client):
    res = client.get("/health")
    assert res.status_code == 200
    assert res.json() == {"status": "ok"}


# ==========================================
# TEAMS
# ==========================================
def test_team_crud(client):
    team = _team(client, founded_year=1902)
    assert team["name"] == "Alpha FC"

    res = client.put(f"/teams/{team['id']}", json={"name": "Alpha City", "city": "Elsewhere", "founded_year": 1902})
    assert res.status_code == 200
    assert res.json()["name"] == "Alpha City"

    res = client.delete(f"/teams/{team['id']}")
    assert res.status_code == 200

    res = client.get(f"/teams/{team['id']}")
    assert res.status_code == 404
    assert res.json() == {"detail": "Team not found", "code": "TeamNotFound"}


def test_team_list_envelope(client):
    for name in ("One", "Two", "Three"):
        _team(client, name)

    body = client.get("/teams", params={"page": 2, "per_page": 2}).json()

    assert len(body["teams"]) == 1
    assert (body["page"], body["per_page"], body["total"], body["total_pages"]) == (2, 2, 3, 2)


def test_team_validation_error(client):
    res = client.post("/teams", json={"city": "Nowhere"})
    assert res.status_code == 422


# ==========================================
# PLAYERS
# ==========================================
def test_player_create_and_list(client):
    team = _team(client)
    res = _player(client, team["id"])
    assert res.status_code == 201
    assert res.json()["team_id"] == team["id"]

    body = client.get(f"/teams/{team['id']}/players").json()
    assert [p["name"] for p in body["players"]] == ["Alan Archer"]
    assert body["total"] == 1


def test_player_for_unknown_team(client):
    res = _player(client, 999)
    assert res.status_code == 404
    assert res.json()["code"] == "TeamNotFound"


def test_jersey_number_unique_per_team(client):
    alpha = _team(client, "Alpha FC")
    beta = _team(client, "Beta United")
    assert _player(client, alpha["id"], jersey=9).status_code == 201

    res = _player(client, alpha["id"], name="Other", jersey=9)
    assert res.status_code == 409
    assert res.json()["code"] == "JerseyNumberTaken"

    # Other teams may reuse the number
    assert _player(client, beta["id"], jersey=9).status_code == 201


def test_deleted_player_frees_jersey(client):
    team = _team(client)
    first = _player(client, team["id"], jersey=7).json()

    assert client.delete(f"/players/{first['id']}").status_code == 200
    assert client.get(f"/players/{first['id']}").status_code == 404

    assert _player(client, team["id"], name="Replacement", jersey=7).status_code == 201


def test_player_update_jersey_conflict(client):
    team = _team(client)
    keeper = _player(client, team["id"], name="Keeper", jersey=1, position="goalkeeper").json()
    _player(client, team["id"], name="Striker", jersey=9)

    payload = {"name": "Keeper", "height_cm": 190, "weight_kg": 85, "position": "goalkeeper"}

    res = client.put(f"/players/{keeper['id']}", json={**payload, "jersey_number": 9})
    assert res.status_code == 409

    # Keeping the same number is not a conflict with itself
    res = client.put(f"/players/{keeper['id']}", json={**payload, "jersey_number": 1})
    assert res.status_code == 200
    assert res.json()["height_cm"] == 190


def test_player_invalid_position(client):
    team = _team(client)
    res = _player(client, team["id"], position="winger")
    assert res.status_code == 422


# ==========================================
# MATCHES AND RESULTS
# ==========================================
def _fixture(client):
    home = _team(client, "Alpha FC")
    away = _team(client, "Beta United")
    scorer = _player(client, home["id"], name="Alan Archer", jersey=9).json()
    visitor = _player(client, away["id"], name="Ben Baker", jersey=9).json()
    res = client.post("/matches", json={
        "home_team_id": home["id"], "away_team_id": away["id"],
        "match_date": "2025-06-15", "match_time": "19:30",
    })
    assert res.status_code == 201
    return res.json(), scorer, visitor


def _goals(*entries):
    return {"goals": [{"player_id": p["id"], "team_id": p["team_id"], "minute": m} for p, m in entries]}


def test_create_match_same_teams(client):
    team = _team(client)
    res = client.post("/matches", json={
        "home_team_id": team["id"], "away_team_id": team["id"],
        "match_date": "2025-06-15", "match_time": "19:30",
    })
    assert res.status_code == 400
    assert res.json()["code"] == "InvalidTeams"


def test_match_result_flow(client):
    match, scorer, visitor = _fixture(client)
    assert match["status"] == "scheduled"
    assert (match["home_score"], match["away_score"]) == (0, 0)

    res = client.post(f"/matches/{match['id']}/result", json=_goals((scorer, 80), (visitor, 55), (scorer, 10)))
    assert res.status_code == 200
    body = res.json()
    assert body["status"] == "completed"
    assert (body["home_score"], body["away_score"]) == (2, 1)
    assert [g["minute"] for g in body["goals"]] == [10, 55, 80]
    assert body["goals"][0]["player_name"] == "Alan Archer"

    res = client.post(f"/matches/{match['id']}/result", json=_goals((scorer, 5)))
    assert res.status_code == 409
    assert res.json()["code"] == "AlreadyCompleted"

    res = client.put(f"/matches/{match['id']}/result", json=_goals((visitor, 5)))
    assert res.status_code == 200
    assert (res.json()["home_score"], res.json()["away_score"]) == (0, 1)


def test_update_result_requires_completed_match(client):
    match, scorer, _ = _fixture(client)
    res = client.put(f"/matches/{match['id']}/result", json=_goals((scorer, 10)))
    assert res.status_code == 409
    assert res.json()["code"] == "NotYetCompleted"


def test_completed_schedule_is_frozen(client):
    match, scorer, _ = _fixture(client)
    client.post(f"/matches/{match['id']}/result", json=_goals((scorer, 10)))

    res = client.put(f"/matches/{match['id']}", json={
        "home_team_id": match["home_team_id"], "away_team_id": match["away_team_id"],
        "match_date": "2025-07-01", "match_time": "18:00",
    })
    assert res.status_code == 409
    assert res.json()["code"] == "MatchAlreadyCompleted"


def test_invalid_goal_reports_position(client):
    match, scorer, _ = _fixture(client)
    res = client.post(f"/matches/{match['id']}/result", json=_goals((scorer, 10), (scorer, 0)))

    assert res.status_code == 400
    assert res.json()["code"] == "InvalidMinute"
    assert res.json()["detail"].startswith("Goal #2:")
    assert client.get(f"/matches/{match['id']}").json()["status"] == "scheduled"


def test_result_with_missing_field(client):
    match, scorer, _ = _fixture(client)
    res = client.post(f"/matches/{match['id']}/result", json={"goals": [{"player_id": scorer["id"], "minute": 3}]})
    assert res.status_code == 422


def test_match_list_and_delete(client):
    match, _, _ = _fixture(client)
    body = client.get("/matches").json()
    assert [m["id"] for m in body["matches"]] == [match["id"]]
    assert body["total"] == 1

    assert client.delete(f"/matches/{match['id']}").status_code == 200
    res = client.get(f"/matches/{match['id']}")
    assert res.status_code == 404
    assert res.json()["code"] == "MatchNotFound"


# ==========================================
# REPORTS
# ==========================================
def test_report_endpoints(client):
    match, scorer, visitor = _fixture(client)

    res = client.get(f"/reports/matches/{match['id']}")
    assert res.status_code == 409
    assert res.json()["code"] == "NotCompleted"

    client.post(f"/matches/{match['id']}/result", json=_goals((scorer, 10), (visitor, 20), (scorer, 30)))

    report = client.get(f"/reports/matches/{match['id']}").json()
    assert report["match_result"] == "Home Win"
    assert report["top_scorer"]["player_name"] == "Alan Archer"
    assert report["top_scorer"]["goals_in_match"] == 2
    assert (report["home_team_total_wins"], report["away_team_total_wins"]) == (1, 0)

    listing = client.get("/reports/matches").json()
    assert [r["match_id"] for r in listing["reports"]] == [match["id"]]
    assert listing["total"] == 1


def test_report_for_unknown_match(client):
    res = client.get("/reports/matches/4242")
    assert res.status_code == 404
    assert res.json()["code"] == "MatchNotFound"


# ==========================================
# STORAGE FAILURES
# ==========================================
def test_storage_error_is_opaque(client, monkeypatch):
    def broken(*args, **kwargs):
        raise OperationalError("SELECT 1", {}, Exception("db down"))

    monkeypatch.setattr(store, "find_teams", broken)

    res = client.get("/teams")

    assert res.status_code == 500
    assert res.json() == {"detail": "Internal server error", "code": "Internal"}


# ==========================================
# INPUT STRICTNESS
# ==========================================
def test_team_sort_order_must_be_asc_or_desc(client):
    _team(client, "Zeta")
    assert client.get("/teams", params={"sort_order": "sideways"}).status_code == 422
    assert client.get("/matches", params={"sort_order": "up"}).status_code == 422


def test_team_sort_by_city(client):
    client.post("/teams", json={"name": "North", "city": "Bergen"})
    client.post("/teams", json={"name": "South", "city": "Athens"})

    body = client.get("/teams", params={"sort_by": "city", "sort_order": "asc"}).json()

    assert [t["city"] for t in body["teams"]] == ["Athens", "Bergen"]


def test_team_logo_url_must_be_a_url(client):
    res = client.post("/teams", json={"name": "Alpha FC", "logo_url": "not a url"})
    assert res.status_code == 422

    res = client.post("/teams", json={"name": "Alpha FC", "logo_url": "https://cdn.example.com/alpha.png"})
    assert res.status_code == 201
    assert res.json()["logo_url"] == "https://cdn.example.com/alpha.png"


def test_goal_fields_are_strict_integers(client):
    match, scorer, _ = _fixture(client)

    for minute in (True, "12", 12.5):
        payload = {"goals": [{"player_id": scorer["id"], "team_id": scorer["team_id"], "minute": minute}]}
        res = client.post(f"/matches/{match['id']}/result", json=payload)
        assert res.status_code == 422

    assert client.get(f"/matches/{match['id']}").json()["status"] == "scheduled"


# ==========================================
# CORS
# ==========================================
def test_cors_preflight(anon_client):
    res = anon_client.options("/teams", headers={
        "Origin": "http://localhost:3000",
        "Access-Control-Request-Method": "POST",
        "Access-Control-Request-Headers": "Authorization, Content-Type",
    })

    assert res.status_code == 200
    assert res.headers["access-control-allow-origin"] == "*"
    assert "POST" in res.headers["access-control-allow-methods"]
    assert res.headers["access-control-max-age"] == str(12 * 60 * 60)


def test_cors_headers_on_simple_request(anon_client):
    res = anon_client.get("/health", headers={"Origin": "http://localhost:3000"})
    assert res.headers["access-control-allow-origin"] == "*"
