from cricket_league.players.schemas.player_schema import PlayerIn
from cricket_league.players.services.player_service import PlayerService

HTML = {"accept": "text/html"}


def test_home_page(client):
    response = client.get("/")

    assert response.status_code == 200
    assert "Toronto Cricket League" in response.text


def test_franchise_index_lists_counts(client, franchise, team):
    response = client.get("/Franchises/")

    assert response.status_code == 200
    assert "Super Kings" in response.text


def test_create_franchise_form_redirects(client):
    response = client.post(
        "/Franchises/Create", data={"name": "Royals", "home_city": "", "logo_url": ""}, follow_redirects=False
    )

    assert response.status_code == 303
    assert response.headers["location"] == "/Franchises/"
    found = client.get("/Franchises/FindFranchise/1").json()
    assert found["name"] == "Royals"
    assert found["home_city"] is None


def test_create_franchise_form_with_blank_name_rerenders(client):
    response = client.post("/Franchises/Create", data={"name": "  "}, follow_redirects=False)

    assert response.status_code == 400
    assert "Create franchise" in response.text
    assert client.get("/Franchises/ListFranchises").json() == []


def test_create_sponsor_form_redirects_to_franchise_edit(client, franchise):
    response = client.post(
        "/Sponsors/Create", data={"name": "Maple Bank", "franchise_id": "1"}, follow_redirects=False
    )

    assert response.status_code == 303
    assert response.headers["location"] == "/Franchises/Edit/1"


def test_create_sponsor_form_with_missing_franchise_shows_error(client, franchise):
    response = client.post("/Sponsors/Create", data={"name": "Maple Bank", "franchise_id": "8"})

    assert response.status_code == 400
    assert "Selected franchise does not exist." in response.text


def test_edit_team_form(client, franchise, team):
    page = client.get("/Teams/Edit/1")
    assert page.status_code == 200
    assert 'name="team_id" value="1"' in page.text

    response = client.post(
        "/Teams/Edit/1",
        data={"team_id": "1", "name": "Super Kings B", "city": "Toronto", "franchise_id": "1"},
        follow_redirects=False,
    )

    assert response.status_code == 303
    assert client.get("/Teams/FindTeam/1").json()["name"] == "Super Kings B"


def test_player_pages(client, db, team):
    PlayerService(db).create(PlayerIn(name="John Doe", age=25, role="Bowler", team_id=team.team_id))

    assert "John Doe" in client.get("/Players/").text
    assert "Super Kings A" in client.get("/Players/Details/1").text

    response = client.post("/Players/Create", data={"name": "Young", "age": "12", "role": "Batsman", "team_id": "1"})
    assert response.status_code == 400


def test_delete_franchise_page_shows_restriction(client, franchise, team):
    response = client.post("/Franchises/Delete/1", follow_redirects=False)

    assert response.status_code == 409
    assert "still has 1 team(s)" in response.text


def test_link_sponsor_from_team_details(client, franchise, team):
    client.post("/Sponsors/Create", data={"name": "Maple Bank", "franchise_id": "1"})

    response = client.post("/Teams/Details/1/Sponsors", data={"sponsor_id": "1"}, follow_redirects=False)
    assert response.status_code == 303

    details = client.get("/Teams/Details/1")
    assert "Maple Bank" in details.text
    assert "/Teams/Details/1/Sponsors/1/Remove" in details.text


def test_missing_entity_page_renders_html_404(client):
    response = client.get("/Teams/Details/5", headers=HTML)

    assert response.status_code == 404
    assert "text/html" in response.headers["content-type"]
    assert "Team with ID 5 does not exist." in response.text


def test_edit_post_missing_hidden_id_renders_html_400(client, franchise):
    response = client.post("/Franchises/Edit/1", data={"name": "Kings"}, headers=HTML, follow_redirects=False)

    assert response.status_code == 400
    assert "text/html" in response.headers["content-type"]
    assert "Error 400" in response.text


def test_edit_post_missing_hidden_id_stays_json_for_api_clients(client, franchise):
    response = client.post("/Franchises/Edit/1", data={"name": "Kings"}, follow_redirects=False)

    assert response.status_code == 400
    assert response.json()["errors"][0]["field"] == "franchise_id"


def test_franchise_edit_page_lists_new_sponsor(client, franchise, team):
    response = client.post("/Sponsors/Create", data={"name": "Maple Bank", "franchise_id": "1"})

    # Redirect followed to the franchise edit page
    assert response.status_code == 200
    assert str(response.url).endswith("/Franchises/Edit/1")
    assert "Maple Bank" in response.text
    assert "/Sponsors/Details/1" in response.text
    assert "/Teams/Details/1" in response.text
