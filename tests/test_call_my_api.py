from call_my_api import seed_league


class RecordingClient:
    """Forwards to the test client, pointing the team at a missing franchise."""

    def __init__(self, inner):
        self.inner = inner
        self.calls = []

    def post(self, url, json):
        self.calls.append(url)
        if url.endswith("CreateTeam"):
            json = {**json, "franchise_id": 999}
        return self.inner.post(url, json=json)


def test_seed_league_creates_linked_rows(client):
    created = seed_league(client, base_url="")

    assert set(created) == {"franchise", "team", "player", "sponsor"}
    franchise = client.get("/Franchises/FindFranchise/1").json()
    assert franchise["team_count"] == 1
    assert franchise["sponsor_count"] == 1
    assert created["player"]["team_name"] == "Super Kings A"


def test_seed_league_stops_at_first_failure(client):
    recording = RecordingClient(client)

    created = seed_league(recording, base_url="")

    assert list(created) == ["franchise"]
    assert recording.calls == ["/Franchises/CreateFranchise", "/Teams/CreateTeam"]
    assert client.get("/Players/ListPlayers").json() == []
