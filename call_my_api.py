import sys
import time

import requests

BASE_URL = "http://127.0.0.1:8000"


def seed_league(client=None, base_url: str = BASE_URL, pause: float = 0):
    """Create a franchise, a team, a player and a sponsor through the JSON API.

    Calls run in order and stop at the first failure, since each one needs
    the ID returned by the previous call.
    """
    client = client or requests.Session()
    created = {}

    steps = [
        ("franchise", "/Franchises/CreateFranchise", lambda: {
            "name": "Super Kings",
            "home_city": "Toronto",
        }),
        ("team", "/Teams/CreateTeam", lambda: {
            "name": "Super Kings A",
            "home_ground": "Toronto",
            "franchise_id": created["franchise"]["franchise_id"],
        }),
        ("player", "/Players/CreatePlayer", lambda: {
            "first_name": "John",
            "last_name": "Doe",
            "date_of_birth": "2000-01-01",
            "position": "Bowler",
            "team_id": created["team"]["team_id"],
        }),
        ("sponsor", "/Sponsors/CreateSponsor", lambda: {
            "name": "Maple Bank",
            "franchise_id": created["franchise"]["franchise_id"],
        }),
    ]

    for idx, (key, path, build_payload) in enumerate(steps):
        url = f"{base_url}{path}"
        print(f"Starting request {idx + 1}: {url}")
        response = client.post(url, json=build_payload())

        if response.status_code != 200:
            print(f"Failed: {url} -> Status code: {response.status_code} {response.text}")
            break

        created[key] = response.json()
        print(f"Success: {url} -> {response.status_code}")
        if pause:
            time.sleep(pause)

    return created


if __name__ == "__main__":
    base_url = sys.argv[1] if len(sys.argv) > 1 else BASE_URL
    try:
        seed_league(base_url=base_url, pause=1)
    except requests.RequestException as e:
        print(f"Error: {base_url} -> {e}")
        sys.exit(1)
