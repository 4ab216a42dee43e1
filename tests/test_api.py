"""HTTP-level tests for the Flask JSON API."""

import pytest

from main import app


@pytest.fixture
def client():
    app.config["TESTING"] = True
    with app.test_client() as client:
        yield client


def test_algorithms(client):
    resp = client.get("/api/algorithms")
    assert resp.status_code == 200
    data = resp.get_json()
    assert [a["key"] for a in data["algorithms"]] == [
        "bubble", "selection", "insertion", "merge", "quick", "radix",
    ]
    assert data["speed_presets"]["normal"] == 500


def test_initial_state(client):
    data = client.get("/api/comparison/state").get_json()
    assert data["state"] == "idle"
    assert data["values"] == [50, 20, 90, 10, 30]
    assert data["step"] is None

    radix = client.get("/api/radix/state").get_json()
    assert radix["max_digits"] == 3
    assert radix["speed"] == 1000


def test_unknown_engine(client):
    resp = client.get("/api/heap/state")
    assert resp.status_code == 404
    assert "heap" in resp.get_json()["error"]


def test_session_keeps_controller(client):
    client.post("/api/comparison/input", json={"values": [3, 1, 2]})
    client.post("/api/comparison/start")
    client.post("/api/comparison/next")
    data = client.get("/api/comparison/state").get_json()
    assert data["values"] == [3, 1, 2]
    assert data["current_step"] == 1


def test_sessions_are_isolated(client):
    client.post("/api/comparison/input", json={"values": [3, 1, 2]})
    with app.test_client() as other:
        assert other.get("/api/comparison/state").get_json()["values"] == [50, 20, 90, 10, 30]


def test_text_input(client):
    data = client.post("/api/radix/input", json={"text": "bb, a, ccc"}).get_json()
    assert data["values"] == ["bb", "a", "ccc"]
    data = client.post("/api/radix/end").get_json()
    assert [el["value"] for el in data["step"]["array"]] == ["a", "bb", "ccc"]


def test_bad_input_is_400(client):
    resp = client.post("/api/comparison/input", json={"text": ""})
    assert resp.status_code == 400
    assert "at least one item" in resp.get_json()["error"]

    resp = client.post("/api/radix/input", json={"values": [-4, 2]})
    assert resp.status_code == 400


def test_random_input_with_seed(client):
    a = client.post("/api/comparison/random", json={"seed": 3, "text": False}).get_json()
    b = client.post("/api/comparison/random", json={"seed": 3, "text": False}).get_json()
    assert a["values"] == b["values"]
    assert all(isinstance(v, int) for v in a["values"])


def test_algorithm_and_order(client):
    client.post("/api/comparison/input", json={"values": [5, 3, 8, 1]})
    client.post("/api/comparison/algorithm", json={"algorithm": "quick"})
    data = client.post("/api/comparison/order", json={"order": "desc"}).get_json()
    assert data["algorithm"] == "quick"
    assert data["order"] == "desc"
    data = client.post("/api/comparison/end").get_json()
    assert [el["value"] for el in data["step"]["array"]] == [8, 5, 3, 1]
    assert data["state"] == "finished"

    resp = client.post("/api/comparison/algorithm", json={"algorithm": "radix"})
    assert resp.status_code == 400
    resp = client.post("/api/comparison/order", json={"order": "up"})
    assert resp.status_code == 400


def test_navigation(client):
    client.post("/api/comparison/input", json={"values": [2, 1]})
    assert client.post("/api/comparison/prev").status_code == 400
    data = client.post("/api/comparison/start").get_json()
    assert data["current_step"] == 0
    data = client.post("/api/comparison/goto", json={"index": 2}).get_json()
    assert data["current_step"] == 2
    assert client.post("/api/comparison/goto", json={"index": 999}).status_code == 400
    assert client.post("/api/comparison/goto", json={"index": "1"}).status_code == 400
    client.post("/api/comparison/end")
    assert client.post("/api/comparison/next").status_code == 400
    data = client.post("/api/comparison/reset").get_json()
    assert data["state"] == "idle"
    assert data["total_steps"] > 0


def test_steps_listing(client):
    client.post("/api/radix/input", json={"values": [12, 3]})
    data = client.get("/api/radix/steps").get_json()
    assert data["total_steps"] == len(data["steps"]) == 1 + 2 * 3 + 1
    assert data["steps"][0]["phase"] == "initial"
    assert data["steps"][-1]["phase"] == "complete"


def test_speed(client):
    data = client.post("/api/comparison/speed", json={"preset": "fast"}).get_json()
    assert data["speed"] == 250
    data = client.post("/api/comparison/speed", json={"speed": 750}).get_json()
    assert data["speed"] == 750
    assert client.post("/api/comparison/speed", json={"speed": 0}).status_code == 400
    assert client.post("/api/comparison/speed", json={}).status_code == 400


def test_play_toggles(client):
    client.post("/api/comparison/speed", json={"speed": 60000})
    data = client.post("/api/comparison/play").get_json()
    assert data["is_playing"] is True
    assert data["state"] == "playing"
    data = client.post("/api/comparison/play").get_json()
    assert data["is_playing"] is False
    assert data["state"] == "ready"


def test_compare(client):
    resp = client.post("/api/compare", json={
        "values": [1, 2, 3, 4, 5], "left": "bubble", "right": "selection",
    })
    assert resp.status_code == 200
    data = resp.get_json()
    assert data["left"]["algo_key"] == "bubble"
    assert data["right"]["algo_key"] == "selection"
    assert data["winner_comparisons"] == "Bubble Sort"


def test_compare_bad_algorithm(client):
    resp = client.post("/api/compare", json={"values": [1, 2], "left": "bogo"})
    assert resp.status_code == 400


def test_sessions_beyond_cap_are_evicted(monkeypatch):
    from collections import OrderedDict

    import main
    from settings import Settings

    monkeypatch.setattr(main, "settings", Settings(max_sessions=3))
    monkeypatch.setattr(main, "_controllers", OrderedDict())

    first = app.test_client()
    first.post("/api/comparison/speed", json={"speed": 60000})
    assert first.post("/api/comparison/play").get_json()["is_playing"] is True
    playing = next(iter(main._controllers.values()))["comparison"]

    for _ in range(3):
        app.test_client().get("/api/comparison/state")

    assert len(main._controllers) == 3
    assert not playing.is_playing
    # the evicted browser starts over with fresh controllers
    assert first.get("/api/comparison/state").get_json()["state"] == "idle"


def test_recent_sessions_survive_eviction(monkeypatch):
    from collections import OrderedDict

    import main
    from settings import Settings

    monkeypatch.setattr(main, "settings", Settings(max_sessions=2))
    monkeypatch.setattr(main, "_controllers", OrderedDict())

    kept = app.test_client()
    kept.post("/api/comparison/input", json={"values": [3, 1, 2]})
    app.test_client().get("/api/comparison/state")
    kept.get("/api/comparison/state")
    app.test_client().get("/api/comparison/state")

    assert len(main._controllers) == 2
    assert kept.get("/api/comparison/state").get_json()["values"] == [3, 1, 2]
