def test_create_room_returns_generated_id(client):
    res = client.post("/api/rooms", json={"name": "2025 Journal", "theme": "work"})
    assert res.status_code == 200
    body = res.json()
    assert body["id"] is not None
    assert body["name"] == "2025 Journal"
    assert body["theme"] == "work"


def test_created_room_is_listed(client):
    created = client.post("/api/rooms", json={"name": "2025 Journal", "theme": "work"}).json()
    rooms = client.get("/api/rooms").json()
    assert created in rooms


def test_client_id_is_ignored(client):
    first = client.post("/api/rooms", json={"id": 42, "name": "a", "theme": "b"}).json()
    second = client.post("/api/rooms", json={"id": 42, "name": "c", "theme": "d"}).json()
    assert first["id"] != second["id"]
    assert len(client.get("/api/rooms").json()) == 2


def test_empty_and_null_fields_accepted(client):
    res = client.post("/api/rooms", json={"name": "", "theme": None})
    assert res.status_code == 200
    assert res.json()["name"] == ""
    assert res.json()["theme"] is None


def test_list_rooms_empty(client):
    assert client.get("/api/rooms").json() == []
