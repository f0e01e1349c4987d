"""
HTTP Tests for the queue and health endpoints

Tests for:
- GET/POST/DELETE /queue
- DELETE /queue/{id}
- POST /queue/move and POST /queue/dequeue
- GET /health and GET /test
"""

import re

import pytest

ID_PATTERN = re.compile(r"^q_[0-9a-f]{32}$")


def _enqueue(client, singer: str, song="20001"):
    response = client.post("/queue", json={"song": song, "singer": singer})
    assert response.status_code == 201
    return response.json()


class TestEnqueue:
    """Tests for POST /queue."""

    def test_created(self, client, sample_song):
        """Should return 201 with the new entry."""
        response = client.post("/queue", json={"song": sample_song, "singer": "Ana"})

        assert response.status_code == 201
        body = response.json()
        assert ID_PATTERN.match(body["id"])
        assert body["song"] == sample_song
        assert body["singer"] == "Ana"
        assert body["queue_position"] == 1
        assert body["created_at"].endswith("Z")

    def test_extra_fields_ignored(self, client):
        response = client.post("/queue", json={"song": "20001", "singer": "Ana", "color": "red"})

        assert response.status_code == 201

    @pytest.mark.parametrize(
        "payload",
        [{"singer": "Ana"}, {"song": "", "singer": "Ana"}, {"song": None, "singer": "Ana"}],
    )
    def test_missing_song(self, client, payload):
        """Should return 400 with a JSON error."""
        response = client.post("/queue", json=payload)

        assert response.status_code == 400
        assert response.json() == {"error": "Song reference is required"}

    @pytest.mark.parametrize("singer", [None, "", "   "])
    def test_missing_singer(self, client, singer):
        response = client.post("/queue", json={"song": "20001", "singer": singer})

        assert response.status_code == 400
        assert response.json() == {"error": "Singer name is required"}

    def test_no_body(self, client):
        """Should treat a missing body as a missing song."""
        response = client.post("/queue")

        assert response.status_code == 400
        assert "error" in response.json()

    def test_invalid_json(self, client):
        response = client.post(
            "/queue", content=b"{not json", headers={"Content-Type": "application/json"}
        )

        assert response.status_code == 400
        assert "error" in response.json()

    def test_full_queue(self, settings, media_dirs):
        """Should answer 400 once the configured limit is reached."""
        from fastapi.testclient import TestClient

        from karaoke_server.config.container import create_container
        from karaoke_server.config.settings import QueueSettings
        from karaoke_server.infrastructure.http.app import create_app

        small = settings.model_copy(update={"queue": QueueSettings(max_size=1)})
        with TestClient(create_app(create_container(small))) as client:
            _enqueue(client, "A")
            response = client.post("/queue", json={"song": "2", "singer": "B"})

        assert response.status_code == 400
        assert "error" in response.json()


class TestListQueue:
    """Tests for GET /queue."""

    def test_empty(self, client):
        response = client.get("/queue")

        assert response.status_code == 200
        assert response.json() == []

    def test_order_and_positions(self, client):
        """Should list entries in arrival order with dense positions."""
        for singer in ("A", "B", "C"):
            _enqueue(client, singer)

        body = client.get("/queue").json()

        assert [e["singer"] for e in body] == ["A", "B", "C"]
        assert [e["queue_position"] for e in body] == [1, 2, 3]
        assert set(body[0]) == {"id", "song", "singer", "queue_position", "created_at"}

    def test_shared_between_clients(self, client):
        """Should show the same queue to every device."""
        _enqueue(client, "Phone")

        assert client.get("/queue").json() == client.get("/queue").json()


class TestRemove:
    """Tests for DELETE /queue/{id}."""

    def test_remove_renumbers(self, client):
        _enqueue(client, "A")
        b = _enqueue(client, "B")
        _enqueue(client, "C")

        response = client.delete(f"/queue/{b['id']}")

        assert response.status_code == 200
        assert response.json() == {"ok": True}
        body = client.get("/queue").json()
        assert [(e["singer"], e["queue_position"]) for e in body] == [("A", 1), ("C", 2)]

    def test_remove_unknown(self, client):
        """Should return 404 with a JSON error."""
        response = client.delete("/queue/q_" + "f" * 32)

        assert response.status_code == 404
        assert response.json() == {"error": "Queue entry not found"}


class TestClear:
    """Tests for DELETE /queue."""

    def test_clear(self, client):
        _enqueue(client, "A")
        _enqueue(client, "B")

        response = client.delete("/queue")

        assert response.status_code == 200
        assert response.json() == {"ok": True, "removed": 2}
        assert client.get("/queue").json() == []


class TestMove:
    """Tests for POST /queue/move."""

    def test_move(self, client):
        for singer in ("A", "B", "C"):
            _enqueue(client, singer)

        response = client.post("/queue/move", json={"fromIndex": 2, "toIndex": 0})

        assert response.status_code == 200
        assert [e["singer"] for e in client.get("/queue").json()] == ["C", "A", "B"]

    def test_move_out_of_range(self, client):
        _enqueue(client, "A")

        response = client.post("/queue/move", json={"from": 0, "to": 5})

        assert response.status_code == 400
        assert "error" in response.json()

    def test_move_missing_fields(self, client):
        assert client.post("/queue/move", json={}).status_code == 400


class TestDequeue:
    """Tests for POST /queue/dequeue."""

    def test_dequeue_head(self, client):
        """Should return and remove the head by default."""
        _enqueue(client, "A")
        _enqueue(client, "B")

        response = client.post("/queue/dequeue")

        assert response.status_code == 200
        assert response.json()["singer"] == "A"
        body = client.get("/queue").json()
        assert [(e["singer"], e["queue_position"]) for e in body] == [("B", 1)]

    def test_dequeue_index(self, client):
        _enqueue(client, "A")
        _enqueue(client, "B")

        assert client.post("/queue/dequeue", json={"index": 1}).json()["singer"] == "B"

    def test_dequeue_empty(self, client):
        response = client.post("/queue/dequeue")

        assert response.status_code == 400
        assert "error" in response.json()


class TestHealth:
    """Tests for the liveness endpoints."""

    @pytest.mark.parametrize("path", ["/health", "/test"])
    def test_health(self, client, path: str):
        _enqueue(client, "A")

        response = client.get(path)

        assert response.status_code == 200
        assert response.json() == {"status": "ok", "message": "Server running", "queue_length": 1}
