"""
HTTP Tests for the media endpoints

Tests for:
- GET /videos/{filename}: full and ranged streaming, prefix resolution, 404
- GET /sounds/{filename}: extension allow-list, 404, ranged streaming
- GET /videos/resolve/{number}: resolution report
"""

import pytest


class TestVideos:
    """Tests for video streaming."""

    def test_full_file(self, client, video_file, file_bytes):
        """Should return 200 with the whole file."""
        response = client.get("/videos/20001.mp4")

        assert response.status_code == 200
        assert response.headers["content-type"] == "video/mp4"
        assert response.headers["content-length"] == "1000"
        assert response.headers["accept-ranges"] == "bytes"
        assert response.content == file_bytes

    def test_range_request(self, client, video_file, file_bytes):
        """Should return 206 with exactly the requested bytes."""
        response = client.get("/videos/20001.mp4", headers={"Range": "bytes=0-99"})

        assert response.status_code == 206
        assert response.headers["content-range"] == "bytes 0-99/1000"
        assert response.headers["content-length"] == "100"
        assert response.content == file_bytes[:100]

    def test_suffix_range(self, client, video_file, file_bytes):
        response = client.get("/videos/20001", headers={"Range": "bytes=-10"})

        assert response.status_code == 206
        assert response.headers["content-range"] == "bytes 990-999/1000"
        assert response.content == file_bytes[-10:]

    def test_malformed_range_sends_whole_file(self, client, video_file):
        """Should ignore a malformed Range header."""
        response = client.get("/videos/20001.mp4", headers={"Range": "bytes=banana"})

        assert response.status_code == 200
        assert len(response.content) == 1000

    def test_bare_number(self, client, video_file):
        """Should resolve a bare song number."""
        assert client.get("/videos/20001").status_code == 200

    def test_prefix_resolution_sets_content_type(self, client, videos_dir, file_bytes):
        """Should find '30002 - Artist - Song.mkv' and serve it as Matroska."""
        (videos_dir / "30002 - Artist - Song.mkv").write_bytes(file_bytes)

        response = client.get("/videos/30002")

        assert response.status_code == 200
        assert response.headers["content-type"] == "video/x-matroska"

    def test_not_found_plain_text(self, client):
        """Should return a plain-text 404 without leaking paths."""
        response = client.get("/videos/99999.mp4")

        assert response.status_code == 404
        assert response.text == "video not found"
        assert response.headers["content-type"].startswith("text/plain")

    def test_cors_headers(self, client, video_file):
        """Should expose range headers to browser clients."""
        response = client.get(
            "/videos/20001.mp4", headers={"Origin": "http://terminal.local", "Range": "bytes=0-0"}
        )

        assert response.headers["access-control-allow-origin"] == "*"
        assert "Content-Range" in response.headers["access-control-expose-headers"]

    def test_root_change_applies_to_next_request(self, client, tmp_path, file_bytes):
        """Should stream from the new root after POST /config."""
        other = tmp_path / "elsewhere"
        other.mkdir()
        (other / "77777.mp4").write_bytes(file_bytes)

        assert client.get("/videos/77777").status_code == 404
        client.post("/config", json={"videosPath": str(other)})
        assert client.get("/videos/77777").status_code == 200


class TestSounds:
    """Tests for sound effect streaming."""

    def test_sound_served(self, client, sound_file, file_bytes):
        response = client.get("/sounds/applause.mp3")

        assert response.status_code == 200
        assert response.headers["content-type"] == "audio/mpeg"
        assert response.content == file_bytes

    def test_sound_range(self, client, sound_file):
        response = client.get("/sounds/applause.mp3", headers={"Range": "bytes=10-19"})

        assert response.status_code == 206
        assert response.headers["content-range"] == "bytes 10-19/1000"

    @pytest.mark.parametrize("name", ["notes.txt", "applause.exe", "clip.mp4"])
    def test_forbidden_extension(self, client, sound_file, name: str):
        """Should reject extensions outside .mp3/.wav/.ogg with 400."""
        response = client.get(f"/sounds/{name}")

        assert response.status_code == 400
        assert response.text == "file type not allowed"

    def test_missing_sound(self, client):
        """Should return a plain-text 404."""
        response = client.get("/sounds/nothing.wav")

        assert response.status_code == 404
        assert response.text == "sound not found"


class TestResolveDiagnostic:
    """Tests for GET /videos/resolve/{number}."""

    def test_report(self, client, video_file, videos_dir):
        response = client.get("/videos/resolve/20001")

        assert response.status_code == 200
        body = response.json()
        assert body["videosPath"] == str(videos_dir)
        assert body["number"] == "20001"
        assert body["existsExact"] is True
        assert body["candidates"] == ["20001.mp4"]
        assert body["resolved"] == str(video_file)

    def test_report_for_missing_number(self, client):
        body = client.get("/videos/resolve/99999").json()

        assert body["existsExact"] is False
        assert body["candidates"] == []
        assert body["resolved"] is None
