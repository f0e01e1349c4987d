import pytest
from fastapi.testclient import TestClient

# ============================================================================
# Settings / Container Fixtures
# ============================================================================


@pytest.fixture
def media_dirs(tmp_path):
    """Create empty video and sound roots."""
    videos = tmp_path / "videos"
    sounds = tmp_path / "sounds"
    videos.mkdir()
    sounds.mkdir()
    return videos, sounds


@pytest.fixture
def videos_dir(media_dirs):
    return media_dirs[0]


@pytest.fixture
def sounds_dir(media_dirs):
    return media_dirs[1]


@pytest.fixture
def settings(media_dirs):
    """Test settings pointing at the temporary media roots."""
    from karaoke_server.config.settings import Settings

    videos, sounds = media_dirs
    return Settings(
        _env_file=None,
        environment="test",
        videos_path=str(videos),
        sounds_path=str(sounds),
    )


@pytest.fixture
def container(settings):
    from karaoke_server.config.container import create_container

    return create_container(settings)


@pytest.fixture
def client(container):
    """HTTP client running the full application (lifespan included)."""
    from karaoke_server.infrastructure.http.app import create_app

    with TestClient(create_app(container)) as test_client:
        yield test_client


# ============================================================================
# Media Fixtures
# ============================================================================


@pytest.fixture
def file_bytes():
    """1000 bytes of non-repeating-per-window content."""
    return bytes(i % 251 for i in range(1000))


@pytest.fixture
def video_file(videos_dir, file_bytes):
    path = videos_dir / "20001.mp4"
    path.write_bytes(file_bytes)
    return path


@pytest.fixture
def sound_file(sounds_dir, file_bytes):
    path = sounds_dir / "applause.mp3"
    path.write_bytes(file_bytes)
    return path


# ============================================================================
# Queue Fixtures
# ============================================================================


@pytest.fixture
def queue_store():
    from karaoke_server.infrastructure.persistence.queue_store import InMemoryQueueStore

    return InMemoryQueueStore(max_size=50)


@pytest.fixture
def sample_song():
    """A catalog record as the web clients send it."""
    return {
        "id": "7f1c",
        "number": "20001",
        "title": "Evidências",
        "artist": "Chitãozinho & Xororó",
        "lyrics": "Quando eu digo que deixei de te amar",
    }
