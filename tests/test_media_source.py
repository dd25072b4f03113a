import io

import pytest
import requests

from linkedin_v2.core.exceptions import ResourceError
from linkedin_v2.services.media_source import open_media


@pytest.fixture
def image(tmp_path):
    path = tmp_path / "image.png"
    path.write_bytes(b"abcdefgh")
    return path


@pytest.mark.parametrize("as_source", [str, lambda p: p, lambda p: p.as_uri()])
def test_local_sources(image, as_source):
    with open_media(as_source(image)) as media:
        assert media.length == 8
        assert media.stream.read() == b"abcdefgh"

    assert media.stream.closed


def test_missing_file(tmp_path):
    with pytest.raises(ResourceError) as exc_info:
        with open_media(str(tmp_path / "nope.png")):
            pass

    assert exc_info.value.source.endswith("nope.png")


def test_empty_file_is_rejected(tmp_path):
    path = tmp_path / "empty.png"
    path.write_bytes(b"")

    with pytest.raises(ResourceError):
        with open_media(path):
            pass


def test_caller_stream_is_measured_from_position_and_left_open():
    stream = io.BytesIO(b"0123456789")
    stream.seek(4)

    with open_media(stream) as media:
        assert media.length == 6
        assert media.stream.read() == b"456789"

    assert not stream.closed


def test_stream_closed_when_body_raises(image):
    with pytest.raises(RuntimeError):
        with open_media(image) as media:
            raise RuntimeError("upload failed")

    assert media.stream.closed


class FakeDownload:
    def __init__(self, chunks, status_code=200):
        self.chunks = chunks
        self.status_code = status_code

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        return False

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Client Error")

    def iter_content(self, chunk_size=None):
        return iter(self.chunks)


def test_remote_source_is_downloaded(monkeypatch):
    calls = []

    def fake_get(url, stream, timeout):
        calls.append((url, stream, timeout))
        return FakeDownload([b"remote ", b"image"])

    monkeypatch.setattr("linkedin_v2.services.media_source.requests.get", fake_get)

    with open_media("https://cdn.example/pic.jpg", timeout=7) as media:
        assert media.length == 12
        assert media.stream.read() == b"remote image"

    assert calls == [("https://cdn.example/pic.jpg", True, 7)]
    assert media.stream.closed


def test_remote_source_http_error(monkeypatch):
    monkeypatch.setattr(
        "linkedin_v2.services.media_source.requests.get",
        lambda url, stream, timeout: FakeDownload([], status_code=404),
    )

    with pytest.raises(ResourceError) as exc_info:
        with open_media("https://cdn.example/missing.jpg"):
            pass

    assert exc_info.value.source == "https://cdn.example/missing.jpg"
