from __future__ import annotations

import pytest

import fetch
import slug


class FakeRemote:
    """In-memory stand-in for the CIPs repository, keyed by path under ``slug.RAW_BASE``."""

    def __init__(self) -> None:
        self.files: dict[str, str | bytes] = {}
        self.requested: list[str] = []

    def add(self, path: str, content: str | bytes) -> None:
        self.files[f"{slug.RAW_BASE}/{path}"] = content

    def _lookup(self, url: str) -> str | bytes:
        self.requested.append(url)
        if url not in self.files:
            raise fetch.FetchError(url, "404 Client Error: Not Found")
        return self.files[url]

    def get_text(self, url: str) -> str:
        content = self._lookup(url)
        return content.decode("utf-8") if isinstance(content, bytes) else content

    def get_bytes(self, url: str) -> bytes:
        content = self._lookup(url)
        return content.encode("utf-8") if isinstance(content, str) else content


@pytest.fixture
def remote(monkeypatch: pytest.MonkeyPatch) -> FakeRemote:
    """Route every fetch through a FakeRemote."""
    fake = FakeRemote()
    monkeypatch.setattr(fetch, "get_text", fake.get_text)
    monkeypatch.setattr(fetch, "get_bytes", fake.get_bytes)
    return fake
