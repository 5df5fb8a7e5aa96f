"""
Thin HTTP layer used by the CIP sync: fetch a URL as text or as raw bytes.

    import fetch
    fetch.get_text("https://raw.githubusercontent.com/cardano-foundation/CIPs/master/README.md")
"""

import requests

HEADERS = {"User-Agent": "Mozilla/5.0 (CipSyncBot/1.0)"}
TIMEOUT = 30


class FetchError(Exception):
    """Transport failure while fetching ``url``."""

    def __init__(self, url: str, reason: str):
        super().__init__(f"{url}: {reason}")
        self.url = url
        self.reason = reason


def _get(url: str) -> requests.Response:
    try:
        response = requests.get(url, timeout=TIMEOUT, headers=HEADERS)
        response.raise_for_status()
    except requests.RequestException as e:
        raise FetchError(url, str(e)) from e
    return response


def get_text(url: str) -> str:
    response = _get(url)
    # raw.githubusercontent serves text/plain, requests would guess latin-1 without a charset
    response.encoding = "utf-8"
    return response.text


def get_bytes(url: str) -> bytes:
    return _get(url).content
