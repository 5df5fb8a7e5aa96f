"""Tests for identifier discovery and path derivation."""

from __future__ import annotations

from pathlib import Path

import slug

INDEX = """\
| # | Title | Status |
|---|-------|--------|
| 1 | [CIP process](./CIP-0001/) | Active |
| 5 | [Common bech32 prefixes](./CIP-0005/) | Active |
| 1 | [CIP process, again](./CIP-0001/) | Active |
| 30 | [Cardano dApp-Wallet Web Bridge](CIP-0030) | Active |

See the [contributing guide](./CONTRIBUTING.md) and [CIP-0001](https://example.test/CIP-0001/).
"""


def test_cip_names_deduplicates_in_first_seen_order() -> None:
    assert slug.cip_names(INDEX) == ["CIP-0001", "CIP-0005", "CIP-0030"]


def test_cip_names_ignores_other_links() -> None:
    assert slug.cip_names("[guide](./CONTRIBUTING.md) [x](./BIP-0001/)") == []


def test_clean_relpath() -> None:
    assert slug.clean_relpath("./img/diagram.png") == "img/diagram.png"
    assert slug.clean_relpath("img/./a/../b.png") == "img/b.png"
    assert slug.clean_relpath("../CIP-0001/a.png") is None
    assert slug.clean_relpath("./") is None


def test_urls_and_paths(tmp_path: Path) -> None:
    base = "https://example.test/cips/"
    assert slug.doc_url("CIP-0001", base) == "https://example.test/cips/CIP-0001/README.md"
    assert slug.resource_url("CIP-0001", "img/a.png", base) == "https://example.test/cips/CIP-0001/img/a.png"
    assert slug.doc_path("CIP-0001", tmp_path) == tmp_path / "CIP-0001.md"
    assert slug.static_path("CIP-0001", "img/a.png", tmp_path) == tmp_path / "CIP-0001" / "img" / "a.png"
    assert slug.static_link("CIP-0001", "img/a.png") == "../../../static/img/cip/CIP-0001/img/a.png"
