# tools/slug.py
# CIP identifier -> deterministic remote URLs and local docs/static paths
import pathlib, posixpath, re, sys

RAW_BASE    = "https://raw.githubusercontent.com/cardano-foundation/CIPs/master"
SOURCE_REPO = "https://github.com/cardano-foundation/CIPs"
TREE_BASE   = SOURCE_REPO + "/tree/master"
BLOB_BASE   = SOURCE_REPO + "/blob/master"
README      = "README.md"
STATIC_LINK = "../../../static/img/cip"

# ](CIP-0001/)  ](./CIP-0030/)  ](CIP-0049)
INDEX_LINK = re.compile(r'\]\((?:\./)?(CIP-[0-9A-Za-z]+)/?\)')


def cip_names(index_text: str) -> list[str]:
    """Identifiers linked from the index, each once, in first-seen order."""
    return list(dict.fromkeys(m.group(1) for m in INDEX_LINK.finditer(index_text)))


def clean_relpath(rel: str) -> str | None:
    path = posixpath.normpath(rel.strip().lstrip("/"))
    if path in (".", "") or path == ".." or path.startswith("../"):
        return None
    return path


def doc_url(name: str, base: str = RAW_BASE) -> str:
    return f"{base.rstrip('/')}/{name}/{README}"


def resource_url(name: str, rel: str, base: str = RAW_BASE) -> str:
    return f"{base.rstrip('/')}/{name}/{rel}"


def doc_path(name: str, docs_dir: pathlib.Path) -> pathlib.Path:
    return docs_dir / f"{name}.md"


def static_path(name: str, rel: str, static_dir: pathlib.Path) -> pathlib.Path:
    return static_dir.joinpath(name, *rel.split("/"))


def static_link(name: str, rel: str) -> str:
    return f"{STATIC_LINK}/{name}/{rel}"


if __name__ == "__main__":
    for name in cip_names(pathlib.Path(sys.argv[1]).read_text(encoding="utf-8")):
        print(name)
