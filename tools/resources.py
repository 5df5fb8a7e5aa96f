"""
Find the images/JSON files a CIP links to, copy them into the static tree
and point the links at the local copies.
"""
import asyncio, pathlib, re, sys
from dataclasses import dataclass

import fetch, slug

STATIC = pathlib.Path("static") / "img" / "cip"
LINK   = re.compile(r'\]\(([^()\s]+?\.(?:png|jpg|jpeg|json))\)')


@dataclass(frozen=True)
class ResourceReference:
    name: str
    relpath: str


def find_resource_links(text: str) -> list[str]:
    """Link targets of local resources, in document order, duplicates kept."""
    return [
        m.group(1) for m in LINK.finditer(text)
        if not m.group(1).startswith(("http://", "https://", slug.STATIC_LINK))
    ]


def collect_references(name: str, text: str) -> dict[ResourceReference, list[str]]:
    """Group link targets by the file they resolve to ("./a.png" and "a.png" are one file)."""
    refs: dict[ResourceReference, list[str]] = {}
    for target in find_resource_links(text):
        rel = slug.clean_relpath(target)
        if rel is None:
            continue
        targets = refs.setdefault(ResourceReference(name, rel), [])
        if target not in targets:
            targets.append(target)
    return refs


def mirror(ref: ResourceReference, static_dir: pathlib.Path, base_url: str) -> bool:
    """Download one resource into the static tree. Failures are reported, not raised."""
    target = slug.static_path(ref.name, ref.relpath, static_dir)
    try:
        data = fetch.get_bytes(slug.resource_url(ref.name, ref.relpath, base_url))
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_bytes(data)
    except (fetch.FetchError, OSError) as e:
        print(f"✗ failed  : {ref.name} {ref.relpath} - {e}", file=sys.stderr)
        return False
    print(f"✓ saved   : {target}")
    return True


async def mirror_resources(name: str, text: str, *,
                           static_dir: pathlib.Path = STATIC,
                           base_url: str = slug.RAW_BASE) -> str:
    refs = collect_references(name, text)
    saved = await asyncio.gather(
        *(asyncio.to_thread(mirror, ref, static_dir, base_url) for ref in refs)
    )
    for (ref, targets), ok in zip(refs.items(), saved):
        if not ok:
            continue
        for target in targets:
            text = text.replace(f"]({target})", f"]({slug.static_link(ref.name, ref.relpath)})")
    return text
