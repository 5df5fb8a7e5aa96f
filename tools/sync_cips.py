"""
Rebuild the CIP section of the docs from the CIPs repository.

Reads the repository README, finds every linked CIP and writes one Markdown
page per CIP into the docs tree, with embedded images/JSON copied into the
static tree. The docs directory is wiped first; this is always a full rebuild.

Usage:
    python tools/sync_cips.py [--docs-dir DIR] [--static-dir DIR] [--base-url URL]
"""
import argparse, asyncio, pathlib, shutil, sys
from dataclasses import dataclass

import fetch, metadata, normalize, resources, slug

DOCS = pathlib.Path("docs") / "governance" / "cardano-improvement-proposals"


@dataclass
class SyncResult:
    name: str
    path: pathlib.Path | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


async def sync_cip(name: str, *,
                   docs_dir: pathlib.Path = DOCS,
                   static_dir: pathlib.Path = resources.STATIC,
                   base_url: str = slug.RAW_BASE) -> SyncResult:
    """Fetch, rewrite and write a single CIP. Never raises."""
    url = slug.doc_url(name, base_url)
    path = slug.doc_path(name, docs_dir)
    print(f"↓ fetching: {url}")
    try:
        text = await asyncio.to_thread(fetch.get_text, url)
        # all resources have settled once this returns
        text = await resources.mirror_resources(name, text, static_dir=static_dir, base_url=base_url)
        text = normalize.normalize(text, name, base_url=base_url)
        text = metadata.inject(text, name)
        await asyncio.to_thread(path.write_text, text, encoding="utf-8")
    except Exception as e:
        # a failed CIP leaves no page behind, not even a partial one
        if path.is_file():
            path.unlink()
        print(f"✗ failed  : {name} - {e}", file=sys.stderr)
        return SyncResult(name, error=str(e))
    print(f"✓ saved   : {path}")
    return SyncResult(name, path=path)


async def run(*, docs_dir: pathlib.Path = DOCS,
              static_dir: pathlib.Path = resources.STATIC,
              base_url: str = slug.RAW_BASE) -> list[SyncResult]:
    """Sync every CIP listed in the index. A failing index fetch raises ``fetch.FetchError``."""
    index_url = f"{base_url.rstrip('/')}/{slug.README}"
    print(f"↓ fetching: {index_url}")
    index = await asyncio.to_thread(fetch.get_text, index_url)
    names = slug.cip_names(index)

    if docs_dir.exists():
        shutil.rmtree(docs_dir)
    docs_dir.mkdir(parents=True)

    return list(await asyncio.gather(
        *(sync_cip(n, docs_dir=docs_dir, static_dir=static_dir, base_url=base_url) for n in names)
    ))


def parse_args(argv: list[str] | None) -> argparse.Namespace:
    ap = argparse.ArgumentParser(description="Mirror the CIPs repository into the docs tree")
    ap.add_argument("--docs-dir", type=pathlib.Path, default=DOCS,
                    help=f"output directory for CIP pages, recreated on every run (default: {DOCS})")
    ap.add_argument("--static-dir", type=pathlib.Path, default=resources.STATIC,
                    help=f"directory for mirrored images/JSON (default: {resources.STATIC})")
    ap.add_argument("--base-url", default=slug.RAW_BASE,
                    help="raw content URL of the CIPs repository")
    return ap.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    print("CIP Content Downloading...")
    try:
        results = asyncio.run(run(docs_dir=args.docs_dir, static_dir=args.static_dir,
                                  base_url=args.base_url))
    except fetch.FetchError as e:
        print(f"✗ failed  : index - {e}", file=sys.stderr)
        return 1

    failed = [r.name for r in results if not r.ok]
    print(f"CIP Content Downloaded: {len(results) - len(failed)} written, {len(failed)} failed")
    if failed:
        print("  failed: " + ", ".join(sorted(failed)), file=sys.stderr)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
