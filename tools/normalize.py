"""
Markdown clean-up applied to every CIP before the Docusaurus metadata goes in.

The generic steps run in order, each one a plain ``str -> str`` function;
later steps rely on the text shape earlier ones leave behind (sibling links
are only fixed after ``./`` links have been made absolute). Fixes that only
concern a single CIP live in ``PATCHES``.
"""
import functools, re
from typing import Callable

import slug

Step = Callable[[str], str]

HTML_TAG   = re.compile(r'<[^>]+>')
H1_SECTION = re.compile(r'^# (Abstract|Motivation|Specification|Rationale|Copyright)\b', re.M)


def strip_html(text: str) -> str:
    return HTML_TAG.sub("", text)


def absolutize_relative_links(text: str, prefix: str) -> str:
    """[Byron](./Byron.md) -> [Byron](<prefix>Byron.md)"""
    return text.replace("](./", "](" + prefix)


def fix_sibling_links(text: str) -> str:
    return text.replace("](../CIP-", "](./CIP-")


def drop_empty_links(text: str) -> str:
    # placeholder links such as [CIP-????]()
    return text.replace("]()", "]")


def strip_backslashes(text: str) -> str:
    return text.replace("\\", "")


def demote_headings(text: str) -> str:
    """Body sections must not compete with the page title for H1."""
    return H1_SECTION.sub(r'## \1', text)


def steps(name: str, base_url: str = slug.RAW_BASE) -> list[tuple[str, Step]]:
    return [
        ("strip_html", strip_html),
        ("absolutize_relative_links",
         functools.partial(absolutize_relative_links, prefix=f"{base_url.rstrip('/')}/{name}/")),
        ("fix_sibling_links", fix_sibling_links),
        ("drop_empty_links", drop_empty_links),
        ("strip_backslashes", strip_backslashes),
        ("demote_headings", demote_headings),
    ]


def _cip_0049(text: str) -> str:
    # legacy header fields left empty in the source
    return text.replace(
        "* License: \n* License-Code:\n* Post-History:\n* Requires:\n* Replaces:\n* Superseded-By:\n", "")


def _cip_0060(text: str) -> str:
    # the CDDL schema is not an image, link to it on GitHub instead
    return text.replace(
        "](cddl/version-1.cddl)", f"]({slug.BLOB_BASE}/CIP-0060/cddl/version-1.cddl)")


PATCHES: dict[str, Step] = {
    "CIP-0049": _cip_0049,
    "CIP-0060": _cip_0060,
}


def normalize(text: str, name: str, *, base_url: str = slug.RAW_BASE) -> str:
    for _, step in steps(name, base_url):
        text = step(text)
    patch = PATCHES.get(name)
    return patch(text) if patch else text
