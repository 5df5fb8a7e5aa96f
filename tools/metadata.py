"""
Docusaurus front matter and the provenance footer for a mirrored CIP.

The values come from the ``Tag: value`` lines of the CIP header. A tag that
is missing (or left empty) is ``None`` on ``DocTags`` and rendered as
``MISSING`` in the generated text.
"""
import re
from dataclasses import dataclass, fields

import slug

MISSING        = "Unknown"
EDIT_URL_FIELD = "custom_edit_url: null"
FENCE          = "---"


@dataclass(frozen=True)
class DocTags:
    cip: str | None = None
    title: str | None = None
    status: str | None = None
    type: str | None = None
    created: str | None = None


TAG_NAMES = {"cip": "CIP", "title": "Title", "status": "Status", "type": "Type", "created": "Created"}


def shown(value: str | None) -> str:
    return MISSING if value is None else value


def _tag_pattern(tag: str) -> re.Pattern:
    # "Status: Active" or, in older CIPs, "* Status: Active"
    return re.compile(rf'^[ \t]*(?:[*-][ \t]+)?{tag}:[ \t]*([^\r\n]*?)[ \t\r]*$', re.M)


def extract_tags(text: str) -> DocTags:
    found = {}
    for f in fields(DocTags):
        m = _tag_pattern(TAG_NAMES[f.name]).search(text)
        found[f.name] = m.group(1) if m and m.group(1) else None
    return DocTags(**found)


def inject_front_matter(text: str, tags: DocTags) -> str:
    """Prepend the sidebar label and edit URL.

    CIPs open with their own ``---`` header; that opening fence is dropped so
    the header fields and its closing fence complete the generated block.
    Without a header the generated block is closed here.
    """
    head = [FENCE, f"sidebar_label: ({shown(tags.cip)}) {shown(tags.title)}", EDIT_URL_FIELD]
    if text.startswith(FENCE):
        return "\n".join(head) + text[len(FENCE):]
    return "\n".join(head + [FENCE, ""]) + text


def inject_footer(text: str, name: str, tags: DocTags) -> str:
    return (
        text
        + "\n"
        + "## CIP Information  \n"
        + f"This [{shown(tags.type)}](CIP-0001#cip-format-and-structure) {name}"
        + f" created on **{shown(tags.created)}**"
        + f" has the status: [{shown(tags.status)}](CIP-0001#cip-workflow).  \n"
        + f"This page was generated automatically from: [{slug.SOURCE_REPO}]"
        + f"({slug.TREE_BASE}/{name}/{slug.README})."
    )


def inject(text: str, name: str) -> str:
    tags = extract_tags(text)
    return inject_footer(inject_front_matter(text, tags), name, tags)
