"""Parse markdown documents with front-matter."""

import re
from dataclasses import dataclass, field

import yaml

from folderban.errors import ParseError

_FRONT_MATTER = re.compile(r"\A---[ \t]*\n(.*?)^---[ \t]*(?:\n|\Z)", re.DOTALL | re.MULTILINE)
_HEADING = re.compile(r"^ {0,3}#{1,6}(?:[ \t]+(.*?))?(?:[ \t]+#+)?[ \t]*$")


@dataclass
class Document:
    """A markdown document split into front-matter and body."""

    meta: dict = field(default_factory=dict)
    body: str = ""
    heading: str | None = None


def parse_document(text: str) -> Document:
    """Split text into front-matter, body and first heading.

    Raises ParseError if the front-matter block is present but is not
    valid YAML, or does not hold a mapping.
    """
    text = text.replace("\r\n", "\n")
    body, meta = _extract_front_matter(text)
    return Document(meta=meta, body=body, heading=first_heading(body))


def first_heading(body: str) -> str | None:
    """Return the text of the body's first block if it is a heading."""
    for line in body.split("\n"):
        if not line.strip():
            continue
        match = _HEADING.match(line)
        if match and match.group(1):
            return match.group(1).strip()
        return None
    return None


def serialize_front_matter(meta: dict) -> str:
    """Serialize meta as a YAML front-matter block, including fences."""
    if not meta:
        return "---\n---\n"
    dumped = yaml.dump(meta, default_flow_style=False, sort_keys=False, allow_unicode=True)
    return f"---\n{dumped}---\n"


def serialize_document(meta: dict, body: str = "") -> str:
    """Serialize front-matter followed by a blank line and the body."""
    text = serialize_front_matter(meta) + "\n"
    body = body.strip("\n")
    if body:
        text += body + "\n"
    return text


def _extract_front_matter(text: str) -> tuple[str, dict]:
    """Extract YAML front-matter from text. Returns (remaining_text, meta)."""
    if not text.startswith("---"):
        return text, {}

    match = _FRONT_MATTER.match(text)
    if not match:
        return text, {}

    remaining = text[match.end() :]

    try:
        meta = yaml.safe_load(match.group(1))
    except yaml.YAMLError as exc:
        raise ParseError(f"invalid front-matter: {exc}") from exc

    if meta is None:
        return remaining, {}
    if not isinstance(meta, dict):
        raise ParseError(f"front-matter must be a mapping, not {type(meta).__name__}")

    return remaining, meta
