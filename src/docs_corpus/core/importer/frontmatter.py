"""Parse and serialize the YAML frontmatter of Markdown documents."""

import math
from typing import Any

import yaml
from loguru import logger

from docs_corpus.config import FRONTMATTER_DELIMITER
from docs_corpus.errors import ParseError
from docs_corpus.models.document import Author, Document, License, Source

KNOWN_KEYS = ("title", "sidebar_position", "author", "license", "source")


def split_frontmatter(text: str, *, path: str | None = None) -> tuple[dict[str, Any], str]:
    """Split a document into its frontmatter mapping and body.

    Args:
        text: Full file contents.
        path: Document path, used in error messages.

    Returns:
        Tuple of (frontmatter mapping, body text after the closing delimiter).

    Raises:
        ParseError: The block is missing, unterminated, not valid YAML, or
            not a mapping.
    """
    text = text.removeprefix("\ufeff")
    lines = text.splitlines(keepends=True)
    if not lines or lines[0].rstrip() != FRONTMATTER_DELIMITER:
        msg = "missing frontmatter block"
        raise ParseError(msg, path=path)

    for i in range(1, len(lines)):
        if lines[i].rstrip() == FRONTMATTER_DELIMITER:
            raw = "".join(lines[1:i])
            body = "".join(lines[i + 1 :])
            break
    else:
        msg = "unterminated frontmatter block"
        raise ParseError(msg, path=path)

    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as e:
        msg = f"invalid YAML in frontmatter: {e}"
        raise ParseError(msg, path=path) from e

    if data is None:
        return {}, body
    if not isinstance(data, dict):
        msg = f"frontmatter must be a mapping, got {type(data).__name__}"
        raise ParseError(msg, path=path)
    return data, body


def _require_str(data: dict[str, Any], key: str, *, where: str, path: str) -> str:
    value = data.get(key)
    if value is None:
        msg = f"missing required field {where}"
        raise ParseError(msg, path=path)
    if not isinstance(value, str) or not value.strip():
        msg = f"{where} must be a non-empty string"
        raise ParseError(msg, path=path)
    return value


def _optional_str(data: dict[str, Any], key: str, *, where: str, path: str) -> str | None:
    if data.get(key) is None:
        return None
    return _require_str(data, key, where=where, path=path)


def _mapping(data: dict[str, Any], key: str, *, path: str) -> dict[str, Any] | None:
    value = data.get(key)
    if value is None:
        return None
    if not isinstance(value, dict):
        msg = f"{key} must be a mapping"
        raise ParseError(msg, path=path)
    return value


def _parse_position(value: Any, *, path: str) -> int | float | None:
    if value is None:
        return None
    # bool is an int subclass
    if isinstance(value, bool) or not isinstance(value, int | float):
        msg = f"sidebar_position must be a number, got {value!r}"
        raise ParseError(msg, path=path)
    if isinstance(value, float) and not math.isfinite(value):
        msg = f"sidebar_position must be a finite number, got {value!r}"
        raise ParseError(msg, path=path)
    return value


def parse_document(text: str, *, path: str) -> Document:
    """Parse file contents into a Document.

    Args:
        text: Full file contents, frontmatter included.
        path: Relative POSIX path of the file inside the content root.

    Returns:
        The parsed Document.

    Raises:
        ParseError: Frontmatter is malformed or ``title`` is missing.
    """
    data, body = split_frontmatter(text, path=path)

    unknown = sorted(str(k) for k in data if k not in KNOWN_KEYS)
    if unknown:
        logger.debug("{}: ignoring frontmatter keys {}", path, ", ".join(unknown))

    title = _require_str(data, "title", where="title", path=path)
    position = _parse_position(data.get("sidebar_position"), path=path)

    author = None
    if (raw := _mapping(data, "author", path=path)) is not None:
        author = Author(
            name=_require_str(raw, "name", where="author.name", path=path),
            url=_optional_str(raw, "url", where="author.url", path=path),
        )

    license_ = None
    if (raw := _mapping(data, "license", path=path)) is not None:
        attribution = raw.get("attribution_required", False)
        if not isinstance(attribution, bool):
            msg = "license.attribution_required must be a boolean"
            raise ParseError(msg, path=path)
        license_ = License(
            type=_require_str(raw, "type", where="license.type", path=path),
            attribution_required=attribution,
        )

    source = None
    if (raw := _mapping(data, "source", path=path)) is not None:
        source = Source(
            canonical_url=_require_str(
                raw, "canonical_url", where="source.canonical_url", path=path
            ),
        )

    # 1-based file line where the body starts
    body_line = text[: len(text) - len(body)].count("\n") + 1

    return Document(
        path=path,
        title=title,
        body=body,
        body_line=body_line,
        sidebar_position=position,
        author=author,
        license=license_,
        source=source,
    )


def frontmatter_data(document: Document) -> dict[str, Any]:
    """Return the frontmatter mapping of a document, absent fields omitted."""
    data: dict[str, Any] = {"title": document.title}
    if document.sidebar_position is not None:
        data["sidebar_position"] = document.sidebar_position
    if document.author is not None:
        author: dict[str, Any] = {"name": document.author.name}
        if document.author.url is not None:
            author["url"] = document.author.url
        data["author"] = author
    if document.license is not None:
        data["license"] = {
            "type": document.license.type,
            "attribution_required": document.license.attribution_required,
        }
    if document.source is not None:
        data["source"] = {"canonical_url": document.source.canonical_url}
    return data


def dump_frontmatter(document: Document) -> str:
    """Serialize a document's metadata as YAML, keys in canonical order."""
    return yaml.safe_dump(
        frontmatter_data(document),
        sort_keys=False,
        allow_unicode=True,
        default_flow_style=False,
    )


def render_document(document: Document) -> str:
    """Render a document back to file contents (frontmatter plus body)."""
    return (
        f"{FRONTMATTER_DELIMITER}\n"
        f"{dump_frontmatter(document)}"
        f"{FRONTMATTER_DELIMITER}\n"
        f"{document.body}"
    )
