"""Report relative links whose targets are not documents in the corpus."""

import posixpath
import re
from collections.abc import Set
from urllib.parse import unquote

from loguru import logger

from docs_corpus.core.corpus import DocumentCorpus
from docs_corpus.models.document import BrokenLink

_LINK_RE = re.compile(
    r"(?<!!)\[[^\]]*\]\(\s*<?((?:[^()\s>]|\([^()\s]*\))+)>?"
    r"(?:\s+\"[^\"]*\")?\s*\)"
)
_SCHEME_RE = re.compile(r"^[A-Za-z][A-Za-z0-9+.-]*:")
_INLINE_CODE_RE = re.compile(r"`[^`]*`")
_FENCE_RE = re.compile(r"^\s*(```|~~~)")


def extract_links(body: str) -> list[tuple[int, str]]:
    """Return (line number, target) for every inline Markdown link.

    Links inside fenced code blocks and inline code spans are skipped.
    Image links are not included. Targets may contain one level of balanced
    parentheses, e.g. `./foo_(bar)`. Line numbers are 1-based within the body.
    """
    links: list[tuple[int, str]] = []
    fence: str | None = None
    for lineno, line in enumerate(body.splitlines(), start=1):
        match = _FENCE_RE.match(line)
        if match:
            marker = match.group(1)
            if fence is None:
                fence = marker
            elif fence == marker:
                fence = None
            continue
        if fence is not None:
            continue
        for link in _LINK_RE.finditer(_INLINE_CODE_RE.sub("", line)):
            links.append((lineno, link.group(1)))
    return links


def is_relative_link(target: str) -> bool:
    """True for links into the corpus: no scheme, not absolute, not a bare anchor."""
    if not target or target.startswith(("#", "/")):
        return False
    return _SCHEME_RE.match(target) is None


def resolve_link(source_path: str, target: str, known_paths: Set[str]) -> str | None:
    """Resolve a relative link against the linking document's directory.

    Tries the target as-is, with ``.md``/``.mdx`` appended, and as a
    directory ``index`` page.

    Returns:
        The matching document path, or None if nothing matches or the link
        escapes the content root.
    """
    target = unquote(target.split("#", 1)[0].split("?", 1)[0])
    if not target:
        return source_path if source_path in known_paths else None

    joined = posixpath.normpath(posixpath.join(posixpath.dirname(source_path), target))
    if joined == ".." or joined.startswith("../"):
        return None

    stem = "" if joined == "." else joined
    candidates = [stem, f"{stem}.md", f"{stem}.mdx"] if stem else []
    index_dir = f"{stem}/" if stem else ""
    candidates += [f"{index_dir}index.md", f"{index_dir}index.mdx"]

    for candidate in candidates:
        if candidate in known_paths:
            return candidate
    return None


def find_broken_links(corpus: DocumentCorpus) -> list[BrokenLink]:
    """Find every relative link in the corpus that does not resolve.

    Returns:
        Broken links in document path order, then line order. Line numbers
        count from the top of the file, frontmatter included.
    """
    known = corpus.paths
    broken: list[BrokenLink] = []
    for doc in corpus:
        for line, target in extract_links(doc.body):
            if not is_relative_link(target):
                continue
            if resolve_link(doc.path, target, known) is None:
                file_line = doc.body_line + line - 1
                broken.append(BrokenLink(source_path=doc.path, target=target, line=file_line))

    logger.debug("Link check: {} broken links in {} documents", len(broken), len(corpus))
    return broken
