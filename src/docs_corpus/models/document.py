"""Domain models for the documentation corpus."""

from dataclasses import dataclass, field
from pathlib import PurePosixPath

from docs_corpus.config import CONTENT_SUFFIXES
from docs_corpus.errors import CorpusError, CorpusLoadError


@dataclass(frozen=True)
class Author:
    """Author of a document."""

    name: str
    url: str | None = None


@dataclass(frozen=True)
class License:
    """License terms of a document."""

    type: str
    attribution_required: bool = False


@dataclass(frozen=True)
class Source:
    """Where a document was originally published."""

    canonical_url: str


@dataclass(frozen=True)
class Document:
    """A single documentation page: frontmatter metadata plus Markdown body."""

    path: str
    title: str
    body: str = ""
    sidebar_position: int | float | None = None
    author: Author | None = None
    license: License | None = None
    source: Source | None = None
    body_line: int = field(default=1, compare=False)

    @property
    def topic(self) -> str:
        """Directory of the document with a trailing slash, "" at the root."""
        parent = PurePosixPath(self.path).parent.as_posix()
        return "" if parent == "." else f"{parent}/"

    @property
    def slug(self) -> str:
        """Path without suffix; an ``index`` page maps to its directory."""
        pure = PurePosixPath(self.path)
        stem = pure.with_suffix("") if pure.suffix in CONTENT_SUFFIXES else pure
        if stem.name == "index":
            parent = stem.parent.as_posix()
            return "" if parent == "." else parent
        return stem.as_posix()

    @property
    def url(self) -> str:
        return f"/{self.slug}"


@dataclass(frozen=True)
class LoadFailure:
    """A file that could not be turned into a Document."""

    path: str
    error: CorpusError


@dataclass(frozen=True)
class LoadResult:
    """Outcome of loading every file under a content root."""

    documents: tuple[Document, ...] = ()
    errors: tuple[LoadFailure, ...] = ()

    @property
    def ok(self) -> bool:
        return not self.errors

    def raise_for_errors(self) -> None:
        """Raise CorpusLoadError if any file failed."""
        if self.errors:
            raise CorpusLoadError([f.error for f in self.errors])


@dataclass(frozen=True)
class BrokenLink:
    """A relative link whose target is not a known document."""

    source_path: str
    target: str
    line: int


@dataclass(frozen=True)
class SearchResult:
    """A search hit with context."""

    document: Document
    snippet: str
    score: float = 0.0


@dataclass(frozen=True)
class TopicNode:
    """A directory in the sidebar tree."""

    name: str
    prefix: str
    documents: tuple[Document, ...] = ()
    children: tuple["TopicNode", ...] = ()

    @property
    def document_count(self) -> int:
        """Documents in this topic and all nested topics."""
        return len(self.documents) + sum(c.document_count for c in self.children)
