"""In-memory corpus of documents: lookup by path and ordering by topic."""

from collections.abc import Iterable, Iterator
from pathlib import Path

from docs_corpus.core.importer.loader import load_all
from docs_corpus.errors import DocumentNotFoundError
from docs_corpus.models.document import Document, LoadResult


def normalize_path(path: str) -> str:
    """Normalize a user-supplied document path to the stored POSIX form."""
    path = path.replace("\\", "/")
    while path.startswith("./"):
        path = path[2:]
    return path.lstrip("/")


def normalize_prefix(prefix: str) -> str:
    """Normalize a topic prefix so it always ends at a directory boundary."""
    prefix = normalize_path(prefix)
    if prefix and not prefix.endswith("/"):
        prefix += "/"
    return prefix


def sidebar_key(document: Document) -> tuple[bool, float, str]:
    """Sort key: by sidebar_position, documents without one last, ties by path."""
    position = document.sidebar_position
    return (position is None, position if position is not None else 0, document.path)


class DocumentCorpus:
    """Read-only collection of documents keyed by path."""

    def __init__(self, documents: Iterable[Document]) -> None:
        self._by_path: dict[str, Document] = {}
        for doc in documents:
            if doc.path in self._by_path:
                msg = f"Duplicate document path: {doc.path!r}"
                raise ValueError(msg)
            self._by_path[doc.path] = doc

    @classmethod
    def from_directory(
        cls, root: Path, *, strict: bool = False
    ) -> tuple["DocumentCorpus", LoadResult]:
        """Load a corpus from a content root.

        Args:
            root: Content root directory.
            strict: Raise CorpusLoadError if any file failed to load.

        Returns:
            Tuple of (corpus of the documents that loaded, full LoadResult).
        """
        result = load_all(root)
        if strict:
            result.raise_for_errors()
        return cls(result.documents), result

    def __len__(self) -> int:
        return len(self._by_path)

    def __iter__(self) -> Iterator[Document]:
        return iter(sorted(self._by_path.values(), key=lambda d: d.path))

    def __contains__(self, path: object) -> bool:
        return isinstance(path, str) and normalize_path(path) in self._by_path

    @property
    def paths(self) -> frozenset[str]:
        return frozenset(self._by_path)

    def get_by_path(self, path: str) -> Document:
        """Return the document with exactly this path.

        Backslashes become "/", and leading "./" and "/" are dropped before the lookup.

        Raises:
            DocumentNotFoundError: No document has this path.
        """
        try:
            return self._by_path[normalize_path(path)]
        except KeyError:
            raise DocumentNotFoundError(path) from None

    def list_by_topic(self, topic_prefix: str = "") -> list[Document]:
        """Return documents under a topic prefix in sidebar order.

        ``python/guides/oop`` and ``python/guides/oop/`` are equivalent; neither
        matches ``python/guides/oop_extra/``. An empty prefix selects everything.
        """
        prefix = normalize_prefix(topic_prefix)
        matches = [d for d in self._by_path.values() if d.path.startswith(prefix)]
        return sorted(matches, key=sidebar_key)

    def topics(self) -> list[str]:
        """Return every directory that directly contains a document."""
        return sorted({d.topic for d in self._by_path.values()})
