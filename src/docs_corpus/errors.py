"""Exceptions raised while loading and querying the corpus."""

from collections.abc import Sequence


class CorpusError(Exception):
    """Base class for all corpus errors."""


class ParseError(CorpusError, ValueError):
    """Frontmatter is malformed or a required field is missing."""

    def __init__(self, message: str, *, path: str | None = None) -> None:
        self.path = path
        super().__init__(f"{path}: {message}" if path else message)


class DocumentReadError(CorpusError, OSError):
    """A content file could not be read."""

    def __init__(self, message: str, *, path: str | None = None) -> None:
        self.path = path
        super().__init__(f"{path}: {message}" if path else message)


class DocumentNotFoundError(CorpusError, LookupError):
    """No document has the requested path."""

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f"Document not found: {path!r}")


class CorpusLoadError(CorpusError):
    """One or more files failed to load."""

    def __init__(self, errors: Sequence[CorpusError]) -> None:
        self.errors = tuple(errors)
        lines = [f"{len(self.errors)} file(s) failed to load:"]
        lines.extend(f"  {e}" for e in self.errors)
        super().__init__("\n".join(lines))
