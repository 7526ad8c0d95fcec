"""Load, order and inspect a corpus of Markdown documentation pages."""

from docs_corpus.core.corpus import DocumentCorpus
from docs_corpus.core.importer.loader import load_all
from docs_corpus.errors import (
    CorpusError,
    CorpusLoadError,
    DocumentNotFoundError,
    DocumentReadError,
    ParseError,
)
from docs_corpus.models.document import Author, Document, License, LoadResult, Source

__all__ = [
    "Author",
    "CorpusError",
    "CorpusLoadError",
    "Document",
    "DocumentCorpus",
    "DocumentNotFoundError",
    "DocumentReadError",
    "License",
    "LoadResult",
    "ParseError",
    "Source",
    "load_all",
]
