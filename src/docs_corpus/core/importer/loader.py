"""Load every content file under a root directory into Documents."""

from collections.abc import Iterator
from pathlib import Path

from loguru import logger

from docs_corpus.config import CONTENT_SUFFIXES
from docs_corpus.core.importer.frontmatter import parse_document
from docs_corpus.errors import CorpusError, DocumentReadError
from docs_corpus.models.document import Document, LoadFailure, LoadResult


def iter_content_files(root: Path) -> Iterator[Path]:
    """Yield content files below root in sorted order, skipping hidden paths."""
    for path in sorted(root.rglob("*")):
        if path.suffix not in CONTENT_SUFFIXES or not path.is_file():
            continue
        if any(part.startswith(".") for part in path.relative_to(root).parts):
            continue
        yield path


def load_document(root: Path, file_path: Path) -> Document:
    """Read and parse a single content file.

    Args:
        root: Content root; the document path is relative to it.
        file_path: File to load.

    Raises:
        DocumentReadError: The file cannot be read or is not valid UTF-8.
        ParseError: The frontmatter is malformed.
    """
    rel = file_path.relative_to(root).as_posix()
    try:
        text = file_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        msg = f"cannot read file: {e}"
        raise DocumentReadError(msg, path=rel) from e
    return parse_document(text, path=rel)


def load_all(root: Path) -> LoadResult:
    """Load every document under root, collecting per-file errors.

    A broken file never stops the others from loading.

    Args:
        root: Content root directory.

    Returns:
        LoadResult with loaded documents and failures, both in path order.
    """
    root = Path(root)
    if not root.is_dir():
        msg = f"Content directory not found: {root}"
        raise FileNotFoundError(msg)

    documents: list[Document] = []
    errors: list[LoadFailure] = []

    for file_path in iter_content_files(root):
        rel = file_path.relative_to(root).as_posix()
        try:
            doc = load_document(root, file_path)
        except CorpusError as e:
            logger.warning("Failed to load {}: {}", rel, e)
            errors.append(LoadFailure(path=rel, error=e))
            continue
        documents.append(doc)
        logger.debug("Loaded {} ({!r})", rel, doc.title)

    logger.debug("Load complete: {} documents, {} errors", len(documents), len(errors))
    return LoadResult(documents=tuple(documents), errors=tuple(errors))
