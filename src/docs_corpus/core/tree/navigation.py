"""Tree navigation: breadcrumbs, siblings, topic tree."""

from docs_corpus.core.corpus import DocumentCorpus, normalize_prefix
from docs_corpus.errors import DocumentNotFoundError
from docs_corpus.models.document import Document, TopicNode


def get_breadcrumbs(document: Document) -> tuple[str, ...]:
    """Topic segments from the root down to the document's directory."""
    return tuple(part for part in document.topic.split("/") if part)


def get_siblings(
    corpus: DocumentCorpus, document: Document
) -> tuple[Document | None, Document | None]:
    """Get the previous and next document in the same directory.

    Returns (previous, next); either is None at the ends.
    """
    siblings = [d for d in corpus.list_by_topic(document.topic) if d.topic == document.topic]
    paths = [d.path for d in siblings]
    if document.path not in paths:
        raise DocumentNotFoundError(document.path)

    index = paths.index(document.path)
    before = siblings[index - 1] if index > 0 else None
    after = siblings[index + 1] if index + 1 < len(siblings) else None
    return before, after


def build_topic_tree(corpus: DocumentCorpus, prefix: str = "") -> TopicNode:
    """Build the nested sidebar tree below a topic prefix.

    Documents within a topic are in sidebar order; child topics are sorted by name.
    """
    prefix = normalize_prefix(prefix)
    return _build(prefix, corpus.list_by_topic(prefix))


def _build(prefix: str, documents: list[Document]) -> TopicNode:
    direct: list[Document] = []
    nested: dict[str, list[Document]] = {}
    for doc in documents:
        rest = doc.path[len(prefix) :]
        head, sep, _tail = rest.partition("/")
        if sep:
            nested.setdefault(head, []).append(doc)
        else:
            direct.append(doc)

    name = prefix.rstrip("/").rpartition("/")[2]
    return TopicNode(
        name=name,
        prefix=prefix,
        documents=tuple(direct),
        children=tuple(_build(f"{prefix}{child}/", nested[child]) for child in sorted(nested)),
    )
