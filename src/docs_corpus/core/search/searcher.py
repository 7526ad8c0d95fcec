"""Plain-text search over document titles and bodies."""

import re

from docs_corpus.core.corpus import DocumentCorpus
from docs_corpus.models.document import Document, SearchResult

TITLE_WEIGHT = 5
SNIPPET_CONTEXT = 60


def _parse_query(query: str) -> list[str]:
    """Split a query into lowercase terms.

    - Whitespace separates terms; all terms must match
    - Quoted phrases are kept as a single term
    """
    terms: list[str] = []
    i = 0
    while i < len(query):
        if query[i] == '"':
            end = query.find('"', i + 1)
            if end == -1:
                end = len(query)
            phrase = query[i + 1 : end].strip()
            if phrase:
                terms.append(phrase.lower())
            i = end + 1
        elif query[i].isspace():
            i += 1
        else:
            end = i
            while end < len(query) and not query[end].isspace() and query[end] != '"':
                end += 1
            terms.append(query[i:end].lower())
            i = end
    return terms


def _score(document: Document, terms: list[str]) -> float:
    title = document.title.lower()
    body = document.body.lower()
    score = 0.0
    for term in terms:
        title_hits = title.count(term)
        body_hits = body.count(term)
        if not title_hits and not body_hits:
            return 0.0
        score += TITLE_WEIGHT * title_hits + body_hits
    return score


def _make_snippet(document: Document, terms: list[str]) -> str:
    """Excerpt around the first body hit, with the hit wrapped in ``**``."""
    text = re.sub(r"\s+", " ", document.body).strip()
    lowered = text.lower()
    hits = [(lowered.find(t), t) for t in terms if lowered.find(t) != -1]
    if not hits:
        return document.title
    start, term = min(hits)
    end = start + len(term)

    left = max(0, start - SNIPPET_CONTEXT)
    right = min(len(text), end + SNIPPET_CONTEXT)
    prefix = "..." if left > 0 else ""
    suffix = "..." if right < len(text) else ""
    return f"{prefix}{text[left:start]}**{text[start:end]}**{text[end:right]}{suffix}"


def search_documents(
    corpus: DocumentCorpus,
    *,
    query: str,
    topic: str | None = None,
    limit: int = 20,
    offset: int = 0,
) -> tuple[list[SearchResult], int]:
    """Search documents by title and body.

    Args:
        corpus: Corpus to search.
        query: Search text.
        topic: Restrict to documents under this topic prefix.
        limit: Max results to return.
        offset: Pagination offset.

    Returns:
        Tuple of (results, total_count), best matches first.
    """
    terms = _parse_query(query)
    if not terms:
        return [], 0

    candidates = corpus.list_by_topic(topic or "")
    scored = [(score, doc) for doc in candidates if (score := _score(doc, terms)) > 0]
    scored.sort(key=lambda item: (-item[0], item[1].path))

    results = [
        SearchResult(document=doc, snippet=_make_snippet(doc, terms), score=score)
        for score, doc in scored[offset : offset + limit]
    ]
    return results, len(scored)
