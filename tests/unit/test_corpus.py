"""Tests for DocumentCorpus lookup and ordering."""

from pathlib import Path

import pytest

from docs_corpus.core.corpus import DocumentCorpus
from docs_corpus.errors import CorpusLoadError, DocumentNotFoundError
from docs_corpus.models.document import Document
from tests.unit.samples import write_corpus


def test_get_by_path_returns_known_document(corpus: DocumentCorpus) -> None:
    doc = corpus.get_by_path("command_line/files_directories.md")
    assert doc.title == "Files and Directories"


def test_get_by_path_normalizes_leading_dot_slash(corpus: DocumentCorpus) -> None:
    assert corpus.get_by_path("./command_line/permissions.md").title == "Permissions"
    assert "command_line\\permissions.md" in corpus
    assert corpus.get_by_path("/command_line/shortcuts.md").title == "Shortcuts"


def test_get_by_path_unknown_raises_not_found(corpus: DocumentCorpus) -> None:
    with pytest.raises(DocumentNotFoundError) as excinfo:
        corpus.get_by_path("command_line/missing.md")
    assert excinfo.value.path == "command_line/missing.md"


def test_duplicate_paths_are_rejected() -> None:
    docs = [Document(path="a.md", title="A"), Document(path="a.md", title="B")]
    with pytest.raises(ValueError, match="Duplicate document path"):
        DocumentCorpus(docs)


def test_paths_are_unique(corpus: DocumentCorpus) -> None:
    paths = [d.path for d in corpus]
    assert len(paths) == len(set(paths)) == len(corpus)


def test_list_by_topic_orders_by_position_missing_last(corpus: DocumentCorpus) -> None:
    titles = [d.title for d in corpus.list_by_topic("command_line/")]
    assert titles == ["Files and Directories", "Permissions", "Shortcuts"]


def test_list_by_topic_breaks_position_ties_by_path(corpus: DocumentCorpus) -> None:
    paths = [d.path for d in corpus.list_by_topic("javascript/guides/")]
    assert paths == ["javascript/guides/arrays.md", "javascript/guides/objects.mdx"]


def test_list_by_topic_positions_are_non_decreasing(corpus: DocumentCorpus) -> None:
    positions = [
        d.sidebar_position for d in corpus.list_by_topic("") if d.sidebar_position is not None
    ]
    assert positions == sorted(positions)
    assert corpus.list_by_topic("")[-1].sidebar_position is None


def test_list_by_topic_excludes_sibling_prefixes(corpus: DocumentCorpus) -> None:
    docs = corpus.list_by_topic("python/guides/oop/")
    assert [d.path for d in docs] == [
        "python/guides/oop/classes.md",
        "python/guides/oop/inheritance.md",
    ]
    assert all(d.path.startswith("python/guides/oop/") for d in docs)


def test_list_by_topic_without_trailing_slash(corpus: DocumentCorpus) -> None:
    assert corpus.list_by_topic("python/guides/oop") == corpus.list_by_topic("python/guides/oop/")
    assert corpus.list_by_topic("python/guide") == []


def test_topics_lists_directories(corpus: DocumentCorpus) -> None:
    assert corpus.topics() == [
        "command_line/",
        "javascript/guides/",
        "python/advanced_guides/oop/",
        "python/guides/",
        "python/guides/functions/",
        "python/guides/oop/",
    ]


def test_from_directory_strict_raises_on_broken_file(tmp_path: Path) -> None:
    write_corpus(tmp_path, {"ok.md": "---\ntitle: Ok\n---\n", "bad.md": "no frontmatter\n"})

    corpus, result = DocumentCorpus.from_directory(tmp_path)
    assert len(corpus) == 1
    assert len(result.errors) == 1

    with pytest.raises(CorpusLoadError):
        DocumentCorpus.from_directory(tmp_path, strict=True)


def test_non_finite_position_is_a_load_error_not_a_sort_key(tmp_path: Path) -> None:
    write_corpus(
        tmp_path,
        {
            "t/a.md": "---\ntitle: A\nsidebar_position: 3\n---\n",
            "t/b.md": "---\ntitle: B\nsidebar_position: .nan\n---\n",
            "t/c.md": "---\ntitle: C\nsidebar_position: 1\n---\n",
        },
    )
    corpus, result = DocumentCorpus.from_directory(tmp_path)

    assert [f.path for f in result.errors] == ["t/b.md"]
    assert [d.sidebar_position for d in corpus.list_by_topic("t/")] == [1, 3]
