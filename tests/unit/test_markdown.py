"""Tests for markdown rendering of the sidebar tree."""

from docs_corpus.core.corpus import DocumentCorpus
from docs_corpus.core.tree.markdown import render_topic_tree_as_markdown
from docs_corpus.core.tree.navigation import build_topic_tree


def test_render_single_topic_as_links(corpus: DocumentCorpus) -> None:
    md = render_topic_tree_as_markdown(build_topic_tree(corpus, "command_line/"))
    assert md == (
        "- [Files and Directories](/command_line/files_directories)\n"
        "- [Permissions](/command_line/permissions)\n"
        "- [Shortcuts](/command_line/shortcuts)\n"
    )


def test_render_nested_topics_are_indented(corpus: DocumentCorpus) -> None:
    md = render_topic_tree_as_markdown(build_topic_tree(corpus, "python/guides/"))
    assert md.splitlines() == [
        "- [Python Guides](/python/guides)",
        "- **functions/**",
        "    - [Lambda Functions](/python/guides/functions/lambda)",
        "- **oop/**",
        "    - [Classes](/python/guides/oop/classes)",
        "    - [Inheritance](/python/guides/oop/inheritance)",
    ]


def test_render_with_depth_limit_shows_truncation(corpus: DocumentCorpus) -> None:
    md = render_topic_tree_as_markdown(build_topic_tree(corpus), max_depth=0)
    assert "- **command_line/**\n    - ... (3 more documents)\n" in md
    assert "- **python/**\n    - ... (5 more documents)\n" in md
    assert "Classes" not in md


def test_render_without_urls(corpus: DocumentCorpus) -> None:
    md = render_topic_tree_as_markdown(
        build_topic_tree(corpus, "javascript/guides/"), include_urls=False
    )
    assert md == "- Arrays\n- Objects\n"
