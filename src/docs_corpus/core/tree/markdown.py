"""Render the sidebar topic tree as markdown."""

import io

from docs_corpus.models.document import TopicNode


def render_topic_tree_as_markdown(
    node: TopicNode,
    *,
    max_depth: int | None = None,
    include_urls: bool = True,
) -> str:
    """Render a topic and everything below it as an indented markdown list.

    Args:
        node: The topic to start rendering from; its own name is not printed.
        max_depth: Max topic levels below the start topic to expand (None = unlimited).
        include_urls: Render documents as links to their URL.

    Returns:
        Markdown string with bullet-list hierarchy.
    """
    out = io.StringIO()
    _render(out, node, depth=0, max_depth=max_depth, include_urls=include_urls)
    return out.getvalue()


def _render(
    out: io.StringIO,
    node: TopicNode,
    *,
    depth: int,
    max_depth: int | None,
    include_urls: bool,
) -> None:
    indent = "    " * depth
    for doc in node.documents:
        if include_urls:
            out.write(f"{indent}- [{doc.title}]({doc.url})\n")
        else:
            out.write(f"{indent}- {doc.title}\n")

    for child in node.children:
        out.write(f"{indent}- **{child.name}/**\n")
        if max_depth is not None and depth + 1 > max_depth:
            # Truncation indicator when the topic is cut off by max_depth
            count = child.document_count
            noun = "document" if count == 1 else "documents"
            out.write(f"{indent}    - ... ({count} more {noun})\n")
            continue
        _render(out, child, depth=depth + 1, max_depth=max_depth, include_urls=include_urls)
