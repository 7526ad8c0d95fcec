"""CLI for docs-corpus (list, show, sidebar, search, check)."""

import json
from pathlib import Path
from typing import Annotated, Any

import typer
from loguru import logger

from docs_corpus.config import resolve_content_directory
from docs_corpus.core.corpus import DocumentCorpus
from docs_corpus.core.importer.frontmatter import frontmatter_data
from docs_corpus.core.links.checker import find_broken_links
from docs_corpus.core.search.searcher import search_documents
from docs_corpus.core.tree.markdown import render_topic_tree_as_markdown
from docs_corpus.core.tree.navigation import build_topic_tree, get_breadcrumbs, get_siblings
from docs_corpus.errors import DocumentNotFoundError
from docs_corpus.logging_config import configure_logging
from docs_corpus.models.document import Document, LoadResult

app = typer.Typer(help="Docs corpus: load and inspect Markdown documentation pages.")

RootOption = Annotated[
    Path | None,
    typer.Option("--root", "-r", help="Content root directory"),
]


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    configure_logging(verbose=verbose)


def _load(root: Path | None) -> tuple[DocumentCorpus, LoadResult]:
    """Load the corpus, exiting if the root directory doesn't exist."""
    src = root or resolve_content_directory()
    if not src.is_dir():
        logger.error("Content directory not found: {}", src)
        raise typer.Exit(1)
    return DocumentCorpus.from_directory(src)


def _summary(doc: Document) -> dict[str, Any]:
    return {
        "path": doc.path,
        "title": doc.title,
        "sidebar_position": doc.sidebar_position,
        "url": doc.url,
    }


@app.command()
def documents(
    topic: str = typer.Argument("", help="Topic prefix, e.g. python/guides/"),
    root: RootOption = None,
    output_json: bool = typer.Option(False, "--json", "-j", help="Output as JSON"),
) -> None:
    """List documents under a topic in sidebar order."""
    corpus, _result = _load(root)
    docs = corpus.list_by_topic(topic)

    if output_json:
        data = {"documents": [_summary(d) for d in docs], "count": len(docs)}
        typer.echo(json.dumps(data, indent=2))
        return

    typer.echo(f"{len(docs)} documents:\n")
    for doc in docs:
        position = "-" if doc.sidebar_position is None else doc.sidebar_position
        typer.echo(f"  [{position}] {doc.title}  ({doc.path})")


@app.command()
def show(
    path: str = typer.Argument(..., help="Document path relative to the root"),
    root: RootOption = None,
    body: bool = typer.Option(True, "--body/--no-body", help="Include the document body"),
    output_json: bool = typer.Option(False, "--json", "-j", help="Output as JSON"),
) -> None:
    """Show a single document."""
    corpus, _result = _load(root)
    try:
        doc = corpus.get_by_path(path)
    except DocumentNotFoundError:
        typer.echo(f"Document '{path}' not found.")
        raise typer.Exit(1) from None

    before, after = get_siblings(corpus, doc)

    if output_json:
        data: dict[str, Any] = {
            "path": doc.path,
            "url": doc.url,
            "topic": doc.topic,
            "breadcrumbs": list(get_breadcrumbs(doc)),
            "frontmatter": frontmatter_data(doc),
            "previous": before.path if before else None,
            "next": after.path if after else None,
        }
        if body:
            data["body"] = doc.body
        typer.echo(json.dumps(data, indent=2))
        return

    typer.echo(f"{doc.title}  ({doc.path})")
    crumbs = get_breadcrumbs(doc)
    if crumbs:
        typer.echo(f"  topic: {' > '.join(crumbs)}")
    if doc.sidebar_position is not None:
        typer.echo(f"  sidebar_position: {doc.sidebar_position}")
    if doc.author:
        url = f" <{doc.author.url}>" if doc.author.url else ""
        typer.echo(f"  author: {doc.author.name}{url}")
    if doc.license:
        typer.echo(f"  license: {doc.license.type}")
    if doc.source:
        typer.echo(f"  source: {doc.source.canonical_url}")
    if before:
        typer.echo(f"  previous: {before.path}")
    if after:
        typer.echo(f"  next: {after.path}")
    if body:
        typer.echo()
        typer.echo(doc.body)


@app.command()
def sidebar(
    prefix: str = typer.Argument("", help="Topic prefix to start from"),
    max_depth: Annotated[
        int | None,
        typer.Option("--max-depth", "-m", help="Max topic levels to expand"),
    ] = None,
    root: RootOption = None,
) -> None:
    """Render the sidebar tree as markdown."""
    corpus, _result = _load(root)
    tree = build_topic_tree(corpus, prefix)
    md = render_topic_tree_as_markdown(tree, max_depth=max_depth)
    if md:
        typer.echo(md, nl=False)
    else:
        typer.echo(f"No documents under '{prefix}'.")


@app.command()
def search(
    query: str = typer.Argument(..., help="Search query"),
    topic: Annotated[
        str | None,
        typer.Option("--topic", "-t", help="Restrict to a topic prefix"),
    ] = None,
    limit: int = typer.Option(10, "--limit", "-n", help="Max results"),
    root: RootOption = None,
    output_json: bool = typer.Option(False, "--json", "-j", help="Output as JSON"),
) -> None:
    """Search document titles and bodies."""
    corpus, _result = _load(root)
    results, total = search_documents(corpus, query=query, topic=topic, limit=limit)

    if output_json:
        data = {
            "results": [
                {**_summary(r.document), "snippet": r.snippet, "score": r.score}
                for r in results
            ],
            "total": total,
        }
        typer.echo(json.dumps(data, indent=2))
        return

    typer.echo(f"Found {total} results (showing {len(results)}):\n")
    for r in results:
        typer.echo(f"  {r.document.title}  ({r.document.path})")
        typer.echo(f"    {r.snippet[:160]}")
        typer.echo()


@app.command()
def check(
    root: RootOption = None,
    strict: bool = typer.Option(False, "--strict", help="Fail on broken links too"),
) -> None:
    """Report files that fail to load and relative links that don't resolve."""
    corpus, result = _load(root)

    for failure in result.errors:
        typer.echo(f"ERROR {failure.error}")

    broken = find_broken_links(corpus)
    for link in broken:
        typer.echo(f"LINK  {link.source_path}:{link.line}: {link.target}")

    typer.echo(
        f"{len(corpus)} documents, {len(result.errors)} load errors, "
        f"{len(broken)} broken links"
    )
    if result.errors or (strict and broken):
        raise typer.Exit(1)
