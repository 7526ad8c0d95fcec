"""Shared test fixtures."""

import sys
from collections.abc import Iterator
from pathlib import Path

import pytest
from loguru import logger

from docs_corpus.core.corpus import DocumentCorpus
from tests.unit.samples import SAMPLE_CORPUS, write_corpus


@pytest.fixture(autouse=True)
def _reset_logging() -> Iterator[None]:
    """Drop sinks bound to CliRunner streams once a test finishes."""
    yield
    logger.remove()
    logger.add(sys.stderr)


@pytest.fixture
def content_root(tmp_path: Path) -> Path:
    """Return a content directory populated with the sample corpus."""
    return write_corpus(tmp_path / "docs", SAMPLE_CORPUS)


@pytest.fixture
def corpus(content_root: Path) -> DocumentCorpus:
    """Return the sample corpus, loaded."""
    loaded, result = DocumentCorpus.from_directory(content_root)
    assert result.ok
    return loaded
