"""
Pytest configuration and fixtures for SimpleSpell tests.
"""

import pytest

SAMPLE_CORPUS = "the quick brown fox the the"


@pytest.fixture(scope="session")
def sample_corpus() -> str:
    """Return the small corpus used across tests."""
    return SAMPLE_CORPUS


@pytest.fixture
def speller(sample_corpus):
    """Return a Speller built from the sample corpus."""
    from simplespell import Speller

    speller = Speller()
    speller.build_corpus(sample_corpus)
    return speller


@pytest.fixture
def corpus_file(tmp_path, sample_corpus):
    """Write the sample corpus to a text file and return its path."""
    path = tmp_path / "corpus.txt"
    path.write_text(sample_corpus, encoding="utf-8")
    return path
