"""Shared fixtures for genesolver tests."""

from __future__ import annotations

import pytest

from genesolver import Genome


@pytest.fixture
def genomes():
    """Build genomes from six-letter strings."""

    def _build(*texts: str) -> list[Genome]:
        return [Genome.from_string(text) for text in texts]

    return _build


@pytest.fixture
def mixed_pool() -> frozenset[Genome]:
    """Two pure lines whose 2 + 2 cross ties at every locus."""
    return frozenset({Genome.from_string("GGGGGG"), Genome.from_string("YYYYYY")})
