"""Turn raw goal counts and plant text into core types."""

from __future__ import annotations

import re

from .errors import GenomeFormatError, ProfileError
from .genome import GENOME_LENGTH, Genome, Profile

GENOME_PATTERN = re.compile(rf"^[GYHWX]{{{GENOME_LENGTH}}}$")
PROFILE_TOTAL_MESSAGE = f"Number of genes in goal does not add to {GENOME_LENGTH}"


def parse_profile(g: int, y: int, h: int, w: int, x: int) -> Profile:
    counts = (g, y, h, w, x)
    if any(count < 0 for count in counts) or sum(counts) != GENOME_LENGTH:
        raise ProfileError(PROFILE_TOTAL_MESSAGE)
    return Profile(g=g, y=y, h=h, w=w, x=x)


def parse_genome(line: str) -> Genome:
    normalized = line.strip().upper()
    if not GENOME_PATTERN.match(normalized):
        raise GenomeFormatError(f"Invalid Gene Set: {normalized}", line=normalized)
    return Genome.from_string(normalized)


def parse_pool(text: str) -> frozenset[Genome]:
    """Parse one plant per line; blank lines are skipped and duplicates merged."""

    return frozenset(parse_genome(line) for line in text.splitlines() if line.strip())
