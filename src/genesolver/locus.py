"""Weighted-dominance scoring of a single locus."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Tuple

from .genome import Allele

DOMINANT_WEIGHT = 6
RECESSIVE_WEIGHT = 8


def dominance_weight(allele: Allele) -> int:
    return RECESSIVE_WEIGHT if allele.is_recessive else DOMINANT_WEIGHT


@dataclass
class LocusTally:
    """Per-allele weight buckets for one locus of one parent combination."""

    weights: dict[Allele, int] = field(default_factory=lambda: {allele: 0 for allele in Allele})

    def add(self, allele: Allele) -> None:
        self.weights[allele] += dominance_weight(allele)

    @property
    def top_score(self) -> int:
        return max(self.weights.values())

    def leaders(self) -> Tuple[Allele, ...]:
        """Alleles sharing the highest tally.

        Ties are listed in reverse declaration order (X before W before H ...),
        which fixes the order offspring are expanded in.
        """

        top = self.top_score
        return tuple(allele for allele in reversed(Allele) if self.weights[allele] == top)


def score_locus(parent_alleles: Iterable[Allele]) -> Tuple[Allele, ...]:
    """Return every allele an offspring can inherit at a locus."""

    tally = LocusTally()
    for allele in parent_alleles:
        tally.add(allele)
    return tally.leaders()
