"""Expansion of a parent combination into its possible offspring."""

from __future__ import annotations

from itertools import product
from math import prod
from typing import Iterator, Sequence, Tuple

from .genome import GENOME_LENGTH, Allele, Genome
from .locus import score_locus

LocusOptions = Tuple[Tuple[Allele, ...], ...]


def locus_options(parents: Sequence[Genome]) -> LocusOptions:
    """Possible alleles at every locus for the given parents."""

    return tuple(score_locus(parent[locus] for parent in parents) for locus in range(GENOME_LENGTH))


def count_offspring(options: LocusOptions) -> int:
    return prod(len(alleles) for alleles in options)


def iter_offspring(options: LocusOptions) -> Iterator[Genome]:
    """Yield one genome per choice of allele at each locus.

    Locus 0 varies slowest. Coinciding genomes are not merged.
    """

    for alleles in product(*options):
        yield Genome(alleles)


def enumerate_offspring(parents: Sequence[Genome]) -> list[Genome]:
    return list(iter_offspring(locus_options(parents)))
