"""Allele alphabet, genomes and trait profiles."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from enum import Enum
from typing import Tuple

GENOME_LENGTH = 6


class Allele(str, Enum):
    G = "G"
    Y = "Y"
    H = "H"
    W = "W"
    X = "X"

    @property
    def is_recessive(self) -> bool:
        return self in (Allele.W, Allele.X)


@dataclass(frozen=True)
class Genome:
    """Ordered six-locus allele sequence of one plant."""

    alleles: Tuple[Allele, ...]

    def __post_init__(self) -> None:
        if len(self.alleles) != GENOME_LENGTH:
            raise ValueError(f"genome must have {GENOME_LENGTH} loci, got {len(self.alleles)}")

    @classmethod
    def from_string(cls, text: str) -> "Genome":
        return cls(tuple(Allele(symbol) for symbol in text))

    def __iter__(self):
        return iter(self.alleles)

    def __getitem__(self, locus: int) -> Allele:
        return self.alleles[locus]

    def __str__(self) -> str:
        return "".join(allele.value for allele in self.alleles)

    def allele_counts(self) -> dict[Allele, int]:
        counts = Counter(self.alleles)
        return {allele: counts.get(allele, 0) for allele in Allele}


@dataclass(frozen=True)
class Profile:
    """Target number of loci carrying each allele; locus order is ignored."""

    g: int = 0
    y: int = 0
    h: int = 0
    w: int = 0
    x: int = 0

    @classmethod
    def from_counts(cls, counts: dict[Allele, int]) -> "Profile":
        return cls(**{allele.value.lower(): counts.get(allele, 0) for allele in Allele})

    def count(self, allele: Allele) -> int:
        return getattr(self, allele.value.lower())

    def as_counts(self) -> dict[Allele, int]:
        return {allele: self.count(allele) for allele in Allele}

    @property
    def total(self) -> int:
        return sum(self.as_counts().values())


def matches(genome: Genome, profile: Profile) -> bool:
    return genome.allele_counts() == profile.as_counts()
