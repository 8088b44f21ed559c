"""Brute-force search for the most reliable four-parent combination."""

from __future__ import annotations

import logging
from concurrent.futures import ProcessPoolExecutor
from dataclasses import dataclass
from itertools import combinations_with_replacement, product
from typing import Iterable, Iterator, Optional, Sequence, Tuple

from .config import SearchConfig
from .genome import GENOME_LENGTH, Allele, Genome, Profile, matches
from .offspring import count_offspring, iter_offspring, locus_options

logger = logging.getLogger(__name__)

PARENT_COUNT = 4
# Larger than any offspring count, which is at most 5 ** 6.
UNREACHABLE_SIZE = len(Allele) ** GENOME_LENGTH + 1

Parents = Tuple[Genome, Genome, Genome, Genome]


@dataclass(frozen=True)
class BreedResult:
    """Best combination found: four parents, the goal child and its odds."""

    parents: Parents
    child: Genome
    outcomes: int

    @property
    def probability(self) -> float:
        return 1.0 / self.outcomes

    @property
    def percent(self) -> float:
        return self.probability * 100.0


@dataclass
class SearchState:
    best: Optional[BreedResult] = None
    best_size: int = UNREACHABLE_SIZE
    evaluated: int = 0
    pruned: int = 0

    def merge(self, other: "SearchState") -> None:
        """Fold a later shard in, keeping the earlier result on ties."""

        self.evaluated += other.evaluated
        self.pruned += other.pruned
        if other.best is not None and other.best_size < self.best_size:
            self.best = other.best
            self.best_size = other.best_size


def candidate_order(pool: Iterable[Genome]) -> list[Genome]:
    """Deterministic iteration order for a pool of plants."""

    return sorted(set(pool), key=str)


def iter_combinations(
    genomes: Sequence[Genome], ordered: bool = False, first: Optional[int] = None
) -> Iterator[Parents]:
    """Yield parent 4-tuples, optionally only those starting at ``genomes[first]``.

    Unordered mode yields each multiset once, in the position its first
    arrangement takes in the ordered walk.
    """

    if first is None:
        if ordered:
            yield from product(genomes, repeat=PARENT_COUNT)
        else:
            yield from combinations_with_replacement(genomes, PARENT_COUNT)
        return

    head = genomes[first]
    rest = product(genomes, repeat=PARENT_COUNT - 1) if ordered else combinations_with_replacement(
        genomes[first:], PARENT_COUNT - 1
    )
    for tail in rest:
        yield (head,) + tail


def scan(profile: Profile, combinations: Iterable[Parents], state: Optional[SearchState] = None) -> SearchState:
    state = SearchState() if state is None else state
    for parents in combinations:
        state.evaluated += 1
        options = locus_options(parents)
        outcomes = count_offspring(options)
        if outcomes >= state.best_size:
            state.pruned += 1
            continue

        child = next((candidate for candidate in iter_offspring(options) if matches(candidate, profile)), None)
        if child is None:
            continue

        state.best = BreedResult(parents=tuple(parents), child=child, outcomes=outcomes)
        state.best_size = outcomes
        logger.debug("New best: %s -> %s (1 in %d)", " + ".join(map(str, parents)), child, outcomes)
        if outcomes == 1:
            break
    return state


def _scan_shard(profile: Profile, genomes: Sequence[Genome], ordered: bool, first: int) -> SearchState:
    return scan(profile, iter_combinations(genomes, ordered=ordered, first=first))


def _scan_sharded(profile: Profile, genomes: Sequence[Genome], config: SearchConfig) -> SearchState:
    state = SearchState()
    with ProcessPoolExecutor(max_workers=config.workers) as executor:
        futures = [
            executor.submit(_scan_shard, profile, genomes, config.ordered, index) for index in range(len(genomes))
        ]
        for future in futures:
            state.merge(future.result())
            if state.best_size == 1:
                for pending in futures:
                    pending.cancel()
                break
    return state


def find_best_combination(
    profile: Profile, pool: Iterable[Genome], config: Optional[SearchConfig] = None
) -> Optional[BreedResult]:
    """Find the parents whose offspring hit ``profile`` with the best odds.

    Returns ``None`` when no combination of the pool can produce a matching
    child. Among equally good combinations the first one in iteration order
    is kept.
    """

    config = config or SearchConfig()
    genomes = candidate_order(pool)
    if config.workers > 1 and len(genomes) > 1:
        state = _scan_sharded(profile, genomes, config)
    else:
        state = scan(profile, iter_combinations(genomes, ordered=config.ordered))

    logger.info(
        "Searched %d plants: %d combinations evaluated, %d pruned, %s",
        len(genomes),
        state.evaluated,
        state.pruned,
        f"best 1 in {state.best_size}" if state.best else "no solution",
    )
    return state.best
