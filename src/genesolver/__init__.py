"""Four-parent breeding solver for six-locus plant genomes."""

from .config import SearchConfig
from .errors import ConfigurationError, GeneSolverError, GenomeFormatError, InputError, ProfileError
from .genome import GENOME_LENGTH, Allele, Genome, Profile, matches
from .locus import DOMINANT_WEIGHT, RECESSIVE_WEIGHT, LocusTally, score_locus
from .offspring import count_offspring, enumerate_offspring, iter_offspring, locus_options
from .parsing import parse_genome, parse_pool, parse_profile
from .search import BreedResult, find_best_combination
from .serialization import format_report, result_to_dict
from .solver import solve

__all__ = [
    "Allele",
    "BreedResult",
    "ConfigurationError",
    "DOMINANT_WEIGHT",
    "GENOME_LENGTH",
    "GeneSolverError",
    "Genome",
    "GenomeFormatError",
    "InputError",
    "LocusTally",
    "Profile",
    "ProfileError",
    "RECESSIVE_WEIGHT",
    "SearchConfig",
    "count_offspring",
    "enumerate_offspring",
    "find_best_combination",
    "format_report",
    "iter_offspring",
    "locus_options",
    "matches",
    "parse_genome",
    "parse_pool",
    "parse_profile",
    "result_to_dict",
    "score_locus",
    "solve",
]
