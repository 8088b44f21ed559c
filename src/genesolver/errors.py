"""Exception hierarchy for genesolver.

All exceptions inherit from :class:`GeneSolverError`. The search itself never
raises: a pool that cannot reach the goal yields ``None``. Errors come from
the input boundary and from invalid configuration.
"""

from __future__ import annotations


class GeneSolverError(Exception):
    """Base exception for all genesolver errors."""


class InputError(GeneSolverError):
    """Raised when raw user input cannot be turned into a goal or a pool."""


class ProfileError(InputError):
    """Raised when goal allele counts are negative or do not add up to six."""


class GenomeFormatError(InputError):
    """Raised when a plant line is not six letters from ``GYHWX``.

    The offending line (upper-cased) is kept on :attr:`line`.
    """

    def __init__(self, message: str = "", line: str | None = None) -> None:
        super().__init__(message)
        self.line = line


class ConfigurationError(GeneSolverError):
    """Raised when a :class:`~genesolver.config.SearchConfig` is invalid.

    Raised at construction time so invalid configs never reach the search.
    """
