"""Cryptographically secure integer draws."""

from __future__ import annotations

import logging
import secrets

from typing import List, Protocol, TypeVar

from .errors import EmptyRangeError, EntropySourceError

logger = logging.getLogger(__name__)

T = TypeVar('T')


class RandomSource(Protocol):
    """Anything that can draw uniform integers for the generator."""

    def uniform_in_range(self, low: int, high: int) -> int: ...

    def uniform_index(self, limit: int) -> int: ...


class SystemRandomSource:
    """
    Random source backed by the operating system CSPRNG.

    Draws go through the secrets module, so the instance has no state of its
    own and can be shared between threads and generators.
    """

    def uniform_in_range(self, low: int, high: int) -> int:
        """
        Return an integer uniformly distributed in [low, high).

        Raises:
            EmptyRangeError: If high <= low.
            EntropySourceError: If the OS entropy source fails.
        """
        if high <= low:
            msg = f'empty range [{low}, {high})'
            raise EmptyRangeError(msg)

        return low + self._randbelow(high - low)

    def uniform_index(self, limit: int) -> int:
        """
        Return an integer uniformly distributed in [0, limit).

        Raises:
            EmptyRangeError: If limit <= 0.
            EntropySourceError: If the OS entropy source fails.
        """
        if limit <= 0:
            msg = f'cannot pick an index below {limit}'
            raise EmptyRangeError(msg)

        return self._randbelow(limit)

    def _randbelow(self, bound: int) -> int:
        try:
            return secrets.randbelow(bound)
        except OSError as err:
            logger.debug('entropy source failed: %s', err)
            msg = f'entropy source failed: {err}'
            raise EntropySourceError(msg) from err


def shuffle_in_place(items: List[T], source: RandomSource) -> None:
    """Shuffle items in place with Fisher-Yates driven by source."""
    for i in range(len(items) - 1, 0, -1):
        j = source.uniform_index(i + 1)
        items[i], items[j] = items[j], items[i]


default_source = SystemRandomSource()
