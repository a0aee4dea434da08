from __future__ import annotations

from typing import Optional

import pytest

from passgen.errors import EntropySourceError


class StubSource:
    """
    Deterministic random source for tests.

    uniform_in_range returns length (or low when unset); uniform_index
    always returns index and starts failing after fail_after calls.
    """

    def __init__(
        self,
        length: Optional[int] = None,
        index: int = 0,
        fail_after: Optional[int] = None,
        fail_length: bool = False,
    ) -> None:
        self.length = length
        self.index = index
        self.fail_after = fail_after
        self.fail_length = fail_length
        self.index_calls = 0

    def uniform_in_range(self, low: int, high: int) -> int:
        if self.fail_length:
            raise EntropySourceError('no entropy for length')
        return low if self.length is None else self.length

    def uniform_index(self, limit: int) -> int:
        if self.fail_after is not None and self.index_calls >= self.fail_after:
            raise EntropySourceError('no entropy for index')
        self.index_calls += 1
        return self.index % limit


@pytest.fixture
def stub_source():
    return StubSource
