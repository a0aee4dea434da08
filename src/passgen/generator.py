from __future__ import annotations

import logging

from dataclasses import dataclass, field
from typing import List, Optional

from .constants import (
    LOWERCASE_LETTERS,
    NUMBERS,
    SPECIAL_CHARS,
    UPPERCASE_LETTERS,
)
from .errors import GenerationPhase, PasswordGenerationError, RandomSourceError
from .random_source import RandomSource, default_source, shuffle_in_place
from .rules import CompositionRules

logger = logging.getLogger(__name__)


@dataclass
class PasswordGenerator:
    """
    Generate random passwords that satisfy a set of composition rules.

    The generator keeps no state between calls, so one instance can be
    shared by several threads.

    Attributes:
        rules: Minimum counts and length bounds, already normalised.
        allowed_special_chars: Special characters to use instead of
            SPECIAL_CHARS. None means the default set; an empty string is
            accepted but makes any special character draw fail.
        random_source: Where every random integer comes from.
        shuffle: Permute the final characters. Off by default, which keeps
            the required characters in front (uppercase, lowercase, digits,
            special, in that order).
    """

    rules: CompositionRules = field(default_factory=CompositionRules)
    allowed_special_chars: Optional[str] = None
    random_source: RandomSource = default_source
    shuffle: bool = False

    def __post_init__(self) -> None:
        logger.debug(
            'password generator created: %s, custom special chars: %s',
            self.rules,
            self.allowed_special_chars is not None,
        )

    @property
    def special_chars(self) -> str:
        """Return the override if one was given, else SPECIAL_CHARS."""
        if self.allowed_special_chars is None:
            return SPECIAL_CHARS
        return self.allowed_special_chars

    @property
    def eligible_chars(self) -> str:
        """Every character the padding phase may pick from."""
        return ''.join(
            (UPPERCASE_LETTERS, LOWERCASE_LETTERS, NUMBERS, self.special_chars)
        )

    def generate(self) -> str:
        """
        Return a password satisfying the rules.

        The required characters of each class are appended first, then a
        target length is drawn from [min_length, max_length) and the
        password is padded with eligible characters up to it. Minimums that
        already exceed the target are kept in full; nothing is truncated.

        Raises:
            PasswordGenerationError: If the random source fails. The error
                carries the phase that failed and the original cause.
        """
        buffer: List[str] = []

        try:
            self._satisfy_minimum_condition(buffer)
        except RandomSourceError as err:
            raise self._fail(GenerationPhase.MINIMUM_CONDITION, err) from err

        try:
            target_length = self.random_source.uniform_in_range(
                self.rules.min_length, self.rules.max_length
            )
        except RandomSourceError as err:
            raise self._fail(GenerationPhase.LENGTH, err) from err

        logger.debug(
            'target length %d, %d required characters',
            target_length,
            len(buffer),
        )

        eligible = self.eligible_chars
        try:
            while len(buffer) < target_length:
                self._add_one_char(buffer, eligible)
        except RandomSourceError as err:
            raise self._fail(GenerationPhase.PADDING, err) from err

        if self.shuffle:
            try:
                shuffle_in_place(buffer, self.random_source)
            except RandomSourceError as err:
                raise self._fail(GenerationPhase.SHUFFLE, err) from err

        return ''.join(buffer)

    def _satisfy_minimum_condition(self, buffer: List[str]) -> None:
        """Append the required number of characters of every class."""
        character_types = (
            (UPPERCASE_LETTERS, self.rules.min_uppercase),
            (LOWERCASE_LETTERS, self.rules.min_lowercase),
            (NUMBERS, self.rules.min_number),
            (self.special_chars, self.rules.min_special_char),
        )

        for chars, count in character_types:
            for _ in range(count):
                self._add_one_char(buffer, chars)

    def _add_one_char(self, buffer: List[str], letters: str) -> None:
        index = self.random_source.uniform_index(len(letters))
        buffer.append(letters[index])

    @staticmethod
    def _fail(
        phase: GenerationPhase, err: RandomSourceError
    ) -> PasswordGenerationError:
        logger.debug('password generation failed (%s): %s', phase.name, err)
        return PasswordGenerationError(phase, err)


def new_generator(
    rules: CompositionRules,
    allowed_special_chars: Optional[str] = None,
) -> PasswordGenerator:
    """
    Create a PasswordGenerator for the given rules.

    Args:
        rules: The composition rules; length defaults are already applied
            by CompositionRules.
        allowed_special_chars: Optional replacement for SPECIAL_CHARS.

    Returns:
        A ready PasswordGenerator.
    """
    return PasswordGenerator(rules, allowed_special_chars)


def generate_password(
    rules: Optional[CompositionRules] = None,
    allowed_special_chars: Optional[str] = None,
    shuffle: bool = False,
) -> str:
    """Generate a single password without keeping a generator around."""
    generator = PasswordGenerator(
        rules or CompositionRules(),
        allowed_special_chars,
        shuffle=shuffle,
    )
    return generator.generate()
