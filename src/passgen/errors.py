from __future__ import annotations

import enum


class PassgenError(Exception):
    """Base class for every error raised by passgen."""


class InvalidRulesError(PassgenError, ValueError):
    """Composition rules that can never be satisfied or were malformed."""


class RandomSourceError(PassgenError):
    """The random source could not produce a value."""


class EntropySourceError(RandomSourceError):
    """The operating system entropy source failed."""


class EmptyRangeError(RandomSourceError, ValueError):
    """A draw was requested from an empty range or an empty alphabet."""


class GenerationPhase(enum.Enum):
    """Step of PasswordGenerator.generate() in which a failure happened."""

    MINIMUM_CONDITION = 'error satisfying minimum character conditions'
    LENGTH = 'error generating password length'
    PADDING = 'error adding random character'
    SHUFFLE = 'error shuffling password characters'


class PasswordGenerationError(PassgenError):
    """
    Generation was aborted because the random source failed.

    Attributes:
        phase: The generation step that failed.
        cause: The underlying random source error.
    """

    def __init__(
        self, phase: GenerationPhase, cause: RandomSourceError
    ) -> None:
        super().__init__(f'{phase.value}: {cause}')
        self.phase = phase
        self.cause = cause

    @property
    def is_entropy_failure(self) -> bool:
        """Return True if the OS entropy source itself failed."""
        return isinstance(self.cause, EntropySourceError)

    @property
    def is_configuration_failure(self) -> bool:
        """Return True if the failure came from a degenerate configuration."""
        return isinstance(self.cause, EmptyRangeError)
