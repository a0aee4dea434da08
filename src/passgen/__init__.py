"""Random password generation driven by composition rules."""

from __future__ import annotations

import logging

from .constants import (
    DEFAULT_MAX_LENGTH,
    DEFAULT_MIN_LENGTH,
    LOWERCASE_LETTERS,
    NUMBERS,
    SPECIAL_CHARS,
    UPPERCASE_LETTERS,
)
from .errors import (
    EmptyRangeError,
    EntropySourceError,
    GenerationPhase,
    InvalidRulesError,
    PassgenError,
    PasswordGenerationError,
    RandomSourceError,
)
from .generator import PasswordGenerator, generate_password, new_generator
from .random_source import RandomSource, SystemRandomSource
from .rules import CompositionRules

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    'DEFAULT_MAX_LENGTH',
    'DEFAULT_MIN_LENGTH',
    'LOWERCASE_LETTERS',
    'NUMBERS',
    'SPECIAL_CHARS',
    'UPPERCASE_LETTERS',
    'CompositionRules',
    'EmptyRangeError',
    'EntropySourceError',
    'GenerationPhase',
    'InvalidRulesError',
    'PassgenError',
    'PasswordGenerationError',
    'PasswordGenerator',
    'RandomSource',
    'RandomSourceError',
    'SystemRandomSource',
    'generate_password',
    'new_generator',
]
