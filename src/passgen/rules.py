from __future__ import annotations

import dataclasses
import logging

from dataclasses import dataclass
from typing import Any, Mapping

from .constants import DEFAULT_MAX_LENGTH, DEFAULT_MIN_LENGTH
from .errors import InvalidRulesError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CompositionRules:
    """
    Minimum character counts and length bounds for a generated password.

    A zero min_length or max_length falls back to DEFAULT_MIN_LENGTH and
    DEFAULT_MAX_LENGTH. When max_length is not above min_length it is raised
    to min_length + 1, so the length draw over [min_length, max_length)
    always has at least one value.
    """

    min_uppercase: int = 0
    min_lowercase: int = 0
    min_number: int = 0
    min_special_char: int = 0
    min_length: int = 0
    max_length: int = 0

    def __post_init__(self) -> None:
        for field in dataclasses.fields(self):
            value = getattr(self, field.name)
            if value < 0:
                msg = f'{field.name} must not be negative, got {value}'
                raise InvalidRulesError(msg)

        min_length = self.min_length or DEFAULT_MIN_LENGTH
        max_length = self.max_length or DEFAULT_MAX_LENGTH
        if max_length <= min_length:
            logger.debug(
                'max_length %d coerced to %d', max_length, min_length + 1
            )
            max_length = min_length + 1

        # frozen dataclass: normalise through object.__setattr__
        object.__setattr__(self, 'min_length', min_length)
        object.__setattr__(self, 'max_length', max_length)

    @property
    def required_length(self) -> int:
        """Number of characters the minimum counts alone demand."""
        return (
            self.min_uppercase
            + self.min_lowercase
            + self.min_number
            + self.min_special_char
        )

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any]) -> CompositionRules:
        """
        Build rules from a configuration mapping.

        Args:
            mapping: Keys named after the dataclass fields, e.g.
                {'min_uppercase': 1, 'max_length': 20}. Missing keys keep
                their defaults.

        Returns:
            The normalised CompositionRules.

        Raises:
            InvalidRulesError: On unknown keys or non-integer values.
        """
        known = {field.name for field in dataclasses.fields(cls)}
        unknown = sorted(set(mapping) - known)
        if unknown:
            msg = f'unknown composition rule(s): {", ".join(unknown)}'
            raise InvalidRulesError(msg)

        values = {}
        for key, raw in mapping.items():
            try:
                values[key] = int(raw)
            except (TypeError, ValueError) as err:
                msg = f'{key} must be an integer, got {raw!r}'
                raise InvalidRulesError(msg) from err

        return cls(**values)
