from __future__ import annotations

import string

from typing import Final

UPPERCASE_LETTERS: Final[str] = string.ascii_uppercase
LOWERCASE_LETTERS: Final[str] = string.ascii_lowercase
NUMBERS: Final[str] = string.digits
SPECIAL_CHARS: Final[str] = '!@#$'

DEFAULT_MIN_LENGTH: Final[int] = 8
DEFAULT_MAX_LENGTH: Final[int] = 15
