"""
Base64 alphabets.

An alphabet maps 6-bit values to ASCII symbols and back. The reverse map
covers the whole byte range so any input code can be checked with a single
sentinel comparison.
"""
from dataclasses import dataclass, field
from typing import Tuple

from .exceptions import InvalidAlphabetError
from .logging import get_logger

logger = get_logger(__name__)

PADDING = '='
PADDING_CODE = ord(PADDING)
UNMAPPED = -1
SYMBOL_COUNT = 64


@dataclass(frozen=True)
class Alphabet:
    """
    Immutable 64-symbol alphabet with its derived lookup tables.

    Attributes:
        symbols: The 64-character specification string
        emap: ASCII code of the symbol for each value 0..63
        dmap: 6-bit value for each byte code 0..255, or UNMAPPED

    Example:
        >>> alphabet = Alphabet.from_string(STANDARD.symbols)
        >>> alphabet.value_of(ord('/'))
        63
    """
    symbols: str
    emap: Tuple[int, ...] = field(init=False, repr=False, compare=False)
    dmap: Tuple[int, ...] = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        _validate(self.symbols)
        dmap = [UNMAPPED] * 256
        for value, symbol in enumerate(self.symbols):
            dmap[ord(symbol)] = value  # duplicates: last write wins
        object.__setattr__(self, 'emap', tuple(ord(symbol) for symbol in self.symbols))
        object.__setattr__(self, 'dmap', tuple(dmap))
        logger.debug(f"Built alphabet {self.symbols!r}")

    @classmethod
    def from_string(cls, spec: str) -> 'Alphabet':
        """Build an alphabet from a 64-character specification."""
        return cls(spec)

    def __len__(self) -> int:
        return len(self.emap)

    def value_of(self, code: int) -> int:
        """Return the 6-bit value for a symbol code, or UNMAPPED."""
        if 0 <= code < 256:
            return self.dmap[code]
        return UNMAPPED

    def symbol_of(self, value: int) -> str:
        """Return the symbol for a 6-bit value."""
        if not 0 <= value < SYMBOL_COUNT:
            raise ValueError(f"Symbol value must be in 0..63, got {value}")
        return self.symbols[value]


def _validate(spec: str) -> None:
    if not isinstance(spec, str):
        raise TypeError(f"Alphabet specification must be str, not {type(spec).__name__}")
    if len(spec) != SYMBOL_COUNT:
        raise InvalidAlphabetError(
            f"Length of alphabet must be {SYMBOL_COUNT}, got {len(spec)}", spec
        )
    if PADDING in spec:
        raise InvalidAlphabetError("Alphabet can not contain padding character", spec)
    if not spec.isascii():
        raise InvalidAlphabetError("Alphabet must contain only ASCII characters", spec)


def make_alphabet(spec: str) -> Alphabet:
    """
    Build an alphabet from a 64-character specification.

    Args:
        spec: 64 ASCII characters, none of them '='

    Returns:
        The immutable alphabet

    Raises:
        InvalidAlphabetError: If the length is wrong or the spec contains '='
    """
    return Alphabet.from_string(spec)


def symbol_count(alphabet: Alphabet) -> int:
    """Number of symbols in an alphabet (always 64)."""
    return len(alphabet)


STANDARD = make_alphabet(
    "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789+/"
)
URL_SAFE = make_alphabet(
    "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789-_"
)
