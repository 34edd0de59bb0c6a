"""
Base64 decoding.

Input is scanned in groups of 4 symbols. Positions 0 and 1 must be data
symbols; position 3 may be '=', and position 2 may be '=' only when
position 3 is. A padded group must be the last one. Reading past the end
of the input is a padding error, an unknown symbol is a malformed error.
"""
from typing import Optional, Sequence, Union

from .alphabet import Alphabet, PADDING_CODE, STANDARD, UNMAPPED
from .logging import get_logger
from .models import DecodeResult, ErrorKind

logger = get_logger(__name__)


class _CodePoints:
    """Read-only view of a str as integer code points."""

    __slots__ = ('_text',)

    def __init__(self, text: str):
        self._text = text

    def __len__(self) -> int:
        return len(self._text)

    def __getitem__(self, index: int) -> int:
        return ord(self._text[index])


def _symbol_codes(text: Union[str, bytes, bytearray, memoryview]) -> Sequence[int]:
    """Return the input as an indexable sequence of integer codes without copying it."""
    if isinstance(text, str):
        return _CodePoints(text)
    return memoryview(text).cast('B')


def _unmapped_kind(code: int) -> ErrorKind:
    """Padding where a data symbol is required is misplaced padding."""
    return ErrorKind.WRONG_PADDING if code == PADDING_CODE else ErrorKind.MALFORMED


def _fail(kind: ErrorKind, offset: int) -> DecodeResult:
    logger.debug(f"Base64 decode failed: {kind.value} at offset {offset}")
    return DecodeResult.failure(kind)


def decode_result(text, alphabet: Alphabet = STANDARD) -> DecodeResult:
    """
    Decode Base64 text without raising on bad input.

    Args:
        text: Base64 text as str or bytes-like object
        alphabet: Alphabet the text was encoded with

    Returns:
        DecodeResult holding the bytes, or ErrorKind.WRONG_PADDING /
        ErrorKind.MALFORMED
    """
    codes = _symbol_codes(text)
    n = len(codes)
    out = bytearray((n // 4) * 3)
    value_of = alphabet.value_of

    i = j = 0
    pad = 0
    while i < n:
        a = value_of(codes[i])
        if a == UNMAPPED:
            return _fail(_unmapped_kind(codes[i]), i)

        if i + 1 >= n:
            return _fail(ErrorKind.WRONG_PADDING, i + 1)
        b = value_of(codes[i + 1])
        if b == UNMAPPED:
            return _fail(_unmapped_kind(codes[i + 1]), i + 1)

        if i + 3 >= n:
            return _fail(ErrorKind.WRONG_PADDING, n)
        code = codes[i + 3]
        d = value_of(code)
        if d != UNMAPPED:
            pad = 0
        elif code == PADDING_CODE:
            d, pad = 0, 1
        else:
            return _fail(ErrorKind.MALFORMED, i + 3)

        code = codes[i + 2]
        c = value_of(code)
        if c == UNMAPPED:
            if code == PADDING_CODE and pad == 1:
                c, pad = 0, 2
            else:
                return _fail(ErrorKind.MALFORMED, i + 2)

        x = (a << 18) | (b << 12) | (c << 6) | d
        out[j] = x >> 16
        out[j + 1] = (x >> 8) & 0xFF
        out[j + 2] = x & 0xFF

        if pad:
            if i + 4 != n:
                return _fail(ErrorKind.WRONG_PADDING, i + 4)
            break
        i += 4
        j += 3

    return DecodeResult.success(bytes(out[:len(out) - pad]))


def decode_opt(text, alphabet: Alphabet = STANDARD) -> Optional[bytes]:
    """Decode Base64 text, returning None on any error."""
    result = decode_result(text, alphabet)
    return result.value if result.ok else None


def decode(text, alphabet: Alphabet = STANDARD) -> bytes:
    """
    Decode Base64 text.

    Raises:
        WrongPaddingError: Padding misplaced or input truncated
        MalformedInputError: Symbol outside the alphabet
    """
    return decode_result(text, alphabet).unwrap()
