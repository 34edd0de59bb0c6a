"""Core codec: alphabets, encoder, decoder and their error types."""
from .alphabet import (
    Alphabet,
    PADDING,
    STANDARD,
    UNMAPPED,
    URL_SAFE,
    make_alphabet,
    symbol_count,
)
from .codec import Base64Encoder
from .decoder import decode, decode_opt, decode_result
from .encoder import encode, encoded_length
from .exceptions import (
    Base64DecodeError,
    Base64Error,
    InvalidAlphabetError,
    MalformedInputError,
    WrongPaddingError,
)
from .models import DecodeResult, ErrorKind

__all__ = [
    'Alphabet',
    'PADDING',
    'STANDARD',
    'UNMAPPED',
    'URL_SAFE',
    'make_alphabet',
    'symbol_count',
    'Base64Encoder',
    'encode',
    'encoded_length',
    'decode',
    'decode_opt',
    'decode_result',
    'DecodeResult',
    'ErrorKind',
    'Base64Error',
    'Base64DecodeError',
    'InvalidAlphabetError',
    'MalformedInputError',
    'WrongPaddingError',
]
