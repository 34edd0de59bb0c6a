r"""
b64codec - Base64 codec with configurable alphabets.

Usage:
    >>> from b64codec import encode, decode_result, URL_SAFE
    >>> 
    >>> encode(b"foo")
    'Zm9v'
    >>> decode_result("Zm9v").value
    b'foo'
    >>> encode(b"\xfb\xff", URL_SAFE, pad=False)
    '-_8'
"""
import logging

from .core import (
    Alphabet,
    PADDING,
    STANDARD,
    UNMAPPED,
    URL_SAFE,
    make_alphabet,
    symbol_count,
    Base64Encoder,
    encode,
    encoded_length,
    decode,
    decode_opt,
    decode_result,
    DecodeResult,
    ErrorKind,
    Base64Error,
    Base64DecodeError,
    InvalidAlphabetError,
    MalformedInputError,
    WrongPaddingError,
)

# Lowercase aliases for the predefined alphabets
standard = STANDARD
url_safe = URL_SAFE

__version__ = '1.0.0'


def setup_logging(level=logging.INFO):
    """
    Configure logging for b64codec modules.
    
    Args:
        level: Logging level (default: logging.INFO)
    """
    loggers = [
        'b64codec',
        'b64codec.core.alphabet',
        'b64codec.core.decoder',
    ]
    
    for logger_name in loggers:
        logger = logging.getLogger(logger_name)
        logger.setLevel(level)
        logger.propagate = True


__all__ = [
    'Alphabet',
    'PADDING',
    'STANDARD',
    'UNMAPPED',
    'URL_SAFE',
    'standard',
    'url_safe',
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
    'setup_logging',
]
