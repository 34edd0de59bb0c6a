"""
Data models for decode outcomes.

A decode either yields bytes or one of two error kinds; both are carried
by an immutable DecodeResult instead of an exception.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Optional


class ErrorKind(Enum):
    """Classification of a failed decode."""
    WRONG_PADDING = 'wrong_padding'
    MALFORMED = 'malformed'


@dataclass(frozen=True)
class DecodeResult:
    """
    Outcome of decoding Base64 text.
    
    Exactly one of value/error is set.
    
    Example:
        >>> DecodeResult.success(b'foo').ok
        True
        >>> DecodeResult.failure(ErrorKind.MALFORMED).value is None
        True
    """
    value: Optional[bytes] = None
    error: Optional[ErrorKind] = None
    
    def __post_init__(self):
        if (self.value is None) == (self.error is None):
            raise ValueError("DecodeResult needs exactly one of value or error")
    
    @classmethod
    def success(cls, value: bytes) -> 'DecodeResult':
        """Create a successful result."""
        return cls(value=value)
    
    @classmethod
    def failure(cls, kind: ErrorKind) -> 'DecodeResult':
        """Create a failed result."""
        return cls(error=kind)
    
    @property
    def ok(self) -> bool:
        """True when decoding succeeded."""
        return self.error is None
    
    def unwrap(self) -> bytes:
        """Return the decoded bytes or raise the matching decode error."""
        if self.error is not None:
            from .exceptions import Base64DecodeError
            raise Base64DecodeError.from_kind(self.error)
        return self.value
