"""
Custom exceptions for Base64 operations.

This module defines exception classes raised at the codec boundary.
Decoding through decode_result never raises these for bad input; only
alphabet construction and the raising decode variant do.
"""
from typing import Optional

from .models import ErrorKind


class Base64Error(Exception):
    """Base exception for all codec errors."""
    
    def __init__(self, message: str, kind: Optional[ErrorKind] = None) -> None:
        """
        Initialize the exception.
        
        Args:
            message: Error message
            kind: Decode error classification (if any)
        """
        self.kind = kind
        super().__init__(message)


class InvalidAlphabetError(Base64Error):
    """Exception raised when an alphabet specification is rejected."""
    
    def __init__(self, message: str, spec: Optional[str] = None) -> None:
        """
        Initialize the exception.
        
        Args:
            message: Error message
            spec: The rejected alphabet specification
        """
        self.spec = spec
        super().__init__(message)


class Base64DecodeError(Base64Error):
    """Exception raised when Base64 text cannot be decoded."""
    
    @classmethod
    def from_kind(cls, kind: ErrorKind) -> 'Base64DecodeError':
        """Build the exception subclass matching an error kind."""
        if kind is ErrorKind.WRONG_PADDING:
            return WrongPaddingError("Invalid Base64 input: wrong padding", kind)
        if kind is ErrorKind.MALFORMED:
            return MalformedInputError("Invalid Base64 input: malformed symbol", kind)
        raise ValueError(f"Unknown error kind: {kind!r}")


class WrongPaddingError(Base64DecodeError):
    """Padding misplaced, or input truncated mid-group."""
    pass


class MalformedInputError(Base64DecodeError):
    """A symbol outside the alphabet appeared where data was required."""
    pass
