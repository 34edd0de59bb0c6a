"""Reusable Base64 codec bound to an alphabet and padding policy."""
from dataclasses import dataclass
from typing import Optional

from .alphabet import Alphabet, PADDING, STANDARD, URL_SAFE
from .decoder import decode, decode_opt, decode_result
from .encoder import encode
from .models import DecodeResult


@dataclass(frozen=True)
class Base64Encoder:
    """
    Base64 encoder/decoder with a fixed alphabet and padding policy.
    
    Attributes:
        alphabet: Alphabet used both ways
        pad: Whether encode pads with '='; an unpadded codec also
            accepts text with the padding left off
    """
    alphabet: Alphabet = STANDARD
    pad: bool = True
    
    @classmethod
    def standard(cls) -> 'Base64Encoder':
        """Standard alphabet, padded."""
        return cls(STANDARD, pad=True)
    
    @classmethod
    def url_safe(cls, pad: bool = False) -> 'Base64Encoder':
        """URL-safe alphabet, unpadded unless asked otherwise."""
        return cls(URL_SAFE, pad=pad)
    
    def _restore_padding(self, data):
        """Re-append the '=' an unpadded encoder left off."""
        if self.pad:
            return data
        missing = -len(data) % 4
        if missing == 3:
            return data
        if isinstance(data, str):
            return data + PADDING * missing
        return bytes(data) + PADDING.encode() * missing
    
    def encode(self, data: bytes) -> str:
        """Encodes bytes to Base64 text."""
        return encode(data, self.alphabet, self.pad)
    
    def decode(self, data: str) -> bytes:
        """Decodes Base64 text, raising Base64DecodeError on bad input."""
        return decode(self._restore_padding(data), self.alphabet)
    
    def decode_result(self, data: str) -> DecodeResult:
        """Decodes Base64 text into a DecodeResult."""
        return decode_result(self._restore_padding(data), self.alphabet)
    
    def decode_opt(self, data: str) -> Optional[bytes]:
        """Decodes Base64 text, returning None on bad input."""
        return decode_opt(self._restore_padding(data), self.alphabet)
