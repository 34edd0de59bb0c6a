"""Tests for Base64 encoding."""
import base64

import pytest

from b64codec import PADDING, STANDARD, URL_SAFE, encode, encoded_length


class TestEncode:
    """Test suite for encode."""
    
    @pytest.mark.parametrize("data, expected", [
        (b"", ""),
        (b"f", "Zg=="),
        (b"fo", "Zm8="),
        (b"foo", "Zm9v"),
        (b"foob", "Zm9vYg=="),
        (b"fooba", "Zm9vYmE="),
        (b"foobar", "Zm9vYmFy"),
    ])
    def test_known_vectors(self, data, expected):
        """Test the RFC 4648 vectors."""
        assert encode(data) == expected
    
    @pytest.mark.parametrize("data, expected", [
        (b"", ""),
        (b"f", "Zg"),
        (b"fo", "Zm8"),
        (b"foo", "Zm9v"),
        (b"foob", "Zm9vYg"),
    ])
    def test_known_vectors_unpadded(self, data, expected):
        """Test vectors without padding."""
        assert encode(data, pad=False) == expected
    
    def test_returns_str(self):
        """Test encode returns text."""
        assert isinstance(encode(b"Hello, World!"), str)
        assert encode(b"Hello, World!") == "SGVsbG8sIFdvcmxkIQ=="
    
    def test_url_safe_symbols(self):
        """Test bytes landing on values 62 and 63."""
        data = b"\xfb\xff\xfe"
        
        assert encode(data, STANDARD) == "+//+"
        assert encode(data, URL_SAFE) == "-__-"
    
    def test_url_safe_unpadded(self):
        """Test URL-safe output without padding."""
        assert encode(b"\xfb\xff", URL_SAFE, pad=False) == "-_8"
    
    def test_accepts_bytes_like(self):
        """Test bytearray and memoryview input."""
        assert encode(bytearray(b"foo")) == "Zm9v"
        assert encode(memoryview(b"foo")) == "Zm9v"
    
    def test_rejects_str(self):
        """Test str input raises TypeError."""
        with pytest.raises(TypeError):
            encode("foo")
    
    def test_matches_stdlib(self, random_payloads):
        """Test output matches the standard library for every tail length."""
        for data in random_payloads:
            assert encode(data) == base64.b64encode(data).decode()
            assert encode(data, URL_SAFE) == base64.urlsafe_b64encode(data).decode()
    
    def test_all_byte_values(self):
        """Test encoding every byte value."""
        data = bytes(range(256))
        assert encode(data) == base64.b64encode(data).decode()
    
    def test_output_is_ascii(self, random_payload):
        """Test output only uses alphabet symbols and padding."""
        allowed = set(STANDARD.symbols) | {PADDING}
        assert set(encode(random_payload)) <= allowed


class TestEncodedLength:
    """Test suite for output length laws."""
    
    @pytest.mark.parametrize("n, padded, unpadded", [
        (0, 0, 0),
        (1, 4, 2),
        (2, 4, 3),
        (3, 4, 4),
        (4, 8, 6),
        (5, 8, 7),
        (6, 8, 8),
    ])
    def test_lengths(self, n, padded, unpadded):
        """Test padded and unpadded lengths."""
        assert encoded_length(n) == padded
        assert encoded_length(n, pad=False) == unpadded
    
    def test_negative_length(self):
        """Test negative input length raises ValueError."""
        with pytest.raises(ValueError):
            encoded_length(-1)
    
    def test_padded_length_law(self, random_payloads):
        """Test len(encode(b)) == ceil(len(b) / 3) * 4."""
        for data in random_payloads:
            assert len(encode(data)) == -(-len(data) // 3) * 4
    
    def test_unpadded_length_law(self, random_payloads):
        """Test len(encode(b, pad=False)) == floor(len(b) / 3) * 4 + extra."""
        extra = {0: 0, 1: 2, 2: 3}
        for data in random_payloads:
            expected = len(data) // 3 * 4 + extra[len(data) % 3]
            assert len(encode(data, pad=False)) == expected
