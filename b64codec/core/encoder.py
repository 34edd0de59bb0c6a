"""Base64 encoding."""
from .alphabet import Alphabet, PADDING_CODE, STANDARD


def encoded_length(n: int, pad: bool = True) -> int:
    """Length of the Base64 text for n input bytes."""
    if n < 0:
        raise ValueError(f"Input length can not be negative: {n}")
    full, rest = divmod(n, 3)
    if pad:
        return (full + (1 if rest else 0)) * 4
    return full * 4 + (rest + 1 if rest else 0)


def encode(data, alphabet: Alphabet = STANDARD, pad: bool = True) -> str:
    """
    Encode bytes to Base64 text.

    Every 3 input bytes become 4 symbols. A trailing 1- or 2-byte group
    yields 2 or 3 symbols, followed by '=' up to 4 when pad is set.

    Args:
        data: Bytes-like object to encode
        alphabet: Alphabet to encode with
        pad: Whether to pad the final group with '='

    Returns:
        ASCII text
    """
    if isinstance(data, str):
        raise TypeError("encode() expects a bytes-like object, not str")
    data = memoryview(data).cast('B')
    n = len(data)
    full, rest = divmod(n, 3)
    emap = alphabet.emap
    out = bytearray(encoded_length(n, pad))

    j = 0
    for i in range(0, full * 3, 3):
        b0, b1, b2 = data[i], data[i + 1], data[i + 2]
        out[j] = emap[b0 >> 2]
        out[j + 1] = emap[((b0 << 4) | (b1 >> 4)) & 0x3F]
        out[j + 2] = emap[((b1 << 2) | (b2 >> 6)) & 0x3F]
        out[j + 3] = emap[b2 & 0x3F]
        j += 4

    if rest:
        b0 = data[n - rest]
        b1 = data[n - 1] if rest == 2 else 0
        out[j] = emap[b0 >> 2]
        out[j + 1] = emap[((b0 << 4) | (b1 >> 4)) & 0x3F]
        if rest == 2:
            out[j + 2] = emap[(b1 << 2) & 0x3F]
        elif pad:
            out[j + 2] = PADDING_CODE
        if pad:
            out[j + 3] = PADDING_CODE

    return out.decode('ascii')
