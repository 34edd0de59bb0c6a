"""
URL-safe tokens and custom alphabets
"""
import os

from b64codec import Base64Encoder, make_alphabet, STANDARD


def main():
    # URL-safe and unpadded, as used in URLs and tokens
    codec = Base64Encoder.url_safe()
    token = codec.encode(os.urandom(16))
    print(f"Token: {token}")
    print(f"Token bytes: {codec.decode(token).hex()}")
    
    # Any 64 ASCII symbols without '=' form an alphabet
    reversed_codec = Base64Encoder(make_alphabet(STANDARD.symbols[::-1]))
    print(f"Reversed: {reversed_codec.encode(b'foo')}")


if __name__ == "__main__":
    main()
