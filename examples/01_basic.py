"""
Basic usage - encode and decode with the standard alphabet
"""
from b64codec import decode, decode_result, encode


def main():
    text = encode(b"Hello, World!")
    print(f"Encoded: {text}")
    
    print(f"Decoded: {decode(text)!r}")
    
    # Bad input comes back as a result instead of an exception
    result = decode_result("Zm9v====")
    print(f"ok={result.ok} error={result.error}")


if __name__ == "__main__":
    main()
