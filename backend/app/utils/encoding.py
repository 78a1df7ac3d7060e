"""
Base64 helpers for embedding uploaded images in provider requests.
"""

import base64

# Bytes processed per encode call
CHUNK_SIZE = 8192


def encode_base64_chunked(data: bytes, chunk_size: int = CHUNK_SIZE) -> str:
    """
    Encode a byte buffer as base64, one bounded chunk at a time.

    Trailing bytes of a chunk that do not complete a 3-byte group are carried
    into the next chunk, so the result is identical to encoding the whole
    buffer at once for any chunk size.

    Args:
        data: Raw bytes to encode
        chunk_size: Number of input bytes read per iteration

    Returns:
        Base64 text
    """
    if chunk_size <= 0:
        raise ValueError(f"chunk_size must be positive, got {chunk_size}")

    view = memoryview(data)
    encoded = []
    carry = b""

    for i in range(0, len(view), chunk_size):
        block = carry + view[i:i + chunk_size].tobytes()
        aligned = len(block) - len(block) % 3
        encoded.append(base64.b64encode(block[:aligned]).decode("ascii"))
        carry = block[aligned:]

    if carry:
        encoded.append(base64.b64encode(carry).decode("ascii"))

    return "".join(encoded)


def build_data_uri(mime_type: str, encoded: str) -> str:
    """Build a ``data:`` URI from a MIME type and base64 payload."""
    return f"data:{mime_type};base64,{encoded}"
