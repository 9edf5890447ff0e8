from xor_breaker.errors import InvalidInputError


def hamming_distance(a: bytes, b: bytes) -> int:
    """Count the differing bits between two equal-length byte strings."""
    if len(a) != len(b):
        raise InvalidInputError(f"Length mismatch: {len(a)} != {len(b)}")
    return sum((x ^ y).bit_count() for x, y in zip(a, b))
