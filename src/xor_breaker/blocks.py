from typing import List, Sequence

from xor_breaker.errors import InvalidInputError


def split_blocks(ciphertext: bytes, keysize: int) -> List[bytes]:
    """Break the ciphertext into keysize-long blocks. The last one may be short."""
    if keysize < 1:
        raise InvalidInputError(f"Block size must be positive, got {keysize}")
    return [ciphertext[i:i + keysize] for i in range(0, len(ciphertext), keysize)]


def transpose(blocks: Sequence[bytes]) -> List[bytes]:
    """
    Column i holds byte i of every block, in block order.

    The column count comes from the first block. A short trailing block leaves
    the later columns one byte shorter than the earlier ones.
    """
    if not blocks:
        return []

    columns = [bytearray() for _ in range(len(blocks[0]))]
    for block in blocks:
        for i, byte in enumerate(block):
            columns[i].append(byte)
    return [bytes(column) for column in columns]
