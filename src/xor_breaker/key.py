from concurrent.futures import ThreadPoolExecutor
from typing import List, Sequence

from xor_breaker.blocks import split_blocks, transpose
from xor_breaker.logs import get_logger
from xor_breaker.single_byte import printable_score, solve_column
from xor_breaker.xor import decrypt


log = get_logger(__name__)


def assemble_key(columns: Sequence[bytes], *, workers: int = 1) -> bytes:
    """Solve each transposed column and join the key bytes in column order."""
    if workers > 1:
        with ThreadPoolExecutor(max_workers=workers) as executor:
            key_bytes = list(executor.map(solve_column, columns))
    else:
        key_bytes = [solve_column(column) for column in columns]

    key = bytes(key_bytes)
    log.info("key_assembled", key_len=len(key), key_hex=key.hex())
    return key


def solve_key(ciphertext: bytes, keysize: int, *, workers: int = 1) -> bytes:
    """Split, transpose and solve the ciphertext for one key size."""
    return assemble_key(transpose(split_blocks(ciphertext, keysize)), workers=workers)


def divisors(n: int, min_size: int = 1) -> List[int]:
    """Divisors of n that are at least min_size, ascending."""
    return [d for d in range(max(min_size, 1), n + 1) if n % d == 0]


def refine_key(
    ciphertext: bytes,
    key: bytes,
    *,
    min_size: int = 1,
    workers: int = 1,
) -> bytes:
    """
    Re-solve the ciphertext at each divisor of the key length, shortest first,
    and keep the first key whose decryption is at least as printable as the
    one from the full-length key.

    Multiples of the real key length score as well as the real length, but
    their columns are shorter and easier to mis-solve. Re-solving at the
    divisor gives every key byte the longest possible column.
    """
    if not key:
        return key

    baseline = printable_score(decrypt(ciphertext, key))
    for size in divisors(len(key), min_size):
        if size == len(key):
            break
        candidate = solve_key(ciphertext, size, workers=workers)
        if printable_score(decrypt(ciphertext, candidate)) >= baseline:
            log.info("key_size_refined", key_size=len(key), refined_key_size=size)
            return candidate
    return key


def reduce_key(key: bytes) -> bytes:
    """
    Shortest period that repeats exactly into the key, e.g. b"ICEICE" -> b"ICE".
    Multiples of the real key length score as well as the real length, so the
    assembled key can come out as the real key repeated.
    """
    for period in range(1, len(key)):
        if len(key) % period == 0 and key[:period] * (len(key) // period) == key:
            return key[:period]
    return key
