from collections import Counter
from dataclasses import dataclass
from typing import List, Mapping

from xor_breaker.logs import get_logger


log = get_logger(__name__)

# Printable ASCII (isprint) and ASCII whitespace (isspace) in the C locale.
PRINTABLE_BYTES = frozenset(range(0x20, 0x7F)) | frozenset(range(0x09, 0x0E))

# Relative English letter frequencies (percent), space weighted above 'e'.
ENGLISH_FREQ = {
    " ": 13.00,
    "e": 12.70, "t": 9.06, "a": 8.17, "o": 7.51, "i": 6.97,
    "n": 6.75, "s": 6.33, "h": 6.09, "r": 5.99, "d": 4.25,
    "l": 4.03, "c": 2.78, "u": 2.76, "m": 2.41, "w": 2.36,
    "f": 2.23, "g": 2.02, "y": 1.97, "p": 1.93, "b": 1.29,
    "v": 0.98, "k": 0.77, "j": 0.15, "x": 0.15, "q": 0.10,
    "z": 0.07,
}

_BYTE_FREQ = [0.0] * 256
for _char, _weight in ENGLISH_FREQ.items():
    _BYTE_FREQ[ord(_char)] = _weight
    _BYTE_FREQ[ord(_char.upper())] = _weight


@dataclass(frozen=True, slots=True)
class KeyByteCandidate:
    """A key byte with its printable count and English frequency score."""

    key_byte: int
    score: float
    frequency: float = 0.0

    @property
    def rank(self):
        return (self.score, self.frequency)


def printable_score(data: bytes) -> float:
    """Number of printable or whitespace bytes."""
    return float(sum(1 for b in data if b in PRINTABLE_BYTES))


def score_key_byte(histogram: Mapping[int, int], key_byte: int) -> KeyByteCandidate:
    """
    Score one key byte from a byte histogram of the column. The printable count
    equals printable_score over the decrypted column, but each distinct
    ciphertext byte is only looked at once.
    """
    score = 0
    frequency = 0.0
    for value, count in histogram.items():
        plain = value ^ key_byte
        if plain in PRINTABLE_BYTES:
            score += count
        frequency += _BYTE_FREQ[plain] * count
    return KeyByteCandidate(key_byte=key_byte, score=float(score), frequency=frequency)


def score_candidates(column: bytes) -> List[KeyByteCandidate]:
    """Score all 256 key bytes against one column, in ascending key byte order."""
    histogram = Counter(column)
    return [score_key_byte(histogram, key_byte) for key_byte in range(256)]


def solve_column_candidate(column: bytes) -> KeyByteCandidate:
    """
    Best key byte for a single-byte XOR column.

    The highest printable count wins. Equal printable counts go to the higher
    English letter frequency first, not straight to the lowest key byte, since
    XOR by small values leaves most letters printable. Only a tie on both keeps
    the lowest key byte.
    """
    best = None
    for candidate in score_candidates(column):
        if best is None or candidate.rank > best.rank:
            best = candidate

    log.debug(
        "column_solved",
        key_byte=f"{best.key_byte:02x}",
        score=best.score,
        column_len=len(column),
    )
    return best


def solve_column(column: bytes) -> int:
    return solve_column_candidate(column).key_byte
