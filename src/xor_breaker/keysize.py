import math
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from typing import Iterable, List, Tuple

from xor_breaker.errors import InvalidInputError
from xor_breaker.hamming import hamming_distance
from xor_breaker.logs import get_logger


log = get_logger(__name__)

DEFAULT_MIN_KEY_SIZE = 2
DEFAULT_MAX_KEY_SIZE = 40


@dataclass(frozen=True, slots=True)
class KeySizeCandidate:
    size: int
    score: float

    @property
    def usable(self) -> bool:
        return not math.isinf(self.score)


@dataclass(frozen=True, slots=True)
class KeySizeEstimate:
    """Chosen key size plus every scored candidate, in search order."""

    key_size: int
    score: float
    reliable: bool
    candidates: Tuple[KeySizeCandidate, ...] = field(default_factory=tuple)


def check_bounds(min_size: int, max_size: int) -> None:
    if min_size < 1:
        raise InvalidInputError(f"Minimum key size must be at least 1, got {min_size}")
    if max_size < min_size:
        raise InvalidInputError(
            f"Maximum key size ({max_size}) must not be below the minimum ({min_size})"
        )


def score_key_size(ciphertext: bytes, keysize: int) -> float:
    """
    Average Hamming distance between adjacent full chunks, normalized by keysize.
    The trailing partial chunk is ignored. Returns +inf with fewer than 2 full chunks.
    """
    chunk_count = len(ciphertext) // keysize
    if chunk_count < 2:
        return math.inf

    total_distance = 0
    for i in range(chunk_count - 1):
        chunk_a = ciphertext[i * keysize:(i + 1) * keysize]
        chunk_b = ciphertext[(i + 1) * keysize:(i + 2) * keysize]
        total_distance += hamming_distance(chunk_a, chunk_b)

    return (total_distance / (chunk_count - 1)) / keysize


def score_key_sizes(
    ciphertext: bytes,
    min_size: int = DEFAULT_MIN_KEY_SIZE,
    max_size: int = DEFAULT_MAX_KEY_SIZE,
    *,
    workers: int = 1,
) -> List[KeySizeCandidate]:
    """Score every candidate size in [min_size, max_size], in ascending size order."""
    check_bounds(min_size, max_size)
    sizes = range(min_size, max_size + 1)

    if workers > 1:
        with ThreadPoolExecutor(max_workers=workers) as executor:
            scores = list(executor.map(lambda k: score_key_size(ciphertext, k), sizes))
    else:
        scores = [score_key_size(ciphertext, k) for k in sizes]

    return [KeySizeCandidate(size=k, score=s) for k, s in zip(sizes, scores)]


def select_best(candidates: Iterable[KeySizeCandidate]) -> KeySizeCandidate:
    """
    Pick the strictly lowest score. On a tie the earlier candidate stays, so with
    ascending search order the smallest size wins. If every score is +inf, the
    first candidate is returned.
    """
    best = None
    for candidate in candidates:
        if best is None or candidate.score < best.score:
            best = candidate
    if best is None:
        raise InvalidInputError("No key size candidates to choose from")
    return best


def rank_key_sizes(candidates: Iterable[KeySizeCandidate]) -> List[KeySizeCandidate]:
    """Candidates ordered best first (score, then size)."""
    return sorted(candidates, key=lambda c: (c.score, c.size))


def assess_key_size(
    ciphertext: bytes,
    min_size: int = DEFAULT_MIN_KEY_SIZE,
    max_size: int = DEFAULT_MAX_KEY_SIZE,
    *,
    workers: int = 1,
) -> KeySizeEstimate:
    candidates = score_key_sizes(ciphertext, min_size, max_size, workers=workers)
    best = select_best(candidates)
    reliable = best.usable

    if reliable:
        log.info("key_size_estimated", key_size=best.size, score=round(best.score, 4))
    else:
        log.warning(
            "key_size_unreliable",
            key_size=best.size,
            ciphertext_len=len(ciphertext),
            needed_len=2 * min_size,
        )

    return KeySizeEstimate(
        key_size=best.size,
        score=best.score,
        reliable=reliable,
        candidates=tuple(candidates),
    )


def estimate_key_size(
    ciphertext: bytes,
    min_size: int = DEFAULT_MIN_KEY_SIZE,
    max_size: int = DEFAULT_MAX_KEY_SIZE,
    *,
    workers: int = 1,
) -> int:
    """
    Most probable repeating-key length.

    When the ciphertext is shorter than 2 * min_size no candidate is usable and
    min_size comes back as a fallback; use assess_key_size to tell the two apart.
    """
    return assess_key_size(ciphertext, min_size, max_size, workers=workers).key_size
