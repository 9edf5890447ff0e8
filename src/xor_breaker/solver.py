from dataclasses import dataclass, field
from typing import Optional, Tuple

from xor_breaker.config import SolverConfig
from xor_breaker.errors import UnusableCiphertextError
from xor_breaker.key import reduce_key, refine_key, solve_key
from xor_breaker.keysize import KeySizeCandidate, assess_key_size, rank_key_sizes
from xor_breaker.logs import get_logger
from xor_breaker.xor import decrypt


log = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class BreakResult:
    """Outcome of one repeating-key XOR break."""

    estimated_key_size: int
    key_size: int
    key: bytes
    plaintext: bytes
    reliable: bool
    candidates: Tuple[KeySizeCandidate, ...] = field(default_factory=tuple)


def break_repeating_key_xor(
    ciphertext: bytes,
    config: Optional[SolverConfig] = None,
) -> BreakResult:
    """
    Recover the key and plaintext of a repeating-key XOR ciphertext.
    - estimate the key size from normalized Hamming distances
    - transpose into one column per key byte and solve each as single-byte XOR
    - re-solve at divisors of the estimated size, since its multiples score alike
    - decrypt with the assembled key
    An unusable (too short) ciphertext still produces a best-effort result with
    reliable=False, unless config.strict is set.
    """
    config = config or SolverConfig()

    estimate = assess_key_size(
        ciphertext,
        config.min_key_size,
        config.max_key_size,
        workers=config.workers,
    )
    if not estimate.reliable and config.strict:
        raise UnusableCiphertextError(
            f"Ciphertext of {len(ciphertext)} bytes is too short for key sizes "
            f"{config.min_key_size}..{config.max_key_size}"
        )

    key = solve_key(ciphertext, estimate.key_size, workers=config.workers)
    if config.reduce_key:
        key = refine_key(
            ciphertext,
            key,
            min_size=config.min_key_size,
            workers=config.workers,
        )
        key = reduce_key(key)

    # Nothing to decrypt (and no key to decrypt with) for an empty ciphertext.
    plaintext = decrypt(ciphertext, key) if key else b""

    log.info(
        "ciphertext_broken",
        estimated_key_size=estimate.key_size,
        key_size=len(key),
        reliable=estimate.reliable,
        plaintext_len=len(plaintext),
    )

    return BreakResult(
        estimated_key_size=estimate.key_size,
        key_size=len(key),
        key=key,
        plaintext=plaintext,
        reliable=estimate.reliable,
        candidates=tuple(rank_key_sizes(estimate.candidates)[:config.top]),
    )
