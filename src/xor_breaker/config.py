from dataclasses import dataclass

from xor_breaker.errors import InvalidInputError
from xor_breaker.keysize import DEFAULT_MAX_KEY_SIZE, DEFAULT_MIN_KEY_SIZE, check_bounds


DEFAULT_TOP = 5


@dataclass(frozen=True, slots=True)
class SolverConfig:
    """Tunable knobs for a single break run."""

    min_key_size: int = DEFAULT_MIN_KEY_SIZE
    max_key_size: int = DEFAULT_MAX_KEY_SIZE
    workers: int = 1
    strict: bool = False  # raise instead of returning an unreliable result
    top: int = DEFAULT_TOP  # ranked key size candidates kept on the result
    reduce_key: bool = True

    def __post_init__(self):
        check_bounds(self.min_key_size, self.max_key_size)
        if self.workers < 1:
            raise InvalidInputError(f"Worker count must be at least 1, got {self.workers}")
        if self.top < 0:
            raise InvalidInputError(f"Candidate count must not be negative, got {self.top}")
