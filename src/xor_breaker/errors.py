class XorBreakerError(Exception):
    pass


class InvalidInputError(XorBreakerError, ValueError):
    """Bad arguments: mismatched lengths, empty key, bad search bounds."""
    pass


class UnusableCiphertextError(XorBreakerError):
    """Ciphertext too short for any candidate key size to have two full chunks."""
    pass


class DecodeFailureError(XorBreakerError, ValueError):
    pass
