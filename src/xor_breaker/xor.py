from xor_breaker.errors import InvalidInputError


def decrypt(ciphertext: bytes, key: bytes) -> bytes:
    """XOR each byte with key[i % len(key)]."""
    if not key:
        raise InvalidInputError("Key must not be empty")
    key_len = len(key)
    return bytes(b ^ key[i % key_len] for i, b in enumerate(ciphertext))


# Repeating-key XOR is its own inverse.
encrypt = decrypt
