import pytest

from xor_breaker.errors import InvalidInputError
from xor_breaker.hamming import hamming_distance


class TestHammingDistance:
    """Test suite for hamming_distance"""

    def test_known_answer(self):
        """Test the canonical wokka wokka example"""
        assert hamming_distance(b"this is a test", b"wokka wokka!!!") == 37

    def test_identical_inputs(self):
        """Test that a sequence has no distance to itself"""
        data = b"\x00\x01\x7f\x80\xff"
        assert hamming_distance(data, data) == 0

    def test_symmetric(self):
        """Test that argument order does not matter"""
        a = b"HELLO world"
        b = b"jello WORLD"
        assert hamming_distance(a, b) == hamming_distance(b, a)

    def test_single_bytes(self):
        """Test bit counting on single bytes"""
        assert hamming_distance(b"\x00", b"\xff") == 8
        assert hamming_distance(b"\x0f", b"\x00") == 4
        assert hamming_distance(b"A", b"C") == 1

    def test_empty(self):
        """Test that two empty sequences have zero distance"""
        assert hamming_distance(b"", b"") == 0

    def test_length_mismatch(self):
        """Test that unequal lengths are rejected"""
        with pytest.raises(InvalidInputError, match="Length mismatch"):
            hamming_distance(b"abc", b"ab")
