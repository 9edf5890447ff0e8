import base64
import binascii
import re
from typing import Literal, TypeAlias, Union

import requests

from xor_breaker.errors import DecodeFailureError, InvalidInputError
from xor_breaker.logs import get_logger


log = get_logger(__name__)

CiphertextFormat: TypeAlias = Union[Literal[
    "b64",
    "b64_urlsafe",
    "hex",
    "raw"
], str]

CIPHERTEXT_FORMATS = ("b64", "b64_urlsafe", "hex", "raw")

_WHITESPACE = re.compile(rb"\s+")


def _as_bytes(
    data: Union[str, bytes, bytearray, memoryview],
    *,
    encoding: str = "utf-8",
) -> bytes:
    """Normalize values to type bytes."""
    if isinstance(data, bytes):
        return data
    if isinstance(data, (bytearray, memoryview)):
        return bytes(data)
    if isinstance(data, str):
        return data.encode(encoding)
    raise TypeError(f"Expected str or bytes-like data, got {type(data).__name__}")


def is_url(source: str) -> bool:
    return source.startswith(("http://", "https://"))


def fetch_ciphertext(url: str, *, timeout: float = 10) -> bytes:
    """Fetch the raw ciphertext body from an HTTP endpoint."""
    response = requests.get(url, timeout=timeout)
    if response.status_code != 200:
        raise ValueError(
            f"Failed to get {url}: {response.status_code} {response.text}"
        )
    log.info("ciphertext_fetched", url=url, size=len(response.content))
    return response.content


def read_bytes(source: str) -> bytes:
    """Read raw bytes from a file path or an http(s) URL."""
    if is_url(source):
        return fetch_ciphertext(source)
    with open(source, "rb") as f:
        return f.read()


def decode_ciphertext(data: bytes, format: CiphertextFormat) -> bytes:
    if format == "b64":
        return b64_decode(data)
    elif format == "b64_urlsafe":
        return b64_decode(data, urlsafe=True)
    elif format == "hex":
        try:
            return bytes.fromhex(_as_bytes(data).decode("ascii"))
        except (UnicodeDecodeError, ValueError) as e:
            raise DecodeFailureError(f"Invalid hex ciphertext: {e}") from e
    elif format == "raw":
        return data
    else:
        raise InvalidInputError(f"Invalid ciphertext format: {format}")


def load_ciphertext(source: str, format: CiphertextFormat = "b64") -> bytes:
    """Load and decode the ciphertext from a file path or URL."""
    return decode_ciphertext(read_bytes(source), format)


def b64_encode(
    data: Union[str, bytes, bytearray, memoryview],
    *,
    urlsafe: bool = False,
    text_encoding: str = "utf-8",
) -> str:
    """Accepts str/bytes/etc and return a base64 string (standard or URL-safe)."""
    raw = _as_bytes(data, encoding=text_encoding)
    fn = base64.urlsafe_b64encode if urlsafe else base64.b64encode
    return fn(raw).decode("ascii")


def b64_decode(
    b64_text: Union[str, bytes, bytearray, memoryview],
    *,
    urlsafe: bool = False,
) -> bytes:
    """
    Decode standard or URL-safe base64. Line breaks and other whitespace are
    dropped and missing '=' padding is tolerated. Any other character outside
    the alphabet raises DecodeFailureError instead of ending the decode there,
    so a corrupt file is reported rather than silently truncated.
    """
    try:
        raw = _WHITESPACE.sub(b"", _as_bytes(b64_text, encoding="ascii"))
    except UnicodeEncodeError as e:
        raise DecodeFailureError(f"Base64 text is not ASCII: {e}") from e

    # normalize padding
    missing = len(raw) % 4
    if missing:
        raw += b"=" * (4 - missing)

    if urlsafe:
        raw = raw.translate(bytes.maketrans(b"-_", b"+/"))

    try:
        return base64.b64decode(raw, validate=True)
    except binascii.Error as e:
        raise DecodeFailureError(f"Invalid base64 ciphertext: {e}") from e
