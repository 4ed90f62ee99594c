"""
Explicit text <-> bytes conversions for call sites.
The signing service never calls these; callers decode first, then sign or verify.
"""
import base64
from typing import Union

ENCODINGS = ("hex", "b64url")


def b64url_encode(data: bytes) -> str:
    """Encode bytes to a URL-safe Base64 string without padding."""
    return base64.urlsafe_b64encode(data).rstrip(b'=').decode('ascii')


def b64url_decode(s: Union[str, bytes]) -> bytes:
    if isinstance(s, bytes):
        s = s.decode("ascii")

    pad = "=" * ((4 - len(s) % 4) % 4)
    return base64.urlsafe_b64decode((s + pad).encode("ascii"))


def to_hex(data: bytes) -> str:
    return bytes(data).hex()


def from_hex(s: str) -> bytes:
    """Accepts an optional 0x prefix. Raises ValueError on odd length or non-hex digits."""
    if s.startswith(("0x", "0X")):
        s = s[2:]
    return bytes.fromhex(s)


def encode(data: bytes, encoding: str = "hex") -> str:
    if encoding == "hex":
        return to_hex(data)
    if encoding == "b64url":
        return b64url_encode(data)
    raise ValueError(f"unknown encoding {encoding!r}, expected one of {ENCODINGS}")


def decode(s: str, encoding: str = "hex") -> bytes:
    if encoding == "hex":
        return from_hex(s)
    if encoding == "b64url":
        return b64url_decode(s)
    raise ValueError(f"unknown encoding {encoding!r}, expected one of {ENCODINGS}")
