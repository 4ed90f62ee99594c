"""Signing service: keypair derivation, detached signing and verification.

All three operations take raw binary buffers only. Text, hex strings and
JSON-like objects are rejected instead of being encoded on the caller's
behalf, so two callers can never sign different bytes while believing they
signed the same payload. Converting to bytes (``edsign.encoding``,
``edsign.canonical``) is always a separate, explicit step at the call site.

Accepted buffer types are ``bytes``, ``bytearray`` and ``memoryview``; they
are copied into immutable ``bytes`` before use. Where the bytes came from
(hex-decoded, re-wrapped, sliced) is irrelevant.

The service holds no state. Instances and the module-level functions are
safe to call from any number of threads at once.
"""
from __future__ import annotations

from typing import Any

import structlog

from edsign.errors import (
    InvalidKeyTypeError,
    InvalidMessageTypeError,
    InvalidSeedError,
    InvalidSignatureTypeError,
)
from edsign.keys import (
    PRIVATE_KEY_SIZE,
    PUBLIC_KEY_SIZE,
    SEED_SIZE,
    Keypair,
    PrivateKey,
    PublicKey,
    Seed,
    keypair_from_seed,
)
from edsign.signing import SIGNATURE_SIZE, Signature, ed25519_sign, ed25519_verify

BUFFER_TYPES = (bytes, bytearray, memoryview)


def as_buffer(value: Any) -> bytes | None:
    """Return value as bytes if it is a readable binary buffer, else None.

    A released memoryview counts as unreadable, so it is rejected like any
    other non-buffer argument.
    """
    if not isinstance(value, BUFFER_TYPES):
        return None
    try:
        return bytes(value)
    except ValueError:
        return None


class SigningService:
    """Deterministic Ed25519 signing over caller-supplied byte buffers."""

    def __init__(self, logger: Any = None) -> None:
        self._log = logger if logger is not None else structlog.get_logger(__name__)

    def derive_keypair(self, seed: Seed) -> Keypair:
        """Derive the Ed25519 keypair for a 32-byte seed.

        Raises:
            InvalidSeedError: seed is not a 32-byte binary buffer.
        """
        raw = as_buffer(seed)
        if raw is None or len(raw) != SEED_SIZE:
            self._rejected("derive_keypair", "seed", seed)
            raise InvalidSeedError()

        keypair = keypair_from_seed(raw)
        self._log.debug("keypair_derived", public_key=keypair.public_key.hex())
        return keypair

    def sign(self, message: bytes, private_key: PrivateKey) -> Signature:
        """Produce the 64-byte detached signature of message.

        Raises:
            InvalidMessageTypeError: message is not a binary buffer.
            InvalidKeyTypeError: private_key is not a 64-byte binary buffer.
        """
        msg = self._message("sign", message)
        sk = as_buffer(private_key)
        if sk is None or len(sk) != PRIVATE_KEY_SIZE:
            self._rejected("sign", "private_key", private_key)
            raise InvalidKeyTypeError("private_key", PRIVATE_KEY_SIZE)

        signature = ed25519_sign(msg, sk)
        self._log.debug("message_signed", message_length=len(msg))
        return signature

    def verify(self, message: bytes, signature: Signature, public_key: PublicKey) -> bool:
        """Check a detached signature.

        Returns False for any cryptographic mismatch: other message, other
        key, corrupted signature, or 32 bytes that are not a valid point.

        Raises:
            InvalidMessageTypeError: message is not a binary buffer.
            InvalidSignatureTypeError: signature is not a 64-byte binary buffer.
            InvalidKeyTypeError: public_key is not a 32-byte binary buffer.
        """
        msg = self._message("verify", message)

        sig = as_buffer(signature)
        if sig is None or len(sig) != SIGNATURE_SIZE:
            self._rejected("verify", "signature", signature)
            raise InvalidSignatureTypeError()

        pk = as_buffer(public_key)
        if pk is None or len(pk) != PUBLIC_KEY_SIZE:
            self._rejected("verify", "public_key", public_key)
            raise InvalidKeyTypeError("public_key", PUBLIC_KEY_SIZE)

        ok = ed25519_verify(msg, sig, pk)
        self._log.debug("signature_verified", message_length=len(msg), valid=ok)
        return ok

    def _message(self, operation: str, message: Any) -> bytes:
        msg = as_buffer(message)
        if msg is None:
            self._rejected(operation, "message", message)
            raise InvalidMessageTypeError()
        return msg

    def _rejected(self, operation: str, argument: str, value: Any) -> None:
        # type and length only; the value itself may be key material
        fields = {"operation": operation, "argument": argument, "received": type(value).__name__}
        raw = as_buffer(value)
        if raw is not None:
            fields["length"] = len(raw)
        self._log.warning("signing_input_rejected", **fields)


_default = SigningService()


def derive_keypair(seed: Seed) -> Keypair:
    return _default.derive_keypair(seed)


def sign(message: bytes, private_key: PrivateKey) -> Signature:
    return _default.sign(message, private_key)


def verify(message: bytes, signature: Signature, public_key: PublicKey) -> bool:
    return _default.verify(message, signature, public_key)
