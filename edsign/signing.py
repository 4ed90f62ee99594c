from typing import NewType

from Crypto.Signature import eddsa

from edsign.keys import import_signing_key, import_verify_key

SIGNATURE_SIZE = 64

Signature = NewType("Signature", bytes)


def ed25519_sign(message: bytes, private_key: bytes) -> Signature:
    """
    Standard Ed25519 over the raw message bytes (RFC8032).
    DO NOT pre-hash here; other Ed25519 implementations verify the plain message.
    """
    signer = eddsa.new(import_signing_key(private_key), mode="rfc8032")
    return Signature(signer.sign(message))


def ed25519_verify(message: bytes, signature: bytes, public_key: bytes) -> bool:
    """
    Verify standard Ed25519 signature over raw message bytes.
    A public key that is not a curve point verifies nothing.
    """
    try:
        verifier = eddsa.new(import_verify_key(public_key), mode="rfc8032")
        verifier.verify(message, signature)
        return True
    except ValueError:
        return False
