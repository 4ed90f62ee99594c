import hashlib

from edsign.keys import Seed


def sha256(data: bytes) -> bytes:
    return hashlib.sha256(data).digest()


def seed_from_passphrase(passphrase: str) -> Seed:
    """SHA-256 of the UTF-8 passphrase, usable as a 32-byte Ed25519 seed."""
    return Seed(sha256(passphrase.encode("utf-8")))
