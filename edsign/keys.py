from __future__ import annotations

from dataclasses import dataclass
from typing import NewType

from Crypto.PublicKey import ECC
from Crypto.Signature import eddsa

SEED_SIZE = 32
PUBLIC_KEY_SIZE = 32
PRIVATE_KEY_SIZE = 64

Seed = NewType("Seed", bytes)
PublicKey = NewType("PublicKey", bytes)
PrivateKey = NewType("PrivateKey", bytes)


@dataclass(frozen=True, repr=False)
class Keypair:
    """
    Raw Ed25519 key material.
    private_key is seed || public_key, the 64-byte layout libsodium and
    tweetnacl use for secret keys.
    """
    public_key: PublicKey
    private_key: PrivateKey

    @property
    def seed(self) -> Seed:
        return Seed(self.private_key[:SEED_SIZE])

    def __repr__(self) -> str:
        return f"Keypair(public_key={self.public_key.hex()!r})"


def keypair_from_seed(seed: bytes) -> Keypair:
    """
    Deterministic RFC8032 key generation. The seed is used as-is; turning a
    passphrase into a seed is hashing.seed_from_passphrase's job.
    """
    sk = ECC.construct(curve="Ed25519", seed=seed)
    pk = sk.public_key().export_key(format="raw")
    return Keypair(public_key=PublicKey(pk), private_key=PrivateKey(seed + pk))


def import_signing_key(private_key: bytes) -> ECC.EccKey:
    # only the seed half matters; the public half is recomputed from it
    return eddsa.import_private_key(private_key[:SEED_SIZE])


def import_verify_key(public_key: bytes) -> ECC.EccKey:
    """Raises ValueError if the 32 bytes do not encode a curve point."""
    return eddsa.import_public_key(public_key)
