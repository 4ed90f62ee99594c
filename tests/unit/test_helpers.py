"""
Tests for the call-site helpers: edsign/hashing.py, edsign/encoding.py,
edsign/canonical.py
"""
import hashlib

import pytest

from edsign.canonical import canonicalize
from edsign.encoding import (
    b64url_decode,
    b64url_encode,
    decode,
    encode,
    from_hex,
    to_hex,
)
from edsign.hashing import seed_from_passphrase, sha256


class TestHashing:

    def test_sha256_known_value(self):
        assert sha256(b"hello").hex() == (
            "2cf24dba5fb0a30e26e83b2ac5b9e29e1b161e5c1fa7425e73043362938b9824"
        )

    def test_seed_from_passphrase(self):
        seed = seed_from_passphrase("ABCDE")

        assert seed == hashlib.sha256(b"ABCDE").digest()
        assert len(seed) == 32

    def test_seed_from_passphrase_utf8(self):
        assert seed_from_passphrase("clé") == sha256("clé".encode("utf-8"))


class TestEncoding:

    def test_b64url_strips_padding(self):
        assert b64url_encode(b"\xfb\xff") == "-_8"

    def test_b64url_decode_restores_padding(self):
        assert b64url_decode("-_8") == b"\xfb\xff"
        assert b64url_decode(b"-_8") == b"\xfb\xff"

    def test_hex_prefix_optional(self):
        assert from_hex("0xdeadbeef") == bytes.fromhex("deadbeef")
        assert from_hex("DEADBEEF") == bytes.fromhex("deadbeef")
        assert to_hex(b"\xde\xad") == "dead"

    def test_from_hex_rejects_invalid(self):
        with pytest.raises(ValueError):
            from_hex("abc")
        with pytest.raises(ValueError):
            from_hex("zz")

    @pytest.mark.parametrize("name", ["hex", "b64url"])
    def test_encode_decode_by_name(self, name):
        data = bytes(range(64))

        assert decode(encode(data, name), name) == data

    def test_unknown_encoding(self):
        with pytest.raises(ValueError, match="unknown encoding"):
            encode(b"x", "base32")
        with pytest.raises(ValueError, match="unknown encoding"):
            decode("x", "utf8")


class TestCanonicalize:

    def test_compact_and_sorted(self):
        assert canonicalize({"b": 1, "a": [1, 2]}) == b'{"a":[1,2],"b":1}'

    def test_reference_message(self):
        assert canonicalize({"field": "value"}) == b'{"field":"value"}'

    def test_key_order_irrelevant(self):
        assert canonicalize({"x": 1, "y": 2}) == canonicalize({"y": 2, "x": 1})

    def test_utf8_not_escaped(self):
        assert canonicalize({"name": "é"}) == '{"name":"é"}'.encode("utf-8")

    def test_nan_rejected(self):
        with pytest.raises(ValueError):
            canonicalize({"value": float("nan")})
