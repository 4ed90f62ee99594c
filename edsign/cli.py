"""
edsign command line.

Every text -> bytes conversion happens here, before the signing service is
called: passphrases are hashed into seeds, key and signature arguments are
decoded from hex or base64url, messages are UTF-8 encoded or canonicalized.
"""
from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Optional, Sequence

import structlog

from edsign import encoding
from edsign.canonical import canonicalize
from edsign.config import OUTPUT_ENCODINGS, load_settings
from edsign.errors import SigningError
from edsign.hashing import seed_from_passphrase
from edsign.log import configure_structlog
from edsign.service import SigningService

log = structlog.get_logger(__name__)

EXIT_OK = 0
EXIT_INVALID = 1
EXIT_ERROR = 2


def read_message(args: argparse.Namespace) -> bytes:
    if args.file is not None:
        raw = Path(args.file).read_bytes()
    else:
        raw = args.message.encode("utf-8")
    if args.canonical_json:
        return canonicalize(json.loads(raw))
    return raw


def cmd_keygen(service: SigningService, args: argparse.Namespace) -> int:
    if args.passphrase is not None:
        seed = seed_from_passphrase(args.passphrase)
    else:
        seed = encoding.from_hex(args.seed)
    keys = service.derive_keypair(seed)
    print(json.dumps({
        "public_key": encoding.encode(keys.public_key, args.encoding),
        "private_key": encoding.encode(keys.private_key, args.encoding),
    }, indent=2))
    return EXIT_OK


def cmd_sign(service: SigningService, args: argparse.Namespace) -> int:
    private_key = encoding.decode(args.private_key, args.encoding)
    signature = service.sign(read_message(args), private_key)
    print(encoding.encode(signature, args.encoding))
    return EXIT_OK


def cmd_verify(service: SigningService, args: argparse.Namespace) -> int:
    public_key = encoding.decode(args.public_key, args.encoding)
    signature = encoding.decode(args.signature, args.encoding)
    ok = service.verify(read_message(args), signature, public_key)
    print("valid" if ok else "invalid")
    return EXIT_OK if ok else EXIT_INVALID


def add_message_args(p: argparse.ArgumentParser) -> None:
    src = p.add_mutually_exclusive_group(required=True)
    src.add_argument("--message", help="message text, signed as its UTF-8 bytes")
    src.add_argument("--file", help="read the message bytes from a file")
    p.add_argument("--canonical-json", action="store_true",
                   help="parse the message as JSON and sign its canonical encoding")


def build_parser(default_encoding: str = "hex") -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="edsign", description="Deterministic Ed25519 signing")
    p.add_argument("--encoding", choices=OUTPUT_ENCODINGS, default=default_encoding,
                   help="text encoding for keys and signatures")
    sub = p.add_subparsers(dest="command", required=True)

    keygen = sub.add_parser("keygen", help="derive a keypair from a seed")
    seed_src = keygen.add_mutually_exclusive_group(required=True)
    seed_src.add_argument("--passphrase", help="hashed with SHA-256 into the seed")
    seed_src.add_argument("--seed", help="32-byte seed as hex")
    keygen.set_defaults(handler=cmd_keygen)

    sign = sub.add_parser("sign", help="sign a message")
    sign.add_argument("--private-key", required=True)
    add_message_args(sign)
    sign.set_defaults(handler=cmd_sign)

    verify = sub.add_parser("verify", help="verify a detached signature")
    verify.add_argument("--public-key", required=True)
    verify.add_argument("--signature", required=True)
    add_message_args(verify)
    verify.set_defaults(handler=cmd_verify)
    return p


def main(argv: Optional[Sequence[str]] = None) -> int:
    settings = load_settings()
    configure_structlog(settings.log_level, settings.log_format)

    args = build_parser(settings.output_encoding).parse_args(argv)
    service = SigningService()
    try:
        return args.handler(service, args)
    except SigningError as e:
        log.info("cli_input_rejected", command=args.command, error=type(e).__name__)
        print(f"error: {e}", file=sys.stderr)
        return EXIT_ERROR
    except ValueError as e:
        # undecodable hex/base64url or JSON arguments
        log.info("cli_input_undecodable", command=args.command, error=str(e))
        print(f"error: {e}", file=sys.stderr)
        return EXIT_ERROR


if __name__ == "__main__":
    sys.exit(main())
