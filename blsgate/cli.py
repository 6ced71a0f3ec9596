#!/usr/bin/env python3
"""Command-line front end: keygen, pubkey, sign, verify, aggregate."""
from __future__ import annotations

import argparse
from pathlib import Path

from . import interface
from .errors import BLSError
from .util import parse_hex

def cmd_keygen(args: argparse.Namespace) -> int:
	bls = interface.build_bls(args)
	pubkey_bytes = interface.save_keypair(bls, args.privkey, args.pubkey, args.force)
	print(f"[keygen] wrote {args.privkey} and {args.pubkey}")
	print(f"[keygen] public key {pubkey_bytes.hex()}")
	return 0

def cmd_pubkey(args: argparse.Namespace) -> int:
	bls = interface.build_bls(args)
	print(bls.get_public_key(interface.load_private_key(args.privkey)).hex())
	return 0

def cmd_sign(args: argparse.Namespace) -> int:
	bls = interface.build_bls(args)
	privkey_bytes = interface.load_private_key(args.privkey)
	print(bls.sign(privkey_bytes, interface.message_from_args(args)).hex())
	return 0

def cmd_verify(args: argparse.Namespace) -> int:
	bls = interface.build_bls(args)
	pubkey_bytes = interface.load_public_key(args.pubkey)
	ok = bls.verify(pubkey_bytes, parse_hex(args.signature), interface.message_from_args(args))
	print(f"[verify] {'valid' if ok else 'INVALID'}")
	return 0 if ok else 1

def cmd_aggregate(args: argparse.Namespace) -> int:
	bls = interface.build_bls(args)
	print(bls.aggregate_signature_list([parse_hex(s) for s in args.signatures]).hex())
	return 0

def build_parser() -> argparse.ArgumentParser:
	parser = argparse.ArgumentParser(
		prog="blsgate",
		description="BLS12-381 key management, signing and verification.",
		formatter_class=lambda prog: interface.WrappedHelpFormatter(prog, width=80),
	)
	interface.add_debug_flag(parser)
	interface.add_engine_args(parser)
	sub = parser.add_subparsers(dest="command", required=True)

	p = sub.add_parser("keygen", help="Generate and save a key pair.")
	p.add_argument("--privkey", type=Path, default=interface.DEFAULT_PRIVKEY_PATH, help="Private key output path.")
	p.add_argument("--pubkey", type=Path, default=interface.DEFAULT_PUBKEY_PATH, help="Public key output path.")
	p.add_argument("--force", action="store_true", help="Overwrite existing files.")
	p.set_defaults(func=cmd_keygen)

	p = sub.add_parser("pubkey", help="Print the public key of a private key file.")
	p.add_argument("--privkey", type=Path, default=interface.DEFAULT_PRIVKEY_PATH, help="Private key path.")
	p.set_defaults(func=cmd_pubkey)

	p = sub.add_parser("sign", help="Sign a message.")
	p.add_argument("--privkey", type=Path, default=interface.DEFAULT_PRIVKEY_PATH, help="Private key path.")
	interface.add_message_args(p)
	p.set_defaults(func=cmd_sign)

	p = sub.add_parser("verify", help="Verify a signature; exit status 1 if invalid.")
	p.add_argument("--pubkey", type=Path, default=interface.DEFAULT_PUBKEY_PATH, help="Public key path.")
	p.add_argument("--signature", required=True, help="Hex encoded signature.")
	interface.add_message_args(p)
	p.set_defaults(func=cmd_verify)

	p = sub.add_parser("aggregate", help="Aggregate signatures into one.")
	p.add_argument("signatures", nargs="+", help="Hex encoded signatures.")
	p.set_defaults(func=cmd_aggregate)
	return parser

def main(argv: list[str] | None = None) -> int:
	parser = build_parser()
	args = parser.parse_args(argv)
	interface.configure_logging(args.debug)
	try:
		return args.func(args)
	except (BLSError, ValueError, OSError) as exc:
		print(f"[{args.command}] error: {exc}")
		return 2

if __name__ == "__main__":
	raise SystemExit(main())
