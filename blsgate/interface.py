"""Shared CLI helpers: argument groups, engine wiring and key files."""
from __future__ import annotations

import logging
import os
import stat
from argparse import ArgumentParser, HelpFormatter
from pathlib import Path

from . import validator
from .bls import BLS
from .constants import DST, PRIVATE_KEY_SIZE, PUBLIC_KEY_SIZE
from .engine import DEFAULT_BACKEND, EngineParameters, engine_choices
from .util import b64_decode, b64_encode, hash_message, parse_hex

DEFAULT_PRIVKEY_PATH = Path("bls_privkey.b64")
DEFAULT_PUBKEY_PATH = Path("bls_pubkey.b64")

class WrappedHelpFormatter(HelpFormatter):
	def __init__(self, prog, width=80, max_help_position=26):
		super().__init__(prog, width=width, max_help_position=max_help_position)

def add_debug_flag(parser: ArgumentParser):
	parser.add_argument(
		"--debug",
		action="store_true",
		default=False,
		help="Enable verbose debug logging",
	)

def configure_logging(debug: bool):
	logging.basicConfig(
		level=logging.DEBUG if debug else logging.WARNING,
		format="%(levelname)s %(name)s: %(message)s",
	)

def add_engine_args(parser: ArgumentParser):
	parser.add_argument("--engine", choices=engine_choices(), default=DEFAULT_BACKEND, help="Curve engine backend.")
	parser.add_argument("--dst", default=DST.decode("ascii"), help="Hash-to-curve domain separation tag.")

def build_engine_parameters(args) -> EngineParameters:
	return EngineParameters(backend=args.engine, dst=args.dst.encode("ascii"))

def build_bls(args) -> BLS:
	return BLS.from_parameters(build_engine_parameters(args))

def add_message_args(parser: ArgumentParser):
	group = parser.add_mutually_exclusive_group(required=True)
	group.add_argument("--message", help="Text message; its SHA-256 digest is what gets signed.")
	group.add_argument("--digest", help="Hex encoded 32-byte message digest.")

def message_from_args(args) -> bytes:
	if args.digest is not None:
		return parse_hex(args.digest)
	return hash_message(args.message)

def save_keypair(bls: BLS, private_key_path: Path, public_key_path: Path, force: bool = False) -> bytes:
	for p in (private_key_path, public_key_path):
		if os.path.exists(p) and not force:
			raise SystemExit(f"Refusing to overwrite existing file: {p} (use --force)")
	privkey_bytes = bls.generate_private_key()
	pubkey_bytes = bls.get_public_key(privkey_bytes)
	with open(private_key_path, "w", encoding="ascii") as f:
		f.write(b64_encode(privkey_bytes) + "\n")
	with open(public_key_path, "w", encoding="ascii") as f:
		f.write(b64_encode(pubkey_bytes) + "\n")
	try: # lock down private key permissions on POSIX
		os.chmod(private_key_path, stat.S_IRUSR | stat.S_IWUSR)
	except OSError:
		logging.getLogger(__name__).warning("could not restrict permissions on %s", private_key_path)
	return pubkey_bytes

def _read_key_file(path: Path, size: int, entity: str) -> bytes:
	raw = Path(path).read_bytes()
	if len(raw) == size:
		return raw
	key_bytes = b64_decode(raw.decode("ascii", errors="replace"))
	validator.check_size(key_bytes, size, entity)
	return key_bytes

def load_private_key(path: Path) -> bytes:
	"""Read a private key stored as base64 text or raw bytes."""
	return _read_key_file(path, PRIVATE_KEY_SIZE, "private key")

def load_public_key(path: Path) -> bytes:
	return _read_key_file(path, PUBLIC_KEY_SIZE, "public key")
