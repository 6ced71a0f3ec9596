"""BLS signature validation and orchestration over a pluggable curve engine."""
from __future__ import annotations

from typing import Sequence

from .bls import BLS, default_bls
from .constants import MESSAGE_SIZE, PRIVATE_KEY_SIZE, PUBLIC_KEY_SIZE, SIGNATURE_SIZE
from .engine import CurveEngine, Decoded, DecodeFailure, EngineParameters, PyEccEngine, build_engine
from .errors import BLSError, InputError, InputSizeError, ZeroPrivateKeyError
from .randomness import RandomSource, SeededRandomSource, SystemRandomSource

def generate_private_key() -> bytes:
	return default_bls().generate_private_key()

def validate_private_key(private_key: bytes) -> bool:
	return default_bls().validate_private_key(private_key)

def get_public_key(private_key: bytes) -> bytes:
	return default_bls().get_public_key(private_key)

def sign(private_key: bytes, message: bytes) -> bytes:
	return default_bls().sign(private_key, message)

def verify(public_key: bytes, signature: bytes, message: bytes) -> bool:
	return default_bls().verify(public_key, signature, message)

def fast_aggregate_verify(signature: bytes, public_keys: Sequence[bytes], message: bytes) -> bool:
	return default_bls().fast_aggregate_verify(signature, public_keys, message)

def aggregate_verify(signature: bytes, public_keys: Sequence[bytes], messages: Sequence[bytes]) -> bool:
	return default_bls().aggregate_verify(signature, public_keys, messages)

def multi_verify(signatures: Sequence[bytes], public_keys: Sequence[bytes], messages: Sequence[bytes]) -> bool:
	return default_bls().multi_verify(signatures, public_keys, messages)

def aggregate_signatures(lhs: bytes, rhs: bytes) -> bytes:
	return default_bls().aggregate_signatures(lhs, rhs)

__all__ = [
	"BLS",
	"default_bls",
	"CurveEngine",
	"Decoded",
	"DecodeFailure",
	"EngineParameters",
	"PyEccEngine",
	"build_engine",
	"BLSError",
	"InputError",
	"InputSizeError",
	"ZeroPrivateKeyError",
	"RandomSource",
	"SeededRandomSource",
	"SystemRandomSource",
	"PRIVATE_KEY_SIZE",
	"PUBLIC_KEY_SIZE",
	"SIGNATURE_SIZE",
	"MESSAGE_SIZE",
	"generate_private_key",
	"validate_private_key",
	"get_public_key",
	"sign",
	"verify",
	"fast_aggregate_verify",
	"aggregate_verify",
	"multi_verify",
	"aggregate_signatures",
]
