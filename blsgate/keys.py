"""Private key generation/validation and public key derivation."""
from __future__ import annotations

import logging

from . import validator
from .constants import MIN_IKM_SIZE
from .engine import CurveEngine
from .errors import InputError, InputSizeError
from .randomness import RandomSource, SystemRandomSource

log = logging.getLogger(__name__)

class KeyManager:
	def __init__(self, engine: CurveEngine, random_source: RandomSource | None = None):
		self.engine = engine
		self.random_source = random_source or SystemRandomSource()

	def generate_private_key(self) -> bytes:
		scalar = self.engine.random_scalar(self.random_source)
		return self.engine.serialize_scalar(scalar)

	def derive_private_key(self, ikm: bytes, key_info: bytes = b"") -> bytes:
		"""Deterministic keygen from at least 32 bytes of input keying material."""
		if len(ikm) < MIN_IKM_SIZE:
			raise InputSizeError("input keying material", MIN_IKM_SIZE, len(ikm), at_least=True)
		return self.engine.serialize_scalar(self.engine.keygen(ikm, key_info))

	def validate_private_key(self, private_key: bytes) -> bool:
		"""Raise on a zero or wrong-sized key; return False if it does not decode."""
		validator.check_private_key(private_key)
		return self.engine.decode_scalar(private_key).ok

	def validate_public_key(self, public_key: bytes) -> bool:
		validator.check_public_key(public_key)
		return self.engine.decode_public_key(public_key).ok

	def decode_private_key(self, private_key: bytes) -> int:
		validator.check_private_key(private_key)
		decoded = self.engine.decode_scalar(private_key)
		if not decoded.ok:
			log.debug("private key rejected: %s", decoded.failure.reason)
			raise InputError("Private key is invalid.")
		return decoded.value

	def get_public_key(self, private_key: bytes) -> bytes:
		scalar = self.decode_private_key(private_key)
		return self.engine.serialize_public_key(self.engine.derive_public_key(scalar))
