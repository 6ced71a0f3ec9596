"""Message signing."""
from __future__ import annotations

from . import validator
from .keys import KeyManager

class SignatureOps:
	def __init__(self, keys: KeyManager):
		self.keys = keys
		self.engine = keys.engine

	def sign(self, private_key: bytes, message: bytes) -> bytes:
		validator.check_message(message)
		scalar = self.keys.decode_private_key(private_key)
		return self.engine.serialize_signature(self.engine.sign(scalar, bytes(message)))
