"""Single signature verification.

verify() is total over well-sized input: a signature or public key that fails
to decode yields False instead of an exception.
"""
from __future__ import annotations

import logging

from . import validator
from .engine import CurveEngine

log = logging.getLogger(__name__)

class Verifier:
	def __init__(self, engine: CurveEngine):
		self.engine = engine

	def verify(self, public_key: bytes, signature: bytes, message: bytes) -> bool:
		validator.check_public_key(public_key)
		validator.check_signature(signature)
		validator.check_message(message)
		pk = self.engine.decode_public_key(public_key)
		sig = self.engine.decode_signature(signature)
		if not (pk.ok and sig.ok):
			log.debug("verify: rejecting undecodable input (%s)", (pk.failure or sig.failure).entity)
			return False
		return self.engine.verify(pk.value, sig.value, bytes(message))

	def validate_signature(self, signature: bytes) -> bool:
		validator.check_signature(signature)
		return self.engine.decode_signature(signature).ok
