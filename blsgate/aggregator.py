"""Signature aggregation by G2 point addition."""
from __future__ import annotations

from typing import Sequence

from . import validator
from .engine import CurveEngine
from .errors import InputError

class Aggregator:
	def __init__(self, engine: CurveEngine):
		self.engine = engine

	def _decode(self, signature: bytes, what: str):
		decoded = self.engine.decode_signature(signature)
		if not decoded.ok:
			raise InputError(f"{what} is invalid.")
		return decoded.value

	def aggregate_signatures(self, lhs: bytes, rhs: bytes) -> bytes:
		"""Return lhs + rhs. Aggregating a signature with itself doubles it."""
		validator.check_signature(lhs)
		validator.check_signature(rhs)
		rhs_point = self._decode(rhs, "Right hand-side signature")
		lhs_point = self._decode(lhs, "Left hand-side signature")
		return self.engine.serialize_signature(self.engine.add_signatures(lhs_point, rhs_point))

	def aggregate_signature_list(self, signatures: Sequence[bytes]) -> bytes:
		if len(signatures) == 0:
			raise InputError("Signatures cannot be empty.")
		validator.check_each(signatures, validator.check_signature)
		acc = None
		for idx, signature in enumerate(signatures):
			point = self._decode(signature, f"Signature at index {idx}")
			acc = point if acc is None else self.engine.add_signatures(acc, point)
		return self.engine.serialize_signature(acc)
