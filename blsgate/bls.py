"""One object wiring a curve engine and a random source into every operation."""
from __future__ import annotations

import threading
from typing import Sequence

from .aggregate import AggregateEngine
from .aggregator import Aggregator
from .engine import CurveEngine, EngineParameters, build_engine
from .keys import KeyManager
from .randomness import RandomSource, SystemRandomSource
from .signing import SignatureOps
from .verifier import Verifier

class BLS:
	def __init__(self, engine: CurveEngine | None = None, random_source: RandomSource | None = None):
		self.engine = engine or build_engine()
		self.random_source = random_source or SystemRandomSource()
		self.keys = KeyManager(self.engine, self.random_source)
		self.signer = SignatureOps(self.keys)
		self.verifier = Verifier(self.engine)
		self.aggregates = AggregateEngine(self.engine, self.random_source, verifier=self.verifier)
		self.aggregator = Aggregator(self.engine)

	@classmethod
	def from_parameters(cls, params: EngineParameters, random_source: RandomSource | None = None) -> "BLS":
		return cls(build_engine(params), random_source)

	def generate_private_key(self) -> bytes:
		return self.keys.generate_private_key()

	def derive_private_key(self, ikm: bytes, key_info: bytes = b"") -> bytes:
		return self.keys.derive_private_key(ikm, key_info)

	def validate_private_key(self, private_key: bytes) -> bool:
		return self.keys.validate_private_key(private_key)

	def validate_public_key(self, public_key: bytes) -> bool:
		return self.keys.validate_public_key(public_key)

	def validate_signature(self, signature: bytes) -> bool:
		return self.verifier.validate_signature(signature)

	def get_public_key(self, private_key: bytes) -> bytes:
		return self.keys.get_public_key(private_key)

	def sign(self, private_key: bytes, message: bytes) -> bytes:
		return self.signer.sign(private_key, message)

	def verify(self, public_key: bytes, signature: bytes, message: bytes) -> bool:
		return self.verifier.verify(public_key, signature, message)

	def fast_aggregate_verify(self, signature: bytes, public_keys: Sequence[bytes], message: bytes) -> bool:
		return self.aggregates.fast_aggregate_verify(signature, public_keys, message)

	def aggregate_verify(self, signature: bytes, public_keys: Sequence[bytes], messages: Sequence[bytes]) -> bool:
		return self.aggregates.aggregate_verify(signature, public_keys, messages)

	def multi_verify(self, signatures: Sequence[bytes], public_keys: Sequence[bytes], messages: Sequence[bytes]) -> bool:
		return self.aggregates.multi_verify(signatures, public_keys, messages)

	def aggregate_signatures(self, lhs: bytes, rhs: bytes) -> bytes:
		return self.aggregator.aggregate_signatures(lhs, rhs)

	def aggregate_signature_list(self, signatures: Sequence[bytes]) -> bytes:
		return self.aggregator.aggregate_signature_list(signatures)

_default: BLS | None = None
_default_lock = threading.Lock()

def default_bls() -> BLS:
	global _default
	with _default_lock:
		if _default is None:
			_default = BLS()
		return _default
