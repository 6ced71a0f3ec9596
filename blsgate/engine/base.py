"""Curve engine interface and tagged decode results."""
from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Callable, Dict, Generic, Sequence, Tuple, Type, TypeVar

from ..constants import DST
from ..randomness import RandomSource

log = logging.getLogger(__name__)

T = TypeVar("T")

@dataclass(frozen=True)
class DecodeFailure:
	entity: str
	reason: str

@dataclass(frozen=True)
class Decoded(Generic[T]):
	"""Either a decoded value or the reason decoding failed."""
	value: T | None = None
	failure: DecodeFailure | None = None

	@property
	def ok(self) -> bool:
		return self.failure is None

	@classmethod
	def success(cls, value: T) -> "Decoded[T]":
		return cls(value=value)

	@classmethod
	def fail(cls, entity: str, reason: str) -> "Decoded[T]":
		return cls(failure=DecodeFailure(entity, reason))

class CurveEngine(ABC):
	"""Group arithmetic, pairing predicates and point encoding.

	Subclasses implement the raw parse hooks (``_parse_*``) which may raise
	anything on bad input; the public ``decode_*`` methods never raise and
	return a Decoded result instead.
	"""
	backend: str = "base"
	curve_order: int = 0
	_registry: Dict[str, Type["CurveEngine"]] = {}

	def __init_subclass__(cls, **kwargs):
		super().__init_subclass__(**kwargs)
		# only classes that name their own backend are selectable
		if "backend" in cls.__dict__:
			CurveEngine._registry[cls.backend] = cls

	def __init__(self, dst: bytes = DST):
		self.dst = dst

	@classmethod
	def get_class(cls, backend: str) -> Type["CurveEngine"]:
		try:
			return cls._registry[backend]
		except KeyError as exc:
			raise ValueError(f"Unknown curve engine backend '{backend}'") from exc

	@classmethod
	def choices(cls) -> Tuple[str, ...]:
		return tuple(cls._registry.keys())

	# ---- decoding ----
	def _decode(self, entity: str, parse: Callable[[bytes], Any], data: bytes) -> Decoded:
		try:
			return Decoded.success(parse(data))
		except Exception as exc:
			log.debug("failed to decode %s: %s", entity, exc)
			return Decoded.fail(entity, str(exc) or type(exc).__name__)

	def decode_scalar(self, data: bytes) -> Decoded[int]:
		return self._decode("private key", self._parse_scalar, data)

	def decode_public_key(self, data: bytes) -> Decoded[Any]:
		return self._decode("public key", self._parse_public_key, data)

	def decode_signature(self, data: bytes) -> Decoded[Any]:
		return self._decode("signature", self._parse_signature, data)

	def decode_message(self, data: bytes) -> Decoded[bytes]:
		return self._decode("message", self._parse_message, data)

	def _parse_message(self, data: bytes) -> bytes:
		return bytes(data)

	@abstractmethod
	def _parse_scalar(self, data: bytes) -> int:
		raise NotImplementedError

	@abstractmethod
	def _parse_public_key(self, data: bytes) -> Any:
		raise NotImplementedError

	@abstractmethod
	def _parse_signature(self, data: bytes) -> Any:
		raise NotImplementedError

	# ---- scalars and encoding ----
	def random_scalar(self, source: RandomSource) -> int:
		return source.nonzero_below(self.curve_order)

	@abstractmethod
	def keygen(self, ikm: bytes, key_info: bytes = b"") -> int:
		raise NotImplementedError

	@abstractmethod
	def serialize_scalar(self, scalar: int) -> bytes:
		raise NotImplementedError

	@abstractmethod
	def serialize_public_key(self, point) -> bytes:
		raise NotImplementedError

	@abstractmethod
	def serialize_signature(self, point) -> bytes:
		raise NotImplementedError

	# ---- group operations ----
	@abstractmethod
	def derive_public_key(self, scalar: int):
		raise NotImplementedError

	@abstractmethod
	def sign(self, scalar: int, message: bytes):
		raise NotImplementedError

	@abstractmethod
	def add_signatures(self, lhs, rhs):
		raise NotImplementedError

	# ---- predicates ----
	@abstractmethod
	def verify(self, public_key, signature, message: bytes) -> bool:
		raise NotImplementedError

	@abstractmethod
	def fast_aggregate_verify(self, signature, public_keys: Sequence, message: bytes) -> bool:
		raise NotImplementedError

	@abstractmethod
	def aggregate_verify(self, signature, public_keys: Sequence, messages: Sequence[bytes]) -> bool:
		raise NotImplementedError

	@abstractmethod
	def multi_verify(self, signatures: Sequence, public_keys: Sequence, messages: Sequence[bytes], coefficients: Sequence[int]) -> bool:
		"""Randomized batch check; ``coefficients`` blind each triplet."""
		raise NotImplementedError

def engine_choices() -> Tuple[str, ...]:
	return tuple(sorted(CurveEngine.choices()))
