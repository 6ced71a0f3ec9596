"""Aggregate verification protocols: fast-aggregate, aggregate and batch.

Policy shared by all three: caller mistakes (empty or mismatched lists, wrong
sizes, undecodable keys or messages) raise InputError; a well-sized signature
that fails to decode, or fails the pairing check, yields False. multi_verify is
stricter and raises on any undecodable item.
"""
from __future__ import annotations

import logging
import warnings
from typing import Sequence

from . import validator
from .engine import CurveEngine
from .errors import InputError
from .randomness import RandomSource, SystemRandomSource
from .verifier import Verifier

log = logging.getLogger(__name__)

class AggregateEngine:
	def __init__(self, engine: CurveEngine, random_source: RandomSource | None = None, verifier: Verifier | None = None):
		self.engine = engine
		self.random_source = random_source or SystemRandomSource()
		self.verifier = verifier or Verifier(engine)

	def _decode_public_keys(self, public_keys: Sequence[bytes]) -> list:
		points = []
		for idx, public_key in enumerate(public_keys):
			validator.check_public_key(public_key)
			decoded = self.engine.decode_public_key(public_key)
			if not decoded.ok:
				raise InputError(f"Public key at index {idx} is invalid: {decoded.failure.reason}")
			points.append(decoded.value)
		return points

	def _decode_messages(self, messages: Sequence[bytes]) -> list:
		l_msgs = []
		for idx, message in enumerate(messages):
			validator.check_message(message)
			decoded = self.engine.decode_message(message)
			if not decoded.ok:
				raise InputError(f"Message at index {idx} is invalid: {decoded.failure.reason}")
			l_msgs.append(decoded.value)
		return l_msgs

	def fast_aggregate_verify(self, signature: bytes, public_keys: Sequence[bytes], message: bytes) -> bool:
		"""All keys signed the same message."""
		if len(public_keys) == 1:
			return self.verifier.verify(public_keys[0], signature, message)
		if len(public_keys) == 0:
			raise InputError("Public keys cannot be empty.")

		validator.check_signature(signature)
		validator.check_message(message)
		sig = self.engine.decode_signature(signature)
		if not sig.ok:
			return False
		pks = self._decode_public_keys(public_keys)
		return self.engine.fast_aggregate_verify(sig.value, pks, bytes(message))

	def aggregate_verify(self, signature: bytes, public_keys: Sequence[bytes], messages: Sequence[bytes]) -> bool:
		"""Each key signed its own message."""
		if len(public_keys) == 0:
			raise InputError("Public keys cannot be empty.")
		if len(messages) == 0:
			raise InputError("Messages cannot be empty.")
		if len(public_keys) != len(messages):
			raise InputError("Public keys and messages must have same rank.")

		validator.check_signature(signature)
		sig = self.engine.decode_signature(signature)
		if not sig.ok:
			return False
		pks = self._decode_public_keys(public_keys)
		msgs = self._decode_messages(messages)
		if len(set(msgs)) != len(msgs):
			warnings.warn(
				"aggregate_verify received duplicate messages; this is only sound if every public key has a proof of possession.",
				UserWarning,
				stacklevel=2,
			)
		return self.engine.aggregate_verify(sig.value, pks, msgs)

	def multi_verify(self, signatures: Sequence[bytes], public_keys: Sequence[bytes], messages: Sequence[bytes]) -> bool:
		"""Batch-verify independent (signature, public key, message) triplets.

		One pairing-product check covers the whole batch. Every triplet is
		weighted by a fresh random scalar, so invalid signatures cannot cancel
		each other out in the combined check.
		"""
		if len(public_keys) == 0:
			raise InputError("Public keys must not be empty.")
		if len(signatures) == 0:
			raise InputError("Signatures must not be empty.")
		if len(messages) == 0:
			raise InputError("Messages must not be empty.")
		if len(signatures) != len(public_keys) or len(signatures) != len(messages):
			raise InputError("Signatures, public keys and messages length are not matching.")

		for signature, public_key, message in zip(signatures, public_keys, messages):
			validator.check_signature(signature)
			validator.check_public_key(public_key)
			validator.check_message(message)

		sigs, pks, msgs, coefficients = [], [], [], []
		for idx, (signature, public_key, message) in enumerate(zip(signatures, public_keys, messages)):
			l_decoded = (
				self.engine.decode_signature(signature),
				self.engine.decode_public_key(public_key),
				self.engine.decode_message(message),
			)
			failed = [d.failure for d in l_decoded if not d.ok]
			if failed:
				log.debug("multi_verify: triplet %d has an invalid %s", idx, failed[0].entity)
				raise InputError("Some of inputs are invalid.")
			sigs.append(l_decoded[0].value)
			pks.append(l_decoded[1].value)
			msgs.append(l_decoded[2].value)
			coefficients.append(self.engine.random_scalar(self.random_source))

		log.debug("multi_verify: %d triplets", len(sigs))
		return self.engine.multi_verify(sigs, pks, msgs, coefficients)
