"""BLS12-381 engine on py_ecc: public keys in G1 (48B), signatures in G2 (96B)."""
from __future__ import annotations

import logging
from functools import reduce
from hashlib import sha256
from typing import Iterable, Sequence, Tuple

from py_ecc.bls import G2ProofOfPossession
from py_ecc.bls.g2_primitives import G1_to_pubkey, G2_to_signature, pubkey_to_G1, signature_to_G2, subgroup_check
from py_ecc.bls.hash_to_curve import hash_to_G2
from py_ecc.optimized_bls12_381 import FQ12, G1, Z1, Z2, add, curve_order as CURVE_ORDER, final_exponentiate, is_inf, multiply, neg, pairing

from ..constants import PRIVATE_KEY_SIZE
from .base import CurveEngine

log = logging.getLogger(__name__)

class PyEccEngine(CurveEngine):
	backend = "py_ecc"
	curve_order = CURVE_ORDER

	def _parse_scalar(self, data: bytes) -> int:
		scalar = int.from_bytes(data, "big")
		if not 0 < scalar < self.curve_order:
			raise ValueError("Scalar is out of range.")
		return scalar

	def _parse_public_key(self, data: bytes):
		point = pubkey_to_G1(bytes(data))
		if is_inf(point):
			raise ValueError("Public key is the identity point.")
		if not subgroup_check(point):
			raise ValueError("Public key is not in the G1 subgroup.")
		return point

	def _parse_signature(self, data: bytes):
		point = signature_to_G2(bytes(data))
		if not subgroup_check(point):
			raise ValueError("Signature is not in the G2 subgroup.")
		return point

	def keygen(self, ikm: bytes, key_info: bytes = b"") -> int:
		return G2ProofOfPossession.KeyGen(bytes(ikm), key_info)

	def serialize_scalar(self, scalar: int) -> bytes:
		return scalar.to_bytes(PRIVATE_KEY_SIZE, "big")

	def serialize_public_key(self, point) -> bytes:
		return bytes(G1_to_pubkey(point))

	def serialize_signature(self, point) -> bytes:
		return bytes(G2_to_signature(point))

	def derive_public_key(self, scalar: int):
		return multiply(G1, scalar)

	def hash_to_point(self, message: bytes):
		return hash_to_G2(message, self.dst, sha256)

	def sign(self, scalar: int, message: bytes):
		return multiply(self.hash_to_point(message), scalar)

	def add_signatures(self, lhs, rhs):
		return add(lhs, rhs)

	def _pairing_product_is_one(self, pairs: Iterable[Tuple[object, object]]) -> bool:
		# pairs are (G2 point, G1 point); one shared final exponentiation
		product = FQ12.one()
		for q, p in pairs:
			product *= pairing(q, p, final_exponentiate=False)
		return final_exponentiate(product) == FQ12.one()

	def verify(self, public_key, signature, message: bytes) -> bool:
		return self._pairing_product_is_one([
			(signature, neg(G1)),
			(self.hash_to_point(message), public_key),
		])

	def fast_aggregate_verify(self, signature, public_keys: Sequence, message: bytes) -> bool:
		aggregate_pk = reduce(add, public_keys, Z1)
		if is_inf(aggregate_pk):
			log.debug("fast_aggregate_verify: public keys sum to the identity")
			return False
		return self.verify(aggregate_pk, signature, message)

	def aggregate_verify(self, signature, public_keys: Sequence, messages: Sequence[bytes]) -> bool:
		pairs = [(self.hash_to_point(msg), pk) for pk, msg in zip(public_keys, messages)]
		pairs.append((signature, neg(G1)))
		return self._pairing_product_is_one(pairs)

	def multi_verify(self, signatures: Sequence, public_keys: Sequence, messages: Sequence[bytes], coefficients: Sequence[int]) -> bool:
		# e(sum r_i*sig_i, g1) == prod e(H(m_i), r_i*pk_i)
		sig_acc = Z2
		pairs = []
		for sig, pk, msg, r in zip(signatures, public_keys, messages, coefficients):
			sig_acc = add(sig_acc, multiply(sig, r))
			pairs.append((self.hash_to_point(msg), multiply(pk, r)))
		pairs.append((sig_acc, neg(G1)))
		log.debug("batch pairing check over %d triplets", len(pairs) - 1)
		return self._pairing_product_is_one(pairs)
