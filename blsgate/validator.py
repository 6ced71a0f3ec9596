"""Size and value checks run on raw buffers before any decode attempt."""
from __future__ import annotations

import hmac
from typing import Sequence

from .constants import MESSAGE_SIZE, PRIVATE_KEY_SIZE, PUBLIC_KEY_SIZE, SIGNATURE_SIZE
from .errors import InputSizeError, ZeroPrivateKeyError

def check_size(data: bytes, expected: int, entity: str) -> None:
	if len(data) != expected:
		raise InputSizeError(entity, expected, len(data))

def is_all_zero(data: bytes) -> bool:
	"""Constant-time test for an all-zero buffer."""
	return hmac.compare_digest(bytes(data), bytes(len(data)))

def check_private_key(private_key: bytes) -> None:
	# zero first, then size
	if is_all_zero(private_key):
		raise ZeroPrivateKeyError()
	check_size(private_key, PRIVATE_KEY_SIZE, "private key")

def check_public_key(public_key: bytes) -> None:
	check_size(public_key, PUBLIC_KEY_SIZE, "public key")

def check_signature(signature: bytes) -> None:
	check_size(signature, SIGNATURE_SIZE, "signature")

def check_message(message: bytes) -> None:
	check_size(message, MESSAGE_SIZE, "message")

def check_each(items: Sequence[bytes], check) -> None:
	for item in items:
		check(item)
