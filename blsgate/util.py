"""Generic utility helpers."""
from __future__ import annotations

import base64
import binascii
import hashlib

def hash_message(data: bytes | str) -> bytes:
	"""SHA-256 digest of arbitrary data, sized for signing."""
	if isinstance(data, str):
		data = data.encode("utf-8")
	return hashlib.sha256(data).digest()

def parse_hex(s: str) -> bytes:
	s = s.strip()
	if s[:2].lower() == "0x":
		s = s[2:]
	try:
		return bytes.fromhex(s)
	except ValueError as exc:
		raise ValueError(f"Not a hex string: {s[:16]}...") from exc

def b64_encode(data: bytes) -> str:
	return base64.b64encode(data).decode("ascii")

def b64_decode(text: str) -> bytes:
	try:
		return base64.b64decode(text.strip(), validate=True)
	except binascii.Error as exc:
		raise ValueError("Not valid base64 text.") from exc
