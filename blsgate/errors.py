"""Exception hierarchy for caller errors."""
from __future__ import annotations

class BLSError(ValueError):
	"""Root of all errors raised by blsgate."""

class InputError(BLSError):
	"""The caller passed structurally invalid input."""

class InputSizeError(InputError):
	def __init__(self, entity: str, expected: int, actual: int, at_least: bool = False):
		self.entity = entity
		self.expected = expected
		self.actual = actual
		self.at_least = at_least
		bound = f"at least {expected}" if at_least else f"{expected}"
		super().__init__(f"Given {entity} is not of the correct size. (expected: {bound}, actual: {actual})")

class ZeroPrivateKeyError(InputError):
	def __init__(self, message: str = "Private key cannot be zero."):
		super().__init__(message)
