"""Random scalar sources.

Key generation and batch verification draw scalars through a RandomSource
handed to them at construction time. Production code uses SystemRandomSource;
SeededRandomSource makes runs reproducible under test.
"""
from __future__ import annotations

import random
import secrets
import threading
from abc import ABC, abstractmethod

class RandomSource(ABC):
	@abstractmethod
	def randbelow(self, n: int) -> int:
		"""Return a uniform integer in [0, n)."""
		raise NotImplementedError

	def nonzero_below(self, n: int) -> int:
		"""Return a uniform integer in [1, n)."""
		if n < 2:
			raise ValueError(f"Range [1, {n}) is empty.")
		return 1 + self.randbelow(n - 1)

class SystemRandomSource(RandomSource):
	"""CSPRNG-backed source; safe to share between threads."""

	def randbelow(self, n: int) -> int:
		return secrets.randbelow(n)

class SeededRandomSource(RandomSource):
	"""Deterministic source for tests. Never use it to make real keys."""

	def __init__(self, seed: int | str | bytes = 0):
		self._rng = random.Random(seed)
		self._lock = threading.Lock()

	def randbelow(self, n: int) -> int:
		if n <= 0:
			raise ValueError("Upper bound must be positive.")
		with self._lock:
			return self._rng.randrange(n)
