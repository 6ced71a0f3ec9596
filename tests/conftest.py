"""Shared fixtures. Pairings are slow in pure Python, so key material is session scoped."""
import pytest

from blsgate import BLS, SeededRandomSource
from blsgate.util import hash_message

N_SIGNERS = 3

@pytest.fixture(scope="session")
def bls():
	return BLS(random_source=SeededRandomSource(2025))

@pytest.fixture(scope="session")
def messages():
	return [hash_message(f"message number {i}") for i in range(N_SIGNERS)]

@pytest.fixture(scope="session")
def private_keys(bls):
	return [bls.generate_private_key() for _ in range(N_SIGNERS)]

@pytest.fixture(scope="session")
def public_keys(bls, private_keys):
	return [bls.get_public_key(sk) for sk in private_keys]

@pytest.fixture(scope="session")
def signatures(bls, private_keys, messages):
	"""signatures[i] is private_keys[i] over messages[i]."""
	return [bls.sign(sk, msg) for sk, msg in zip(private_keys, messages)]

@pytest.fixture(scope="session")
def shared_message_signatures(bls, private_keys, messages):
	"""Every key over messages[0]."""
	return [bls.sign(sk, messages[0]) for sk in private_keys]
