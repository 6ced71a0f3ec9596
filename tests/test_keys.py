import pytest
from py_ecc.bls import G2ProofOfPossession
from py_ecc.optimized_bls12_381 import curve_order

from blsgate import BLS, SeededRandomSource
from blsgate.constants import PRIVATE_KEY_SIZE, PUBLIC_KEY_SIZE
from blsgate.errors import InputError, InputSizeError, ZeroPrivateKeyError

OUT_OF_RANGE_KEY = curve_order.to_bytes(PRIVATE_KEY_SIZE, "big")

def test_zero_private_key_rejected_everywhere(bls, messages):
	zero = bytes(PRIVATE_KEY_SIZE)
	with pytest.raises(ZeroPrivateKeyError):
		bls.validate_private_key(zero)
	with pytest.raises(ZeroPrivateKeyError):
		bls.get_public_key(zero)
	with pytest.raises(ZeroPrivateKeyError):
		bls.sign(zero, messages[0])

def test_short_private_key_is_size_error(bls):
	key = b"\x01" * (PRIVATE_KEY_SIZE - 1)
	with pytest.raises(InputSizeError):
		bls.validate_private_key(key)
	with pytest.raises(InputSizeError):
		bls.get_public_key(key)

def test_out_of_range_key_is_false_not_error(bls):
	assert bls.validate_private_key(OUT_OF_RANGE_KEY) is False

def test_out_of_range_key_raises_when_used(bls, messages):
	with pytest.raises(InputError, match="Private key is invalid"):
		bls.get_public_key(OUT_OF_RANGE_KEY)
	with pytest.raises(InputError, match="Private key is invalid"):
		bls.sign(OUT_OF_RANGE_KEY, messages[0])

def test_generated_keys(bls, private_keys, public_keys):
	for sk, pk in zip(private_keys, public_keys):
		assert len(sk) == PRIVATE_KEY_SIZE
		assert bls.validate_private_key(sk) is True
		assert len(pk) == PUBLIC_KEY_SIZE
		assert bls.validate_public_key(pk) is True
	assert len(set(private_keys)) == len(private_keys)

def test_generation_is_reproducible_with_seeded_source():
	a = BLS(random_source=SeededRandomSource(99))
	b = BLS(random_source=SeededRandomSource(99))
	assert a.generate_private_key() == b.generate_private_key()

def test_public_key_matches_py_ecc(bls, private_keys):
	sk = private_keys[0]
	assert bls.get_public_key(sk) == G2ProofOfPossession.SkToPk(int.from_bytes(sk, "big"))

def test_derive_private_key(bls):
	ikm = bytes(range(32))
	sk = bls.derive_private_key(ikm)
	assert sk == bls.derive_private_key(ikm)
	assert sk != bls.derive_private_key(ikm, key_info=b"other")
	assert int.from_bytes(sk, "big") == G2ProofOfPossession.KeyGen(ikm)
	assert bls.validate_private_key(sk)

def test_derive_private_key_short_ikm(bls):
	with pytest.raises(InputSizeError, match="expected: at least 32, actual: 31") as excinfo:
		bls.derive_private_key(b"\x01" * 31)
	assert excinfo.value.at_least is True
	assert len(bls.derive_private_key(b"\x01" * 64)) == PRIVATE_KEY_SIZE

def test_validate_public_key(bls):
	assert bls.validate_public_key(b"\x00" * PUBLIC_KEY_SIZE) is False
	assert bls.validate_public_key(b"\xc0" + bytes(PUBLIC_KEY_SIZE - 1)) is False
	with pytest.raises(InputSizeError):
		bls.validate_public_key(b"\x00" * (PUBLIC_KEY_SIZE + 1))
