from concurrent.futures import ThreadPoolExecutor

import blsgate
from blsgate import bls as bls_module
from blsgate.util import hash_message

def test_module_level_round_trip():
	sk = blsgate.generate_private_key()
	assert blsgate.validate_private_key(sk)
	pk = blsgate.get_public_key(sk)
	msg = hash_message(b"module level")
	sig = blsgate.sign(sk, msg)
	assert blsgate.verify(pk, sig, msg)
	assert blsgate.fast_aggregate_verify(sig, [pk], msg)
	assert blsgate.multi_verify([sig], [pk], [msg])

def test_default_bls_is_shared():
	assert blsgate.default_bls() is blsgate.default_bls()

def test_default_bls_is_built_once_across_threads(monkeypatch):
	monkeypatch.setattr(bls_module, "_default", None)
	with ThreadPoolExecutor(max_workers=8) as pool:
		instances = list(pool.map(lambda _: bls_module.default_bls(), range(32)))
	assert len({id(inst) for inst in instances}) == 1
