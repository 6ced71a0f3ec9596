import base64

import pytest

from blsgate import cli, interface
from blsgate.constants import PRIVATE_KEY_SIZE, PUBLIC_KEY_SIZE
from blsgate.errors import InputSizeError

@pytest.fixture
def key_paths(tmp_path, capsys):
	priv, pub = tmp_path / "sk.b64", tmp_path / "pk.b64"
	assert cli.main(["keygen", "--privkey", str(priv), "--pubkey", str(pub)]) == 0
	return priv, pub

def test_keygen_writes_base64_files(key_paths, capsys):
	priv, pub = key_paths
	assert len(base64.b64decode(priv.read_text())) == PRIVATE_KEY_SIZE
	assert len(base64.b64decode(pub.read_text())) == PUBLIC_KEY_SIZE
	assert "[keygen]" in capsys.readouterr().out

def test_keygen_refuses_overwrite(key_paths):
	priv, pub = key_paths
	with pytest.raises(SystemExit):
		cli.main(["keygen", "--privkey", str(priv), "--pubkey", str(pub)])

def test_pubkey_matches_file(key_paths, capsys):
	priv, pub = key_paths
	capsys.readouterr()
	assert cli.main(["pubkey", "--privkey", str(priv)]) == 0
	assert bytes.fromhex(capsys.readouterr().out.strip()) == interface.load_public_key(pub)

def test_sign_and_verify(key_paths, capsys):
	priv, pub = key_paths
	capsys.readouterr()
	assert cli.main(["sign", "--privkey", str(priv), "--message", "hello"]) == 0
	sig_hex = capsys.readouterr().out.strip()
	assert cli.main(["verify", "--pubkey", str(pub), "--signature", sig_hex, "--message", "hello"]) == 0
	assert cli.main(["verify", "--pubkey", str(pub), "--signature", sig_hex, "--message", "goodbye"]) == 1
	assert "INVALID" in capsys.readouterr().out

def test_sign_rejects_short_digest(key_paths, capsys):
	priv, _ = key_paths
	assert cli.main(["sign", "--privkey", str(priv), "--digest", "abcd"]) == 2
	assert "error" in capsys.readouterr().out

def test_aggregate_single(key_paths, capsys):
	priv, _ = key_paths
	capsys.readouterr()
	cli.main(["sign", "--privkey", str(priv), "--digest", "11" * 32])
	sig_hex = capsys.readouterr().out.strip()
	assert cli.main(["aggregate", sig_hex]) == 0
	assert capsys.readouterr().out.strip() == sig_hex

def test_load_raw_and_bad_key_files(tmp_path):
	raw = tmp_path / "raw.bin"
	raw.write_bytes(b"\x07" * PRIVATE_KEY_SIZE)
	assert interface.load_private_key(raw) == b"\x07" * PRIVATE_KEY_SIZE
	short = tmp_path / "short.b64"
	short.write_text(base64.b64encode(b"\x07" * 10).decode())
	with pytest.raises(InputSizeError):
		interface.load_private_key(short)
