"""Fixed byte lengths of every entity crossing the API boundary."""

PRIVATE_KEY_SIZE = 32	# big-endian scalar
PUBLIC_KEY_SIZE = 48	# compressed G1 point
SIGNATURE_SIZE = 96	# compressed G2 point
MESSAGE_SIZE = 32	# digest fed to hash-to-curve
MIN_IKM_SIZE = 32	# input keying material for deterministic keygen

DST = b"BLS_SIG_BLS12381G2_XMD:SHA-256_SSWU_RO_POP_"	# domain separation tag
