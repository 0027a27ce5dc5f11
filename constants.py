'''Project wide constants for key derivation.

These are fixed by the derivation scheme and are deliberately not read from
the configuration file (see config.py for the runtime settings).
'''

# chain path grammar
MASTER_SYMBOL = "m"
HARDENED_SYMBOLS = ("H", "'")
SEPARATOR = "/"

# 2 ** 31, the first index of the hardened range
HARDENED_KEY_START_INDEX = 2147483648
MAX_KEY_INDEX = 2 ** 32 - 1

# depth is stored in a single byte
MAX_DEPTH = 255

# HMAC key used to turn a seed into the master key
SEED_KEY = b"Enclave seed"

CHAIN_CODE_LENGTH = 32
PRIVATE_KEY_LENGTH = 32
PUBLIC_KEY_LENGTH = 33
