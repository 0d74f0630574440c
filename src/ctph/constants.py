from typing import Final

ALPHABET: Final = b'ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789+/'

ROLLING_WINDOW: Final = 7

BLOCK_MIN: Final = 3

SPAMSUM_LENGTH: Final = 64

MIN_INPUT_SIZE: Final = 4096

HASH_PRIME: Final = 0x01000193
HASH_INIT: Final = 0x28021967

MASK32: Final = 0xFFFFFFFF

READ_CHUNK_SIZE: Final = 1 << 20  # 1 MiB reads per pass
