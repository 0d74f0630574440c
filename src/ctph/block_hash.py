from .constants import ALPHABET, HASH_INIT, HASH_PRIME, MASK32


class BlockAccumulator:
  """FNV-style hash of the bytes seen since the last block boundary."""

  __slots__ = ('value',)

  def __init__(self) -> None:
    self.value = HASH_INIT

  def absorb(self, c: int) -> None:
    self.value = ((self.value * HASH_PRIME) & MASK32) ^ c

  def reset(self) -> None:
    self.value = HASH_INIT

  def char(self) -> int:
    return ALPHABET[self.value % 64]


class HashString:
  """
  Fixed-capacity buffer for one half of the digest.

  While scanning, ``append`` refuses once ``limit`` characters are held. Finalisation
  may add one character past the limit, which is why the buffer reserves ``limit + 1``.
  """

  __slots__ = ('_buffer', '_length', 'limit')

  def __init__(self, limit: int) -> None:
    self.limit = limit
    self._buffer = bytearray(limit + 1)
    self._length = 0

  def __len__(self) -> int:
    return self._length

  def __str__(self) -> str:
    return self._buffer[: self._length].decode('ascii')

  def append(self, char: int) -> bool:
    if self._length >= self.limit:
      return False

    self._buffer[self._length] = char
    self._length += 1
    return True

  def finish(self, char: int) -> None:
    self._buffer[self._length] = char
    self._length += 1

  def clear(self) -> None:
    self._length = 0
