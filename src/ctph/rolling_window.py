from .constants import MASK32, ROLLING_WINDOW


class RollingWindow:
  """
  Adler-style rolling checksum over the last seven bytes of input.

  ``h1`` is the plain sum of the window, ``h2`` weights each byte by how recently it
  entered, and ``h3`` shifts every byte in regardless of the window. All three wrap at
  32 bits. The combined value only decides where a block ends; it never reaches the
  digest directly.
  """

  __slots__ = ('window', 'h1', 'h2', 'h3', 'n')

  def __init__(self) -> None:
    self.window = bytearray(ROLLING_WINDOW)
    self.h1 = 0
    self.h2 = 0
    self.h3 = 0
    self.n = 0

  def push(self, c: int) -> None:
    self.h2 = (self.h2 - self.h1 + ROLLING_WINDOW * c) & MASK32
    self.h1 = (self.h1 + c - self.window[self.n]) & MASK32
    self.window[self.n] = c
    self.n = (self.n + 1) % ROLLING_WINDOW
    self.h3 = ((self.h3 << 5) ^ c) & MASK32

  def checksum(self) -> int:
    return (self.h1 + self.h2 + self.h3) & MASK32
