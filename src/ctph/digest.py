from __future__ import annotations

import logging
from typing import Protocol

from .block_hash import BlockAccumulator, HashString
from .block_size import initial_block_size, max_passes, shrink_block_size
from .constants import MIN_INPUT_SIZE, READ_CHUNK_SIZE, SPAMSUM_LENGTH
from .error import TooSmallBlockError, TooSmallInputError
from .rolling_window import RollingWindow
from .stats import DigestStats

logger = logging.getLogger(__name__)


class RewindableSource(Protocol):
  """
  Minimal input interface: rewind to the start, then read sequentially.

  Binary file objects and ``io.BytesIO`` both satisfy it.
  """

  def seek(self, offset: int, whence: int = 0, /) -> int: ...

  def read(self, size: int = -1, /) -> bytes: ...


class DigestBuilder:
  """
  Computes one context-triggered piecewise hash.

  The builder starts from the block size suggested by ``size`` and scans the whole
  source. When the scan yields fewer than 32 coarse characters the block size is halved
  and the source is scanned again from offset 0. The number of scans is bounded by the
  number of halvings that keep the block size at or above the minimum.
  """

  def __init__(self, size: int) -> None:
    if size < MIN_INPUT_SIZE:
      raise TooSmallInputError(size)

    self.size = size
    self.block_size = initial_block_size(size)
    self.window = RollingWindow()
    self.coarse_hash = BlockAccumulator()
    self.fine_hash = BlockAccumulator()
    self.coarse = HashString(SPAMSUM_LENGTH - 1)
    self.fine = HashString(SPAMSUM_LENGTH // 2 - 1)
    self.passes = 0

  def run(self, source: RewindableSource) -> DigestStats:
    for _ in range(max_passes(self.block_size)):
      self.scan(source)

      if len(self.coarse) >= SPAMSUM_LENGTH // 2:
        return self.finalize()

      self.shrink()

    raise TooSmallBlockError(self.block_size)

  def scan(self, source: RewindableSource) -> None:
    self._begin_pass()
    logger.debug('Pass %d with block size %d', self.passes, self.block_size)

    block_size = self.block_size
    double_size = block_size * 2
    window = self.window
    coarse_hash, fine_hash = self.coarse_hash, self.fine_hash
    coarse, fine = self.coarse, self.fine

    source.seek(0)

    while chunk := source.read(READ_CHUNK_SIZE):
      for c in chunk:
        coarse_hash.absorb(c)
        fine_hash.absorb(c)
        window.push(c)

        rh = window.checksum()

        if rh % block_size != block_size - 1:
          continue

        if coarse.append(coarse_hash.char()):
          coarse_hash.reset()

        if rh % double_size == double_size - 1 and fine.append(fine_hash.char()):
          fine_hash.reset()

  def shrink(self) -> None:
    logger.debug(
      'Only %d characters at block size %d, halving', len(self.coarse), self.block_size
    )
    self.block_size = shrink_block_size(self.block_size)

  def finalize(self) -> DigestStats:
    # A zero rolling sum is taken to mean the trailing block was already emitted.
    if self.window.checksum() != 0:
      self.coarse.finish(self.coarse_hash.char())
      self.fine.finish(self.fine_hash.char())

    digest = f'{self.block_size}:{self.coarse}:{self.fine}'
    logger.debug('Digest after %d passes: %s', self.passes, digest)

    return DigestStats(
      total_bytes=self.size,
      block_size=self.block_size,
      passes=self.passes,
      digest=digest,
    )

  def _begin_pass(self) -> None:
    self.passes += 1
    self.window = RollingWindow()
    self.coarse_hash.reset()
    self.fine_hash.reset()
    self.coarse.clear()
    self.fine.clear()


def fuzzy_reader(source: RewindableSource, size: int) -> str:
  """
  Compute the fuzzy digest of ``source``, which must yield exactly ``size`` bytes.

  The result has the form ``<block size>:<coarse>:<fine>``. Appending a file name is
  left to the caller. Errors raised by ``source`` propagate unchanged.
  """
  return DigestBuilder(size).run(source).digest
