from .constants import BLOCK_MIN, SPAMSUM_LENGTH


def initial_block_size(size: int) -> int:
  """Smallest ``BLOCK_MIN * 2**k`` whose 64 ideal blocks cover ``size`` bytes."""
  block_size = BLOCK_MIN

  while block_size * SPAMSUM_LENGTH < size:
    block_size *= 2

  return block_size


def shrink_block_size(block_size: int) -> int:
  return block_size // 2


def max_passes(block_size: int) -> int:
  """
  Number of scans needed to walk ``block_size`` down to ``BLOCK_MIN``, inclusive.

  ``block_size`` must be ``BLOCK_MIN`` times a power of two.
  """
  if block_size < BLOCK_MIN or block_size % BLOCK_MIN:
    raise ValueError(f'Not a valid block size: {block_size}')

  return (block_size // BLOCK_MIN).bit_length()
