class DigestError(Exception):
  """Base class for failures raised while computing a fuzzy digest."""


class TooSmallInputError(DigestError):
  def __init__(self, size: int) -> None:
    self.size = size
    super().__init__(f'Too small data size: {size} bytes')


class TooSmallBlockError(DigestError):
  def __init__(self, block_size: int) -> None:
    self.block_size = block_size
    super().__init__(f'Too small block size: {block_size}')
