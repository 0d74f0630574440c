from dataclasses import dataclass


@dataclass(frozen=True)
class DigestStats:
  total_bytes: int
  block_size: int
  passes: int
  digest: str

  @property
  def shrinks(self) -> int:
    return max(self.passes - 1, 0)
