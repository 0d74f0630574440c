from __future__ import annotations

import pytest

from ctph.block_size import initial_block_size, max_passes, shrink_block_size


@pytest.mark.parametrize(
  ('size', 'expected'),
  [
    (0, 3),
    (192, 3),
    (193, 6),
    (4096, 96),
    (6144, 96),
    (6145, 192),
    (1 << 20, 24576),
  ],
)
def test_initial_block_size(size: int, expected: int) -> None:
  assert initial_block_size(size) == expected


@pytest.mark.parametrize('size', [4096, 5000, 65536, 100_000, 3 * 1024 * 1024 + 7])
def test_initial_block_size_is_smallest_covering_power_of_two(size: int) -> None:
  block_size = initial_block_size(size)
  multiple = block_size // 3

  assert block_size % 3 == 0
  assert multiple & (multiple - 1) == 0
  assert block_size * 64 >= size
  assert block_size == 3 or (block_size // 2) * 64 < size


def test_shrink_halves() -> None:
  assert shrink_block_size(96) == 48
  assert shrink_block_size(6) == 3
  assert shrink_block_size(3) == 1


@pytest.mark.parametrize(('block_size', 'expected'), [(3, 1), (6, 2), (96, 6), (24576, 14)])
def test_max_passes_counts_halvings_down_to_minimum(block_size: int, expected: int) -> None:
  assert max_passes(block_size) == expected


@pytest.mark.parametrize('block_size', [0, 1, 2, 5])
def test_max_passes_rejects_invalid_block_sizes(block_size: int) -> None:
  with pytest.raises(ValueError):
    max_passes(block_size)
