from __future__ import annotations

import argparse
import os
import random
import tempfile
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable

from ctph.__main__ import digest_path
from ctph.stats import DigestStats


def _write_random(path: Path, size_bytes: int, *, rng: random.Random) -> None:
  path.parent.mkdir(parents=True, exist_ok=True)
  path.write_bytes(rng.randbytes(size_bytes))


def _mutate_offsets(
  size_bytes: int, mutation_count: int, *, chunk_len: int, rng: random.Random
) -> Iterable[int]:
  if mutation_count <= 0 or size_bytes == 0:
    return []
  max_offset = max(size_bytes - chunk_len, 0)
  return (rng.randint(0, max_offset) for _ in range(mutation_count))


def _mutate_file(path: Path, offsets: Iterable[int], *, chunk_size: int = 64) -> None:
  with path.open('r+b') as fh:
    for offset in offsets:
      fh.seek(offset)
      fh.write(os.urandom(chunk_size))


@dataclass(slots=True)
class BenchmarkResult:
  original_time: float
  mutated_time: float
  original: DigestStats
  mutated: DigestStats


def run_benchmark(*, size_kb: int, mutation_count: int, seed: int) -> BenchmarkResult:
  size_bytes = size_kb * 1024
  rng = random.Random(seed)

  with tempfile.TemporaryDirectory() as workspace:
    source = Path(workspace) / 'source.bin'
    _write_random(source, size_bytes, rng=rng)

    start = time.perf_counter()
    original = digest_path(source)
    original_time = time.perf_counter() - start

    mutation_chunk = min(64, max(size_bytes // 1024, 1))
    offsets = list(_mutate_offsets(size_bytes, mutation_count, chunk_len=mutation_chunk, rng=rng))
    if offsets:
      _mutate_file(source, offsets, chunk_size=mutation_chunk)

    start = time.perf_counter()
    mutated = digest_path(source)
    mutated_time = time.perf_counter() - start

  return BenchmarkResult(
    original_time=original_time,
    mutated_time=mutated_time,
    original=original,
    mutated=mutated,
  )


def _throughput(stats: DigestStats, seconds: float) -> str:
  scanned = stats.total_bytes * stats.passes
  return f'{scanned / (1024 * 1024) / max(seconds, 1e-9):.2f} MiB/s'


def main() -> None:
  parser = argparse.ArgumentParser(description='Benchmark fuzzy digest computation.')
  parser.add_argument('--size-kb', type=int, default=1024, help='Size of the input file in KiB')
  parser.add_argument(
    '--mutations', type=int, default=4, help='Number of small mutations applied to the copy'
  )
  parser.add_argument('--seed', type=int, default=1337, help='Seed for content and mutations')

  args = parser.parse_args()

  result = run_benchmark(size_kb=args.size_kb, mutation_count=args.mutations, seed=args.seed)

  print('=== Fuzzy Digest Benchmark ===')
  print(f'Input size       : {args.size_kb} KiB')
  print(f'Mutations applied: {args.mutations}')
  print()
  for label, stats, seconds in (
    ('Original', result.original, result.original_time),
    ('Mutated', result.mutated, result.mutated_time),
  ):
    print(f'{label:<17}: {stats.digest}')
    print(f'  Passes         : {stats.passes}')
    print(f'  Time           : {seconds:.2f}s ({_throughput(stats, seconds)})')


if __name__ == '__main__':
  main()
