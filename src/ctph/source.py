from __future__ import annotations

import io
import os
from pathlib import Path
from typing import BinaryIO

from .digest import DigestBuilder, fuzzy_reader
from .stats import DigestStats


def fuzzy_bytes(data: bytes) -> str:
  """Compute the fuzzy digest of an in-memory buffer."""
  return fuzzy_reader(io.BytesIO(data), len(data))


def fuzzy_file_stats(fh: BinaryIO) -> DigestStats:
  """
  Compute the fuzzy digest of an open binary file, starting from its beginning.

  The file position is restored once the computation finishes, whether or not it
  succeeded.
  """
  position = fh.tell()

  try:
    return DigestBuilder(os.fstat(fh.fileno()).st_size).run(fh)
  finally:
    fh.seek(position, io.SEEK_SET)


def fuzzy_file(fh: BinaryIO) -> str:
  return fuzzy_file_stats(fh).digest


def fuzzy_filename(path: Path | str) -> str:
  with Path(path).open('rb') as fh:
    return fuzzy_file(fh)
