from .digest import DigestBuilder, RewindableSource, fuzzy_reader
from .error import DigestError, TooSmallBlockError, TooSmallInputError
from .source import fuzzy_bytes, fuzzy_file, fuzzy_file_stats, fuzzy_filename
from .stats import DigestStats

__all__ = [
  'DigestBuilder',
  'DigestError',
  'DigestStats',
  'RewindableSource',
  'TooSmallBlockError',
  'TooSmallInputError',
  'fuzzy_bytes',
  'fuzzy_file',
  'fuzzy_file_stats',
  'fuzzy_filename',
  'fuzzy_reader',
]
