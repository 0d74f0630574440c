from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Iterable, Iterator, Optional, Tuple

from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.progress import (
  BarColumn,
  MofNCompleteColumn,
  Progress,
  TaskID,
  TaskProgressColumn,
  TextColumn,
  TimeRemainingColumn,
)
from rich.table import Table
from rich.text import Text

from ctph.arguments import Arguments, OutputFormat
from ctph.error import DigestError
from ctph.source import fuzzy_file_stats
from ctph.stats import DigestStats


def _configure_logging(console: Console, verbose: bool) -> None:
  handler = RichHandler(console=console, show_path=False, show_time=False)
  handler.setFormatter(logging.Formatter('%(message)s'))

  logger = logging.getLogger('ctph')
  logger.handlers.clear()
  logger.addHandler(handler)
  logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
  logger.propagate = False


def _iter_files(paths: Iterable[Path], recursive: bool) -> Iterator[Path]:
  for path in paths:
    if recursive and path.is_dir():
      for root, dirnames, filenames in os.walk(path):
        dirnames.sort()
        for name in sorted(filenames):
          yield Path(root) / name
      continue

    yield path


def digest_path(path: Path) -> DigestStats:
  with path.open('rb') as fh:
    return fuzzy_file_stats(fh)


def _format_line(stats: DigestStats, path: Path) -> str:
  return f'{stats.digest},"{path}"'


def _build_table(results: list[Tuple[Path, DigestStats]]) -> Table:
  table = Table(show_lines=True)
  table.add_column('File', overflow='fold')
  table.add_column('Size')
  table.add_column('Block size')
  table.add_column('Passes')
  table.add_column('Digest', overflow='fold')

  for path, stats in results:
    table.add_row(
      Text(str(path)),
      f'{stats.total_bytes:,} B',
      str(stats.block_size),
      str(stats.passes),
      Text(stats.digest),
    )

  return table


def _make_progress(console: Console, total: int, *, enable_progress: bool) -> Optional[Progress]:
  progress = Progress(
    TextColumn('[progress.description]{task.description}'),
    BarColumn(),
    TaskProgressColumn(),
    MofNCompleteColumn(),
    TimeRemainingColumn(),
    console=console,
    transient=True,
    disable=(not enable_progress) or (not console.is_interactive) or total < 2,
  )

  if progress.disable:
    return None

  return progress


def main() -> int:
  arguments = Arguments.from_args()

  console, err_console = Console(), Console(stderr=True)

  _configure_logging(err_console, arguments.verbose)

  files = list(_iter_files(arguments.paths, arguments.recursive))
  results: list[Tuple[Path, DigestStats]] = []
  failures = 0

  progress = _make_progress(
    console, len(files), enable_progress=arguments.format is OutputFormat.TABLE
  )
  task_id: Optional[TaskID] = None

  if progress is not None:
    progress.start()
    task_id = progress.add_task('Hashing', total=len(files))

  try:
    for path in files:
      try:
        stats = digest_path(path)
      except (DigestError, OSError) as exc:
        failures += 1
        err_console.print(
          f'[bold red]error:[/] {escape(str(path))}: {escape(str(exc))}', emoji=False
        )
      else:
        if arguments.format is OutputFormat.LINES:
          console.print(
            _format_line(stats, path), markup=False, highlight=False, emoji=False, soft_wrap=True
          )
        else:
          results.append((path, stats))
      finally:
        if progress is not None and task_id is not None:
          progress.advance(task_id)
  finally:
    if progress is not None:
      progress.stop()

  if arguments.format is OutputFormat.TABLE and results:
    console.print(_build_table(results))

  return 1 if failures else 0


if __name__ == '__main__':
  raise SystemExit(main())
