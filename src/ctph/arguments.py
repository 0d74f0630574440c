from __future__ import annotations

import argparse
import typing as t
from dataclasses import dataclass
from enum import Enum
from pathlib import Path


class HelpFormatter(argparse.HelpFormatter):
  """
  Help formatter printing a single-line usage and one line per option.
  """

  def __init__(
    self,
    prog: str,
    indent_increment: int = 2,
    max_help_position: int = 50,
    width: t.Optional[int] = None,
  ):
    super().__init__(prog, indent_increment, max_help_position, width)

  def _format_usage(
    self,
    usage: t.Optional[str],
    actions: t.Iterable[argparse.Action],
    groups: t.Iterable[argparse._MutuallyExclusiveGroup],
    prefix: t.Optional[str],
  ) -> str:
    if usage is not None:
      return usage

    _ = groups

    parts: list[str] = []

    for action in actions:
      if isinstance(action, argparse._HelpAction):
        continue

      if not action.option_strings:
        parts.append(self._format_args(action, action.dest))
        continue

      option = action.option_strings[0]

      if action.nargs == 0:
        display = option
      else:
        display = f'{option} {self._metavar(action)}'

      parts.append(display if action.required else f'[{display}]')

    return f'{prefix or "usage: "}{self._prog} {" ".join(parts)}\n\n'

  def _format_action(self, action: argparse.Action) -> str:
    if isinstance(action, argparse._HelpAction):
      return '  -h --help Show this help message and exit\n'

    if action.option_strings:
      invocation = action.option_strings[0]
      if action.nargs != 0:
        invocation += f' {self._metavar(action)}'
    else:
      invocation = self._format_args(action, action.dest)

    help_text = action.help or ''

    if action.default is not None and action.default != argparse.SUPPRESS:
      help_text = f'{help_text} (default: {action.default})'

    return f'  {invocation} {help_text}\n'

  def _metavar(self, action: argparse.Action) -> str:
    default = self._get_default_metavar_for_optional(action)
    return self._metavar_formatter(action, default)(1)[0]


class OutputFormat(str, Enum):
  """How computed digests are printed."""

  LINES = 'lines'
  TABLE = 'table'

  def __str__(self) -> str:
    return self.value


@dataclass
class Arguments:
  """
  A wrapper class providing concrete types for parsed command-line arguments.
  """

  paths: list[Path]
  recursive: bool
  format: OutputFormat
  verbose: bool

  @staticmethod
  def from_args(argv: t.Optional[t.Sequence[str]] = None) -> Arguments:
    parser = argparse.ArgumentParser(
      prog='ctph',
      description='Compute context-triggered piecewise hashes of files.',
      formatter_class=HelpFormatter,
    )

    parser.add_argument('paths', type=Path, nargs='+', help='Files to hash')

    parser.add_argument(
      '-r',
      '--recursive',
      action='store_true',
      help='Hash every file below directory arguments.',
    )

    parser.add_argument(
      '--format',
      type=OutputFormat,
      choices=list(OutputFormat),
      default=OutputFormat.LINES,
      help='Print one digest per line or a summary table.',
    )

    parser.add_argument(
      '-v',
      '--verbose',
      action='store_true',
      help='Log each pass of the block size search.',
    )

    return Arguments(**vars(parser.parse_args(argv)))
