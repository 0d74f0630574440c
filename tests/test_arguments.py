from __future__ import annotations

import argparse
import sys
from pathlib import Path

import pytest

from ctph.arguments import Arguments, HelpFormatter, OutputFormat


def test_help_formatter_usage_lists_flags_separately() -> None:
  parser = argparse.ArgumentParser(prog='ctph', formatter_class=HelpFormatter)
  parser.add_argument('path')
  parser.add_argument('--flag', action='store_true')
  parser.add_argument('--opt', type=int)
  parser.add_argument('--needed', required=True, metavar='VALUE')

  usage = parser.format_usage()

  assert usage.startswith('usage: ctph path')
  assert usage.endswith('\n')
  assert '[--flag]' in usage
  assert '[--opt OPT]' in usage
  assert ' --needed VALUE' in usage
  assert '[-h]' not in usage


def test_help_formatter_formats_action_help_with_defaults() -> None:
  parser = argparse.ArgumentParser(prog='ctph', formatter_class=HelpFormatter)
  parser.add_argument('-v', '--verbose', action='store_true', help='Verbose output.')
  parser.add_argument('--count', default=3, help='Number of runs.')
  parser.add_argument('path', help='Input file.')

  formatter = parser._get_formatter()
  actions = {action.dest: action for action in parser._actions}

  assert formatter._format_action(actions['verbose']) == '  -v Verbose output. (default: False)\n'
  assert formatter._format_action(actions['count']) == (
    '  --count COUNT Number of runs. (default: 3)\n'
  )
  assert formatter._format_action(actions['path']) == '  path Input file.\n'
  assert formatter._format_action(actions['help']) == (
    '  -h --help Show this help message and exit\n'
  )


def test_arguments_from_args_parses_all_fields(
  tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
  first = tmp_path / 'one.bin'
  second = tmp_path / 'two'

  monkeypatch.setattr(
    sys,
    'argv',
    ['ctph', str(first), str(second), '--recursive', '--format', 'table', '--verbose'],
  )

  args = Arguments.from_args()

  assert args.paths == [first, second]
  assert args.recursive is True
  assert args.format is OutputFormat.TABLE
  assert args.verbose is True


def test_arguments_from_args_uses_defaults(tmp_path: Path) -> None:
  args = Arguments.from_args([str(tmp_path / 'file.bin')])

  assert args.paths == [tmp_path / 'file.bin']
  assert args.recursive is False
  assert args.format is OutputFormat.LINES
  assert args.verbose is False


def test_arguments_require_a_path(capsys: pytest.CaptureFixture[str]) -> None:
  with pytest.raises(SystemExit):
    Arguments.from_args([])

  assert 'usage: ctph' in capsys.readouterr().err


def test_arguments_reject_unknown_format() -> None:
  with pytest.raises(SystemExit):
    Arguments.from_args(['file.bin', '--format', 'json'])
