#!/usr/bin/env python3
"""
Lint Markdown files with the mdtidy rules.

Runs as a dry run by default and only reports the files that would change.
Use --apply to write the fixes.

Usage:
  mdtidy docs --rule unordered-list-style
  mdtidy docs --config mdtidy.json --apply --backup-dir .mdtidy_backups
  mdtidy --list-rules [--json]

Exit codes:
  0: Nothing to change, or changes applied
  1: Files would change (dry run), or rendered HTML changed with --check-render
  2: Usage, settings or processing error
"""
from __future__ import annotations

import argparse
import json
import os
import shutil
import sys
from datetime import datetime, timezone
from pathlib import Path

from .engine import LintSettings, SettingsError, lint_text, load_settings
from .render import render_changed
from .rules import RULES


def iter_markdown_files(paths):
    for root in paths:
        if os.path.isfile(root):
            yield Path(root)
            continue
        for dirpath, dirnames, filenames in os.walk(root):
            dirnames.sort()
            for f in sorted(filenames):
                if f.endswith('.md'):
                    yield Path(os.path.join(dirpath, f))


def make_backup(path: Path, backup_dir: Path) -> Path:
    rel = path.relative_to(path.anchor) if path.is_absolute() else path
    rel = Path(*[part for part in rel.parts if part not in ('.', '..')])
    dst = backup_dir / rel
    dst.parent.mkdir(parents=True, exist_ok=True)
    ts = datetime.now(timezone.utc).strftime("%Y%m%dT%H%M%SZ")
    backup_path = dst.with_suffix(dst.suffix + f".bak.{ts}")
    shutil.copy2(path, backup_path)
    return backup_path


def process_file(path: Path, settings: LintSettings, apply: bool = False, backup_dir=None, check_render: bool = False):
    """Lint one file. Returns ``(changed, render_changed)``."""
    # newline='' keeps \r\n line endings as they are
    with open(path, 'r', encoding='utf-8', newline='') as fh:
        text = fh.read()
    new_text = lint_text(text, settings)
    if new_text == text:
        return False, False
    flagged = check_render and render_changed(text, new_text)
    if apply:
        if backup_dir is not None:
            backup_path = make_backup(path, Path(backup_dir))
            print(f"Patched {path} (backup: {backup_path})")
        else:
            print('Patched', path)
        with open(path, 'w', encoding='utf-8', newline='') as fh:
            fh.write(new_text)
    else:
        print('Would patch', path)
    if flagged:
        print(f"WARNING: rendered HTML changed for {path}")
    return True, flagged


def list_rules(as_json: bool = False):
    if as_json:
        print(json.dumps([rule.to_dict() for rule in RULES.values()], indent=2))
        return
    for alias, rule in RULES.items():
        print(f"{alias} ({rule.type.value}): {rule.description}")
        for option in rule.options:
            default = getattr(option.default, 'value', option.default)
            print(f"  {option.key} = {default!r}  {option.description}")


def build_arg_parser():
    parser = argparse.ArgumentParser(description='Normalize Markdown style in files and directories')
    parser.add_argument('paths', nargs='*', help='Markdown files or directories to lint')
    parser.add_argument('--config', help='JSON settings file with per-rule options')
    parser.add_argument('--rule', action='append', default=[], help='Enable a rule with default options (repeatable)')
    parser.add_argument('--apply', action='store_true', help='Write changes (default is a dry run)')
    parser.add_argument('--backup-dir', help='Copy each file here before it is changed by --apply')
    parser.add_argument('--check-render', action='store_true', help='Warn when a fix changes the rendered HTML')
    parser.add_argument('--list-rules', action='store_true', help='List available rules and exit')
    parser.add_argument('--json', action='store_true', help='With --list-rules, print rules, options and examples as JSON')
    return parser


def main(argv=None):
    parser = build_arg_parser()
    args = parser.parse_args(argv)

    if args.list_rules:
        list_rules(as_json=args.json)
        return 0
    if not args.paths:
        parser.print_usage()
        print('ERROR: no paths given')
        return 2

    try:
        settings = load_settings(args.config) if args.config else LintSettings()
        for alias in args.rule:
            settings.enable(alias)
        enabled = settings.enabled_rules()
    except (SettingsError, OSError) as e:
        print(f"ERROR: {e}")
        return 2
    if not enabled:
        print('ERROR: no rules enabled; use --rule or --config')
        return 2

    changed = []
    flagged = []
    errors = 0
    for path in iter_markdown_files(args.paths):
        try:
            was_changed, was_flagged = process_file(
                path, settings, apply=args.apply, backup_dir=args.backup_dir, check_render=args.check_render)
        except Exception as e:
            print(f"Error processing {path}: {e}")
            errors += 1
            continue
        if was_changed:
            changed.append(path)
        if was_flagged:
            flagged.append(path)

    if not changed:
        print('No changes')
    if errors:
        return 2
    if flagged or (changed and not args.apply):
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())
