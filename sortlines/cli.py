#!/usr/bin/env python3
"""
cli.py - Sort the lines of a file, of piped text, or of the clipboard.

Usage:
    sortlines POLICY PATH [--lines 3:40] [--all] [--filter-blanks] [--dry-run]
    sortlines POLICY -                     # stdin -> stdout
    sortlines POLICY --clipboard [--hotkey ctrl+alt+s]
    sortlines --list

Without --lines a file has an empty selection, which is only sorted when
sortEntireFile is on (ini) or --all is given. Piped text and the clipboard
are always sorted as a whole.

Exit codes: 0 done, 1 nothing sorted (bad range, missing target, I/O error),
2 usage or configuration error.
"""

import argparse
import locale
import sys
from datetime import datetime

import pyperclip

from .config import Settings, find_ini, get_chains, get_settings, load_ini
from .document import replace_span
from .errors import RangeError, SortLinesError
from .hosts import ClipboardHost, FileHost, StreamHost
from .pipeline import POLICIES, TITLES, build_pipeline, transform_lines
from .ranges import Selection, resolve_span

try:
    import keyboard
    KEYBOARD_AVAILABLE = True
except ImportError:
    KEYBOARD_AVAILABLE = False


# ─── Core entry ───────────────────────────────────────────────────────────────

def sort_target(host, policy: str, settings: Settings, chains: dict = None):
    """
    Resolve the span on ``host`` and transform it with ``policy``.

    Returns (span, new_lines, new_document). Nothing is written; a RangeError
    raised by the resolver leaves the host untouched.
    """
    span = resolve_span(host.context(), settings.sort_entire_file)
    doc = host.document
    new_lines = transform_lines(policy, doc.slice(span), settings, chains)
    return span, new_lines, replace_span(doc, span, new_lines)


# ─── Runner ───────────────────────────────────────────────────────────────────

class SortLinesRunner:
    def __init__(self, settings: Settings, chains: dict = None, dry_run: bool = False,
                 quiet: bool = False,
                 stdout=None, stderr=None):
        self.settings  = settings
        self.chains    = chains or {}
        self.dry_run   = dry_run
        self.quiet     = quiet
        self.stdout    = stdout or sys.stdout
        self.stderr    = stderr or sys.stderr

        self.run_count   = 0
        self.error_count = 0

    # ── Logging ───────────────────────────────────────────────────────────────

    def _log(self, message: str, tag: str = "info"):
        if self.quiet and tag in ("info", "ok"):
            return
        ts = datetime.now().strftime("%H:%M:%S")
        self.stderr.write(f"[{ts}] {tag:<4} {message}\n")

    # ── Execution ─────────────────────────────────────────────────────────────

    def run(self, host, policy: str) -> int:
        self._log(f"▶ [{policy}] on {host}", "info")
        try:
            span, new_lines, new_doc = sort_target(host, policy, self.settings, self.chains)
        except RangeError as exc:
            self.error_count += 1
            self._log(f"✗ {exc} ({exc.kind})", "err")
            return 1

        before = len(span)
        after  = len(new_lines)
        where  = f"lines {span.start + 1}-{span.end + 1}"

        if self.dry_run:
            self.stdout.write(new_doc.render())
            self.stdout.flush()
            self._log(f"🔍 Dry run: {where}, {before} -> {after} line(s) sent to stdout", "warn")
        else:
            try:
                host.write(new_doc)
            except (OSError, pyperclip.PyperclipException) as exc:
                self.error_count += 1
                self._log(f"✗ Write to {host} failed: {exc}", "err")
                return 1
            self._log(f"✓ {where}, {before} -> {after} line(s) written to {host}", "ok")

        self.run_count += 1
        return 0

    # ── Hotkey ────────────────────────────────────────────────────────────────

    def watch_hotkey(self, host: ClipboardHost, policy: str, hotkey: str) -> int:
        """Sort the clipboard every time ``hotkey`` is pressed, until Ctrl+C."""
        if not KEYBOARD_AVAILABLE:
            self._log("'keyboard' not installed - hotkey disabled. pip install keyboard", "err")
            return 2

        def _on_hotkey():
            host.refresh()
            try:
                self.run(host, policy)
            except (UnicodeDecodeError, pyperclip.PyperclipException) as exc:
                self.error_count += 1
                self._log(f"Hotkey error: {exc}", "err")

        keyboard.add_hotkey(hotkey, _on_hotkey)
        self._log(f"Hotkey registered: {hotkey} -> [{policy}] (Ctrl+C to stop)", "ok")
        try:
            keyboard.wait()
        except KeyboardInterrupt:
            pass
        finally:
            keyboard.remove_hotkey(hotkey)
        self._log(f"Stopped after {self.run_count} run(s), {self.error_count} error(s)", "info")
        return 0


# ─── Argument parsing ─────────────────────────────────────────────────────────

def parse_selection(value: str) -> Selection:
    """'3:10' -> lines 3 to 10, '7' -> line 7 only (1-based, inclusive)."""
    start, _, end = value.partition(":")
    try:
        first = int(start)
        last  = int(end) if end else first
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected START[:END], got {value!r}")
    if first < 1 or last < first:
        raise argparse.ArgumentTypeError(f"bad line range {value!r}")
    return Selection(first - 1, last - 1)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sortlines",
        description="Sort, shuffle or dedupe lines of a file, piped text or the clipboard.",
    )
    parser.add_argument("policy", nargs="?",
                        help="Policy or ini chain name (see --list).")
    parser.add_argument("path", nargs="?", default=None,
                        help="File to sort in place, or '-' for stdin -> stdout.")
    parser.add_argument("--lines", "-l", type=parse_selection, default=None,
                        help="1-based inclusive line range START[:END] to sort.")
    parser.add_argument("--all", "-a", dest="sort_entire_file", action="store_true", default=None,
                        help="Sort the whole file when no --lines are given (sortEntireFile).")
    parser.add_argument("--filter-blanks", "-b", dest="filter_blank_lines",
                        action="store_true", default=None,
                        help="Drop blank lines before sorting (filterBlankLines).")
    parser.add_argument("--clipboard", "-c", action="store_true",
                        help="Sort the clipboard text instead of a file.")
    parser.add_argument("--hotkey", "-k", default=None,
                        help="With --clipboard: sort on every press of this hotkey "
                             "(e.g. ctrl+alt+s). Requires: pip install keyboard")
    parser.add_argument("--dry-run", "-n", action="store_true",
                        help="Print the result to stdout instead of writing it back.")
    parser.add_argument("--config", default=None,
                        help="Path to sortlines.ini (default: ./sortlines.ini, ~/.sortlines.ini).")
    parser.add_argument("--quiet", "-q", action="store_true",
                        help="Only report warnings and errors.")
    parser.add_argument("--list", action="store_true",
                        help="List policies and ini chains, then exit.")
    return parser


def list_policies(chains: dict, out) -> None:
    width = max(len(n) for n in list(POLICIES) + list(chains))
    for name in POLICIES:
        out.write(f"{name:<{width}}  {TITLES[name]}\n")
    for name, chain in chains.items():
        desc = chain["description"] or " -> ".join(chain["steps"])
        out.write(f"{name:<{width}}  ⛓ {desc}\n")


class _NoHost:
    """Stand-in when neither a path nor --clipboard was given."""

    document = None

    def context(self):
        return None

    def __str__(self):
        return "<nothing>"


def make_host(args, stdin=None, stdout=None):
    if args.clipboard:
        return ClipboardHost()
    if args.path == "-":
        return StreamHost(stdin, stdout)
    if args.path is None:
        return _NoHost()
    return FileHost(args.path, args.lines)


def main(argv=None, stdin=None, stdout=None, stderr=None) -> int:
    stdout = stdout or sys.stdout
    stderr = stderr or sys.stderr

    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        locale.setlocale(locale.LC_ALL, "")
    except locale.Error:
        pass

    try:
        cfg      = load_ini(find_ini(args.config))
        settings = get_settings(cfg).override(args.sort_entire_file, args.filter_blank_lines)
        chains   = get_chains(cfg)
    except SortLinesError as exc:
        stderr.write(f"sortlines: {exc}\n")
        return 2

    if args.list:
        list_policies(chains, stdout)
        return 0

    if not args.policy:
        parser.print_usage(stderr)
        stderr.write("sortlines: a policy is required (see --list)\n")
        return 2
    try:
        build_pipeline(args.policy, chains)
    except SortLinesError as exc:
        stderr.write(f"sortlines: {exc}\n")
        return 2
    if args.hotkey and not args.clipboard:
        stderr.write("sortlines: --hotkey only works with --clipboard\n")
        return 2
    if args.lines is not None and (args.clipboard or args.path == "-"):
        stderr.write("sortlines: --lines only works with a file; piped text and the clipboard are sorted whole\n")
        return 2

    host = make_host(args, stdin, stdout)
    runner = SortLinesRunner(settings, chains, dry_run=args.dry_run,
                             quiet=args.quiet, stdout=stdout, stderr=stderr)
    if args.hotkey:
        return runner.watch_hotkey(host, args.policy, args.hotkey)
    try:
        return runner.run(host, args.policy)
    except (OSError, UnicodeDecodeError, pyperclip.PyperclipException) as exc:
        runner._log(f"✗ Cannot read {host}: {exc}", "err")
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
