#!/usr/bin/env python3
"""
namekit CLI
===========
Command-line interface for meaningful name generation.

Usage:
    namekit generate -n 10 --seed demo
    namekit generate -n 50 --config words.xml --exclude taken.txt --json
    namekit patterns --config words.yaml
    namekit words --category verb
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional, Set

from rich.console import Console
from rich.table import Table

from namekit import __version__
from namekit.catalog import WordCatalog
from namekit.entropy import SeededRandom
from namekit.generator import NameGenerator
from namekit.settings import get_setting, setup_logging
from namekit.words import WordCategory

logger = logging.getLogger(__name__)

CATEGORY_CHOICES = [c.value.lower() for c in WordCategory]


# =============================================================================
# Utilities
# =============================================================================

class Output:
    """Handles CLI output with quiet mode support."""

    def __init__(self, quiet: bool = False, console: Console = None, err_console: Console = None):
        self.quiet = quiet
        self.console = console or Console()
        self.err_console = err_console or Console(stderr=True)

    def print(self, *args, **kwargs):
        if not self.quiet:
            self.console.print(*args, **kwargs)

    def raw(self, text: str):
        """Print unstyled text even in quiet mode (machine-readable output)."""
        self.console.print(text, markup=False, highlight=False, soft_wrap=True)

    def error(self, msg: str):
        self.err_console.print(f"Error: {msg}", markup=False, highlight=False, soft_wrap=True)

    def table(self, title: str, headers: list, rows: list):
        """Print a rich table."""
        if self.quiet:
            return
        table = Table(title=title)
        for header in headers:
            table.add_column(str(header))
        for row in rows:
            table.add_row(*(str(c) for c in row))
        self.console.print(table)


def load_catalog(path: Optional[str]) -> WordCatalog:
    """Catalog from a config file, or the built-in defaults."""
    if not path:
        return WordCatalog.with_defaults()
    return WordCatalog.from_file(path)


def read_names(path: str) -> Set[str]:
    """Read a newline-separated list of names, skipping blanks and # comments."""
    names = set()
    for line in Path(path).read_text(encoding='utf-8').splitlines():
        line = line.strip()
        if line and not line.startswith('#'):
            names.add(line)
    return names


# =============================================================================
# Commands
# =============================================================================

def cmd_generate(args, out: Output):
    """Generate unique names."""
    if args.count < 1:
        out.error("--count must be at least 1")
        return 1

    catalog = load_catalog(args.config)
    seed = args.seed if args.seed is not None else get_setting('cli.default_seed')
    generator = NameGenerator(catalog, SeededRandom(seed))

    existing = read_names(args.exclude) if args.exclude else set()
    logger.debug("Generating %d names with %d excluded", args.count, len(existing))

    names: List[str] = []
    for _ in range(args.count):
        name = generator.generate_unique_name(existing)
        names.append(name)
        existing.add(name)

    if args.json:
        out.raw(json.dumps(names, indent=2))
        return 0

    rows = [[i, name, len(name)] for i, name in enumerate(names, 1)]
    out.table(f"Generated {len(names)} names", ['#', 'Name', 'Length'], rows)
    if out.quiet:
        for name in names:
            out.raw(name)
    return 0


def cmd_patterns(args, out: Output):
    """List catalog patterns."""
    catalog = load_catalog(args.config)
    rows = [[i, p.display_name(), p.to_string()] for i, p in enumerate(catalog.patterns, 1)]
    out.table("Patterns", ['#', 'Pattern', 'Value'], rows)
    return 0


def cmd_words(args, out: Output):
    """List catalog words by category."""
    catalog = load_catalog(args.config)

    categories = list(WordCategory)
    if args.category:
        categories = [WordCategory.from_name(args.category)]

    rows = []
    for category in categories:
        words = catalog.words_for(category)
        rows.append([category.value, len(words), ', '.join(w.value for w in words)])
    out.table("Words", ['Category', 'Count', 'Words'], rows)
    out.print(f"Settings: useNumbers={catalog.use_numbers} "
              f"minLength={catalog.min_length} maxLength={catalog.max_length}")
    return 0


# =============================================================================
# Main
# =============================================================================

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='namekit',
        description='namekit - Meaningful Name Generator',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s generate -n 10 --seed demo
  %(prog)s generate -n 50 --config words.xml --exclude taken.txt --json
  %(prog)s patterns --config words.yaml
  %(prog)s words --category verb
"""
    )

    parser.add_argument('--version', '-V', action='version', version=f'%(prog)s {__version__}')
    parser.add_argument('--quiet', '-q', action='store_true', help='Suppress non-essential output')
    parser.add_argument('--verbose', '-v', action='store_true', help='Enable debug logging')

    subparsers = parser.add_subparsers(dest='command', help='Commands')

    # --- generate ---
    p = subparsers.add_parser('generate', aliases=['gen', 'g'], help='Generate unique names')
    p.add_argument('-n', '--count', type=int, default=get_setting('cli.default_count', 10),
                   help='Number of names (default: %(default)s)')
    p.add_argument('--config', '-c', help='Word catalog (.xml, .yaml)')
    p.add_argument('--seed', '-s', help='Seed string for reproducible output')
    p.add_argument('--exclude', '-x', help='File with names to avoid, one per line')
    p.add_argument('--json', '-j', action='store_true', help='Output as JSON')

    # --- patterns ---
    p = subparsers.add_parser('patterns', aliases=['p'], help='List catalog patterns')
    p.add_argument('--config', '-c', help='Word catalog (.xml, .yaml)')

    # --- words ---
    p = subparsers.add_parser('words', aliases=['w'], help='List catalog words')
    p.add_argument('--config', '-c', help='Word catalog (.xml, .yaml)')
    p.add_argument('--category', choices=CATEGORY_CHOICES, help='Only one category')

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging(logging.DEBUG if args.verbose else None)

    if not args.command:
        parser.print_help()
        return 0

    # Handle aliases
    cmd_map = {
        'gen': 'generate', 'g': 'generate',
        'p': 'patterns',
        'w': 'words',
    }
    command = cmd_map.get(args.command, args.command)

    out = Output(quiet=args.quiet)

    commands = {
        'generate': cmd_generate,
        'patterns': cmd_patterns,
        'words': cmd_words,
    }

    handler = commands[command]
    try:
        return handler(args, out)
    except KeyboardInterrupt:
        out.print("\nCancelled.")
        return 130
    except (OSError, UnicodeDecodeError) as e:
        out.error(str(e))
        return 1


if __name__ == '__main__':
    sys.exit(main())
