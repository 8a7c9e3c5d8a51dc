#!/usr/bin/env python3
"""
passgen CLI
===========
Command-line interface for password and passphrase generation.

Usage:
    passgen password -n 5 -m 8 -x 14 -t secure
    passgen passphrase -n 3 -w 4 -m 4 -x 10 -d internal
    passgen types
"""

import argparse
import logging
import sys

import yaml

from passgen import __version__
from passgen.errors import PassgenError
from passgen.generators.alphabet import AlphabetGenerator
from passgen.generators.dictionary import DictionaryGenerator
from passgen.presets import get_password_generator, list_password_types, password_type_names
from passgen.settings import get_setting
from passgen.wordlists import new_passphrase_generator

logger = logging.getLogger(__name__)


# =============================================================================
# Utilities
# =============================================================================

class Output:
    """Handles CLI output with quiet mode support."""

    def __init__(self, quiet: bool = False):
        self.quiet = quiet

    def print(self, *args, **kwargs):
        if not self.quiet:
            print(*args, **kwargs)

    def result(self, value: str):
        # Generated values are printed even in quiet mode
        print(value)

    def error(self, msg: str):
        print(f"Error: {msg}", file=sys.stderr)

    def table(self, headers: list, rows: list, col_widths: list = None):
        """Print a formatted table."""
        if self.quiet:
            return

        if not col_widths:
            col_widths = [max(len(str(h)), max((len(str(r[i])) for r in rows), default=0)) + 2
                          for i, h in enumerate(headers)]

        header_line = ''.join(str(h).ljust(w) for h, w in zip(headers, col_widths))
        print(header_line)
        print('-' * len(header_line))

        for row in rows:
            print(''.join(str(c).ljust(w) for c, w in zip(row, col_widths)))


def configure_logging(verbose: bool = False):
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format='%(levelname)s %(name)s: %(message)s',
        stream=sys.stderr,
    )


# =============================================================================
# Commands
# =============================================================================

def cmd_password(args, out: Output):
    """Generate passwords."""
    gen = AlphabetGenerator(get_password_generator(args.type))
    logger.debug(f"Generating {args.num} '{args.type}' passwords of {args.min}-{args.max} characters")

    for _ in range(args.num):
        out.result(gen.generate(args.min, args.max))
    return 0


def cmd_passphrase(args, out: Output):
    """Generate passphrases."""
    gen = DictionaryGenerator(new_passphrase_generator(args.dict, args.min, args.max))
    logger.debug(
        f"Generating {args.num} passphrases of {args.words} words "
        f"from {len(gen.config)} candidates"
    )

    for _ in range(args.num):
        out.result(gen.generate(args.words))
    return 0


def cmd_types(args, out: Output):
    """List password types."""
    types = list_password_types()
    rows = []
    for name, description in types.items():
        config = get_password_generator(name)
        rows.append((name, config.alphabet_size, description))
    out.table(['Type', 'Size', 'Description'], rows)
    return 0


# =============================================================================
# Main
# =============================================================================

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='passgen',
        description='passgen - secure password and passphrase generator',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s password
  %(prog)s password -n 5 -t alphanumeric -m 20 -x 20
  %(prog)s passphrase -w 5
  %(prog)s passphrase -d /usr/share/dict/words -m 4 -x 8
  %(prog)s types
"""
    )

    parser.add_argument('--version', '-V', action='version', version=f'%(prog)s {__version__}')
    parser.add_argument('--quiet', '-q', action='store_true', help='Suppress non-essential output')
    parser.add_argument('--verbose', '-v', action='store_true', help='Enable debug logging')

    subparsers = parser.add_subparsers(dest='command', help='Commands')

    # --- password ---
    p = subparsers.add_parser('password', aliases=['pw'], help='Generate passwords')
    p.add_argument('-n', '--num', type=int, default=get_setting('password.count', 1),
                   help='Number of passwords to generate')
    p.add_argument('-m', '--min', type=int, default=get_setting('password.min_length', 8),
                   help='Minimum length of generated password')
    p.add_argument('-x', '--max', type=int, default=get_setting('password.max_length', 14),
                   help='Maximum length of generated password')
    p.add_argument('-t', '--type', choices=password_type_names(),
                   default=get_setting('password.type', 'secure'),
                   help='Type of password: (s)ecure, (a)lphanumeric, (n)umeric, alpha, upper, lower')

    # --- passphrase ---
    p = subparsers.add_parser('passphrase', aliases=['pp'], help='Generate passphrases')
    p.add_argument('-n', '--num', type=int, default=get_setting('passphrase.count', 1),
                   help='Number of passphrases to generate')
    p.add_argument('-w', '--words', type=int, default=get_setting('passphrase.words', 4),
                   help='Number of words the passphrase should contain')
    p.add_argument('-m', '--min', type=int, default=get_setting('passphrase.min_word_length', 4),
                   help='Minimum length of words to allow')
    p.add_argument('-x', '--max', type=int, default=get_setting('passphrase.max_word_length', 10),
                   help='Maximum length of words to allow')
    p.add_argument('-d', '--dict', default=get_setting('passphrase.dictionary', 'internal'),
                   help='Dictionary file to pick words from, one word per line ("internal" for the bundled list)')

    # --- types ---
    subparsers.add_parser('types', help='List password types')

    return parser


def main(argv=None):
    try:
        parser = build_parser()
    except (OSError, yaml.YAMLError) as e:
        Output().error(f"Unable to load config: {e}")
        return 1

    args = parser.parse_args(argv)

    configure_logging(args.verbose)

    if not args.command:
        parser.print_help()
        return 0

    cmd_map = {'pw': 'password', 'pp': 'passphrase'}
    command = cmd_map.get(args.command, args.command)

    out = Output(quiet=args.quiet)

    commands = {
        'password': cmd_password,
        'passphrase': cmd_passphrase,
        'types': cmd_types,
    }

    handler = commands.get(command)
    if handler:
        if getattr(args, 'num', 0) < 0:
            out.error("Count must be non-negative")
            return 1
        try:
            return handler(args, out)
        except KeyboardInterrupt:
            out.print("\nCancelled.")
            return 130
        except PassgenError as e:
            out.error(str(e))
            return 1

    parser.print_help()
    return 0


if __name__ == '__main__':
    sys.exit(main())
