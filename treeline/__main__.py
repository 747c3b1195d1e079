# __main__.py

import sys
import argparse
from pathlib import Path

from .logger import Logger
from .config import StyleWhen
from .indent import IndentChars, CHARACTER_SETS
from .loader import ConfigError, load_config, config_from_env
from .output import print_tree_with
from .adapters import PathItem

def _count(minimum: int):
    """Return an argparse type accepting integers >= minimum."""
    def convert(value: str) -> int:
        try:
            number = int(value)
        except ValueError:
            raise argparse.ArgumentTypeError(f"invalid integer: '{value}'")
        if number < minimum:
            raise argparse.ArgumentTypeError(f"must be at least {minimum}, got {number}")
        return number
    return convert

def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog='treeline',
        description='Print a directory as a tree.')
    parser.add_argument('path', nargs='?', default='.',
        help='Directory to print (default: current directory)')
    parser.add_argument('-d', '--depth', type=_count(0),
        help='Maximum depth below PATH')
    parser.add_argument('-i', '--indent', type=_count(1),
        help='Columns per level')
    parser.add_argument('-c', '--characters', choices=sorted(CHARACTER_SETS),
        help='Branch character set')
    parser.add_argument('-s', '--style', choices=[w.value for w in StyleWhen],
        help='When to color the output')
    parser.add_argument('-C', '--config',
        help='Config file (default: $TREELINE_CONFIG or ~/.config/treeline.toml)')
    parser.add_argument('--enable-logging', action='store_true',
        help='Enable debug logging')
    parser.add_argument('--log-file',
        help='Log file path (default or "-": stderr)')
    return parser.parse_args(argv)

def main(argv=None) -> None:
    args = parse_args(argv)

    if args.enable_logging:
        Logger('treeline', logging_enabled=True, log_file=args.log_file)

    target = Path(args.path)
    if not target.exists():
        print(f"Error: path '{target}' does not exist", file=sys.stderr)
        sys.exit(1)

    try:
        config = load_config(args.config) if args.config else config_from_env()
    except ConfigError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    # Command line options override the config file
    if args.depth is not None:
        config.depth = args.depth
    if args.indent is not None:
        config.indent = args.indent
    if args.characters:
        config.characters = IndentChars.from_name(args.characters)
    if args.style:
        config.styled = StyleWhen(args.style)

    print_tree_with(PathItem(target), config)

if __name__ == "__main__":
    main()
