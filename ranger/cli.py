from typing import Any, Dict, List
import sys
import os
import argparse
from pathlib import Path
import logging

##################################################################################################
# Main
##################################################################################################

ArgParser = argparse.ArgumentParser
SubParser = "argparse._SubParsersAction[argparse.ArgumentParser]"

class Commands:
    def __init__(self, parser: ArgParser) -> None:
        self.parsers: Dict[str, ArgParser] = {'': parser}
        self.subparsers: Dict[str, SubParser] = {}

    @staticmethod
    def dest(depth: int) -> str:
        # command, subcommand, subsubcommand, ...
        return ('sub' * depth) + 'command'

    def __call__(self, name: str) -> ArgParser:
        path = name.split('/')
        for i in range(1, len(path) + 1):
            parent = '/'.join(path[:i-1])
            p = '/'.join(path[:i])
            if parent not in self.subparsers:
                self.subparsers[parent] = self.parsers[parent].add_subparsers(dest=self.dest(i - 1))
            if p not in self.parsers:
                self.parsers[p] = self.subparsers[parent].add_parser(path[i-1])
        return self.parsers[name]


def add_value_arguments(cmd: ArgParser) -> None:
    cmd.add_argument('values', type=str, nargs='*', help='Integers or inclusive a..b runs, in insertion order.')
    cmd.add_argument('--domain', type=str, default=None, help='Value domain: u8, i8, u16, i16, u32, i32, u64, i64 or int.')


def take_value_tokens(parser: ArgParser, args: argparse.Namespace, extras: List[str]) -> None:
    # argparse reads tokens like -128..-126 or -1,0,1 as unknown options.
    # Anything left over that parses as values is appended, in order, to args.values.
    if not extras:
        return
    from ranger.tasks.values import parse_values
    if not hasattr(args, 'values'):
        parser.error(f"unrecognized arguments: {' '.join(extras)}")
    try:
        parse_values(extras)
    except ValueError:
        parser.error(f"unrecognized arguments: {' '.join(extras)}")
    args.values = list(args.values) + extras


def main(argv: List[str] | None = None) -> int:
    if sys.platform.lower() == "win32":
        os.system('color')
        os.system('chcp 65001 > nul')
        sys.stdout.reconfigure(encoding='utf-8') # type: ignore
        sys.stderr.reconfigure(encoding='utf-8') # type: ignore

    parser = argparse.ArgumentParser(description='Coalescing integer interval sets.')
    parser.add_argument('--config', type=str, default=None, help='Path to a ranger.yml file.')
    parser.add_argument('--verbose', '-v', action='store_true', help='Log merges as they happen.')
    commands = Commands(parser)

    add_value_arguments(commands('format'))

    cmd = commands('contains')
    cmd.add_argument('probe', type=int)
    add_value_arguments(cmd)

    cmd = commands('verify')
    add_value_arguments(cmd)
    cmd.add_argument('--rounds', type=int, default=None, help='Number of shuffled insertion orders to try.')
    cmd.add_argument('--seed', type=int, default=None)

    commands('config/check')

    args, extras = parser.parse_known_args(argv)
    take_value_tokens(parser, args, extras)
    if args.command is None:
        parser.print_help()
        return 0

    from ranger.config import load_config
    from ranger.domain import get_domain
    from ranger.messages import error

    config_path = Path(args.config) if args.config else None
    try:
        config = load_config(config_path)
    except ValueError as e:
        error(f"Invalid configuration: {e}")
        return 2

    logging.basicConfig(level=config.logging_level, format='%(message)s')
    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    def domain_and_values() -> tuple[Any, list[int]]:
        from ranger.tasks.values import parse_values
        domain = get_domain(args.domain) if args.domain else config.int_domain
        return domain, parse_values(args.values)

    try:
        match args.command:
            case 'format':
                from ranger.tasks.format import format_values
                domain, values = domain_and_values()
                print(format_values(values, domain))

            case 'contains':
                from ranger.tasks.contains import contains
                domain, values = domain_and_values()
                return 0 if contains(args.probe, values, domain) else 1

            case 'verify':
                from ranger.tasks.verify import verify
                domain, values = domain_and_values()
                rounds = args.rounds if args.rounds is not None else config.verify_rounds
                seed = args.seed if args.seed is not None else config.seed
                return 0 if verify(values, domain, rounds, seed) else 1

            case 'config':
                match args.subcommand:
                    case 'check':
                        from ranger.tasks.check_config import check_config
                        check_config(config_path)
                    case _:
                        raise ValueError(f"Unknown subcommand: {args.subcommand}")

            case _:
                raise ValueError(f"Unknown command: {args.command}")

    except (TypeError, ValueError) as e:
        error(str(e))
        return 2

    return 0
