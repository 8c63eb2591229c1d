#!/usr/bin/env python3
import argparse
import sys
from typing import Iterable, List, Optional

from ke2daira import __version__, config
from ke2daira.logger import logger, set_level
from ke2daira.nlp import get_reading_resolver
from ke2daira.nlp.japanese.phonetics import JapanesePhonetics
from ke2daira.transformer import NameTransformer

OUTPUT_SCRIPTS = ["katakana", "hiragana", "romaji"]


def read_names(stream) -> List[str]:
    """Read one raw name per line, skipping blank lines."""
    return [line.strip() for line in stream if line.strip()]


def run(names: Iterable[str], transformer: NameTransformer, output: str = "katakana") -> int:
    """Transform every name, print the results and return the process exit code."""
    phonetics = JapanesePhonetics()
    failed = 0

    for raw_name in names:
        result = transformer.transform(raw_name)
        if result is None:
            print(f"ke2daira: could not convert '{raw_name}' to Katakana", file=sys.stderr)
            failed += 1
            continue
        print(phonetics.render(result, output))

    if failed:
        logger.warning(f"{failed} name(s) could not be transformed")
    return 1 if failed else 0


def main(argv: Optional[List[str]] = None):
    parser = argparse.ArgumentParser(
        prog="ke2daira",
        description="Swap the first mora of a Japanese first and last name (松平 健 -> ケツダイラ マン)"
    )
    parser.add_argument(
        "names",
        nargs="*",
        help="Names to transform, e.g. '松平 健'. Read one per line from stdin when omitted"
    )
    parser.add_argument(
        "--output",
        choices=OUTPUT_SCRIPTS,
        default="katakana",
        help="Script used to print the result (default: katakana)"
    )
    parser.add_argument(
        "--user-dict",
        default=config.USER_DICT,
        help="Janome user dictionary (IPADIC CSV) with extra readings"
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log readings and morae"
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    args = parser.parse_args(argv)

    if args.verbose:
        set_level("DEBUG")

    resolver = get_reading_resolver('janome', user_dict=args.user_dict)
    transformer = NameTransformer(resolver)
    names = args.names or read_names(sys.stdin)

    sys.exit(run(names, transformer, args.output))


if __name__ == "__main__":
    main()
