import argparse
import sys

from .lox import Lox

DEFAULT_RECURSION_LIMIT = 10000


def build_parser():
    parser = argparse.ArgumentParser(
        prog="treelox", description="Run Lox scripts")
    parser.add_argument("filename", nargs="?")
    parser.add_argument(
        "--debug", action="store_true",
        help="print the tokens and syntax tree to stderr before running")
    parser.add_argument(
        "--recursion-limit", type=int, default=DEFAULT_RECURSION_LIMIT,
        metavar="N", help="host recursion limit (default: %(default)s)")
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)
    sys.setrecursionlimit(args.recursion_limit)
    return Lox(debug=args.debug).main(args.filename)


if __name__ == "__main__":
    sys.exit(main())
