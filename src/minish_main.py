""" Command-line entry point for minish. """
import argparse
import io
import logging
import sys

from constants import PROMPT
from shell import Shell
from shell_state import ShellState


def build_arg_parser():
    parser = argparse.ArgumentParser(
        prog="minish",
        description="A minimal interactive shell with cd, pwd and ls"
    )
    parser.add_argument(
        "--prompt",
        default=PROMPT,
        help=f"Prompt string shown before each line (default: {PROMPT!r})"
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Log dispatch and process details to stderr"
    )
    return parser


def main(argv=None):
    args = build_arg_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )

    # Keep reading past a line of invalid UTF-8 instead of losing the buffer.
    if isinstance(sys.stdin, io.TextIOWrapper):
        sys.stdin.reconfigure(errors="surrogateescape")

    sh = Shell(ShellState(prompt=args.prompt))
    raise SystemExit(sh.run())


if __name__ == "__main__":
    main()
