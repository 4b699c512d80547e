""" Dispatch a tokenized command and print its result. """
import logging
import sys

from constants import TEXT_ENCODING
from exceptions import TextEncodingError
from process import SubprocessRunner
from shell_builtins import BUILTINS
from shell_externals import EXTERNALS

logger = logging.getLogger(__name__)


def write_text(text: str, stream):
    stream.write(text if text.endswith("\n") else text + "\n")


def decode_stream(name: str, label: str, data: bytes) -> str:
    try:
        return data.decode(TEXT_ENCODING)
    except UnicodeDecodeError as e:
        raise TextEncodingError(f"{name}: failed to decode {label}: {e}") from e


def relay_output(name: str, result):
    """ Forward a finished child's captured streams to our own. """
    for label, data, stream in (("stdout", result.stdout, sys.stdout),
                                ("stderr", result.stderr, sys.stderr)):
        if not data:
            continue
        try:
            write_text(decode_stream(name, label, data), stream)
        except TextEncodingError as e:
            print(e, file=sys.stderr)


def execute_command(tokens: list[str], state, process_runner=None):
    if not tokens:
        return

    name, args = tokens[0], tokens[1:]

    if name in BUILTINS:
        logger.debug("builtin %s %s", name, args)
        output = BUILTINS[name](args, state)
        if output is not None:
            write_text(output, sys.stdout)
        return

    if name in EXTERNALS:
        logger.debug("external %s %s", name, args)
        if process_runner is None:
            process_runner = SubprocessRunner()
        result = EXTERNALS[name](args, state, process_runner)
        relay_output(name, result)
        return

    logger.debug("unknown command %s", name)
    print(f"unknown command: '{name}'")
