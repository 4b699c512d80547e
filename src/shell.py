""" Implement the core of the shell. """
import logging
import sys

from constants import EXIT_KEYWORD, FAREWELL, TEXT_ENCODING
from exceptions import InputClosedError, InputError, ShellError, ShellExit
from lexer import tokenize
from process import SubprocessRunner
from runner import execute_command
from shell_state import ShellState

logger = logging.getLogger(__name__)


def read_command(prompt):
    """ Print the prompt and read one line. EOFError means no more input. """
    sys.stdout.write(prompt)
    sys.stdout.flush()
    try:
        line = input()
    except UnicodeDecodeError as e:
        raise InputError(f"cannot read from stdin: {e}") from e
    except OSError as e:
        raise InputClosedError(f"cannot read from stdin: {e}") from e

    # Undecodable bytes arrive as surrogate escapes when stdin allows them.
    try:
        line.encode(TEXT_ENCODING)
    except UnicodeEncodeError as e:
        raise InputError(f"cannot read from stdin: line is not valid UTF-8: {e}") from e
    return line


class Shell:
    def __init__(self, state=None, process_runner=None):
        self.state = state if state is not None else ShellState()
        self.process_runner = process_runner or SubprocessRunner()

    def run_once(self):
        """ Read, dispatch and report a single line. """
        tokens = tokenize(read_command(self.state.prompt))

        if tokens and tokens[0] == EXIT_KEYWORD:
            print(FAREWELL)
            raise ShellExit(0)

        execute_command(tokens, self.state, self.process_runner)

    def run(self):
        while True:
            try:
                self.run_once()
            except ShellExit as e:
                return e.status

            except InputClosedError as e:
                # The stream is unusable, so there is nothing left to read.
                print(e, file=sys.stderr)
                return 0

            except EOFError:
                print()
                return 0

            except ShellError as e:
                logger.debug("command failed", exc_info=True)
                print(e, file=sys.stderr)
