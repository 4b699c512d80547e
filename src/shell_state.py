""" Current state of the shell. """
import logging
import os

from constants import PROMPT
from exceptions import InvalidTargetError

logger = logging.getLogger(__name__)


def resolve_home() -> str:
    return os.path.realpath(os.path.expanduser("~"))


class ShellState:
    def __init__(self, home_directory=None, prompt=PROMPT):
        if home_directory is None:
            home_directory = resolve_home()
        self._home_directory = home_directory
        self.prompt = prompt

        if os.path.isdir(home_directory):
            self._current_directory = home_directory
        else:
            logger.warning("home directory %s does not exist, starting in %s",
                           home_directory, os.getcwd())
            self._current_directory = os.getcwd()

    @property
    def home_directory(self) -> str:
        return self._home_directory

    @property
    def current_directory(self) -> str:
        return self._current_directory

    def change_directory(self, path: str):
        """ Replace the current directory; path must be an existing directory. """
        if not os.path.isdir(path):
            raise InvalidTargetError(f"cd: '{path}' is not a directory")
        logger.debug("current directory %s -> %s", self._current_directory, path)
        self._current_directory = path
