""" Registry of builtin commands. """
import logging
import os

from constants import HOME_SHORTCUT, TEXT_ENCODING
from exceptions import InvalidTargetError, PathNotFoundError, TextEncodingError

BUILTINS = {}

logger = logging.getLogger(__name__)


def builtin(name):
    """Decorator to register builtins"""
    def wrapper(func):
        BUILTINS[name] = func
        return func
    return wrapper


def resolve_cd_target(args, state) -> str:
    if not args or args[0] == HOME_SHORTCUT:
        return state.home_directory

    target = args[0]
    if os.path.isabs(target):
        return target
    return os.path.join(state.current_directory, target)


@builtin("cd")
def builtin_cd(args, state):
    target = resolve_cd_target(args, state)
    label = args[0] if args else HOME_SHORTCUT

    try:
        canonical = os.path.realpath(target, strict=True)
    except (OSError, ValueError) as e:
        # ValueError: embedded null byte
        raise PathNotFoundError(f"cd: {label}: No such file or directory") from e

    if not os.path.isdir(canonical):
        raise InvalidTargetError(f"cd: '{label}' is not a directory")

    logger.debug("cd %s resolved to %s", label, canonical)
    state.change_directory(canonical)
    return None


@builtin("pwd")
def builtin_pwd(args, state):
    cwd = state.current_directory
    try:
        cwd.encode(TEXT_ENCODING)
    except UnicodeEncodeError as e:
        raise TextEncodingError("pwd: current directory is not valid UTF-8") from e
    return cwd
