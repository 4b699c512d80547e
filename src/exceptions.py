""" Exceptions raised while reading and dispatching commands. """


class ShellExit(Exception):
    """ Raised to leave the read-eval-print loop. """
    def __init__(self, status=0):
        super().__init__(status)
        self.status = status


class ShellError(Exception):
    """ Base class for errors reported at the prompt. """


class InputError(ShellError):
    """ A line could not be read from standard input. """


class InputClosedError(InputError):
    """ Standard input can no longer be read at all. """


class PathResolutionError(ShellError):
    """ A cd target could not be resolved. """


class PathNotFoundError(PathResolutionError):
    pass


class InvalidTargetError(PathResolutionError):
    pass


class TextEncodingError(ShellError):
    """ A path or process output is not valid text. """


class SpawnError(ShellError):
    """ An external executable could not be started. """


class CollectError(ShellError):
    """ The output of a finished child could not be retrieved. """
