""" Spawn external executables and capture their output. """
import logging
import subprocess

from exceptions import CollectError, SpawnError

logger = logging.getLogger(__name__)


class ProcessResult:
    def __init__(self, stdout=b"", stderr=b"", returncode=0):
        self.stdout = stdout
        self.stderr = stderr
        self.returncode = returncode


class SubprocessRunner:
    """
    Run one child at a time and wait for it.

    stdout and stderr are piped and fully drained before run() returns;
    stdin is inherited from the shell.
    """
    def run(self, argv, cwd=None) -> ProcessResult:
        name = argv[0]
        logger.debug("spawning %s in %s", argv, cwd)
        try:
            proc = subprocess.Popen(
                argv,
                cwd=cwd,
                stdout=subprocess.PIPE,
                stderr=subprocess.PIPE,
            )
        except (OSError, ValueError) as e:
            raise SpawnError(f"{name}: failed to call {name}: {e}") from e

        try:
            out, err = proc.communicate()
        except OSError as e:
            proc.kill()
            proc.wait()
            raise CollectError(f"{name}: failed to get the output of {name}: {e}") from e

        logger.debug("%s exited with status %d", name, proc.returncode)
        return ProcessResult(out, err, proc.returncode)
