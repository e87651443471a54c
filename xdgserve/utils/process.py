import subprocess

from .logger import logger

__all__ = ["ProcessError", "read_process"]


class ProcessError(Exception):
    """The command could not be run or its output could not be captured"""

    def __init__(self, command, reason):
        super().__init__("%s: %s" % (command, reason))
        self.command = command
        self.reason = reason


def read_process(command, max_size):
    """
    Run `command` through the shell and return at most `max_size` bytes
    of its standard output.

    Output that does not fit in `max_size` bytes, or that cannot be read,
    is a failure: `ProcessError` is raised and nothing is returned.
    The exit status of the command is not checked.
    """
    try:
        proc = subprocess.Popen(command, shell=True, stdout=subprocess.PIPE)
    except OSError as e:
        raise ProcessError(command, "could not spawn: %s" % e) from e

    # Popen.__exit__ closes the pipe and waits for the child
    with proc:
        try:
            output = proc.stdout.read(max_size)
            at_eof = proc.stdout.read(1) == b""
        except OSError as e:
            raise ProcessError(command, "could not read output: %s" % e) from e

        if not at_eof:
            raise ProcessError(command, "output exceeds %d bytes" % max_size)

    logger.debug("`%s` exited with status %s", command, proc.returncode)
    return output
