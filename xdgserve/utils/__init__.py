import shlex

from .process import ProcessError, read_process

__all__ = [
    "ProcessError",
    "read_process",
    "join_command",
    "printable",
]


def join_command(command, *args):
    """
    Append arguments to a shell command line, quoting each one.
    Example:
        join_command("xdg-mime query filetype", "a b.txt")
        -> "xdg-mime query filetype 'a b.txt'"
    """
    return " ".join([command] + [shlex.quote(arg) for arg in args])


def printable(data, limit=200):
    """Render raw request bytes for a log line"""
    text = str(data[:limit], "iso-8859-1")
    if len(data) > limit:
        text += "..."
    return text.encode("unicode_escape").decode("ascii")
