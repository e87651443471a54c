import mimetypes
import os

from xdgserve import utils
from xdgserve.config import MIME_BUFFER_SIZE, MIME_COMMAND
from xdgserve.utils import ProcessError

__all__ = [
    "ContentTypeError",
    "ContentTypeResolver",
    "CommandContentTypeResolver",
    "MimetypesContentTypeResolver",
]


class ContentTypeError(Exception):
    """ No content type could be determined for a path """


class ContentTypeResolver:
    """ Map a file path to a MIME type string """

    def resolve(self, path):
        raise NotImplementedError


class CommandContentTypeResolver(ContentTypeResolver):
    """
    Ask an external tool for the type, e.g. `xdg-mime query filetype PATH`.
    The tool must print the MIME type followed by a newline.
    """

    def __init__(self, command=MIME_COMMAND, max_size=MIME_BUFFER_SIZE):
        self.command = command
        self.max_size = max_size

    def resolve(self, path):
        # a leading "-" must not be taken for an option of the command
        command = utils.join_command(self.command, os.path.join(os.curdir, path))
        try:
            output = utils.read_process(command, self.max_size)
        except ProcessError as e:
            raise ContentTypeError(str(e)) from e

        if output.endswith(b"\n"):
            output = output[:-1]
        if not output:
            raise ContentTypeError("`%s` printed no content type" % command)
        return str(output, "iso-8859-1")


class MimetypesContentTypeResolver(ContentTypeResolver):
    """ In-process lookup by file extension """

    def __init__(self, default="application/octet-stream"):
        self.default = default

    def resolve(self, path):
        ctype, _ = mimetypes.guess_type(path)
        return ctype or self.default
