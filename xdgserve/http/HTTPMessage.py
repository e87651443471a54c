import os
from http import HTTPStatus

from .errors import InternalError, MalformedRequest
from .grammar import UNBOUNDED, match
from xdgserve.utils.logger import logger

__all__ = ["parse_request_path", "Response", "CANNED_RESPONSES"]

GET_PREFIX = b"GET /"
SPACE = b" "


def parse_request_path(data):
    """
    Extract the path from a `GET /<path> ...` request line.
    Everything after the space that ends the path is ignored.
    Example:
        b"GET /docs/a.txt HTTP/1.1\\r\\n\\r\\n" -> "docs/a.txt"
    """
    start = match(GET_PREFIX, 1, 0, False, data)
    if start is None:
        raise MalformedRequest("not a GET request")

    # `GET / ` has an empty path, which the non-space scan below rejects
    if match(SPACE, 1, 0, False, data, start) is not None:
        return ""

    end = match(SPACE, 1, UNBOUNDED, True, data, start)
    if end is None or match(SPACE, 1, 0, False, data, end) is None:
        raise MalformedRequest("invalid path value")

    return os.fsdecode(data[start:end])


class Response:
    """ A `200 OK` response holding the whole file in one buffer """

    HTTP_VERSION = "HTTP/1.1"

    def __init__(self, content_type, content_length, status=HTTPStatus.OK):
        self.status = HTTPStatus(status)
        self.msg = self.status.phrase
        self.content_type = content_type
        self.content_length = content_length
        self.buffer = None

    def header_encode(self, header):
        return header.encode("latin-1", "strict")

    def header(self):
        return self.header_encode(
            "%s %d %s\r\nContent-Type: %s\r\n\r\n"
            % (Response.HTTP_VERSION, self.status, self.msg, self.content_type)
        )

    def __len__(self):
        return len(self.header()) + self.content_length

    def assemble(self, fp):
        """
        Allocate the response buffer and fill it with the header followed
        by `content_length` bytes read from `fp`.
        """
        header = self.header()
        try:
            self.buffer = bytearray(len(header) + self.content_length)
        except MemoryError:
            raise InternalError("insufficient memory") from None

        self.buffer[: len(header)] = header
        with memoryview(self.buffer) as view:
            try:
                nbytes = fp.readinto(view[len(header):])
            except OSError as e:
                self.release()
                raise InternalError("could not read from %r: %s" % (fp.name, e)) from e

        # The tail stays zero-filled if the file shrank after fstat.
        if nbytes is not None and nbytes < self.content_length:
            logger.warning(
                "Short read from %r: %d of %d bytes", fp.name, nbytes, self.content_length
            )
        return self.buffer

    def send(self, sock):
        try:
            sock.sendall(self.buffer)
        except OSError as e:
            raise InternalError("could not send response: %s" % e) from e

    def release(self):
        self.buffer = None

    @classmethod
    def canned(cls, status):
        """ Fixed `text/plain` response whose body is the status phrase """
        status = HTTPStatus(status)
        response = cls("text/plain", len(status.phrase), status)
        return response.header() + status.phrase.encode("latin-1")


CANNED_RESPONSES = {
    status: Response.canned(status)
    for status in (
        HTTPStatus.BAD_REQUEST,
        HTTPStatus.NOT_FOUND,
        HTTPStatus.INTERNAL_SERVER_ERROR,
    )
}
