import os
import socket
from http import HTTPStatus

from xdgserve.config import MAX_REQUEST_SIZE
from xdgserve.http import (
    CANNED_RESPONSES,
    ContentTypeError,
    HTTPError,
    InternalError,
    NotFound,
    Response,
    parse_request_path,
)
from xdgserve.utils import printable
from xdgserve.utils.logger import logger


class HTTPRequestHandler:
    """
    Serve one `GET /<path>` request from the working directory.

    Stages: read the request, extract the path, open the file, stat it,
    resolve its content type, then assemble and send the response.
    A failing stage is answered with the canned 400, 404 or 500 response.
    """

    def __init__(self, request, client_address, server):
        self.request = request
        self.client_address = client_address
        self.server = server
        self.content_type_resolver = server.content_type_resolver

        self.setup()
        try:
            self.handle()
        finally:
            self.finish()

    def setup(self):
        self.path = None
        self.file = None
        self.response = None

    def handle(self):
        try:
            data = self.request.recv(MAX_REQUEST_SIZE - 1)
        except OSError as e:
            logger.warning("Failed to retrieve client request: %s", e)
            return

        logger.debug("Received client request: %s", printable(data))
        try:
            self.handle_one_request(data)
        except HTTPError as e:
            logger.warning("%s %d: %s", self.client_address, e.status, e)
            self.send_error(e.status)
        except Exception:
            logger.exception("%s failed while serving %r", self.client_address, self.path)
            self.send_error(HTTPStatus.INTERNAL_SERVER_ERROR)

    def handle_one_request(self, data):
        self.path = parse_request_path(data)
        self.file = self.open_file(self.path)

        try:
            fs = os.fstat(self.file.fileno())
        except OSError as e:
            raise InternalError("could not retrieve file information: %s" % e) from e

        try:
            ctype = self.content_type_resolver.resolve(self.path)
        except ContentTypeError as e:
            raise InternalError("could not resolve content type: %s" % e) from e

        self.response = Response(ctype, fs.st_size)
        try:
            self.response.assemble(self.file)
            self.response.send(self.request)
        finally:
            self.response.release()
        logger.info('"GET /%s" %d %d', self.path, HTTPStatus.OK, fs.st_size)

    def open_file(self, path):
        """
        Open `path` relative to the working directory.
        Directories, including the empty path, are not served.
        """
        try:
            return open(path or os.curdir, "rb")
        except (OSError, ValueError) as e:
            raise NotFound("could not open %r: %s" % (path, e)) from e

    def send_error(self, status):
        try:
            self.request.sendall(CANNED_RESPONSES[HTTPStatus(status)])
        except OSError as e:
            logger.warning("Could not send %d response: %s", status, e)

    def finish(self):
        if self.file is not None:
            self.file.close()
            self.file = None
        try:
            self.request.shutdown(socket.SHUT_WR)
        except OSError:
            # the peer may already be gone
            pass
