import socket
import selectors
import threading

from xdgserve.config import POLL_INTERVAL, REQUEST_QUEUE_SIZE
from xdgserve.utils.logger import logger

if hasattr(selectors, 'PollSelector'):
    _ServerSelector = selectors.PollSelector
else:
    _ServerSelector = selectors.SelectSelector


class TCPServer:
    """
    Accept connections one at a time and handle each one completely
    before accepting the next.
    """

    address_family = socket.AF_INET
    socket_type = socket.SOCK_STREAM

    request_queue_size = REQUEST_QUEUE_SIZE

    def __init__(self, server_address, RequestHandlerClass, content_type_resolver):
        self.server_address = server_address
        self.RequestHandlerClass = RequestHandlerClass
        self.content_type_resolver = content_type_resolver
        self.__is_shut_down = threading.Event()
        self.__shutdown_request = False
        self.socket = socket.socket(self.address_family, self.socket_type)
        try:
            # allow_reuse_address
            self.socket.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
            self.socket.bind(self.server_address)
            self.server_address = self.socket.getsockname()
            self.socket.listen(self.request_queue_size)
        except OSError:
            self.socket.close()
            raise

    def serve_forever(self, poll_interval=POLL_INTERVAL):
        self.__is_shut_down.clear()
        try:
            with _ServerSelector() as selector:
                selector.register(self.socket, selectors.EVENT_READ)

                while not self.__shutdown_request:
                    ready = selector.select(poll_interval)
                    if self.__shutdown_request:
                        break
                    if ready:
                        self._handle_request()
        finally:
            self.__shutdown_request = False
            self.__is_shut_down.set()

    def get_request(self):
        return self.socket.accept()

    def _handle_request(self):
        try:
            request, client_address = self.get_request()
        except OSError as e:
            logger.error("Failed to accept a client request: %s", e)
            return

        try:
            self.RequestHandlerClass(request, client_address, self)
        except Exception:
            logger.exception("Error while handling %s", client_address)
        finally:
            request.close()

    def shutdown(self):
        """ Stop the serve_forever loop and wait for it to finish """
        self.__shutdown_request = True
        self.__is_shut_down.wait()

    def server_close(self):
        self.socket.close()

    def __enter__(self):
        return self

    def __exit__(self, *args):
        self.server_close()
