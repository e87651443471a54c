import socket
import threading

import pytest

from xdgserve.http import CommandContentTypeResolver
from xdgserve.server import HTTPRequestHandler, TCPServer

# Prints a fixed type whatever path gets appended to it
TEXT_PLAIN = "printf 'text/plain\\n'; true"


@pytest.fixture
def root(tmp_path, monkeypatch):
    """Served directory with a few files, used as the working directory"""
    (tmp_path / "foo.txt").write_bytes(b"hello, world\n")
    (tmp_path / "docs").mkdir()
    (tmp_path / "docs" / "a.bin").write_bytes(bytes(range(256)) * 8)
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def serve(root):
    """Start a server on an ephemeral port, return it"""
    servers = []

    def start(resolver=None):
        if resolver is None:
            resolver = CommandContentTypeResolver(TEXT_PLAIN)
        server = TCPServer(("127.0.0.1", 0), HTTPRequestHandler, resolver)
        thread = threading.Thread(target=server.serve_forever, kwargs={"poll_interval": 0.05})
        thread.daemon = True
        thread.start()
        servers.append((server, thread))
        return server

    yield start

    for server, thread in servers:
        server.shutdown()
        thread.join(5)
        server.server_close()


def exchange(server, data, timeout=5):
    """Send raw bytes, return everything received until the server closes"""
    with socket.create_connection(server.server_address, timeout=timeout) as sock:
        sock.sendall(data)
        chunks = []
        while True:
            chunk = sock.recv(65536)
            if not chunk:
                break
            chunks.append(chunk)
    return b"".join(chunks)
