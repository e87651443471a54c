import logging

import pytest

from xdgserve.http import CANNED_RESPONSES, InternalError, MalformedRequest, Response, parse_request_path


@pytest.mark.parametrize(
    "data, path",
    [
        (b"GET /foo.txt HTTP/1.1\r\n\r\n", "foo.txt"),
        (b"GET /docs/a.bin HTTP/1.0\r\n", "docs/a.bin"),
        (b"GET /a%20b ", "a%20b"),
        (b"GET / HTTP/1.1\r\n", ""),
        (b"GET //etc/passwd x", "/etc/passwd"),
    ],
)
def test_parse_request_path(data, path):
    assert parse_request_path(data) == path


@pytest.mark.parametrize(
    "data",
    [
        b"",
        b"POST /foo.txt HTTP/1.1\r\n",
        b"get /foo.txt HTTP/1.1\r\n",
        b"GET foo.txt HTTP/1.1\r\n",
        b"GET /foo.txt",
        b"GET /foo.txt\r\n\r\n",
    ],
)
def test_malformed_request_line(data):
    with pytest.raises(MalformedRequest):
        parse_request_path(data)


def test_canned_responses():
    assert [bytes(v) for v in CANNED_RESPONSES.values()] == [
        b"HTTP/1.1 400 Bad Request\r\nContent-Type: text/plain\r\n\r\nBad Request",
        b"HTTP/1.1 404 Not Found\r\nContent-Type: text/plain\r\n\r\nNot Found",
        b"HTTP/1.1 500 Internal Server Error\r\nContent-Type: text/plain\r\n\r\nInternal Server Error",
    ]


def test_assemble_header_and_body(tmp_path):
    path = tmp_path / "page.html"
    path.write_bytes(b"<p>hi</p>")
    response = Response("text/html", 9)
    with open(path, "rb") as f:
        buffer = response.assemble(f)

    assert bytes(buffer) == b"HTTP/1.1 200 OK\r\nContent-Type: text/html\r\n\r\n<p>hi</p>"
    assert len(buffer) == len(response)


def test_short_read_is_logged_not_fixed(tmp_path, caplog):
    path = tmp_path / "shrunk"
    path.write_bytes(b"abc")
    response = Response("text/plain", 5)
    with caplog.at_level(logging.WARNING, logger="xdgserve"):
        with open(path, "rb") as f:
            buffer = response.assemble(f)

    assert bytes(buffer).endswith(b"\r\n\r\nabc\x00\x00")
    assert "Short read" in caplog.text


class BrokenFile:
    name = "broken"

    def readinto(self, buffer):
        raise OSError(5, "Input/output error")


class BrokenSocket:
    def sendall(self, data):
        raise BrokenPipeError(32, "Broken pipe")


def test_failed_read_is_an_internal_error():
    response = Response("text/plain", 4)
    with pytest.raises(InternalError):
        response.assemble(BrokenFile())
    assert response.buffer is None


def test_failed_send_is_an_internal_error(tmp_path):
    path = tmp_path / "f"
    path.write_bytes(b"data")
    response = Response("text/plain", 4)
    with open(path, "rb") as f:
        response.assemble(f)
    with pytest.raises(InternalError):
        response.send(BrokenSocket())
