from http import HTTPStatus

__all__ = ["HTTPError", "MalformedRequest", "NotFound", "InternalError"]


class HTTPError(Exception):
    """ A failure that is answered with a canned response """

    status = HTTPStatus.INTERNAL_SERVER_ERROR


class MalformedRequest(HTTPError):
    """ Not a `GET /` request, or the path is not followed by a space """

    status = HTTPStatus.BAD_REQUEST


class NotFound(HTTPError):
    """ The requested file could not be opened """

    status = HTTPStatus.NOT_FOUND


class InternalError(HTTPError):
    status = HTTPStatus.INTERNAL_SERVER_ERROR
