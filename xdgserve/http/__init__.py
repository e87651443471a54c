from .HTTPMessage import CANNED_RESPONSES, Response, parse_request_path
from .errors import HTTPError, InternalError, MalformedRequest, NotFound
from .mimetype import (
    CommandContentTypeResolver,
    ContentTypeError,
    ContentTypeResolver,
    MimetypesContentTypeResolver,
)

__all__ = [
    'CANNED_RESPONSES',
    'Response',
    'parse_request_path',
    'HTTPError',
    'InternalError',
    'MalformedRequest',
    'NotFound',
    'ContentTypeError',
    'ContentTypeResolver',
    'CommandContentTypeResolver',
    'MimetypesContentTypeResolver',
]
