from .HTTPRequestHandler import HTTPRequestHandler
from .TCPServer import TCPServer

__all__ = ["HTTPRequestHandler", "TCPServer"]
