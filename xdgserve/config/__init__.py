__all__ = [
    "HOST",
    "PORT",
    "REQUEST_QUEUE_SIZE",
    "MAX_REQUEST_SIZE",
    "MIME_BUFFER_SIZE",
    "MIME_COMMAND",
    "POLL_INTERVAL",
    "LOG_LEVEL",
]

# Listen on all interfaces
HOST = ""
PORT = 7696
REQUEST_QUEUE_SIZE = 100

# The server reads at most `MAX_REQUEST_SIZE - 1` bytes of a request.
MAX_REQUEST_SIZE = 1024

# Upper bound for the output of the content type detection command.
MIME_BUFFER_SIZE = 1024
MIME_COMMAND = "xdg-mime query filetype"

# Seconds between checks of the shutdown flag in `serve_forever`
POLL_INTERVAL = 0.5

LOG_LEVEL = "WARNING"
