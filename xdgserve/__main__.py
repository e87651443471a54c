import argparse
import os
import sys
import threading
import time

from xdgserve import config
from xdgserve.http import CommandContentTypeResolver, MimetypesContentTypeResolver
from xdgserve.server import HTTPRequestHandler, TCPServer
from xdgserve.utils.logger import logger, set_level


class ArgumentParser(argparse.ArgumentParser):
    """Exit with status 1 on bad arguments"""

    def error(self, message):
        self.print_usage(sys.stderr)
        self.exit(1, "%s: error: %s\n" % (self.prog, message))


def build_parser():
    parser = ArgumentParser(prog="xdgserve", description="Serve the files of DIRECTORY over HTTP.")
    parser.add_argument("directory", metavar="DIRECTORY", help="directory to serve")
    parser.add_argument("--host", default=config.HOST, help="address to bind (default: all interfaces)")
    parser.add_argument("--port", type=int, default=config.PORT)
    parser.add_argument(
        "--mime-command",
        default=config.MIME_COMMAND,
        help="command printing the MIME type of the path appended to it",
    )
    parser.add_argument(
        "--builtin-mime",
        action="store_true",
        help="guess types from file extensions instead of running a command",
    )
    parser.add_argument("--log-level", default=config.LOG_LEVEL)
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)

    try:
        set_level(args.log_level)
    except ValueError as e:
        logger.error("%s", e)
        return 1

    try:
        os.chdir(args.directory)
    except OSError as e:
        logger.error("Could not open directory '%s': %s", args.directory, e)
        return 1

    if args.builtin_mime:
        resolver = MimetypesContentTypeResolver()
    else:
        resolver = CommandContentTypeResolver(args.mime_command)

    try:
        http_server = TCPServer((args.host, args.port), HTTPRequestHandler, resolver)
    except OSError as e:
        logger.error("Could not listen on %s:%d: %s", args.host or "*", args.port, e)
        return 1

    with http_server:
        try:
            http_thread = threading.Thread(target=http_server.serve_forever)
            http_thread.daemon = True
            http_thread.start()
            print("Serving %s on port %d..." % (os.getcwd(), http_server.server_address[1]))

            while True:
                time.sleep(1)

        except KeyboardInterrupt:
            http_server.shutdown()
            print("Server close.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
