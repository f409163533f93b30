import logging
import os
import signal
import sys
import threading
from http.server import ThreadingHTTPServer

from greeter.diagnostics import print_diagnostics
from greeter.handler import GreetingHandler
from greeter.routes import ROUTES

logger = logging.getLogger("greeter")

HOST = os.environ.get("HOST", "")
PORT = int(os.environ.get("PORT", 8000))


class GreetingServer(ThreadingHTTPServer):
    # server_close() joins request threads, so in-flight requests finish.
    daemon_threads = False

    def __init__(self, address, routes=ROUTES, bind_and_activate=True):
        handler = type("Handler", (GreetingHandler,), {"routes": routes})
        super().__init__(address, handler, bind_and_activate)
        self._shutdown_lock = threading.RLock()
        self._shutdown_requested = False

    def request_shutdown(self):
        """Stop serve_forever() from any thread, signal handlers included.

        shutdown() blocks until the serve loop exits, so it runs in its own
        thread. Repeated calls are no-ops.
        """
        with self._shutdown_lock:
            if self._shutdown_requested:
                return
            self._shutdown_requested = True
        logger.info("Shutting down")
        threading.Thread(target=self.shutdown, daemon=True).start()


def install_signal_handlers(server):
    def handle(signum, frame):
        server.request_shutdown()

    for signum in (signal.SIGINT, signal.SIGTERM):
        signal.signal(signum, handle)


def main(port=None):
    port = PORT if port is None else port
    # serve_forever() returns at once if a signal already requested shutdown.
    server = GreetingServer((HOST, port), bind_and_activate=False)
    install_signal_handlers(server)
    print_diagnostics()

    try:
        server.server_bind()
        server.server_activate()
    except OSError as e:
        server.server_close()
        sys.exit(f"Could not listen on port {port}: {e}")

    logger.info(f"Server started on port {server.server_address[1]}")
    with server:
        server.serve_forever()
    logger.info("Server stopped")


if __name__ == "__main__":
    main()
