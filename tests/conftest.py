import signal
import threading

import pytest

from greeter.app import GreetingServer


def start_server(routes=None):
    if routes is None:
        server = GreetingServer(("127.0.0.1", 0))
    else:
        server = GreetingServer(("127.0.0.1", 0), routes)
    thread = threading.Thread(target=server.serve_forever, daemon=True)
    thread.start()
    return server, thread


@pytest.fixture
def server_url():
    server, thread = start_server()
    yield f"http://127.0.0.1:{server.server_address[1]}"
    server.shutdown()
    server.server_close()
    thread.join(timeout=5)


@pytest.fixture
def restore_signals():
    saved = {s: signal.getsignal(s) for s in (signal.SIGINT, signal.SIGTERM)}
    yield
    for signum, handler in saved.items():
        signal.signal(signum, handler)
