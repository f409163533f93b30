import logging
import sys
from http.server import BaseHTTPRequestHandler
from urllib.parse import parse_qs, urlsplit

from greeter.routes import ROUTES

logger = logging.getLogger("greeter")
logger.setLevel(logging.INFO)
if not logger.handlers:
    stdout_handler = logging.StreamHandler(sys.stdout)
    stdout_handler.setFormatter(
        logging.Formatter("%(asctime)s %(levelname)s %(message)s")
    )
    logger.addHandler(stdout_handler)


class GreetingHandler(BaseHTTPRequestHandler):
    routes = ROUTES

    def do_GET(self):
        target = urlsplit(self.path)
        route = self.routes.resolve(target.path or "/")
        if route is None:
            self.send_response(404)
            self.send_header("Content-Length", "0")
            self.end_headers()
            logger.info({"method": "GET", "path": self.path, "response": 404})
            return

        body = route(parse_qs(target.query)).encode("utf-8")
        self.send_response(200)
        self.send_header("Content-Type", "text/plain; charset=utf-8")
        self.send_header("Content-Length", str(len(body)))
        self.end_headers()
        self.wfile.write(body)
        logger.info({"method": "GET", "path": self.path, "response": 200})

    def log_request(self, code="-", size="-"):
        pass

    def log_message(self, format, *args):
        logger.warning(format % args)
