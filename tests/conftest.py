import socket
import threading
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer

import pytest
from httpx import ASGITransport, AsyncClient

from joker.main import create_app
from joker.models import Empty, Success


class JokeServer:
    """Local HTTP server answering every GET with a configurable response."""

    def __init__(self):
        self.status = 200
        self.body = b""
        self.headers = {"Content-Type": "application/json"}
        self.hits = 0
        server = self

        class Handler(BaseHTTPRequestHandler):
            def do_GET(self):
                server.hits += 1
                self.send_response(server.status)
                for name, value in server.headers.items():
                    self.send_header(name, value)
                self.send_header("Content-Length", str(len(server.body)))
                self.end_headers()
                self.wfile.write(server.body)

            def log_message(self, format, *args):
                pass

        self._httpd = ThreadingHTTPServer(("127.0.0.1", 0), Handler)
        self._thread = threading.Thread(target=self._httpd.serve_forever, daemon=True)

    @property
    def url(self):
        host, port = self._httpd.server_address[:2]
        return f"http://{host}:{port}/jokes/random"

    def respond(self, status=200, body="", headers=None):
        self.status = status
        self.body = body.encode("utf-8") if isinstance(body, str) else body
        if headers is not None:
            self.headers = headers

    def start(self):
        self._thread.start()

    def stop(self):
        self._httpd.shutdown()
        self._httpd.server_close()


class ScriptedJokeClient:
    """Stands in for JokeClient, replaying a list of results."""

    def __init__(self, *results):
        self.results = list(results) or [Success("Chuck Norris can divide by zero.")]
        self.calls = 0
        self._lock = threading.Lock()

    def fetch_joke(self):
        with self._lock:
            result = self.results[min(self.calls, len(self.results) - 1)]
            self.calls += 1
        return result


@pytest.fixture
def joke_server():
    server = JokeServer()
    server.start()
    yield server
    server.stop()


@pytest.fixture
def closed_port_url():
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as sock:
        sock.bind(("127.0.0.1", 0))
        port = sock.getsockname()[1]
    return f"http://127.0.0.1:{port}/jokes/random"


@pytest.fixture
def make_joke_client():
    return ScriptedJokeClient


@pytest.fixture
def scripted_client():
    return ScriptedJokeClient(Success("Chuck Norris counted to infinity. Twice."), Empty())


@pytest.fixture
def app(scripted_client):
    return create_app(client=scripted_client, fetch_on_startup=False)


@pytest.fixture
async def client(app):
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://testserver") as ac:
        yield ac
