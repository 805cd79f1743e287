import pytest
import os
import socket
import threading
from http.server import BaseHTTPRequestHandler, HTTPServer

from minio_tests.client import CommandError, CommandResult, MCClient

def pytest_configure(config):
    """Configure test environment."""
    # Keep the harness away from any real server or toolchain settings
    os.environ.setdefault("MINIO_TESTS_ENDPOINT", "http://localhost:9000")

@pytest.fixture
def goroot(tmp_path):
    """A Go installation directory reporting go1.21.5."""
    root = tmp_path / "goroot"
    (root / "bin").mkdir(parents=True)
    (root / "VERSION").write_text("go1.21.5\ntime 2023-11-29T21:21:09Z\n")
    return root

@pytest.fixture
def gopath_env():
    """Environment where GOPATH is set and on PATH."""
    return {
        "GOPATH": "/home/tester/go",
        "PATH": "/usr/local/bin:/usr/bin:/home/tester/go/bin",
    }

class FakeS3:
    """Stand-in for the boto3 S3 client used by the health check."""
    def __init__(self, status=200, error=None):
        self.status = status
        self.error = error
        self.calls = 0

    def list_buckets(self):
        self.calls += 1
        if self.error is not None:
            raise self.error
        return {"ResponseMetadata": {"HTTPStatusCode": self.status}, "Buckets": []}

@pytest.fixture
def make_s3():
    return FakeS3

class FakeMC(MCClient):
    """MCClient that records argument vectors instead of running mc."""
    def __init__(self, fail_on=None, output="mc: <ERROR> access denied"):
        super().__init__("mc")
        self.fail_on = fail_on
        self.output = output
        self.calls = []

    def run(self, *args, operation=None):
        self.calls.append(list(args))
        cmd_args = ["--json"] + list(args)
        if args[0] == self.fail_on:
            raise CommandError(f"mc {args[0]} exited with status 1", operation=args[0],
                               args=cmd_args, returncode=1, output=self.output)
        return CommandResult(args=cmd_args, returncode=0, output="{\"status\":\"success\"}")

@pytest.fixture
def make_mc():
    return FakeMC

LIST_BUCKETS_XML = (
    b'<?xml version="1.0" encoding="UTF-8"?>'
    b'<ListAllMyBucketsResult xmlns="http://s3.amazonaws.com/doc/2006-03-01/">'
    b'<Owner><ID>minio</ID><DisplayName>minio</DisplayName></Owner><Buckets></Buckets>'
    b'</ListAllMyBucketsResult>'
)

ERROR_XML = (
    b'<?xml version="1.0" encoding="UTF-8"?>'
    b'<Error><Code>InternalError</Code><Message>We encountered an internal error.</Message></Error>'
)

class S3Handler(BaseHTTPRequestHandler):
    """Answers every GET with the status configured on the server."""
    def do_GET(self):
        self.server.requests.append((self.command, self.path))
        body = LIST_BUCKETS_XML if self.server.status == 200 else ERROR_XML
        self.send_response(self.server.status)
        self.send_header("Content-Type", "application/xml")
        self.send_header("Content-Length", str(len(body)))
        self.end_headers()
        self.wfile.write(body)

    def log_message(self, format, *args):
        pass

@pytest.fixture
def s3_server(monkeypatch):
    """Local HTTP server standing in for MinIO; set ``.status`` to change replies."""
    for var in ("HTTP_PROXY", "HTTPS_PROXY", "http_proxy", "https_proxy"):
        monkeypatch.delenv(var, raising=False)
    server = HTTPServer(("127.0.0.1", 0), S3Handler)
    server.status = 200
    server.requests = []
    server.endpoint = f"http://127.0.0.1:{server.server_address[1]}"
    thread = threading.Thread(target=server.serve_forever, daemon=True)
    thread.start()
    yield server
    server.shutdown()
    server.server_close()
    thread.join()

@pytest.fixture
def closed_endpoint():
    """Endpoint on a local port nothing listens on."""
    sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    sock.bind(("127.0.0.1", 0))
    port = sock.getsockname()[1]
    sock.close()
    return f"http://127.0.0.1:{port}"
