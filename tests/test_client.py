import json
import socket
import threading
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer
from urllib.parse import parse_qs, urlsplit

import pytest

from dockernuke.client import (
    DEFAULT_HOST,
    Container,
    DockerClient,
    DockerError,
    ImageSummary,
    NetworkSummary,
    Volume,
)


class _Handler(BaseHTTPRequestHandler):
    def _handle(self):
        self.server.requests.append((self.command, self.path))
        key = (self.command, urlsplit(self.path).path)
        status, payload = self.server.routes.get(key, (404, {"message": "no such route"}))
        body = b"" if payload is None else json.dumps(payload).encode()
        self.send_response(status)
        self.send_header("Content-Type", "application/json")
        self.send_header("Content-Length", str(len(body)))
        self.end_headers()
        if body:
            self.wfile.write(body)

    do_GET = _handle
    do_POST = _handle
    do_DELETE = _handle

    def log_message(self, format, *args):
        pass


@pytest.fixture
def daemon():
    server = ThreadingHTTPServer(("127.0.0.1", 0), _Handler)
    server.routes = {}
    server.requests = []
    thread = threading.Thread(target=server.serve_forever, daemon=True)
    thread.start()
    try:
        yield server
    finally:
        server.shutdown()
        server.server_close()


def _client(server, **options):
    host, port = server.server_address[:2]
    return DockerClient(f"tcp://{host}:{port}", **options)


def _query(server):
    return parse_qs(urlsplit(server.requests[-1][1]).query)


def test_container_list_maps_fields_and_asks_for_all(daemon):
    daemon.routes[("GET", "/containers/json")] = (
        200,
        [{"Id": "c1", "Names": ["/web"], "Image": "nginx", "State": "exited"}],
    )
    result = _client(daemon).container_list(all=True)
    assert result == [Container(id="c1", names=("/web",), image="nginx", state="exited")]
    assert _query(daemon) == {"all": ["1"]}


def test_container_list_without_all_sends_no_query(daemon):
    daemon.routes[("GET", "/containers/json")] = (200, [{"Id": "c2"}])
    result = _client(daemon).container_list()
    assert [container.id for container in result] == ["c2"]
    assert "all" not in _query(daemon)


def test_container_stop_accepts_not_modified(daemon):
    route = ("POST", "/containers/abc/stop")
    daemon.routes[route] = (304, None)
    assert _client(daemon).container_stop("abc") is None
    assert [request[0] for request in daemon.requests] == [route[0]]
    assert urlsplit(daemon.requests[0][1]).path == route[1]


def test_container_remove_uses_route_and_force(daemon):
    route = ("DELETE", "/containers/abc")
    daemon.routes[route] = (204, None)
    _client(daemon).container_remove("abc", force=True)
    assert (daemon.requests[0][0], urlsplit(daemon.requests[0][1]).path) == route
    assert _query(daemon) == {"force": ["1"]}


def test_image_list_treats_null_tags_as_dangling(daemon):
    daemon.routes[("GET", "/images/json")] = (
        200,
        [{"Id": "img1", "RepoTags": ["app:latest"]}, {"Id": "img2", "RepoTags": None}],
    )
    images = _client(daemon).image_list(all=True)
    assert images[0] == ImageSummary(id="img1", repo_tags=("app:latest",))
    assert images[1].id == "img2"
    assert not images[1].repo_tags


def test_image_remove_returns_delete_report(daemon):
    report = [{"Untagged": "app:latest"}, {"Deleted": "img1"}]
    daemon.routes[("DELETE", "/images/img1")] = (200, report)
    assert _client(daemon).image_remove("img1", force=True) == report


def test_network_list_maps_fields(daemon):
    daemon.routes[("GET", "/networks")] = (
        200,
        [{"Id": "n1", "Name": "bridge"}, {"Id": "n2", "Name": "backend"}],
    )
    assert _client(daemon).network_list() == [
        NetworkSummary(id="n1", name="bridge"),
        NetworkSummary(id="n2", name="backend"),
    ]


def test_network_remove_hits_network_route(daemon):
    route = ("DELETE", "/networks/n2")
    daemon.routes[route] = (204, None)
    _client(daemon).network_remove("n2")
    assert (daemon.requests[0][0], urlsplit(daemon.requests[0][1]).path) == route


def test_volume_list_maps_names(daemon):
    daemon.routes[("GET", "/volumes")] = (
        200,
        {"Volumes": [{"Name": "data", "Driver": "local"}], "Warnings": None},
    )
    assert _client(daemon).volume_list() == [Volume(name="data", driver="local")]


def test_volume_list_with_null_volumes_is_empty(daemon):
    daemon.routes[("GET", "/volumes")] = (200, {"Volumes": None})
    assert len(_client(daemon).volume_list()) == 0


def test_volume_remove_without_force_sends_no_query(daemon):
    daemon.routes[("DELETE", "/volumes/data")] = (204, None)
    _client(daemon).volume_remove("data")
    assert "force" not in _query(daemon)


def test_error_status_raises_with_daemon_message(daemon):
    daemon.routes[("DELETE", "/containers/busy")] = (409, {"message": "container is running"})
    with pytest.raises(DockerError) as info:
        _client(daemon).container_remove("busy")
    assert info.value.status_code == 409
    assert "container is running" in str(info.value)


def test_api_version_prefixes_path(daemon):
    daemon.routes[("GET", "/v1.41/networks")] = (200, [])
    assert _client(daemon, api_version="1.41").network_list() == []
    assert daemon.requests[0][1].startswith("/v1.41/")


def test_unreachable_daemon_raises_docker_error():
    probe = socket.socket()
    probe.bind(("127.0.0.1", 0))
    port = probe.getsockname()[1]
    probe.close()
    client = DockerClient(f"tcp://127.0.0.1:{port}", timeout=2)
    with pytest.raises(DockerError) as info:
        client.network_list()
    assert info.value.status_code is None


def test_from_env_reads_host_and_version():
    client = DockerClient.from_env(
        {"DOCKER_HOST": "tcp://127.0.0.1:2375", "DOCKER_API_VERSION": "1.43"}
    )
    assert client.host == "tcp://127.0.0.1:2375"
    assert client.api_version == "1.43"


def test_from_env_defaults_to_local_socket():
    client = DockerClient.from_env({})
    assert client.host == DEFAULT_HOST
    assert client.api_version is None


@pytest.mark.parametrize("host", ["ftp://example.com", "nohost", "tcp://"])
def test_unusable_host_raises(host):
    with pytest.raises(DockerError):
        DockerClient.from_env({"DOCKER_HOST": host})