"""Docker Engine API access: the interface the services rely on and an HTTP client."""

from __future__ import annotations

import http.client
import json
import os
import socket
import ssl
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Protocol
from urllib.parse import quote, urlencode, urlsplit

DEFAULT_HOST = "unix:///var/run/docker.sock"
_DEFAULT_TCP_PORT = 2375
_DEFAULT_TLS_PORT = 2376


class DockerError(Exception):
    """Raised when the Docker daemon cannot be reached or rejects a request."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


@dataclass(frozen=True)
class Container:
    """A container as reported by the daemon's container list."""

    id: str
    names: tuple[str, ...] = ()
    image: str = ""
    state: str = ""


@dataclass(frozen=True)
class ImageSummary:
    """An image as reported by the daemon's image list."""

    id: str
    repo_tags: tuple[str, ...] = ()


@dataclass(frozen=True)
class NetworkSummary:
    """A network as reported by the daemon's network list."""

    id: str
    name: str = ""


@dataclass(frozen=True)
class Volume:
    """A volume as reported by the daemon's volume list."""

    name: str
    driver: str = ""


class Docker(Protocol):
    """The operations on the Docker daemon that the removal services use."""

    def container_list(self, all: bool = False) -> list[Container]:
        """Return containers; stopped ones too when ``all`` is true."""

    def container_stop(self, container_id: str) -> None:
        """Stop a container."""

    def container_remove(self, container_id: str, force: bool = False) -> None:
        """Remove a container."""

    def image_list(self, all: bool = False) -> list[ImageSummary]:
        """Return images; intermediate ones too when ``all`` is true."""

    def image_remove(self, image_id: str, force: bool = False) -> list[dict[str, Any]]:
        """Remove an image and return the daemon's delete report."""

    def network_list(self) -> list[NetworkSummary]:
        """Return all networks."""

    def network_remove(self, network_id: str) -> None:
        """Remove a network."""

    def volume_list(self) -> list[Volume]:
        """Return all volumes."""

    def volume_remove(self, volume_id: str, force: bool = False) -> None:
        """Remove a volume."""


class _UnixHTTPConnection(http.client.HTTPConnection):
    """An HTTP connection over a Unix domain socket."""

    def __init__(self, socket_path: str, timeout: float | None) -> None:
        super().__init__("localhost", timeout=timeout)
        self._socket_path = socket_path

    def connect(self) -> None:
        sock = socket.socket(socket.AF_UNIX, socket.SOCK_STREAM)
        sock.settimeout(self.timeout)
        try:
            sock.connect(self._socket_path)
        except OSError:
            sock.close()
            raise
        self.sock = sock


def _parse_host(host: str) -> tuple[str, str, int, str]:
    """Split a daemon address into (scheme, host or socket path, port, base path)."""
    scheme, separator, address = host.partition("://")
    scheme = scheme.lower()
    if not separator or not address:
        raise DockerError(f"unable to parse docker host `{host}`")
    if scheme == "unix":
        return scheme, address, 0, ""
    if scheme in ("tcp", "http", "https"):
        parsed = urlsplit(f"http://{address}")
        try:
            port = parsed.port
        except ValueError as error:
            raise DockerError(f"unable to parse docker host `{host}`: {error}") from None
        if not parsed.hostname:
            raise DockerError(f"unable to parse docker host `{host}`")
        default_port = _DEFAULT_TLS_PORT if scheme == "https" else _DEFAULT_TCP_PORT
        return scheme, parsed.hostname, port or default_port, parsed.path.rstrip("/")
    raise DockerError(f"protocol not available for docker host `{host}`")


def _tls_context(cert_path: str, verify: bool) -> ssl.SSLContext:
    context = ssl.create_default_context(
        cafile=os.path.join(cert_path, "ca.pem") if verify else None
    )
    if not verify:
        context.check_hostname = False
        context.verify_mode = ssl.CERT_NONE
    context.load_cert_chain(
        os.path.join(cert_path, "cert.pem"), os.path.join(cert_path, "key.pem")
    )
    return context


class DockerClient:
    """A client for the Docker Engine HTTP API."""

    def __init__(
        self,
        host: str = DEFAULT_HOST,
        *,
        api_version: str | None = None,
        ssl_context: ssl.SSLContext | None = None,
        timeout: float | None = None,
    ) -> None:
        self.host = host
        self.api_version = api_version
        self._scheme, self._address, self._port, self._base_path = _parse_host(host)
        self._ssl_context = ssl_context
        self._timeout = timeout

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> DockerClient:
        """Build a client from DOCKER_HOST, DOCKER_API_VERSION, DOCKER_CERT_PATH and DOCKER_TLS_VERIFY."""
        env = os.environ if environ is None else environ
        host = env.get("DOCKER_HOST") or DEFAULT_HOST
        api_version = env.get("DOCKER_API_VERSION") or None
        cert_path = env.get("DOCKER_CERT_PATH") or None
        verify = bool(env.get("DOCKER_TLS_VERIFY"))
        context = None
        if cert_path:
            try:
                context = _tls_context(cert_path, verify)
            except (OSError, ssl.SSLError) as error:
                raise DockerError(f"could not load TLS certificates: {error}") from None
        return cls(host, api_version=api_version, ssl_context=context)

    def _connection(self) -> http.client.HTTPConnection:
        if self._scheme == "unix":
            return _UnixHTTPConnection(self._address, self._timeout)
        if self._scheme == "https" or self._ssl_context is not None:
            return http.client.HTTPSConnection(
                self._address, self._port, timeout=self._timeout, context=self._ssl_context
            )
        return http.client.HTTPConnection(self._address, self._port, timeout=self._timeout)

    def _request(
        self, method: str, path: str, query: Mapping[str, str] | None = None
    ) -> Any:
        if self.api_version:
            path = f"/v{self.api_version}{path}"
        path = self._base_path + path
        if query:
            path = f"{path}?{urlencode(query)}"
        connection = self._connection()
        try:
            connection.request(method, path)
            response = connection.getresponse()
            body = response.read()
            status = response.status
        except OSError as error:
            raise DockerError(
                f"Cannot connect to the Docker daemon at {self.host}. "
                f"Is the docker daemon running? ({error})"
            ) from None
        finally:
            connection.close()
        if status >= 400:
            raise DockerError(
                f"Error response from daemon: {_error_message(body)}", status_code=status
            )
        if not body:
            return None
        try:
            return json.loads(body)
        except ValueError as error:
            raise DockerError(f"invalid response from daemon: {error}") from None

    def container_list(self, all: bool = False) -> list[Container]:
        query = {"all": "1"} if all else None
        return [
            Container(
                id=item["Id"],
                names=tuple(item.get("Names") or ()),
                image=item.get("Image") or "",
                state=item.get("State") or "",
            )
            for item in self._request("GET", "/containers/json", query) or []
        ]

    def container_stop(self, container_id: str) -> None:
        self._request("POST", f"/containers/{quote(container_id, safe='')}/stop")

    def container_remove(self, container_id: str, force: bool = False) -> None:
        query = {"force": "1"} if force else None
        self._request("DELETE", f"/containers/{quote(container_id, safe='')}", query)

    def image_list(self, all: bool = False) -> list[ImageSummary]:
        query = {"all": "1"} if all else None
        return [
            ImageSummary(id=item["Id"], repo_tags=tuple(item.get("RepoTags") or ()))
            for item in self._request("GET", "/images/json", query) or []
        ]

    def image_remove(self, image_id: str, force: bool = False) -> list[dict[str, Any]]:
        query = {"force": "1"} if force else None
        return list(
            self._request("DELETE", f"/images/{quote(image_id, safe='')}", query) or []
        )

    def network_list(self) -> list[NetworkSummary]:
        return [
            NetworkSummary(id=item["Id"], name=item.get("Name") or "")
            for item in self._request("GET", "/networks") or []
        ]

    def network_remove(self, network_id: str) -> None:
        self._request("DELETE", f"/networks/{quote(network_id, safe='')}")

    def volume_list(self) -> list[Volume]:
        data = self._request("GET", "/volumes") or {}
        return [
            Volume(name=item["Name"], driver=item.get("Driver") or "")
            for item in data.get("Volumes") or []
        ]

    def volume_remove(self, volume_id: str, force: bool = False) -> None:
        query = {"force": "1"} if force else None
        self._request("DELETE", f"/volumes/{quote(volume_id, safe='')}", query)


def _error_message(body: bytes) -> str:
    text = body.decode("utf-8", errors="replace").strip()
    try:
        payload = json.loads(text)
    except ValueError:
        return text
    if isinstance(payload, dict) and "message" in payload:
        return str(payload["message"])
    return text